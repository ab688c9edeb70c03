"""Parsers that turn path descriptions into typed commands."""

from .svg_parser import SVGParser

__all__ = ["SVGParser"]
