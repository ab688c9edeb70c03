"""Configuration management for SVG Interpolator.

Configuration is read from ``svg_interpolator.toml``. Search order (first hit
wins):
1. Explicit path
2. Current directory
3. ~/.config/svg_interpolator/
4. /etc/svg_interpolator/

Loaded values are merged over the built-in defaults.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import toml

from .constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILENAME,
    DEFAULT_RESOLUTION,
    DEFAULT_SPACING,
    ConfigSections,
    get_output_formats,
)
from .data_models import SamplingConfig
from .error_handling import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    ConfigSections.SAMPLING: {
        "resolution": DEFAULT_RESOLUTION,
        "spacing": DEFAULT_SPACING,
    },
    ConfigSections.FILL: {
        "enabled": False,
        "min_length": 15.0,
        "max_length": 32.0,
        "passes": 1,
    },
    ConfigSections.TRANSFORM: {
        "scale": 1.0,
        "translate_x": 0.0,
        "translate_y": 0.0,
    },
    ConfigSections.OUTPUT: {
        "format": "json",
        "precision": 3,
    },
    ConfigSections.LOGGING: {
        "level": "INFO",
        "file": "",
    },
}


def get_search_locations() -> List[Path]:
    """Directories searched for the configuration file, in order."""
    return [
        Path.cwd(),
        Path.home() / ".config" / CONFIG_DIR_NAME,
        Path("/etc") / CONFIG_DIR_NAME,
    ]


def find_config_file() -> Optional[Path]:
    """Find the first configuration file in the search locations."""
    for location in get_search_locations():
        config_path = location / CONFIG_FILENAME
        if config_path.exists() and config_path.is_file():
            return config_path
    return None


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override config into base config."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            merge_config(base[key], value)
        else:
            base[key] = value


def default_config_text() -> str:
    """Default configuration rendered as TOML."""
    return toml.dumps(DEFAULT_CONFIG)


class Config:
    """Configuration manager for SVG Interpolator."""

    def __init__(self, config_path: Union[str, Path, None] = None) -> None:
        """Load configuration.

        Args:
            config_path: Explicit configuration file. When omitted the search
                         locations are tried and defaults used if none exist.

        Raises:
            ConfigurationError: If the file is missing or not valid TOML
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self.source: Optional[Path] = None

        if config_path is not None:
            path = Path(config_path)
            if not path.is_file():
                raise ConfigurationError(f"Configuration file '{path}' not found")
        else:
            path = find_config_file()

        if path is None:
            logger.debug(f"Using default configuration (no {CONFIG_FILENAME} found)")
            return

        try:
            loaded = toml.load(path)
        except (toml.TomlDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to load config from {path}: {e}",
                details={"path": str(path)},
            ) from e

        merge_config(self._config, loaded)
        self.source = path
        logger.info(f"Configuration loaded from {path}")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            if default is not None:
                return default
            raise ConfigurationError(f"Configuration key '{section}.{key}' not found")

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section."""
        try:
            return self._config[section]
        except KeyError:
            raise ConfigurationError(f"Configuration section '{section}' not found")

    def set(self, section: str, key: str, value: Any) -> None:
        """Override a single value, e.g. from a command line flag."""
        self._config.setdefault(section, {})[key] = value

    @property
    def sampling(self) -> Dict[str, Any]:
        """Get sampling configuration."""
        return self.get_section(ConfigSections.SAMPLING)

    @property
    def fill(self) -> Dict[str, Any]:
        """Get fill configuration."""
        return self.get_section(ConfigSections.FILL)

    @property
    def transform(self) -> Dict[str, Any]:
        """Get transform configuration."""
        return self.get_section(ConfigSections.TRANSFORM)

    @property
    def output(self) -> Dict[str, Any]:
        """Get output configuration."""
        return self.get_section(ConfigSections.OUTPUT)

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get_section(ConfigSections.LOGGING)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration dictionary."""
        return self._config

    def sampling_config(self) -> SamplingConfig:
        """Build the sampling parameters.

        Raises:
            ConfigurationError: If resolution or spacing are invalid
        """
        sampling = self.sampling
        try:
            return SamplingConfig(
                spacing=float(sampling["spacing"]),
                resolution=sampling["resolution"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid sampling configuration: {e}") from e

    def validate(self) -> None:
        """Validate configuration completeness and correctness."""
        for section in DEFAULT_CONFIG:
            if section not in self._config:
                raise ConfigurationError(
                    f"Missing required configuration section: {section}"
                )

        self.sampling_config()
        self._validate_ranges()

    def _validate_ranges(self) -> None:
        """Validate configuration value ranges."""
        fill = self.fill
        if fill["min_length"] < 0:
            raise ConfigurationError("fill.min_length must be non-negative")
        if fill["max_length"] <= fill["min_length"]:
            raise ConfigurationError("fill.max_length must exceed fill.min_length")
        if not isinstance(fill["passes"], int) or fill["passes"] < 1:
            raise ConfigurationError("fill.passes must be a positive integer")

        if self.transform["scale"] == 0:
            raise ConfigurationError("transform.scale must be non-zero")

        output = self.output
        if output["format"] not in get_output_formats():
            raise ConfigurationError(
                f"output.format must be one of {', '.join(get_output_formats())}"
            )
        if not isinstance(output["precision"], int) or output["precision"] < 0:
            raise ConfigurationError("output.precision must be a non-negative integer")
