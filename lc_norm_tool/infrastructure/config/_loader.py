# lc_norm_tool/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from lc_norm_tool.core.types.json import JSONDict
from lc_norm_tool.infrastructure.config._models import AppConfig
from lc_norm_tool.infrastructure.config._models import ColumnsConfig
from lc_norm_tool.infrastructure.config._models import InputConfig
from lc_norm_tool.infrastructure.config._models import LoggingConfig
from lc_norm_tool.infrastructure.config._models import OutputConfig
from lc_norm_tool.infrastructure.config._models import ProcessingConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing each validated config section"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already-built AppConfig (used by the CLI after applying overrides)"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.to_dict()

    @property
    def columns(self) -> ColumnsConfig:
        """Column selection configuration"""
        return self._app_config.columns

    @property
    def input(self) -> InputConfig:
        """Input reading configuration"""
        return self._app_config.input

    @property
    def processing(self) -> ProcessingConfig:
        """Processing configuration"""
        return self._app_config.processing

    @property
    def output(self) -> OutputConfig:
        """Output configuration"""
        return self._app_config.output

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    def with_overrides(self, **sections: dict[str, object]) -> "ConfigLoader":
        """Return a new loader with some fields of some sections replaced

        Overrides whose value is None are ignored, so unset CLI options keep
        the configured value.

        Args:
            **sections: Section name mapped to {field: value}

        Returns:
            New ConfigLoader; this one is left untouched
        """
        data = self._app_config.model_dump()
        for section, values in sections.items():
            if section not in data:
                raise KeyError(f"Unknown configuration section: {section}")
            data[section].update({k: v for k, v in values.items() if v is not None})

        loader = ConfigLoader.from_app_config(AppConfig.model_validate(data))
        loader.config_path = self.config_path
        return loader


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
