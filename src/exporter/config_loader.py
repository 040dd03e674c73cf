"""YAML configuration loading and validation.

This module loads optional overrides for the export engine from a YAML
file. Every setting has a default matching the live service, so the file
only needs the keys a user wants to change. A missing or empty file means
"use the defaults".
"""

import logging
from dataclasses import fields
from typing import Any, Dict

import yaml

from .errors import ConfigError, FilesystemError
from .models import ExporterConfig, Selectors

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles configuration file loading and validation.

    Configuration file structure (all keys optional):
        base_url: "https://whimsical.com/"
        pagination_timeout_ms: 1000
        capture_timeout_ms: 30000
        background_color: "#f0f4f7"
        probe_vector_view: false
        selectors:
          share_button: 'button[aria-label="Share, Export & Print"]'
    """

    DEFAULT_CONFIG_PATH = '.whimsical-export/config.yaml'

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> ExporterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExporterConfig with overrides applied on top of the defaults

        Raises:
            FilesystemError: If the file exists but cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug(f"No configuration at {config_path}, using defaults")
            return ExporterConfig()
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        if not content.strip():
            return ExporterConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return ExporterConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ExporterConfig:
        """Validate a raw configuration dictionary and build the config.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        selectors_dict = config_dict.get('selectors') or {}
        if not isinstance(selectors_dict, dict):
            raise ConfigError(
                f"Field 'selectors' must be a dictionary, got {type(selectors_dict).__name__}",
                'selectors'
            )

        settings = {k: v for k, v in config_dict.items() if k != 'selectors'}
        settings = cls._validate_fields(ExporterConfig, settings, prefix='')
        selectors = Selectors(
            **cls._validate_fields(Selectors, selectors_dict, prefix='selectors.')
        )

        return ExporterConfig(selectors=selectors, **settings)

    @staticmethod
    def _validate_fields(model: type, values: Dict[str, Any], prefix: str) -> Dict[str, Any]:
        expected = {
            f.name: type(f.default)
            for f in fields(model)
            if f.name != 'selectors'
        }

        for key, value in values.items():
            name = f"{prefix}{key}"
            if key not in expected:
                raise ConfigError(f"Unknown setting '{name}'", name)

            expected_type = expected[key]
            # bool is an int subclass; keep the two apart
            if isinstance(value, bool) != (expected_type is bool) or not isinstance(value, expected_type):
                raise ConfigError(
                    f"Field '{name}' must be {expected_type.__name__}, got {type(value).__name__}",
                    name
                )

            if expected_type is int and value <= 0:
                raise ConfigError(f"Field '{name}' must be positive", name)

            if expected_type is str and key.endswith('url') and value and not value.startswith(('http://', 'https://')):
                raise ConfigError(f"Field '{name}' must be an http(s) URL", name)

        return dict(values)
