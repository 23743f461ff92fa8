"""
Converter Config Reader Module
Loads converter settings from a JSON file and CSS2TW_* environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from core.settings import DEFAULT_SETTINGS, ConverterSettings, SettingsError

logger = logging.getLogger(__name__)

ENV_VARIABLES = {
    'CSS2TW_SIZE_OPTIMIZATION': 'enable_size_optimization',
    'CSS2TW_REPEATER_OPTIMIZATION': 'enable_repeater_optimization',
    'CSS2TW_REPEATER_THRESHOLD': 'repeater_threshold',
    'CSS2TW_ARBITRARY_VALUES': 'enable_arbitrary_values',
    'CSS2TW_SHORT_CLASS_NAMES': 'prefer_short_class_names',
}

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


def parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise SettingsError(f"{name} must be a boolean, got {raw!r}")


class ConverterConfigReader:
    def __init__(self):
        self.config: Dict[str, Any] = {}

    def read_config(self, config_path: str | Path) -> Dict[str, Any]:
        """Read a JSON object of settings (camelCase or snake_case keys)."""
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file {path}: {e}", exc_info=True)
            raise
        if not isinstance(data, dict):
            raise SettingsError(f"Config file {path} must contain a JSON object")
        logger.info(f"Loaded converter config from {path}")
        self.config.update(data)
        return data

    def read_env(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Collect settings from CSS2TW_* variables that are set."""
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for variable, name in ENV_VARIABLES.items():
            raw = environ.get(variable)
            if raw is None or not raw.strip():
                continue
            if name == 'repeater_threshold':
                try:
                    data[name] = int(raw)
                except ValueError:
                    raise SettingsError(f"{variable} must be an integer, got {raw!r}") from None
            else:
                data[name] = parse_bool(variable, raw)
        if data:
            logger.debug(f"Settings from environment: {data}")
        self.config.update(data)
        return data


def load_settings(config_path: Optional[str | Path] = None,
                  environ: Optional[Mapping[str, str]] = None,
                  base: ConverterSettings = DEFAULT_SETTINGS) -> ConverterSettings:
    """Defaults, then the config file, then the environment."""
    reader = ConverterConfigReader()
    settings = base
    if config_path is not None:
        settings = settings.merged(reader.read_config(config_path))
    return settings.merged(reader.read_env(environ))
