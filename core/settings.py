"""
Converter Settings Module
Immutable settings value plus a small get/update/reset store.

Settings are always passed explicitly to the converter; the store is only a
convenience for hosts (the CLI, the web app) that keep a current value.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

MIN_REPEATER_THRESHOLD = 2

# camelCase names used in JSON payloads and config files
CAMEL_CASE_KEYS = {
    'enableSizeOptimization': 'enable_size_optimization',
    'enableRepeaterOptimization': 'enable_repeater_optimization',
    'repeaterThreshold': 'repeater_threshold',
    'enableArbitraryValues': 'enable_arbitrary_values',
    'preferShortClassNames': 'prefer_short_class_names',
}


class SettingsError(ValueError):
    """Raised for unknown setting names or out-of-range values."""


@dataclass(frozen=True)
class ConverterSettings:
    enable_size_optimization: bool = True
    enable_repeater_optimization: bool = True
    repeater_threshold: int = 3
    enable_arbitrary_values: bool = True
    prefer_short_class_names: bool = True

    def __post_init__(self):
        threshold = self.repeater_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise SettingsError(f"repeater_threshold must be an integer, got {threshold!r}")
        if threshold < MIN_REPEATER_THRESHOLD:
            raise SettingsError(
                f"repeater_threshold must be at least {MIN_REPEATER_THRESHOLD}, got {threshold}")
        for f in fields(self):
            if f.type is bool and not isinstance(getattr(self, f.name), bool):
                raise SettingsError(f"{f.name} must be a boolean, got {getattr(self, f.name)!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_camel_dict(self) -> Dict[str, Any]:
        snake = self.to_dict()
        return {camel: snake[name] for camel, name in CAMEL_CASE_KEYS.items()}

    def merged(self, changes: Dict[str, Any]) -> 'ConverterSettings':
        """Return a copy with a partial set of changes applied."""
        return replace(self, **normalize_keys(changes))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ConverterSettings':
        return cls().merged(data or {})


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept snake_case or camelCase names; reject anything else."""
    known = {f.name for f in fields(ConverterSettings)}
    normalized = {}
    for key, value in data.items():
        name = CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            raise SettingsError(f"Unknown setting: {key}")
        normalized[name] = value
    return normalized


DEFAULT_SETTINGS = ConverterSettings()


class SettingsStore:
    def __init__(self, initial: Optional[ConverterSettings] = None):
        self._settings = initial or DEFAULT_SETTINGS

    def get(self) -> ConverterSettings:
        return self._settings

    def update(self, changes: Optional[Dict[str, Any]] = None, **kwargs) -> ConverterSettings:
        merged = dict(changes or {})
        merged.update(kwargs)
        self._settings = self._settings.merged(merged)
        logger.debug(f"Settings updated: {self._settings}")
        return self._settings

    def reset(self) -> ConverterSettings:
        self._settings = DEFAULT_SETTINGS
        return self._settings
