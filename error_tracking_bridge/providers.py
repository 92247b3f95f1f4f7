# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Configuration providers that back the bridge's persisted settings."""

import os
from abc import ABC, abstractmethod
from typing import Any, Mapping

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _parse_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value_lower = value.strip().lower()
        if value_lower in _TRUE_VALUES:
            return True
        if value_lower in _FALSE_VALUES:
            return False
    return default


class ConfigProvider(ABC):
    """Abstract base class for settings sources."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw configuration value."""
        raise NotImplementedError

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Get a string value, treating blank strings as missing."""
        value = self.get(key)
        if value is None:
            return default
        value = str(value).strip()
        return value if value else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean configuration value."""
        value = self.get(key)
        if value is None:
            return default
        return _parse_bool(value, default)


class EnvConfigProvider(ConfigProvider):
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)


class StaticConfigProvider(ConfigProvider):
    """Configuration provider with static values (useful for tests)."""

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = config if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._config[key] = value
