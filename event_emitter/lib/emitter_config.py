"""Emitter settings with optional config file loading."""

from __future__ import annotations

import configparser
import logging
from typing import Any


class EmitterConfig:
    """Settings shared by EventEmitter instances.

    Values come from DEFAULTS, optionally overridden by the [EVENTEMITTER] section of
    an INI file and then by keyword arguments.
    """

    SECTION = "EVENTEMITTER"

    # Default values for all settings (single source of truth)
    DEFAULTS = {
        "max_listeners": 10,
        "log_emits": False,
    }

    def __init__(self, **overrides: Any) -> None:
        for name, value in overrides.items():
            if name not in self.DEFAULTS:
                raise KeyError(f"Unknown emitter setting: {name}")
            if not self._has_default_type(name, value):
                expected = type(self.DEFAULTS[name]).__name__
                raise TypeError(
                    f"Emitter setting {name} must be {expected}, got {type(value).__name__}"
                )
        for name, default in self.DEFAULTS.items():
            setattr(self, name, overrides.get(name, default))

    @classmethod
    def from_file(cls, config_file_path: str, **overrides: Any) -> EmitterConfig:
        """Load settings from an INI file, falling back to DEFAULTS.

        A missing file or section is not an error, and a value that cannot be converted
        to the type of its default is logged and replaced by the default. Keyword
        arguments win over the file.
        """
        parser = configparser.ConfigParser()
        # Silently ignores missing files
        parser.read(config_file_path, encoding="utf-8")
        logging.debug(f"Using emitter config file: {config_file_path}")

        values: dict[str, Any] = {}
        if parser.has_section(cls.SECTION):
            for name, raw in parser.items(cls.SECTION):
                if name not in cls.DEFAULTS:
                    logging.debug(f"Ignoring unknown emitter setting << {name} >>")
                    continue
                try:
                    value = cls._convert_value(raw)
                except ValueError:
                    value = raw
                if not cls._has_default_type(name, value):
                    logging.warning(
                        f"Invalid emitter setting << {name} >> = {raw!r}, "
                        f"using default {cls.DEFAULTS[name]!r}"
                    )
                    continue
                values[name] = value
        values.update(overrides)
        return cls(**values)

    @classmethod
    def _has_default_type(cls, name: str, value: Any) -> bool:
        # bool is an int subclass, so compare exact types
        return type(value) is type(cls.DEFAULTS[name])

    @staticmethod
    def _convert_value(val: Any) -> Any:
        """Convert a string to bool/int/float if applicable, otherwise return as-is."""
        if not isinstance(val, str):
            return val

        val_lower = val.lower()
        if val_lower in ("true", "yes", "on"):
            return True
        if val_lower in ("false", "no", "off"):
            return False

        # Try numeric conversion: integer first, then float
        stripped = val.lstrip("-")
        if stripped.isdigit():
            return int(val)
        if stripped.replace(".", "", 1).isdigit():
            return float(val)

        return val

    def as_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.DEFAULTS}

    def __repr__(self) -> str:
        return f"EmitterConfig({self.as_dict()!r})"
