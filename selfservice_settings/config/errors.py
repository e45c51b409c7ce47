"""
Settings Errors
===============

Exception taxonomy for the settings resolver.

Lookups never raise these; they are logged and absorbed. Only the strict
entry points (document loading, shared store binding, catalogue and type
name lookups) let them propagate to the caller.
"""

from pathlib import Path
from typing import Optional, Union


class SelfServicePlusSettingsError(Exception):
    """Base class for all settings errors."""

    @property
    def description(self) -> str:
        return "Unknown settings error"

    def __str__(self) -> str:
        return self.description


class InvalidAppGroupError(SelfServicePlusSettingsError):
    """The shared App Group container could not be bound."""

    def __init__(self, namespace: str, container: Optional[Union[str, Path]] = None):
        super().__init__(namespace)
        self.namespace = namespace
        self.container = Path(container) if container is not None else None

    @property
    def description(self) -> str:
        return f"Could not access the shared App Group: {self.namespace}"


class ConfigurationFileNotFoundError(SelfServicePlusSettingsError, FileNotFoundError):
    """No configuration file exists at the requested path."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(str(path))
        self.path = Path(path)

    @property
    def description(self) -> str:
        return f"Configuration file not found at: {self.path}"


class InvalidConfigurationDataError(SelfServicePlusSettingsError, ValueError):
    """The configuration file exists but is not a readable JSON object."""

    def __init__(self, path: Optional[Union[str, Path]] = None, reason: Optional[str] = None):
        super().__init__(str(path), reason)
        self.path = Path(path) if path is not None else None
        self.reason = reason

    @property
    def description(self) -> str:
        message = "Configuration data is invalid or corrupted"
        if self.path is not None:
            message += f" ({self.path})"
        if self.reason:
            message += f": {self.reason}"
        return message


class KeyNotFoundError(SelfServicePlusSettingsError, KeyError):
    """A key is not part of the settings catalogue."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    @property
    def description(self) -> str:
        return f"Configuration key not found: {self.key}"


class UnsupportedValueTypeError(SelfServicePlusSettingsError, TypeError):
    """A value type name outside the supported set was requested."""

    def __init__(self, type_name: Optional[str] = None):
        super().__init__(type_name)
        self.type_name = type_name

    @property
    def description(self) -> str:
        message = "Unsupported value type in configuration"
        if self.type_name:
            message += f": {self.type_name}"
        return message
