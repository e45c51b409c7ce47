"""
SelfService+ Settings
=====================

Read-only, layered configuration resolution for SelfService+.

Each setting is looked up in the shared App Group store, then the managed
store, then the JSON configuration document, falling back to a builtin
default.

Modules:
- config: keys catalogue, sources, resolver and typed accessors
- utils: logging helpers
- cli: command-line diagnostics
"""

__version__ = "1.0.0"
__author__ = "SelfService+ Team"

from .config import (
    CATALOGUE,
    ConfigurationKeys,
    ConfigurationResolver,
    DocumentStore,
    ManagedStore,
    ResolvedValue,
    ResolverSettings,
    SelfServicePlusSettingsError,
    SelfServicePlusSettingsManager,
    SettingsManager,
    SharedStore,
    ValueType,
)
from .utils.logger import setup_logging

__all__ = [
    "CATALOGUE",
    "ConfigurationKeys",
    "ConfigurationResolver",
    "DocumentStore",
    "ManagedStore",
    "ResolvedValue",
    "ResolverSettings",
    "SelfServicePlusSettingsError",
    "SelfServicePlusSettingsManager",
    "SettingsManager",
    "SharedStore",
    "ValueType",
    "setup_logging",
]
