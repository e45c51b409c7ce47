"""Configuration package.

Provides the layered ConfigurationResolver, its sources and the SelfService+
settings catalogue.
"""
from .errors import (  # noqa: F401
    SelfServicePlusSettingsError,
    InvalidAppGroupError,
    ConfigurationFileNotFoundError,
    InvalidConfigurationDataError,
    KeyNotFoundError,
    UnsupportedValueTypeError,
)
from .keys import CATALOGUE, Category, ConfigurationKeys, KeySpec, keys_in, spec_for  # noqa: F401
from .resolver import ConfigurationResolver, ResolvedValue  # noqa: F401
from .resolver_settings import ResolverSettings  # noqa: F401
from .settings_manager import SelfServicePlusSettingsManager, SettingsManager  # noqa: F401
from .sources import DocumentStore, ManagedStore, SettingsSource, SharedStore  # noqa: F401
from .value_types import ValueType  # noqa: F401
