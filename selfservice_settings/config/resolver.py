"""
Configuration Resolver
======================

Resolves settings by consulting the sources in a fixed priority order:

1. App Group (SharedStore)
2. Managed (ManagedStore)
3. JSON document (DocumentStore)
4. Caller-supplied default

The first source holding a value that decodes into the requested type wins.
A value of the wrong type is skipped and the search continues, so lookups
never fail. The resolver is meant to be created once per process and handed
to its consumers; it performs no locking.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import (
    ConfigurationFileNotFoundError,
    InvalidAppGroupError,
    InvalidConfigurationDataError,
)
from .keys import CATALOGUE
from .resolver_settings import ResolverSettings
from .sources import DocumentStore, ManagedStore, SettingsSource, SharedStore
from .value_types import ValueType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedValue:
    """Result of a lookup together with the source that satisfied it."""
    key: str
    value: Any
    source: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return self.source is None


class ConfigurationResolver:
    """
    Type-safe, source-prioritized settings lookup.
    """

    def __init__(self,
                 settings: Optional[ResolverSettings] = None,
                 shared_store: Optional[SettingsSource] = None,
                 managed_store: Optional[SettingsSource] = None,
                 document_store: Optional[DocumentStore] = None,
                 load_document: bool = True):
        """
        Initialize the resolver and bind its sources.

        Args:
            settings: Source locations (read from the environment if None)
            shared_store: App Group source; bound from ``settings`` if None
            managed_store: Managed source; the process-wide default if None
            document_store: JSON document source; a fresh one if None
            load_document: Load the conventional JSON document now
        """
        self.settings = settings or ResolverSettings.from_env()

        if shared_store is None:
            shared_store = self._bind_shared_store()
        self.shared_store = shared_store
        self.managed_store = managed_store if managed_store is not None else ManagedStore.standard(self.settings)
        self.document_store = document_store if document_store is not None else DocumentStore()

        if load_document:
            self.load_document_store()

    def _bind_shared_store(self) -> Optional[SharedStore]:
        try:
            return SharedStore.bind(self.settings.app_group_identifier, self.settings.container_root)
        except InvalidAppGroupError as e:
            logger.warning(f"Failed to initialize App Group store for identifier "
                           f"{self.settings.app_group_identifier}: {e}")
            return None

    @property
    def sources(self) -> List[SettingsSource]:
        """Bound sources in priority order."""
        return [s for s in (self.shared_store, self.managed_store, self.document_store) if s is not None]

    # ------------------------------------------------------------------
    # Generic access

    def resolve(self, key: str, default: Any = None, value_type: Optional[ValueType] = None) -> ResolvedValue:
        """
        Resolve a key with provenance.

        Args:
            key: Configuration key
            default: Returned unchanged when no source matches
            value_type: Requested type (inferred from ``default`` if None)

        Returns:
            ResolvedValue naming the winning source, or none for the default
        """
        value_type = value_type or ValueType.infer(default)

        for source in self.sources:
            try:
                raw = source.lookup(key)
            except Exception as e:
                logger.warning(f"Lookup of '{key}' in {source.name} failed: {e}")
                continue

            matched, value = value_type.decode(raw)
            if matched:
                logger.debug(f"Retrieved '{key}' from {source.name}: {value!r}")
                return ResolvedValue(key, value, source.name)

            if raw is not None:
                logger.debug(f"Skipping '{key}' in {source.name}: "
                             f"{type(raw).__name__} is not {value_type.value}")

        logger.debug(f"Using default value for '{key}': {default!r}")
        return ResolvedValue(key, default, None)

    def get(self, key: str, default: Any = None, value_type: Optional[ValueType] = None) -> Any:
        """Resolved value for ``key``, or ``default`` when no source matches."""
        return self.resolve(key, default, value_type).value

    def get_bool(self, key: str, default: bool = False) -> bool:
        return self.get(key, default, ValueType.BOOL)

    def get_number(self, key: str, default: float = 0.0) -> float:
        return self.get(key, default, ValueType.NUMBER)

    def get_string(self, key: str, default: str = "") -> str:
        return self.get(key, default, ValueType.STRING)

    def get_optional_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get(key, default, ValueType.OPTIONAL_STRING)

    def get_string_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        return self.get(key, [] if default is None else default, ValueType.STRING_LIST)

    def get_record_list(self, key: str, default: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
        return self.get(key, [] if default is None else default, ValueType.RECORD_LIST)

    def has_value(self, key: str) -> bool:
        """
        True if any source holds a value for ``key``, whatever its type.

        A ``null`` entry counts as no value, so a key whose only entry is a
        JSON ``null`` reports False even though the key is in the document.
        """
        for source in self.sources:
            try:
                if source.lookup(key) is not None:
                    return True
            except Exception as e:
                logger.warning(f"Lookup of '{key}' in {source.name} failed: {e}")
        return False

    def source_availability(self) -> Dict[str, bool]:
        """Which sources are bound (App Group) or populated (JSON)."""
        return {
            SharedStore.name: self.shared_store is not None,
            ManagedStore.name: True,
            DocumentStore.name: self.document_store.is_loaded,
        }

    # ------------------------------------------------------------------
    # Document store

    def default_document_path(self) -> Path:
        return self.settings.default_document_path

    def load_document_store_strict(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Load the JSON document, reporting failures to the caller.

        The previous document is kept when loading fails.

        Args:
            path: JSON file path (conventional location if None)

        Returns:
            Path that was loaded

        Raises:
            ConfigurationFileNotFoundError: If no file exists at the path
            InvalidConfigurationDataError: If the file is not a JSON object
        """
        config_path = Path(path) if path is not None else self.default_document_path()
        self.document_store.load(config_path)
        logger.info(f"Successfully loaded JSON configuration from: {config_path}")
        return config_path

    def load_document_store(self, path: Optional[Union[str, Path]] = None) -> bool:
        """
        Load the JSON document without raising.

        Returns:
            True if a new document was loaded
        """
        try:
            self.load_document_store_strict(path)
            return True
        except ConfigurationFileNotFoundError as e:
            logger.info(f"No JSON configuration file found at: {e.path}")
        except InvalidConfigurationDataError as e:
            logger.error(f"Failed to load JSON configuration: {e}")
        return False

    def reload(self) -> bool:
        """Reload the JSON document from its conventional location."""
        loaded = self.load_document_store()
        logger.info("Configuration reloaded from all sources")
        return loaded

    # ------------------------------------------------------------------
    # Diagnostics

    def create_report(self) -> Dict[str, Any]:
        """Snapshot of source state and every catalogue key's resolution."""
        settings = {}
        for key, spec in CATALOGUE.items():
            resolved = self.resolve(key, spec.default_value(), spec.value_type)
            settings[key] = {
                'value': resolved.value,
                'source': resolved.source or 'default',
            }

        return {
            'sources': self.source_availability(),
            'app_group': {
                'identifier': self.settings.app_group_identifier,
                'container': str(self.settings.shared_container),
            },
            'document': {
                'default_path': str(self.default_document_path()),
                'loaded_path': str(self.document_store.path) if self.document_store.path else None,
            },
            'settings': settings,
        }
