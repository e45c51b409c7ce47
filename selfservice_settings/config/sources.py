"""
Configuration Sources
=====================

Read-only key-value sources consulted by the resolver:

1. SharedStore: cross-process App Group store (YAML file in a shared container)
2. ManagedStore: process-local store filled by the management channel
3. DocumentStore: JSON document loaded from disk into memory

Every source answers ``lookup(key)`` with the raw stored value, or ``None``
when it has nothing for the key. Type decoding happens in the resolver.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml

from .errors import (
    ConfigurationFileNotFoundError,
    InvalidAppGroupError,
    InvalidConfigurationDataError,
)
from .resolver_settings import DEFAULT_MANAGED_PREFIX, ResolverSettings

logger = logging.getLogger(__name__)

_PLAIN_TYPES = (bool, int, float, str, list, dict)


class SettingsSource:
    """Base class for a read-only settings source."""

    name = "source"

    def lookup(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class SharedStore(SettingsSource):
    """
    App Group store shared between processes.

    The store lives in ``<container_root>/<namespace>/<namespace>.yaml`` and is
    written by other processes. The file is re-read whenever its modification
    time or size changes, so lookups see the latest write visible on disk.
    """

    name = "appGroup"

    def __init__(self, namespace: str, container: Union[str, Path]):
        self.namespace = namespace
        self.container = Path(container)
        self.path = self.container / f"{namespace}.yaml"
        self._values: Dict[Any, Any] = {}
        self._file_state: Optional[Tuple[int, int]] = None

    @classmethod
    def bind(cls, namespace: str, container_root: Union[str, Path]) -> 'SharedStore':
        """
        Bind to the App Group container for a namespace.

        Args:
            namespace: App Group identifier
            container_root: Directory holding the group containers

        Returns:
            Bound SharedStore

        Raises:
            InvalidAppGroupError: If the container directory does not exist
        """
        container = Path(container_root).expanduser() / namespace
        if not container.is_dir():
            raise InvalidAppGroupError(namespace, container)
        return cls(namespace, container)

    def lookup(self, key: str) -> Optional[Any]:
        self._refresh()
        return self._values.get(key)

    def keys(self) -> List[str]:
        self._refresh()
        return [str(k) for k in self._values]

    def _refresh(self):
        try:
            stat = self.path.stat()
        except OSError:
            # Nothing written to the group yet
            self._file_state = None
            self._values = {}
            return

        state = (stat.st_mtime_ns, stat.st_size)
        if state == self._file_state:
            return

        self._file_state = state
        self._values = self._read()

    def _read(self) -> Dict[Any, Any]:
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError, RecursionError) as e:
            logger.warning(f"Failed to read App Group store {self.path}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring App Group store {self.path}: expected a mapping, got {type(data).__name__}")
            return {}

        logger.debug(f"Read {len(data)} App Group values from {self.path}")
        return data


_standard_stores: Dict[Tuple[str, Optional[Path]], 'ManagedStore'] = {}


def _decode_managed_text(text: str) -> Any:
    """Decode an environment value with YAML scalar rules, keeping text on failure."""
    try:
        value = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, RecursionError):
        return text
    if value is None or not isinstance(value, _PLAIN_TYPES):
        return text
    return value


class ManagedStore(SettingsSource):
    """
    Process-local store populated by the management channel.

    Values arrive from a managed profile file and from prefixed environment
    variables (``SSP_HideConnectMenubar=true``). ``update`` and ``clear`` are
    the channel's write entry points; the resolver only reads.
    """

    name = "managed"

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def lookup(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def keys(self) -> List[str]:
        return list(self._values)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def update(self, values: Mapping[str, Any]):
        self._values.update(values)

    def clear(self):
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    @classmethod
    def from_environment(cls,
                         prefix: str = DEFAULT_MANAGED_PREFIX,
                         environ: Optional[Mapping[str, str]] = None) -> 'ManagedStore':
        """
        Build a store from prefixed environment variables.

        Args:
            prefix: Variable prefix; the remainder of the name is the key
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            ManagedStore with the decoded values
        """
        environ = os.environ if environ is None else environ
        values = {
            name[len(prefix):]: _decode_managed_text(text)
            for name, text in environ.items()
            if name.startswith(prefix) and len(name) > len(prefix)
        }
        if values:
            logger.debug(f"Loaded {len(values)} managed values from environment prefix {prefix}")
        return cls(values)

    @classmethod
    def from_profile(cls, path: Union[str, Path]) -> 'ManagedStore':
        """
        Build a store from a managed profile (YAML or JSON mapping).

        A missing or malformed profile yields an empty store.
        """
        path = Path(path).expanduser()
        if not path.exists():
            logger.warning(f"Managed profile not found: {path}")
            return cls()

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError, RecursionError) as e:
            logger.warning(f"Failed to read managed profile {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring managed profile {path}: expected a mapping")
            return cls()

        logger.info(f"Loaded managed profile from {path}")
        return cls({str(k): v for k, v in data.items()})

    @classmethod
    def standard(cls, settings: Optional[ResolverSettings] = None) -> 'ManagedStore':
        """
        Process-wide default store, built on first use.

        One store is kept per (environment prefix, managed profile) pair, so
        resolvers configured alike share a store and differently configured
        ones don't.
        """
        settings = settings or ResolverSettings()
        cache_key = (settings.managed_env_prefix, settings.managed_profile)
        store = _standard_stores.get(cache_key)
        if store is None:
            store = cls.from_profile(settings.managed_profile) if settings.managed_profile else cls()
            store.update(cls.from_environment(settings.managed_env_prefix).as_dict())
            _standard_stores[cache_key] = store
        return store

    @classmethod
    def reset_standard(cls):
        """Drop the process-wide default stores so the next use rebuilds them."""
        _standard_stores.clear()


class DocumentStore(SettingsSource):
    """
    JSON document held in memory.

    The raw parsed tree is kept as-is and decoded per lookup. A successful
    ``load`` swaps in the new document in a single assignment; a failed one
    leaves the previous document untouched.
    """

    name = "json"

    def __init__(self):
        self._document: Optional[Dict[str, Any]] = None
        self.path: Optional[Path] = None

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    def lookup(self, key: str) -> Optional[Any]:
        if self._document is None:
            return None
        return self._document.get(key)

    def keys(self) -> List[str]:
        return list(self._document or {})

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a JSON object from disk, replacing the in-memory document.

        Args:
            path: JSON file path

        Returns:
            The newly loaded document

        Raises:
            ConfigurationFileNotFoundError: If nothing exists at ``path``
            InvalidConfigurationDataError: If the file is unreadable or not a JSON object
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise ConfigurationFileNotFoundError(path)

        try:
            with path.open('r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers malformed JSON, bad UTF-8 and oversized integer literals
            raise InvalidConfigurationDataError(path, str(e)) from e

        if not isinstance(document, dict):
            raise InvalidConfigurationDataError(
                path, f"expected a JSON object at top level, got {type(document).__name__}"
            )

        self._document = document
        self.path = path
        return document
