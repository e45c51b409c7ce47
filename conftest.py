"""
Shared pytest fixtures: isolated source locations under tmp_path.
"""

import json
import logging
import os
import time
from pathlib import Path

import pytest
import yaml

from selfservice_settings.config import ManagedStore, ResolverSettings

APP_GROUP = "group.com.jamf.selfserviceplus"


@pytest.fixture(autouse=True)
def fresh_standard_store():
    """Never leak the process-wide managed store between tests."""
    ManagedStore.reset_standard()
    yield
    ManagedStore.reset_standard()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def settings(tmp_path: Path) -> ResolverSettings:
    return ResolverSettings(
        app_group_identifier=APP_GROUP,
        container_root=tmp_path / "containers",
        documents_dir=tmp_path / "Documents",
        managed_env_prefix="SSP_TEST_",
    )


class AppGroupWriter:
    """Plays the part of another process writing to the App Group store."""

    def __init__(self, container: Path):
        self.container = container
        self.path = container / f"{APP_GROUP}.yaml"
        self._writes = 0

    def write(self, values):
        self.container.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(values, f)
        # Distinct mtime per write so the store notices every change
        self._writes += 1
        stamp = time.time_ns() + self._writes * 1_000_000_000
        os.utime(self.path, ns=(stamp, stamp))


@pytest.fixture
def app_group(settings: ResolverSettings) -> AppGroupWriter:
    settings.shared_container.mkdir(parents=True)
    return AppGroupWriter(settings.shared_container)


@pytest.fixture
def write_document(settings: ResolverSettings):
    """Write JSON (or raw text) to the conventional document path or a given one."""
    def _write(content, path: Path = None) -> Path:
        path = path or settings.default_document_path
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
