"""
Logging Utility Tests
=====================
"""

import logging

import pytest

from selfservice_settings.config import ResolverSettings
from selfservice_settings.utils.logger import _parse_size, setup_logging


@pytest.mark.parametrize("size, expected", [
    ("10MB", 10 * 1024 * 1024),
    ("1.5kb", 1536),
    ("1GB", 1024 ** 3),
    ("2048", 2048),
])
def test_parse_size(size, expected):
    assert _parse_size(size) == expected


def test_setup_logging_writes_file(tmp_path, restore_root_logging):
    log_file = tmp_path / "logs" / "settings.log"
    settings = ResolverSettings(log_level="DEBUG", log_file=str(log_file))

    app_logger = setup_logging(settings)
    logging.getLogger("selfservice_settings.config.resolver").debug("Retrieved 'BrandingName' from json")

    for handler in logging.getLogger().handlers:
        handler.flush()

    assert app_logger.name == "selfservice_settings"
    assert logging.getLogger().level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized - Level: DEBUG" in text
    assert "selfservice_settings.config.resolver - DEBUG - Retrieved 'BrandingName' from json" in text


def test_explicit_level_used_without_settings(restore_root_logging):
    setup_logging(log_level="warning")
    assert logging.getLogger().level == logging.WARNING
