"""
Resolver Settings
=================

The library's own configuration: where the sources live and how the
resolver logs. Read from environment variables, optionally seeded from a
``.env`` file.
"""

import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

DEFAULT_APP_GROUP = "group.com.jamf.selfserviceplus"
DEFAULT_CONFIG_FILE_NAME = "SelfServicePlusSettings.json"
DEFAULT_MANAGED_PREFIX = "SSP_"


def default_container_root() -> Path:
    """Directory holding shared App Group containers on this platform."""
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Group Containers"
    xdg_data_home = os.getenv("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home)
    return Path.home() / ".local" / "share"


def default_documents_dir() -> Path:
    return Path.home() / "Documents"


@dataclass
class ResolverSettings:
    """Locations and logging options used by the configuration resolver."""

    # Sources
    app_group_identifier: str = DEFAULT_APP_GROUP
    container_root: Optional[Path] = None
    documents_dir: Optional[Path] = None
    config_file_name: str = DEFAULT_CONFIG_FILE_NAME
    managed_env_prefix: str = DEFAULT_MANAGED_PREFIX
    managed_profile: Optional[Path] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        self.container_root = Path(self.container_root) if self.container_root else default_container_root()
        self.documents_dir = Path(self.documents_dir) if self.documents_dir else default_documents_dir()
        if self.managed_profile:
            self.managed_profile = Path(self.managed_profile)

    @property
    def default_document_path(self) -> Path:
        """Conventional location of the JSON configuration document."""
        return self.documents_dir / self.config_file_name

    @property
    def shared_container(self) -> Path:
        return self.container_root / self.app_group_identifier

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> 'ResolverSettings':
        """
        Create settings from environment variables.

        Args:
            dotenv_path: Optional ``.env`` file; real environment variables win

        Returns:
            ResolverSettings instance
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        return cls(
            app_group_identifier=os.getenv('SELFSERVICEPLUS_APP_GROUP', DEFAULT_APP_GROUP),
            container_root=os.getenv('SELFSERVICEPLUS_GROUP_CONTAINERS') or None,
            documents_dir=os.getenv('SELFSERVICEPLUS_DOCUMENTS_DIR') or None,
            config_file_name=os.getenv('SELFSERVICEPLUS_CONFIG_FILE', DEFAULT_CONFIG_FILE_NAME),
            managed_env_prefix=os.getenv('SELFSERVICEPLUS_MANAGED_PREFIX', DEFAULT_MANAGED_PREFIX),
            managed_profile=os.getenv('SELFSERVICEPLUS_MANAGED_PROFILE') or None,
            log_level=os.getenv('SELFSERVICEPLUS_LOG_LEVEL', 'INFO'),
            log_file=os.getenv('SELFSERVICEPLUS_LOG_FILE') or None,
        )
