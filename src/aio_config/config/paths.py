"""File locations for the persisted layers and the dotenv file

The store never computes paths itself; it asks a PathResolver for the few
facts it needs (working directory, home, XDG config home, an explicit
override) and derives the three file locations from them here.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional


class PathResolver(ABC):
    """Source of the directories configuration files are located from."""

    @abstractmethod
    def current_working_directory(self) -> Path:
        pass

    @abstractmethod
    def home_directory(self) -> Path:
        pass

    @abstractmethod
    def xdg_config_home(self) -> Optional[Path]:
        """Value of $XDG_CONFIG_HOME, or None when unset or empty."""
        pass

    @abstractmethod
    def explicit_config_file(self) -> Optional[Path]:
        """Global config file named by the override variable, if any."""
        pass


class SystemPathResolver(PathResolver):
    """Resolve directories from the running process.

    Args:
        environ: Environment mapping to read (defaults to os.environ, read
            at call time so .env-loaded values are seen)
        config_file_var: Variable naming an explicit global config file
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config_file_var: str = "AIO_CONFIG_FILE",
    ) -> None:
        self._environ = environ
        self.config_file_var = config_file_var

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def current_working_directory(self) -> Path:
        return Path.cwd()

    def home_directory(self) -> Path:
        return Path.home()

    def xdg_config_home(self) -> Optional[Path]:
        value = self.environ.get("XDG_CONFIG_HOME")
        return Path(value) if value else None

    def explicit_config_file(self) -> Optional[Path]:
        value = self.environ.get(self.config_file_var)
        return Path(value) if value else None


def resolve_global_file(resolver: PathResolver, dir_name: str = "aio") -> Path:
    """Global (per-user) config file.

    Order: explicit override, $XDG_CONFIG_HOME/<dir_name>, ~/.config/<dir_name>.
    """
    explicit = resolver.explicit_config_file()
    if explicit is not None:
        return (resolver.current_working_directory() / explicit).resolve()
    config_home = resolver.xdg_config_home() or resolver.home_directory() / ".config"
    return (config_home / dir_name).resolve()


def resolve_local_file(resolver: PathResolver, file_name: str = ".aio") -> Path:
    """Local (per-project) config file in the working directory."""
    return (resolver.current_working_directory() / file_name).resolve()


def resolve_env_file(resolver: PathResolver, file_name: str = ".env") -> Path:
    """dotenv file in the working directory."""
    return (resolver.current_working_directory() / file_name).resolve()
