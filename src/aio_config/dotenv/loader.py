"""Loading of <cwd>/.env into the process environment.

The .env file supplies defaults only: a variable that is already set in the
environment is never overwritten. Loading happens once per process per
file; the path last loaded is remembered in an EnvFileContext and a second
load of the same path is skipped unless forced.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, MutableMapping, Optional

from aio_config.config.paths import PathResolver, SystemPathResolver, resolve_env_file
from aio_config.logger import Logger, get_logger
from aio_config.storage import FileStore, LocalFileStore, StorageError

from .parser import parse_env


@dataclass
class EnvFileContext:
    """Process-wide record of .env loading.

    Attributes:
        env_file: Path of the .env file most recently loaded (or attempted)
        loaded_vars: Names the most recent successful read added to the
            environment. A load whose read fails leaves it unchanged, so
            clear() can still remove what an earlier load added.
    """

    env_file: Optional[Path] = None
    loaded_vars: List[str] = field(default_factory=list)

    def reset(self) -> None:
        """Forget everything (primarily for testing)"""
        self.env_file = None
        self.loaded_vars = []


_process_context = EnvFileContext()


def get_env_file_context() -> EnvFileContext:
    """Return the context shared by every loader in this process."""
    return _process_context


def reset_env_file_context() -> None:
    """Reset the shared context (primarily for testing)"""
    _process_context.reset()


class EnvFileLoader:
    """Hoist variables from <cwd>/.env into the environment.

    Args:
        context: Load marker to use (defaults to the process-wide one)
        resolver: Where the working directory comes from
        file_store: How the file is read
        logger: Diagnostic sink
        environ: Environment to update (defaults to os.environ)
        env_file_name: Name of the file inside the working directory

    Example:
        loader = EnvFileLoader()
        added = loader.load()          # reads .env
        loader.load()                  # no-op, already loaded
        loader.load(force=True)        # reads again
    """

    def __init__(
        self,
        context: Optional[EnvFileContext] = None,
        resolver: Optional[PathResolver] = None,
        file_store: Optional[FileStore] = None,
        logger: Optional[Logger] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        env_file_name: str = ".env",
    ) -> None:
        self.context = context if context is not None else get_env_file_context()
        self.resolver = resolver or SystemPathResolver(environ=environ)
        self.file_store = file_store or LocalFileStore()
        self.logger = logger or get_logger()
        self.environ = environ if environ is not None else os.environ
        self.env_file_name = env_file_name

    def load(self, force: bool = False) -> List[str]:
        """Load the .env file unless this path was already loaded.

        Read failures are logged and skipped, never raised.

        Returns:
            Names newly added to the environment by this call
        """
        env_file = resolve_env_file(self.resolver, self.env_file_name)
        if self.context.env_file == env_file and not force:
            return []

        self.context.env_file = env_file
        try:
            text = self.file_store.read_text(env_file)
        except StorageError as e:
            self.logger.debug(f"cannot read environment variables from {env_file}", path=str(env_file))
            self.logger.debug(f" - {type(e).__name__}: {e}", error=str(e))
            self.logger.debug("skipping ...")
            return []

        added = []
        for name, value in parse_env(text).items():
            if name not in self.environ:
                self.environ[name] = value
                added.append(name)

        self.context.loaded_vars = added
        if added:
            self.logger.debug(f"added environment variable(s): {', '.join(added)}")
        return added

    def clear(self) -> List[str]:
        """Remove the variables the last load added.

        Callers that want a forced reload to drop variables no longer in
        the file call this first; load() itself only ever adds.

        Returns:
            Names removed from the environment
        """
        removed = [name for name in self.context.loaded_vars if name in self.environ]
        for name in removed:
            del self.environ[name]
        self.context.loaded_vars = []
        if removed:
            self.logger.debug(f"removed environment variable(s): {', '.join(removed)}")
        return removed


def dotenv(force: bool = False) -> List[str]:
    """Load <cwd>/.env into os.environ with the process-wide context."""
    return EnvFileLoader().load(force=force)
