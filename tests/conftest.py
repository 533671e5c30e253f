"""Shared fixtures: an isolated environment, fake directories and in-memory files."""

from pathlib import Path
from typing import Dict, Optional

import pytest

from aio_config import (
    ConfigStore,
    EnvFileContext,
    MemoryFileStore,
    MemoryLogger,
    PathResolver,
)

HOME_DIR = Path("/Users/foo")
WORKING_DIR = Path("/Project/runtime")
GLOBAL_FILE = HOME_DIR / ".config" / "aio"
LOCAL_FILE = WORKING_DIR / ".aio"
ENV_FILE = WORKING_DIR / ".env"


class FakePathResolver(PathResolver):
    """PathResolver over fixed directories and a given environment."""

    def __init__(
        self,
        environ: Dict[str, str],
        cwd: Path = WORKING_DIR,
        home: Path = HOME_DIR,
    ) -> None:
        self.environ = environ
        self.cwd = cwd
        self.home = home

    def current_working_directory(self) -> Path:
        return self.cwd

    def home_directory(self) -> Path:
        return self.home

    def xdg_config_home(self) -> Optional[Path]:
        value = self.environ.get("XDG_CONFIG_HOME")
        return Path(value) if value else None

    def explicit_config_file(self) -> Optional[Path]:
        value = self.environ.get("AIO_CONFIG_FILE")
        return Path(value) if value else None


@pytest.fixture
def environ() -> Dict[str, str]:
    return {"PATH": "/usr/bin", "HOME": str(HOME_DIR)}


@pytest.fixture
def resolver(environ) -> FakePathResolver:
    return FakePathResolver(environ)


@pytest.fixture
def file_store() -> MemoryFileStore:
    return MemoryFileStore()


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def env_context() -> EnvFileContext:
    return EnvFileContext()


@pytest.fixture
def make_store(environ, resolver, file_store, memory_logger, env_context):
    """Factory for stores wired to the isolated fixtures."""

    def _make(**kwargs) -> ConfigStore:
        options = dict(
            resolver=resolver,
            file_store=file_store,
            logger=memory_logger,
            environ=environ,
            env_context=env_context,
        )
        options.update(kwargs)
        return ConfigStore(**options)

    return _make


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Keep the process-wide .env marker and store from leaking between tests."""
    from aio_config.dotenv import reset_env_file_context
    from aio_config.store import reset_config

    yield
    reset_env_file_context()
    reset_config()
