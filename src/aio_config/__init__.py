"""aio-config - layered configuration for command-line tooling.

Resolves configuration from, in increasing priority:
- the global file (~/.config/aio, $XDG_CONFIG_HOME/aio or $AIO_CONFIG_FILE)
- the local file (<cwd>/.aio)
- AIO_* environment variables, with <cwd>/.env hoisted into the environment first

Subpackages:
- dotenv: .env parsing and loading
- config: settings, file locations and AIO_* variable decoding
- storage: file store and layer codecs
- logger: diagnostic logging
- exceptions: structured error classes
"""

__version__ = "1.0.0"

from aio_config.config import (
    EnvVarMapper,
    PathResolver,
    ResolverSettings,
    SystemPathResolver,
    decode_env_name,
)
from aio_config.documents import deep_merge, split_key_path
from aio_config.dotenv import (
    EnvFileContext,
    EnvFileLoader,
    dotenv,
    format_env,
    parse_env,
)
from aio_config.exceptions import (
    AioConfigError,
    ConfigurationError,
    ConfigWriteError,
    InvalidKeyPathError,
    UnknownLayerError,
)
from aio_config.logger import Logger, MemoryLogger, StructuredLogger, create_logger, get_logger
from aio_config.storage import FileStore, LayerFormat, LocalFileStore, MemoryFileStore
from aio_config.store import ConfigLayer, ConfigStore, LayerName, get_config, reset_config

__all__ = [
    "__version__",
    # Store
    "ConfigStore",
    "ConfigLayer",
    "LayerName",
    "get_config",
    "reset_config",
    # dotenv
    "parse_env",
    "format_env",
    "EnvFileContext",
    "EnvFileLoader",
    "dotenv",
    # Config inputs
    "ResolverSettings",
    "PathResolver",
    "SystemPathResolver",
    "EnvVarMapper",
    "decode_env_name",
    # Documents
    "deep_merge",
    "split_key_path",
    # Storage
    "FileStore",
    "LocalFileStore",
    "MemoryFileStore",
    "LayerFormat",
    # Logger
    "Logger",
    "StructuredLogger",
    "MemoryLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "AioConfigError",
    "ConfigurationError",
    "ConfigWriteError",
    "InvalidKeyPathError",
    "UnknownLayerError",
]
