"""Configuration inputs for the layered store

- settings: names, prefix and file format the store works with
- paths: where the global, local and dotenv files live
- env_vars: decoding of AIO_* variables into configuration keys
"""

from aio_config.config.env_vars import EnvVarMapper, decode_env_name
from aio_config.config.paths import (
    PathResolver,
    SystemPathResolver,
    resolve_env_file,
    resolve_global_file,
    resolve_local_file,
)
from aio_config.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
    "PathResolver",
    "SystemPathResolver",
    "resolve_global_file",
    "resolve_local_file",
    "resolve_env_file",
    "EnvVarMapper",
    "decode_env_name",
]
