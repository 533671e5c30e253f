"""dotenv support: parse .env text and hoist it into the environment."""

from .loader import (
    EnvFileContext,
    EnvFileLoader,
    dotenv,
    get_env_file_context,
    reset_env_file_context,
)
from .parser import format_env, parse_env

__all__ = [
    "parse_env",
    "format_env",
    "EnvFileContext",
    "EnvFileLoader",
    "dotenv",
    "get_env_file_context",
    "reset_env_file_context",
]
