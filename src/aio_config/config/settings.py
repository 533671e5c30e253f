"""Resolver settings

Names and formats the configuration store works with. Defaults match the
aio command-line tooling; everything can be overridden for other tools that
want the same layering under a different prefix.
"""

import os
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from aio_config.storage.codecs import LayerFormat

_PREFIX_RE = re.compile(r"^[A-Z][A-Z0-9]*$")


class ResolverSettings(BaseModel):
    """Layered configuration settings with environment variable overrides"""

    env_prefix: str = Field(
        default="AIO",
        description="Variables named {env_prefix}_<PATH> override configuration keys",
    )
    config_file_var: str = Field(
        default="AIO_CONFIG_FILE",
        description="Environment variable holding an explicit global config file",
    )
    global_dir_name: str = Field(
        default="aio",
        description="Global file name inside $XDG_CONFIG_HOME or ~/.config",
    )
    local_file_name: str = Field(
        default=".aio",
        description="Local (per-project) file name inside the working directory",
    )
    env_file_name: str = Field(
        default=".env",
        description="dotenv file name inside the working directory",
    )
    layer_format: LayerFormat = Field(
        default=LayerFormat.HJSON,
        description="Serialization format of both persisted layers",
    )

    @field_validator("env_prefix")
    @classmethod
    def validate_env_prefix(cls, v: str) -> str:
        """Prefix is upper-case alphanumeric, given without the trailing underscore"""
        v = v.rstrip("_")
        if not _PREFIX_RE.match(v):
            raise ValueError("env_prefix must be upper-case letters and digits, e.g. 'AIO'")
        return v

    @field_validator("global_dir_name", "local_file_name", "env_file_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """File names are plain names, never paths"""
        if not v or not v.strip() or "/" in v or "\\" in v:
            raise ValueError(f"'{v}' is not a plain file name")
        return v

    @classmethod
    def from_env(cls, prefix: str = "AIOCONFIG", env_prefix: Optional[str] = None) -> "ResolverSettings":
        """Create settings from environment variables

        Args:
            prefix: Prefix of the settings variables themselves
            env_prefix: Override prefix for configuration key variables

        Environment variables:
            {prefix}_FORMAT: json or hjson
            {prefix}_GLOBAL_DIR: global file name
            {prefix}_LOCAL_FILE: local file name
            {prefix}_ENV_FILE: dotenv file name
        """
        key_prefix = (env_prefix or "AIO").rstrip("_")
        return cls(
            env_prefix=key_prefix,
            config_file_var=f"{key_prefix}_CONFIG_FILE",
            global_dir_name=os.getenv(f"{prefix}_GLOBAL_DIR", key_prefix.lower()),
            local_file_name=os.getenv(f"{prefix}_LOCAL_FILE", f".{key_prefix.lower()}"),
            env_file_name=os.getenv(f"{prefix}_ENV_FILE", ".env"),
            layer_format=os.getenv(f"{prefix}_FORMAT", LayerFormat.HJSON.value).lower(),
        )
