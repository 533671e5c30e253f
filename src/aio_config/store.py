"""Layered configuration store.

Three layers feed one merged view, lowest priority first:

    global  ~/.config/aio (or $XDG_CONFIG_HOME/aio, or $AIO_CONFIG_FILE)
    local   <cwd>/.aio
    env     AIO_* environment variables, after <cwd>/.env is hoisted

Nested mappings merge key by key, so ``AIO_A_KEY`` overrides ``a.key``
without hiding the rest of ``a``. Only the global and local layers are
ever written to disk.

Example:
    from aio_config import ConfigStore

    config = ConfigStore().reload()
    config.set("runtime.namespace", "my-ns", local=True)
    config.get("runtime.namespace")          # "my-ns" unless AIO_RUNTIME_NAMESPACE is set
    config.get("runtime", layer="global")    # global file only
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Union

from aio_config.config.env_vars import EnvVarMapper
from aio_config.config.paths import (
    PathResolver,
    SystemPathResolver,
    resolve_global_file,
    resolve_local_file,
)
from aio_config.config.settings import ResolverSettings
from aio_config.documents import deep_merge, delete_path, get_path, set_path, split_key_path
from aio_config.dotenv.loader import EnvFileContext, EnvFileLoader
from aio_config.exceptions import ConfigWriteError, UnknownLayerError
from aio_config.logger import Logger, get_logger
from aio_config.storage import (
    FileStore,
    LayerFormat,
    LocalFileStore,
    StorageError,
    decode_document,
    encode_document,
)


class LayerName(str, Enum):
    """Configuration sources, lowest priority first"""

    GLOBAL = "global"
    LOCAL = "local"
    ENVIRONMENT = "env"

    @classmethod
    def parse(cls, value: Union[str, "LayerName"]) -> "LayerName":
        """Accept a LayerName, its value, or "environment"."""
        if isinstance(value, LayerName):
            return value
        if value == "environment":
            return cls.ENVIRONMENT
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownLayerError(str(value)) from e


@dataclass
class ConfigLayer:
    """One configuration source and its document.

    Attributes:
        name: Which layer this is
        file: Backing file (None for the environment layer)
        format: Serialization format of the backing file
        values: The layer's document
    """

    name: LayerName
    file: Optional[Path] = None
    format: LayerFormat = LayerFormat.HJSON
    values: Dict[str, Any] = field(default_factory=dict)


class ConfigStore:
    """Merge global, local and environment configuration.

    Collaborators default to the real process (os.environ, the working
    directory, the local filesystem) and can be replaced for tests.

    Not thread-safe: callers sharing a store across threads must serialize
    access themselves. Writes are last-writer-wins across processes.
    """

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        resolver: Optional[PathResolver] = None,
        file_store: Optional[FileStore] = None,
        logger: Optional[Logger] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        env_context: Optional[EnvFileContext] = None,
    ) -> None:
        self.settings = settings or ResolverSettings()
        self._environ = environ
        self.resolver = resolver or SystemPathResolver(
            environ=environ, config_file_var=self.settings.config_file_var
        )
        self.file_store = file_store or LocalFileStore()
        self.logger = logger or get_logger()
        self.env_loader = EnvFileLoader(
            context=env_context,
            resolver=self.resolver,
            file_store=self.file_store,
            logger=self.logger,
            environ=environ,
            env_file_name=self.settings.env_file_name,
        )
        self.env_mapper = EnvVarMapper(prefix=self.settings.env_prefix, logger=self.logger)

        self.global_layer = ConfigLayer(LayerName.GLOBAL, format=self.settings.layer_format)
        self.local_layer = ConfigLayer(LayerName.LOCAL, format=self.settings.layer_format)
        self.env_layer = ConfigLayer(LayerName.ENVIRONMENT)
        self.values: Dict[str, Any] = {}
        self._loaded = False

    @property
    def environ(self) -> MutableMapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def layer(self, name: Union[str, LayerName]) -> ConfigLayer:
        """Return the layer object for a layer name."""
        layer_name = LayerName.parse(name)
        if layer_name is LayerName.GLOBAL:
            return self.global_layer
        if layer_name is LayerName.LOCAL:
            return self.local_layer
        return self.env_layer

    def reload(self) -> "ConfigStore":
        """Re-read every layer and rebuild the merged view.

        Unreadable or malformed files are logged and treated as empty; this
        never raises for file problems.
        """
        self.env_loader.load()

        self.global_layer.file = resolve_global_file(self.resolver, self.settings.global_dir_name)
        self.local_layer.file = resolve_local_file(self.resolver, self.settings.local_file_name)
        self.global_layer.values = self._read_layer(self.global_layer)
        self.local_layer.values = self._read_layer(self.local_layer)
        self.env_layer.values = self.env_mapper.map(self.environ)

        self._loaded = True
        self._merge()
        return self

    def get(self, key_path: Optional[str] = None, layer: Optional[Union[str, LayerName]] = None) -> Any:
        """Read a value.

        Args:
            key_path: Dotted path; None, "" or whitespace returns the whole document
            layer: "global", "local" or "env"; None reads the merged view

        Returns:
            A copy of the value, or None if the path does not exist

        Raises:
            InvalidKeyPathError: If key_path is made only of dots
        """
        self._ensure_loaded()
        document = self.values if layer is None else self.layer(layer).values
        return copy.deepcopy(get_path(document, key_path))

    def set(self, key_path: Optional[str] = None, value: Any = None, local: bool = False) -> "ConfigStore":
        """Write a value into the global (or local) file.

        An empty key path replaces the layer with an empty document.

        Raises:
            InvalidKeyPathError: If key_path is made only of dots; nothing is written
            ConfigWriteError: If the file cannot be written; the layer is
                restored to its previous content first
        """
        self._ensure_loaded()
        target = self.local_layer if local else self.global_layer
        previous = target.values
        if split_key_path(key_path):
            target.values = set_path(copy.deepcopy(previous), key_path, value)
        else:
            target.values = {}
        self._persist(target, previous)
        self._merge()
        return self

    def delete(self, key_path: Optional[str], local: bool = False) -> "ConfigStore":
        """Remove a value from the global (or local) file.

        Deleting a missing key still rewrites the file. An empty key path
        empties the layer.

        Raises:
            InvalidKeyPathError: If key_path is made only of dots; nothing is written
            ConfigWriteError: If the file cannot be written; the layer is
                restored to its previous content first
        """
        self._ensure_loaded()
        target = self.local_layer if local else self.global_layer
        previous = target.values
        if split_key_path(key_path):
            document = copy.deepcopy(previous)
            delete_path(document, key_path)
            target.values = document
        else:
            target.values = {}
        self._persist(target, previous)
        self._merge()
        return self

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.reload()

    def _read_layer(self, layer: ConfigLayer) -> Dict[str, Any]:
        try:
            return decode_document(self.file_store.read_text(layer.file), layer.format)
        except StorageError as e:
            self.logger.debug(
                f"cannot read {layer.name.value} configuration from {layer.file}: {e}",
                path=str(layer.file),
                error=str(e),
            )
            return {}

    def _persist(self, layer: ConfigLayer, previous: Dict[str, Any]) -> None:
        try:
            self.file_store.write_text(layer.file, encode_document(layer.values, layer.format))
        except StorageError as e:
            layer.values = previous
            self.logger.error(
                f"cannot write {layer.name.value} configuration to {layer.file}",
                path=str(layer.file),
                error=str(e),
            )
            raise ConfigWriteError(str(layer.file), layer.name.value, e) from e

    def _merge(self) -> None:
        self.values = deep_merge(self.global_layer.values, self.local_layer.values, self.env_layer.values)


_global_store: Optional[ConfigStore] = None


def get_config(reload: bool = False) -> ConfigStore:
    """Get the process-wide store, loading it on first use.

    Args:
        reload: If True, re-read every layer
    """
    global _global_store
    if _global_store is None:
        _global_store = ConfigStore().reload()
    elif reload:
        _global_store.reload()
    return _global_store


def reset_config() -> None:
    """Drop the process-wide store (primarily for testing)"""
    global _global_store
    _global_store = None
