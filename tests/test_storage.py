"""Tests for aio_config.storage (file stores and layer codecs)."""

import json
from pathlib import Path

import pytest

from aio_config.exceptions import ConfigurationError
from aio_config.storage import (
    FileStore,
    InvalidFormatError,
    LayerFormat,
    LocalFileStore,
    MemoryFileStore,
    PermissionDeniedError,
    ResourceNotFoundError,
    StorageError,
    decode_document,
    encode_document,
)
from aio_config.storage import file_storage


class TestJsonCodec:
    """Tests for the plain JSON layer format."""

    def test_encode_sorted_and_indented(self):
        text = encode_document({"b": 1, "a": {"d": 2, "c": 3}}, LayerFormat.JSON)
        assert text == json.dumps({"a": {"c": 3, "d": 2}, "b": 1}, indent=2) + "\n"

    def test_encode_is_deterministic(self):
        first = encode_document({"x": 1, "a": 2})
        second = encode_document({"a": 2, "x": 1})
        assert first == second

    def test_empty_document_is_empty_text(self):
        assert encode_document({}) == ""

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_blank_text_is_empty_document(self, text):
        assert decode_document(text) == {}

    def test_decode(self):
        assert decode_document('{"a": {"key": "v"}, "n": 1}') == {"a": {"key": "v"}, "n": 1}

    def test_decode_invalid(self):
        with pytest.raises(InvalidFormatError):
            decode_document("{not json")

    def test_decode_non_mapping(self):
        with pytest.raises(InvalidFormatError, match="root must be a mapping"):
            decode_document("[1, 2]")

    def test_format_accepts_string(self):
        assert decode_document('{"a": 1}', "json") == {"a": 1}


class TestHjsonCodec:
    """Tests for the relaxed Hjson layer format."""

    def test_round_trip(self):
        document = {"b": {"list": [1, 2], "flag": True}, "a": "text", "n": None}
        text = encode_document(document, LayerFormat.HJSON)
        assert decode_document(text, LayerFormat.HJSON) == document

    def test_keys_sorted(self):
        text = encode_document({"zeta": 1, "alpha": 2}, LayerFormat.HJSON)
        assert text.index("alpha") < text.index("zeta")

    def test_comments_and_quoteless_strings(self):
        text = "{\n  # user settings\n  runtime:\n  {\n    namespace: my-ns\n  }\n}\n"
        assert decode_document(text, "hjson") == {"runtime": {"namespace": "my-ns"}}

    def test_reads_plain_json(self):
        assert decode_document('{"a": {"key": "v"}}', LayerFormat.HJSON) == {"a": {"key": "v"}}

    def test_decode_returns_plain_dicts(self):
        document = decode_document('{"a": {"b": 1}}', LayerFormat.HJSON)
        assert type(document) is dict
        assert type(document["a"]) is dict

    def test_empty_document(self):
        assert encode_document({}, LayerFormat.HJSON) == ""
        assert decode_document("", LayerFormat.HJSON) == {}

    def test_decode_non_mapping(self):
        with pytest.raises(InvalidFormatError):
            decode_document("[1, 2]", LayerFormat.HJSON)


def test_unserializable_value():
    with pytest.raises(InvalidFormatError):
        encode_document({"a": object()})


def test_unknown_format():
    with pytest.raises(ConfigurationError) as exc_info:
        encode_document({"a": 1}, "yaml")
    assert exc_info.value.code == "UNKNOWN_FORMAT"


def test_invalid_format_is_storage_error():
    assert issubclass(InvalidFormatError, StorageError)


class TestLocalFileStore:
    """Tests for LocalFileStore."""

    def test_is_file_store(self):
        assert isinstance(LocalFileStore(), FileStore)

    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "config"
        LocalFileStore().write_text(target, "hello")
        assert target.read_text() == "hello"

    def test_read(self, tmp_path):
        target = tmp_path / "config"
        target.write_text("héllo", encoding="utf-8")
        assert LocalFileStore().read_text(str(target)) == "héllo"

    def test_read_missing(self, tmp_path):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            LocalFileStore().read_text(tmp_path / "missing")
        assert exc_info.value.path == str(tmp_path / "missing")

    def test_read_directory_is_storage_error(self, tmp_path):
        with pytest.raises(StorageError):
            LocalFileStore().read_text(tmp_path)

    def test_read_invalid_utf8(self, tmp_path):
        target = tmp_path / "binary"
        target.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(StorageError):
            LocalFileStore().read_text(target)

    def test_write_into_file_parent_fails(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(StorageError):
            LocalFileStore().write_text(blocker / "child", "data")

    def test_permission_error_mapped(self, tmp_path, monkeypatch):
        def deny(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(file_storage, "open", deny, raising=False)
        with pytest.raises(PermissionDeniedError):
            LocalFileStore().read_text(tmp_path / "config")


class TestMemoryFileStore:
    """Tests for MemoryFileStore."""

    def test_read_write(self):
        store = MemoryFileStore({"/a": "1"})
        assert store.read_text("/a") == "1"
        store.write_text("/b", "2")
        assert store.contents("/b") == "2"
        assert [str(p) for p in store.reads] == ["/a"]

    def test_missing(self):
        with pytest.raises(ResourceNotFoundError):
            MemoryFileStore().read_text("/missing")

    def test_injected_failures(self):
        store = MemoryFileStore({"/a": "1"})
        store.fail_reads[Path("/a")] = OSError("boom")
        with pytest.raises(StorageError, match="boom"):
            store.read_text("/a")

    def test_clear(self):
        store = MemoryFileStore({"/a": "1"})
        store.read_text("/a")
        store.clear()
        assert store.contents("/a") is None
        assert store.reads == []

    def test_clear_drops_injected_failures(self):
        store = MemoryFileStore()
        store.fail_reads[Path("/a")] = OSError("boom")
        store.fail_writes[Path("/a")] = OSError("boom")
        store.clear()
        store.write_text("/a", "1")
        assert store.read_text("/a") == "1"
