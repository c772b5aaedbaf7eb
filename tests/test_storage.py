"""Tests for pycfgparser.storage."""

import pytest

from pycfgparser.consts import ConfigError
from pycfgparser.storage import (
    FileStore, MemoryStore, StorageError, split_lines
)


class TestMemoryStore:
    def test_write_then_read(self):
        store = MemoryStore()
        store.writelines("x", ["a", "", "b"])
        assert store.files["x"] == "a\n\nb\n"
        assert store.readlines("x") == ["a", "", "b"]

    def test_missing(self):
        store = MemoryStore()
        assert not store.exists("x")
        with pytest.raises(StorageError) as e:
            store.readlines("x")
        assert e.value.code == ConfigError.FILE_OPEN_ERROR


class TestFileStore:
    def test_write_then_read(self, tmp_path):
        path = tmp_path / "f.txt"
        store = FileStore()
        store.writelines(str(path), ["one", "two"])
        assert path.read_text(encoding="utf-8") == "one\ntwo\n"
        assert store.readlines(str(path)) == ["one", "two"]
        assert [p.name for p in tmp_path.iterdir()] == ["f.txt"]

    def test_overwrite_keeps_mode(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("old\n", encoding="utf-8")
        path.chmod(0o600)
        FileStore().writelines(str(path), ["new"])
        assert path.read_text(encoding="utf-8") == "new\n"
        assert path.stat().st_mode & 0o777 == 0o600

    def test_open_error_on_folder(self, tmp_path):
        with pytest.raises(StorageError) as e:
            FileStore().readlines(str(tmp_path))
        assert e.value.code == ConfigError.FILE_OPEN_ERROR

    def test_write_into_missing_folder(self, tmp_path):
        with pytest.raises(StorageError) as e:
            FileStore().writelines(str(tmp_path / "no" / "f.txt"), ["x"])
        assert e.value.code == ConfigError.FILE_OPEN_ERROR

    def test_encoding(self):
        assert FileStore("gbk").encoding == "gbk"


# ---------------------------------------------------------------------------
# line splitting
# ---------------------------------------------------------------------------

def test_split_lines_only_on_newline():
    assert split_lines("a b\nc\x85d\x0ce\r\nf\n") == [
        "a b", "c\x85d\x0ce", "f"]

def test_split_lines_keeps_inner_blanks():
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("") == []
    assert split_lines("\n") == [""]

def test_memory_store_keeps_odd_separators():
    store = MemoryStore({"x": "k = a\x1eb\n"})
    assert store.readlines("x") == ["k = a\x1eb"]


# ---------------------------------------------------------------------------
# failure paths
# ---------------------------------------------------------------------------

def test_unknown_encoding_fails_early():
    with pytest.raises(LookupError):
        FileStore(encoding="no-such-codec")

def test_write_through_symlink(tmp_path):
    real = tmp_path / "real.txt"
    real.write_text("old\n", encoding="utf-8")
    link = tmp_path / "link.txt"
    link.symlink_to(real)
    FileStore().writelines(str(link), ["new"])
    assert link.is_symlink()
    assert real.read_text(encoding="utf-8") == "new\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "link.txt", "real.txt"]

def test_failed_write_leaves_no_temp(tmp_path):
    path = tmp_path / "f.txt"
    with pytest.raises(StorageError) as e:
        FileStore(encoding="ascii").writelines(str(path), ["é"])
    assert e.value.code == ConfigError.FILE_WRITE_ERROR
    assert list(tmp_path.iterdir()) == []

def test_undecodable_low_confidence(tmp_path, monkeypatch):
    path = tmp_path / "f.txt"
    path.write_bytes(bytes(range(0x80, 0x100)) * 3)
    monkeypatch.setattr(
        "pycfgparser.storage.guess_codec",
        lambda raw: {"encoding": "windows-1252", "confidence": 0.3})
    with pytest.raises(StorageError) as e:
        FileStore(encoding="ascii").readlines(str(path))
    assert e.value.code == ConfigError.FILE_READ_ERROR

def test_guessed_codec_fails_too(tmp_path, monkeypatch):
    path = tmp_path / "f.txt"
    path.write_bytes(bytes(range(0x80, 0x100)) * 3)
    monkeypatch.setattr(
        "pycfgparser.storage.guess_codec",
        lambda raw: {"encoding": "utf-8", "confidence": 0.99})
    with pytest.raises(StorageError) as e:
        FileStore(encoding="ascii").readlines(str(path))
    assert e.value.code == ConfigError.FILE_READ_ERROR
