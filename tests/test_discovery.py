"""Tests for dupline.discovery."""

import os

import pytest

from dupline.discovery import (
    SourceType,
    _check_pattern,
    compute_ignore_paths,
    find_source_files,
    path_is_ignored,
    split_folders,
)
from dupline.errors import PatternError


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x\n", encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# SourceType
# ---------------------------------------------------------------------------


def test_source_type_from_name():
    assert SourceType("javascript") is SourceType.JAVASCRIPT
    assert str(SourceType.CPP) == "cpp"


def test_source_type_extensions():
    assert SourceType.RUST.extensions == ("rs",)
    assert "h" in SourceType.C.extensions


# ---------------------------------------------------------------------------
# split_folders / _check_pattern
# ---------------------------------------------------------------------------


def test_split_folders_string():
    assert split_folders("a,b,c") == ["a", "b", "c"]


def test_split_folders_list():
    assert split_folders(("a", "b")) == ["a", "b"]


def test_check_pattern_trims():
    assert _check_pattern("  vendor ") == "vendor"


@pytest.mark.parametrize("bad", ["", "  ", "/abs", "../up", "a/../b", "ven[dor"])
def test_check_pattern_rejects(bad):
    with pytest.raises(PatternError):
        _check_pattern(bad)


# ---------------------------------------------------------------------------
# compute_ignore_paths / path_is_ignored
# ---------------------------------------------------------------------------


def test_ignore_paths_at_root_and_nested(tmp_path):
    (tmp_path / "test").mkdir()
    (tmp_path / "src" / "deep" / "test").mkdir(parents=True)
    paths, messages = compute_ignore_paths("test", str(tmp_path))
    assert messages == []
    assert os.path.join(str(tmp_path), "test") in paths
    assert os.path.join(str(tmp_path), "src", "deep", "test") in paths


def test_ignore_paths_reports_bad_entries(tmp_path):
    (tmp_path / "vendor").mkdir()
    paths, messages = compute_ignore_paths("vendor,,ven[dor", str(tmp_path))
    assert os.path.join(str(tmp_path), "vendor") in paths
    assert len(messages) == 2
    assert all(m.startswith("ignore folders: ") for m in messages)


def test_path_is_ignored_component_aware():
    ignored = [os.path.join("root", "test")]
    assert path_is_ignored(os.path.join("root", "test", "a.c"), ignored)
    assert path_is_ignored(os.path.join("root", "test"), ignored)
    assert not path_is_ignored(os.path.join("root", "tests", "a.c"), ignored)


# ---------------------------------------------------------------------------
# find_source_files
# ---------------------------------------------------------------------------


def test_find_source_files_sorted_and_filtered(tmp_path):
    root = tmp_path
    b = _touch(root / "b.java")
    a = _touch(root / "pkg" / "a.java")
    _touch(root / "pkg" / "a.c")
    _touch(root / "node_modules" / "dep.java")
    _touch(root / "src" / "test" / "t.java")
    result = find_source_files(str(root), SourceType.JAVA, ["node_modules", "test"])
    assert result.files == sorted([a, b])
    assert result.messages == []


def test_find_source_files_multiple_extensions(tmp_path):
    c = _touch(tmp_path / "a.c")
    h = _touch(tmp_path / "a.h")
    _touch(tmp_path / "a.cpp")
    result = find_source_files(str(tmp_path), SourceType.C)
    assert result.files == sorted([c, h])


def test_find_source_files_skips_directories(tmp_path):
    (tmp_path / "weird.py").mkdir()
    f = _touch(tmp_path / "real.py")
    assert find_source_files(str(tmp_path), SourceType.PYTHON).files == [f]


def test_find_source_files_includes_hidden(tmp_path):
    f = _touch(tmp_path / ".hidden" / "a.rs")
    assert find_source_files(str(tmp_path), SourceType.RUST).files == [f]


def test_find_source_files_missing_root(tmp_path):
    result = find_source_files(str(tmp_path / "nope"), SourceType.JAVA, "test")
    assert result.files == []
    assert result.messages == []


def test_find_source_files_root_with_glob_chars(tmp_path):
    root = tmp_path / "proj[1]"
    f = _touch(root / "a.java")
    assert find_source_files(str(root), SourceType.JAVA).files == [f]
