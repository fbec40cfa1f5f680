"""Expand a root folder and source type into the list of files to scan."""

import glob
import os
from enum import Enum
from typing import Iterable, List, NamedTuple, Tuple, Union

from .errors import PatternError


class SourceType(Enum):
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    RUST = "rust"
    JAVASCRIPT = "javascript"
    PYTHON = "python"

    def __str__(self) -> str:
        return self.value

    @property
    def extensions(self) -> Tuple[str, ...]:
        return _EXTENSIONS[self]


_EXTENSIONS = {
    SourceType.JAVA: ("java",),
    SourceType.CPP: ("cpp", "cc", "cxx", "hpp", "hh", "hxx"),
    SourceType.C: ("c", "h"),
    SourceType.RUST: ("rs",),
    SourceType.JAVASCRIPT: ("js", "mjs", "cjs"),
    SourceType.PYTHON: ("py",),
}


class Discovery(NamedTuple):
    files: List[str]
    messages: List[str]


def split_folders(ignore_folders: Union[str, Iterable[str]]) -> List[str]:
    """Accept either a comma-separated string or a list of folder names."""
    if isinstance(ignore_folders, str):
        return ignore_folders.split(",")
    return list(ignore_folders)


def _check_pattern(folder: str) -> str:
    """Return the trimmed folder pattern or raise PatternError."""
    name = folder.strip()
    if not name:
        raise PatternError("empty ignore pattern")
    if os.path.isabs(name):
        raise PatternError(f"ignore pattern must be relative: {name!r}")
    if ".." in name.replace("\\", "/").split("/"):
        raise PatternError(f"ignore pattern must not leave the root: {name!r}")
    if name.count("[") != name.count("]"):
        raise PatternError(f"unbalanced brackets in ignore pattern: {name!r}")
    return name


def compute_ignore_paths(
    ignore_folders: Union[str, Iterable[str]], root: str
) -> Tuple[List[str], List[str]]:
    """Glob each ignore folder at the root and at any depth below it.

    Returns ``(paths, messages)``; malformed entries are reported in
    *messages* and skipped.
    """
    base = glob.escape(root)
    paths: List[str] = []
    messages: List[str] = []
    for folder in split_folders(ignore_folders):
        try:
            name = _check_pattern(folder)
        except PatternError as exc:
            messages.append(f"ignore folders: {exc}")
            continue
        for pattern in (
            os.path.join(base, "**", name),
            os.path.join(base, name),
        ):
            paths.extend(glob.glob(pattern, recursive=True, include_hidden=True))
    return paths, messages


def path_is_ignored(path: str, ignore_paths: Iterable[str]) -> bool:
    """Return True if *path* is one of *ignore_paths* or lies below one."""
    for ignored in ignore_paths:
        if path == ignored or path.startswith(ignored.rstrip(os.sep) + os.sep):
            return True
    return False


def find_source_files(
    root: str,
    source_type: SourceType,
    ignore_folders: Union[str, Iterable[str]] = (),
) -> Discovery:
    """Return the sorted source files of *source_type* under *root*.

    A missing root simply yields no files.
    """
    ignore_paths, messages = compute_ignore_paths(ignore_folders, root)
    found = set()
    for ext in source_type.extensions:
        pattern = os.path.join(glob.escape(root), "**", f"*.{ext}")
        found.update(glob.glob(pattern, recursive=True, include_hidden=True))
    files = [
        path
        for path in sorted(found)
        if os.path.isfile(path) and not path_is_ignored(path, ignore_paths)
    ]
    return Discovery(files, messages)
