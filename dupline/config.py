"""Load dupline configuration from pyproject.toml and optional .dupline.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import ConfigError

# "corpus": index every file first, then flag lines seen more than once in
# total. "running": flag a line once its text was already seen earlier.
COUNT_MODES = ("corpus", "running")


@dataclass
class DuplineConfig:
    """Runtime configuration for dupline."""

    # Minimum number of consecutive duplicate lines for a span to be reported
    min_line_count: int = 6
    # Minimum total characters (trimmed lines) for a span to be reported
    min_char_count: int = 80
    # Number of ranked spans to print
    list_top_result: int = 30

    # How occurrences are counted, see COUNT_MODES
    count_mode: str = "corpus"

    # Folder names skipped during discovery, matched at the root and at any
    # depth below it.
    ignore_folders: List[str] = field(
        default_factory=lambda: ["thirdparty", "test", "node_modules"]
    )
    # Print every discovered source file before scanning
    list_source_files: bool = False
    # Print the run summary after the ranked spans
    summary: bool = False


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _apply(cfg: DuplineConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys and None values."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid and val is not None:
            setattr(cfg, key, val)


def load_config(
    project_root: Optional[Path] = None, overrides: Optional[dict] = None
) -> DuplineConfig:
    """Load config from pyproject.toml [tool.dupline], then .dupline.toml.

    Non-None entries of *overrides* (typically command-line flags) win over
    both files.
    """
    if project_root is None:
        project_root = Path.cwd()
    cfg = DuplineConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("dupline", {}))
    local = _read_toml(project_root / ".dupline.toml")
    _apply(cfg, local)
    if overrides:
        _apply(cfg, overrides)
    return cfg


def check_config(cfg: DuplineConfig) -> None:
    """Raise ConfigError if a value can not drive a scan."""
    for name in ("min_line_count", "min_char_count", "list_top_result"):
        value = getattr(cfg, name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
    if cfg.count_mode not in COUNT_MODES:
        raise ConfigError(
            f"unknown count_mode {cfg.count_mode!r}, "
            f"expected one of: {', '.join(COUNT_MODES)}"
        )
    folders = cfg.ignore_folders
    if not isinstance(folders, str) and not (
        isinstance(folders, list) and all(isinstance(f, str) for f in folders)
    ):
        raise ConfigError(
            "ignore_folders must be a comma-separated string or a list of "
            f"strings, got {folders!r}"
        )
    for name in ("list_source_files", "summary"):
        value = getattr(cfg, name)
        if not isinstance(value, bool):
            raise ConfigError(f"{name} must be true or false, got {value!r}")
