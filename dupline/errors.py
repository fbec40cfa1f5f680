"""Dupline-specific exceptions."""


class DuplineError(Exception):
    """Base class for all dupline errors."""


class ScanError(DuplineError):
    """Raised when a source file can not be read; the file is skipped.

    The scan loop reports the message and carries on with the next file, so
    a single unreadable file never aborts a run.
    """

    def __init__(self, filepath: str, reason: str) -> None:
        super().__init__(f"{filepath}: {reason}")
        self.filepath = filepath
        self.reason = reason


class PatternError(DuplineError):
    """Raised for a malformed ignore-folder pattern; the entry is skipped."""


class ConfigError(DuplineError):
    """Raised when a configuration value is out of range."""
