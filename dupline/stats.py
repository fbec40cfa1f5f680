"""Cumulative statistics for a single dupline run."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class RunStats:
    """Holds cumulative counts for a single dupline run."""

    # Discovery
    files_found: int = 0

    # File tracking
    files_scanned: int = 0
    files_skipped: List[str] = field(default_factory=list)

    # Line counts
    lines_scanned: int = 0
    lines_indexed: int = 0
    duplicate_lines: int = 0

    # Span outcomes
    spans_found: int = 0
    spans_rejected: int = 0

    def merge(self, other: "RunStats") -> None:
        """Add all counters from *other* into self (files_skipped is not merged)."""
        self.files_found += other.files_found
        self.files_scanned += other.files_scanned
        self.lines_scanned += other.lines_scanned
        self.lines_indexed += other.lines_indexed
        self.duplicate_lines += other.duplicate_lines
        self.spans_found += other.spans_found
        self.spans_rejected += other.spans_rejected

    @property
    def total_runs(self) -> int:
        return self.spans_found + self.spans_rejected

    @property
    def duplicate_ratio(self) -> float:
        """Fraction of indexed lines that were flagged as duplicates."""
        if not self.lines_indexed:
            return 0.0
        return self.duplicate_lines / self.lines_indexed

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable run summary."""
        lines = ["--- dupline summary ---"]
        lines.append("files:")
        lines.append(f"  found:               {self.files_found}")
        lines.append(f"  scanned:             {self.files_scanned}")
        lines.append(f"  skipped:             {len(self.files_skipped)}")
        lines.append("lines:")
        lines.append(f"  scanned:             {self.lines_scanned}")
        lines.append(f"  indexed:             {self.lines_indexed}")
        lines.append(
            f"  duplicate:           {self.duplicate_lines}"
            f" ({self.duplicate_ratio:.1%})"
        )
        lines.append("duplicate runs:")
        lines.append(f"  reported:            {self.spans_found}")
        lines.append(f"  below threshold:     {self.spans_rejected}")
        lines.append(f"  total:               {self.total_runs}")
        if self.files_skipped:
            flist = ", ".join(self.files_skipped)
            lines.append(f"files skipped ({len(self.files_skipped)}): {flist}")
        else:
            lines.append("files skipped: none")
        return lines
