"""Turn a per-line duplicate flag stream into reported line spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .stats import RunStats


@dataclass(frozen=True)
class DuplicateSpan:
    """A reported run of duplicate lines in one file (1-based, inclusive)."""

    filepath: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"invalid span {self.start}~{self.end}")

    @property
    def line_count(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{self.filepath}: line {self.start}~{self.end}"


class SpanAccumulator:
    """Per-file state machine with two states, idle and in-run.

    Feed every physical line in order with :meth:`feed`, then call
    :meth:`finish` at end of file so a trailing run is still evaluated.
    A run is emitted only when it covers at least ``min_line_count`` lines
    and ``min_char_count`` characters.
    """

    def __init__(
        self,
        filepath: str,
        min_line_count: int,
        min_char_count: int,
        stats: Optional[RunStats] = None,
    ) -> None:
        self.filepath = filepath
        self.min_line_count = min_line_count
        self.min_char_count = min_char_count
        self.stats = stats
        self.spans: List[DuplicateSpan] = []
        self.in_run = False
        self.start = 0
        self.end = 0
        self.char_count = 0

    def feed(self, line_num: int, is_duplicate: bool, length: int = 0) -> None:
        """Advance the state machine by one physical line."""
        if is_duplicate:
            if not self.in_run:
                self.in_run = True
                self.start = line_num
                self.char_count = 0
            self.end = line_num
            self.char_count += length
        elif self.in_run:
            self._close()

    def finish(self) -> List[DuplicateSpan]:
        """Close any open run and return every span accepted so far."""
        if self.in_run:
            self._close()
        return self.spans

    def _close(self) -> None:
        run_length = self.end - self.start + 1
        accepted = (
            run_length >= self.min_line_count
            and self.char_count >= self.min_char_count
        )
        if accepted:
            self.spans.append(DuplicateSpan(self.filepath, self.start, self.end))
        if self.stats is not None:
            if accepted:
                self.stats.spans_found += 1
            else:
                self.stats.spans_rejected += 1
        self.char_count = 0
        self.in_run = False
