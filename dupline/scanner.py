"""Read source files, index their lines and collect duplicate spans."""

from typing import Callable, Generator, Iterable, List, Optional

from .config import DuplineConfig, check_config, load_config
from .errors import ScanError
from .normalizer import normalize_line
from .ranking import rank_spans
from .repetition import RepetitionIndex
from .spans import DuplicateSpan, SpanAccumulator
from .stats import RunStats


def read_lines(filepath: str) -> List[str]:
    """Return the physical lines of *filepath*, split on ``\\n`` only.

    The whole file is read before any line is indexed so that a file which
    fails part-way leaves the shared index untouched.
    """
    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(filepath, str(exc)) from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def index_lines(lines: Iterable[str], index: RepetitionIndex) -> None:
    """Insert every indexable line into *index* without flagging anything."""
    in_comment = False
    for raw in lines:
        line = normalize_line(raw, in_comment)
        in_comment = line.in_comment
        if line.indexable:
            index.insert(line.text)


def scan_lines(
    filepath: str,
    lines: Iterable[str],
    occurrences: Callable[[str], int],
    min_line_count: int,
    min_char_count: int,
    stats: Optional[RunStats] = None,
) -> List[DuplicateSpan]:
    """Flag each line of one file and return the spans it contributes.

    *occurrences* maps a trimmed line to its occurrence count; pass
    ``index.insert`` to count as lines stream past, or ``index.count`` for an
    index that already holds the whole corpus.

    A run's character count is the number of code points in its trimmed
    lines, not their encoded byte length, so non-ASCII text weighs less
    against *min_char_count* than its UTF-8 size would suggest.
    """
    accumulator = SpanAccumulator(filepath, min_line_count, min_char_count, stats)
    in_comment = False
    line_num = 0
    for line_num, raw in enumerate(lines, start=1):
        line = normalize_line(raw, in_comment)
        in_comment = line.in_comment
        is_duplicate = line.indexable and occurrences(line.text) > 1
        accumulator.feed(line_num, is_duplicate, len(line.text))
        if stats is not None:
            stats.lines_indexed += line.indexable
            stats.duplicate_lines += is_duplicate
    if stats is not None:
        stats.lines_scanned += line_num
    return accumulator.finish()


def scan_file(
    filepath: str,
    index: RepetitionIndex,
    config: DuplineConfig,
    stats: Optional[RunStats] = None,
    prepared: bool = False,
) -> List[DuplicateSpan]:
    """Scan a single file; raises ScanError if it can not be read.

    With ``prepared=True`` the index is assumed to already contain every line
    of the corpus and is only queried.
    """
    lines = read_lines(filepath)
    return scan_lines(
        filepath,
        lines,
        index.count if prepared else index.insert,
        config.min_line_count,
        config.min_char_count,
        stats,
    )


class Scanner:
    """Scan files in order against one shared RepetitionIndex.

    In ``corpus`` count mode every file is indexed before any is flagged, so
    a block copied between two files is reported in both of them. In
    ``running`` mode a line only counts as a duplicate once the same text has
    already been seen earlier in the run, so the first copy is never flagged.
    """

    def __init__(
        self,
        config: Optional[DuplineConfig] = None,
        stats: Optional[RunStats] = None,
        index: Optional[RepetitionIndex] = None,
    ) -> None:
        self.config = config if config is not None else load_config()
        check_config(self.config)
        self.stats = stats if stats is not None else RunStats()
        self.index = index if index is not None else RepetitionIndex()
        self.spans: List[DuplicateSpan] = []

    def scan(self, files: Iterable[str]) -> Generator[str, None, None]:
        """Scan *files*, yielding a message for each file that is skipped."""
        files = list(files)
        prepared = self.config.count_mode == "corpus"
        if prepared:
            readable = []
            for filepath in files:
                try:
                    index_lines(read_lines(filepath), self.index)
                except ScanError as exc:
                    yield self._skip(exc)
                    continue
                readable.append(filepath)
            files = readable

        for filepath in files:
            file_stats = RunStats()
            try:
                found = scan_file(
                    filepath, self.index, self.config, file_stats, prepared
                )
            except ScanError as exc:
                yield self._skip(exc)
                continue
            self.stats.merge(file_stats)
            self.stats.files_scanned += 1
            self.spans.extend(found)

    def _skip(self, exc: ScanError) -> str:
        self.stats.files_skipped.append(exc.filepath)
        return f"{exc.filepath}: skipped ({exc.reason})"

    def top(self, n: Optional[int] = None) -> List[DuplicateSpan]:
        """Return the *n* longest spans (default ``config.list_top_result``)."""
        if n is None:
            n = self.config.list_top_result
        return rank_spans(self.spans, n)
