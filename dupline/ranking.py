"""Order reported spans longest first."""

from typing import Iterable, List, Optional

from .spans import DuplicateSpan


def rank_spans(
    spans: Iterable[DuplicateSpan], top_n: Optional[int] = None
) -> List[DuplicateSpan]:
    """Return spans sorted by line count, descending, truncated to *top_n*.

    The sort is stable: spans of equal length keep their scan order.
    ``top_n=None`` keeps every span.
    """
    ranked = sorted(spans, key=lambda s: s.line_count, reverse=True)
    if top_n is None:
        return ranked
    return ranked[: max(top_n, 0)]
