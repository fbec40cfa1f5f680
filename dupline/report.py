"""Render ranked duplicate spans to the console."""

from typing import Iterable

from rich.console import Console
from rich.markup import escape

from .spans import DuplicateSpan


def span_markup(span: DuplicateSpan) -> str:
    """Return rich markup for one span: ``<filepath>: line <start>~<end>``."""
    return (
        f"[red]{escape(span.filepath)}[/red]: line "
        f"[magenta]{span.start}[/magenta]~[magenta]{span.end}[/magenta]"
    )


def print_report(console: Console, spans: Iterable[DuplicateSpan], top_n: int) -> None:
    console.print(f"top [blue]{top_n}[/blue] result:")
    for span in spans:
        console.print(span_markup(span))
