"""CLI entry point: discovers source files, drives the scanner, reports spans."""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .config import COUNT_MODES, check_config, load_config
from .discovery import SourceType, find_source_files, split_folders
from .errors import DuplineError
from .report import print_report
from .scanner import Scanner
from .stats import RunStats


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _fail(exc: DuplineError) -> None:
    print(f"dupline: {exc}", file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dupline",
        description="Find copy-pasted line runs across a source tree.",
    )
    parser.add_argument("root", help="folder to scan")
    parser.add_argument(
        "source_type",
        type=SourceType,
        choices=list(SourceType),
        help="source file type",
    )
    parser.add_argument(
        "--min-line-count",
        type=_non_negative,
        help="minimum number of lines to considered as copy paste (default 6)",
    )
    parser.add_argument(
        "--min-char-count",
        type=_non_negative,
        help="minimum characters to considered as copy paste (default 80)",
    )
    parser.add_argument(
        "--ignore-folders",
        help="comma-separated folders to ignore "
        "(default thirdparty,test,node_modules)",
    )
    parser.add_argument(
        "--list-source-files",
        action="store_true",
        default=None,
        help="list source files",
    )
    parser.add_argument(
        "--list-top-result",
        type=_non_negative,
        help="top number of results to list (default 30)",
    )
    parser.add_argument(
        "--count-mode",
        choices=COUNT_MODES,
        help="count occurrences over the whole corpus first, or as lines "
        "are read (default corpus)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        default=None,
        help="print run statistics after the results",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    overrides = {
        "min_line_count": args.min_line_count,
        "min_char_count": args.min_char_count,
        "list_top_result": args.list_top_result,
        "count_mode": args.count_mode,
        "list_source_files": args.list_source_files,
        "summary": args.summary,
    }
    if args.ignore_folders is not None:
        overrides["ignore_folders"] = split_folders(args.ignore_folders)
    config = load_config(overrides=overrides)
    try:
        check_config(config)
    except DuplineError as exc:
        _fail(exc)

    console = Console(highlight=False, emoji=False, soft_wrap=True)
    discovery = find_source_files(args.root, args.source_type, config.ignore_folders)
    if config.list_source_files:
        for path in discovery.files:
            console.print(path, markup=False)
    for message in discovery.messages:
        console.print(message, markup=False)
    console.print(
        f"found {len(discovery.files)} source files of {args.source_type}",
        markup=False,
    )

    run_stats = RunStats(files_found=len(discovery.files))
    scanner = Scanner(config=config, stats=run_stats)
    for message in scanner.scan(discovery.files):
        console.print(message, markup=False)

    print_report(console, scanner.top(), config.list_top_result)
    if config.summary:
        for line in run_stats.format_summary():
            console.print(line, markup=False)
