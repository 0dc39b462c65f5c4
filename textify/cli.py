"""
Command-line front end for the textify library.

Usage:
    textify list
    textify run snake < names.txt
    textify run wrap --param max_length=40 --file notes.txt
    textify stats --file essay.txt
    textify freq --chars --limit 5 < essay.txt
    textify extract urls < page.txt
    textify batch history.csv --column inputText --output stats.csv
    textify playground
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import analysis, counting, operations
from .config import DEFAULT_CONFIG

EXTRACTORS = {
    "urls": analysis.extract_urls,
    "emails": analysis.extract_emails,
    "hashtags": analysis.extract_hashtags,
    "mentions": analysis.extract_mentions,
}

PLAYGROUND_TEXT = """Hello world! This is a test.
This text spans multiple lines.
Let's see what we can learn from it."""


class UsageError(Exception):
    pass


def _read_input(path: Optional[str]) -> str:
    if path:
        file_path = Path(path)
        if not file_path.exists():
            raise UsageError(f"Input file not found: {file_path}")
        return file_path.read_text(encoding="utf-8")
    return sys.stdin.read()


def _parse_params(pairs: Optional[List[str]]) -> Dict[str, str]:
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise UsageError(f"Expected key=value, got {pair!r}")
        params[key.strip().replace("-", "_")] = value
    return params


def cmd_list(args):
    for name in operations.list_operations():
        print(name)
    return 0


def cmd_run(args):
    text = _read_input(args.file)
    result = operations.apply_operation(args.operation, text, **_parse_params(args.param))
    sys.stdout.write(result)
    if not result.endswith("\n"):
        sys.stdout.write("\n")
    return 0


def cmd_stats(args):
    text = _read_input(args.file)
    stats = analysis.get_text_statistics(text)
    stats["reading_time"] = counting.get_reading_time_string(text, args.wpm)
    score = analysis.calculate_readability_score(text)
    stats["readability"] = score
    stats["readability_level"] = analysis.get_readability_level(score)
    print(json.dumps(stats, indent=2, ensure_ascii=False))
    return 0


def cmd_freq(args):
    text = _read_input(args.file)
    if args.chars:
        table = analysis.get_character_frequency(text, args.case_sensitive, args.limit)
        key = "character"
    else:
        table = analysis.get_word_frequency(text, args.case_sensitive, args.limit)
        key = "word"
    for row in table:
        print(f"{row[key]!r:<20} {row['count']:>6} {row['percentage']:6.2f}%")
    return 0


def cmd_extract(args):
    text = _read_input(args.file)
    for match in EXTRACTORS[args.kind](text):
        print(match)
    return 0


def cmd_batch(args):
    # pandas is only needed here
    import pandas as pd

    from . import batch

    csv_path = Path(args.csv)
    if not csv_path.exists():
        raise UsageError(f"CSV file not found: {csv_path}")
    df = pd.read_csv(csv_path)
    if args.column:
        text_col = args.column
    else:
        df = batch.ensure_text_column(df)
        text_col = "text"
    result = batch.analyze_frame(df, text_col=text_col)
    if args.output:
        result.to_csv(args.output, index=False)
        logging.info("Wrote statistics for %s rows to %s", len(result), args.output)
    else:
        print(result.to_csv(index=False), end="")
    return 0


def cmd_playground(args):
    print("Text Processing Playground\n")
    print("COUNTING")
    print("-" * 50)
    print(PLAYGROUND_TEXT)
    print()
    print("Counts:", counting.get_all_counts(PLAYGROUND_TEXT))
    print("Reading time:", counting.get_reading_time_string(PLAYGROUND_TEXT))
    print()

    phrase = "hello world example"
    print("CASE CONVERSION")
    print("-" * 50)
    for name in ("camel", "snake", "kebab", "title"):
        print(f"{name}: {operations.apply_operation(name, phrase)}")
    print()

    messy = "  hello    world  \n  multiple   spaces  "
    print("WHITESPACE")
    print("-" * 50)
    print("Normalized:", operations.apply_operation("normalize-whitespace", messy))
    print("Lines trimmed:", repr(operations.apply_operation("trim-lines", messy)))
    print()

    items = "banana\napple\ncherry\napple"
    print("LINE OPERATIONS")
    print("-" * 50)
    print("Sorted:", repr(operations.apply_operation("sort", items)))
    print("Deduplicated:", repr(operations.apply_operation("dedupe", items)))
    print("Reversed:", repr(operations.apply_operation("reverse", items)))
    print("Numbered:", repr(operations.apply_operation("number", items)))
    print()

    print("ANALYSIS")
    print("-" * 50)
    print("Statistics:", analysis.get_text_statistics(PLAYGROUND_TEXT))
    print("Top words:", analysis.get_word_frequency(PLAYGROUND_TEXT, limit=3))
    links = "Visit https://example.com or mail admin@example.com"
    print("URLs:", analysis.extract_urls(links))
    print("Emails:", analysis.extract_emails(links))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textify",
        description="Text transformation and analysis tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List available operations")

    run_parser = subparsers.add_parser("run", help="Apply a named operation")
    run_parser.add_argument("operation", help="Operation name (see 'list')")
    run_parser.add_argument("--param", "-p", action="append", metavar="KEY=VALUE",
                            help="Operation parameter, repeatable")
    run_parser.add_argument("--file", "-f", help="Input file (default: stdin)")

    stats_parser = subparsers.add_parser("stats", help="Text statistics as JSON")
    stats_parser.add_argument("--file", "-f", help="Input file (default: stdin)")
    stats_parser.add_argument("--wpm", type=int, default=DEFAULT_CONFIG["counting"]["words_per_minute"],
                              help="Reading speed in words per minute")

    freq_parser = subparsers.add_parser("freq", help="Word or character frequency table")
    freq_parser.add_argument("--file", "-f", help="Input file (default: stdin)")
    freq_parser.add_argument("--chars", action="store_true", help="Count characters instead of words")
    freq_parser.add_argument("--limit", type=int, default=DEFAULT_CONFIG["analysis"]["word_frequency_limit"],
                             help="Max rows (0 for all)")
    freq_parser.add_argument("--case-sensitive", action="store_true", help="Do not fold case")

    extract_parser = subparsers.add_parser("extract", help="Extract URLs, emails, hashtags or mentions")
    extract_parser.add_argument("kind", choices=sorted(EXTRACTORS))
    extract_parser.add_argument("--file", "-f", help="Input file (default: stdin)")

    batch_parser = subparsers.add_parser("batch", help="Per-row statistics for a CSV of texts")
    batch_parser.add_argument("csv", help="CSV file")
    batch_parser.add_argument("--column", "-c", help="Text column (default: auto-detect)")
    batch_parser.add_argument("--output", "-o", help="Output CSV (default: stdout)")

    subparsers.add_parser("playground", help="Tour of the library on sample text")
    return parser


COMMANDS = {
    "list": cmd_list,
    "run": cmd_run,
    "stats": cmd_stats,
    "freq": cmd_freq,
    "extract": cmd_extract,
    "batch": cmd_batch,
    "playground": cmd_playground,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, DEFAULT_CONFIG["log_level"], logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return 2

    try:
        return COMMANDS[args.command](args)
    except (UsageError, ValueError) as e:
        # OperationError is a ValueError, as are the batch column errors
        logging.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
