"""
Line-level operations: sorting, de-duplication, shuffling, filtering,
numbering, decoration and range edits.

Lines are always split on "\\n"; every function returns the lines re-joined
with "\\n".
"""
import logging
import random
import re
from typing import Callable, Optional, Union

from .tokens import split_lines

SORT_ORDERS = ("asc", "desc")
SORT_TYPES = ("alphabetical", "numerical", "length")

_NUMBER_RE = re.compile(r"-?\d+\.?\d*")
_LINE_NUMBER_RE = re.compile(r"^\d+\.?\s*")


def _is_desc(order: str) -> bool:
    if order not in SORT_ORDERS:
        logging.warning("Unknown sort order %r; sorting ascending", order)
    return order == "desc"


def _alphabetical_key(case_sensitive: bool):
    if case_sensitive:
        # dictionary order first, lowercase before uppercase on ties
        return lambda line: (line.casefold(), line.swapcase())
    return lambda line: line.lower()


def _first_number(line: str) -> float:
    match = _NUMBER_RE.search(line)
    return float(match.group(0)) if match else 0.0


def sort_lines_alphabetically(text: str, order: str = "asc", case_sensitive: bool = False) -> str:
    lines = sorted(split_lines(text), key=_alphabetical_key(case_sensitive), reverse=_is_desc(order))
    return "\n".join(lines)


def sort_lines_numerically(text: str, order: str = "asc") -> str:
    """Sort by the first number found on each line; lines without one count as 0."""
    lines = sorted(split_lines(text), key=_first_number, reverse=_is_desc(order))
    return "\n".join(lines)


def sort_lines_by_length(text: str, order: str = "asc") -> str:
    lines = sorted(split_lines(text), key=len, reverse=_is_desc(order))
    return "\n".join(lines)


def sort_lines(
    text: str,
    sort_type: str = "alphabetical",
    order: str = "asc",
    case_sensitive: bool = False,
) -> str:
    if sort_type == "numerical":
        return sort_lines_numerically(text, order)
    if sort_type == "length":
        return sort_lines_by_length(text, order)
    if sort_type != "alphabetical":
        logging.warning("Unknown sort type %r; falling back to alphabetical", sort_type)
    return sort_lines_alphabetically(text, order, case_sensitive)


def deduplicate_lines(text: str, case_sensitive: bool = True, keep_first: bool = True) -> str:
    """Drop repeated lines.

    With keep_first=False the last occurrence survives; the lines are walked
    back to front and the result reversed again.
    """
    lines = split_lines(text)
    if not keep_first:
        lines.reverse()
    seen = set()
    kept = []
    for line in lines:
        key = line if case_sensitive else line.lower()
        if key in seen:
            continue
        seen.add(key)
        kept.append(line)
    if not keep_first:
        kept.reverse()
    return "\n".join(kept)


def reverse_lines(text: str) -> str:
    return "\n".join(split_lines(text)[::-1])


def shuffle_lines(text: str, rng: Optional[random.Random] = None) -> str:
    """Fisher-Yates shuffle of the lines.

    `rng` is anything with a `randrange(n)` method; pass a seeded
    random.Random for a reproducible permutation.
    """
    rng = rng or random
    lines = split_lines(text)
    for i in range(len(lines) - 1, 0, -1):
        j = rng.randrange(i + 1)
        lines[i], lines[j] = lines[j], lines[i]
    return "\n".join(lines)


def filter_lines(text: str, predicate: Callable[[str], bool]) -> str:
    return "\n".join([line for line in split_lines(text) if predicate(line)])


def filter_lines_containing(
    text: str, search: str, case_sensitive: bool = False, invert: bool = False
) -> str:
    needle = search if case_sensitive else search.lower()

    def _keep(line: str) -> bool:
        haystack = line if case_sensitive else line.lower()
        return (needle in haystack) != invert

    return filter_lines(text, _keep)


def filter_lines_matching(text: str, pattern: Union[str, re.Pattern], invert: bool = False) -> str:
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return filter_lines(text, lambda line: bool(regex.search(line)) != invert)


def add_line_numbers(text: str, start_at: int = 1, separator: str = ". ") -> str:
    return "\n".join([f"{start_at + i}{separator}{line}" for i, line in enumerate(split_lines(text))])


def remove_line_numbers(text: str) -> str:
    # any leading number counts as numbering, whoever put it there
    return "\n".join([_LINE_NUMBER_RE.sub("", line) for line in split_lines(text)])


def add_line_prefix(text: str, prefix: str) -> str:
    return "\n".join([prefix + line for line in split_lines(text)])


def add_line_suffix(text: str, suffix: str) -> str:
    return "\n".join([line + suffix for line in split_lines(text)])


def wrap_lines(text: str, prefix: str, suffix: str) -> str:
    return "\n".join([prefix + line + suffix for line in split_lines(text)])


def extract_lines(text: str, start: int, end: int) -> str:
    """Lines `start`..`end`, 1-indexed and inclusive."""
    lines = split_lines(text)
    return "\n".join(lines[max(start, 1) - 1:max(end, 0)])


def delete_lines(text: str, start: int, end: int) -> str:
    """Remove lines `start`..`end` (1-indexed, inclusive). An empty range is a no-op."""
    lines = split_lines(text)
    del lines[max(start, 1) - 1:max(end, 0)]
    return "\n".join(lines)


def join_lines(text: str, separator: str = " ") -> str:
    return separator.join(split_lines(text))


def split_into_lines(text: str, delimiter: str) -> str:
    if not delimiter:
        # an empty delimiter puts every character on its own line
        return "\n".join(text)
    return "\n".join(text.split(delimiter))
