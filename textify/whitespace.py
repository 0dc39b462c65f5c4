"""
Whitespace management: trimming, collapsing, indentation, tabs and line endings.
"""
import logging
import re

from .tokens import WHITESPACE_RE, WHITESPACE_RUN_RE, split_lines

_LEADING_WS_RE = re.compile(r"^\s*")


def trim_text(text: str) -> str:
    return text.strip()


def trim_start(text: str) -> str:
    return text.lstrip()


def trim_end(text: str) -> str:
    return text.rstrip()


def remove_all_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) into one space.

    This flattens the text onto a single line; see remove_extra_spaces for the
    line-preserving variant.
    """
    return WHITESPACE_RUN_RE.sub(" ", text).strip()


def remove_extra_spaces(text: str) -> str:
    return "\n".join([WHITESPACE_RUN_RE.sub(" ", line).strip() for line in split_lines(text)])


def remove_empty_lines(text: str) -> str:
    return "\n".join([line for line in split_lines(text) if line.strip()])


def trim_lines(text: str) -> str:
    return "\n".join([line.strip() for line in split_lines(text)])


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        logging.debug("Clamping negative %s=%s to 0", name, value)
        return 0
    return value


def indent_lines(text: str, spaces: int = 2) -> str:
    indent = " " * _non_negative(spaces, "spaces")
    return "\n".join([indent + line for line in split_lines(text)])


def dedent_lines(text: str) -> str:
    """Strip the indentation shared by every non-blank line.

    Relative indentation is kept: "  a\\n    b" becomes "a\\n  b".
    """
    lines = split_lines(text)
    indents = [len(_LEADING_WS_RE.match(line).group(0)) for line in lines if line.strip()]
    if not indents:
        return text
    min_indent = min(indents)
    if min_indent == 0:
        return text
    return "\n".join([line[min_indent:] for line in lines])


def tabs_to_spaces(text: str, tab_size: int = 4) -> str:
    return text.replace("\t", " " * _non_negative(tab_size, "tab_size"))


def spaces_to_tabs(text: str, tab_size: int = 4) -> str:
    """Replace every run of exactly `tab_size` spaces with a tab, left to right.

    Purely textual; it does not look at indentation columns.
    """
    if tab_size <= 0:
        return text
    return text.replace(" " * tab_size, "\t")


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def to_lf(text: str) -> str:
    return normalize_line_endings(text)


def to_crlf(text: str) -> str:
    return normalize_line_endings(text).replace("\n", "\r\n")


def ensure_trailing_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def remove_trailing_newline(text: str) -> str:
    # exactly one; "a\n\n" keeps its first newline
    return text[:-1] if text.endswith("\n") else text


def wrap_text(text: str, max_length: int = 80) -> str:
    """Greedy word wrap. Words longer than `max_length` get a line of their own
    and are never split."""
    lines = []
    current = ""
    for word in WHITESPACE_RUN_RE.split(text):
        if not word:
            continue
        if len(current) + len(word) + 1 <= max_length:
            current = f"{current} {word}" if current else word
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return "\n".join(lines)
