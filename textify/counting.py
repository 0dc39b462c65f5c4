"""
Scalar text metrics: characters, words, lines, sentences, paragraphs and
reading time.
"""
import logging
import math
from typing import Dict

from .config import DEFAULT_CONFIG
from .tokens import WHITESPACE_RE, paragraph_split, sentence_split, split_lines, tokenize_words

CFG = DEFAULT_CONFIG["counting"]


def count_characters(text: str, include_spaces: bool = True) -> int:
    if not text:
        return 0
    if include_spaces:
        return len(text)
    return len(WHITESPACE_RE.sub("", text))


def count_words(text: str) -> int:
    return len(tokenize_words(text))


def count_lines(text: str, count_empty: bool = True) -> int:
    if not text:
        return 0
    lines = split_lines(text)
    if count_empty:
        return len(lines)
    return sum(1 for line in lines if line.strip())


def count_sentences(text: str) -> int:
    return len(sentence_split(text))


def count_paragraphs(text: str) -> int:
    return len(paragraph_split(text))


def get_all_counts(text: str) -> Dict[str, int]:
    """Every count in one record, so callers needing several don't recompute."""
    return {
        "characters": count_characters(text, True),
        "characters_no_spaces": count_characters(text, False),
        "words": count_words(text),
        "lines": count_lines(text, True),
        "sentences": count_sentences(text),
        "paragraphs": count_paragraphs(text),
    }


def _reading_speed(words_per_minute) -> float:
    if not words_per_minute or words_per_minute <= 0:
        logging.debug("Invalid reading speed %r; using configured default", words_per_minute)
        return CFG["words_per_minute"]
    return words_per_minute


def estimate_reading_time(text: str, words_per_minute: int = 200) -> int:
    """Minutes needed to read `text`, rounded up. 0 for text without words."""
    return math.ceil(count_words(text) / _reading_speed(words_per_minute))


def get_reading_time_string(text: str, words_per_minute: int = 200) -> str:
    exact_minutes = count_words(text) / _reading_speed(words_per_minute)
    if exact_minutes < 1:
        return "< 1 min read"
    return f"{math.ceil(exact_minutes)} min read"
