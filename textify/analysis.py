"""
Text analysis: frequency tables, aggregate statistics, Flesch readability,
entity extraction (URLs, emails, hashtags, mentions) and substring search.
"""
import math
import re
from collections import Counter
from typing import Any, Dict, List, Optional

from .config import DEFAULT_CONFIG
from .counting import count_sentences, get_all_counts, get_reading_time_string
from .tokens import tokenize_words

CFG = DEFAULT_CONFIG["analysis"]

_IGNORED_CHARACTERS = frozenset(" \n\t")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

URL_RE = re.compile(r"https?://[^\s)]+")
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
HASHTAG_RE = re.compile(r"#\w+")
MENTION_RE = re.compile(r"@\w+")


def _round1(value: float) -> float:
    # half-up to one decimal, so 2.25 -> 2.3 rather than banker's 2.2
    return math.floor(value * 10 + 0.5) / 10


def _frequency_table(counts: Counter, key: str, limit: Optional[int]) -> List[Dict[str, Any]]:
    total = sum(counts.values())
    # sorted() is stable, so ties keep the order of first occurrence
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    table = [
        {key: item, "count": count, "percentage": count / total * 100}
        for item, count in ranked
    ]
    # non-positive limits mean no limit
    return table[:limit] if limit and limit > 0 else table


def get_character_frequency(
    text: str, case_sensitive: bool = False, limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """Frequency of every character except spaces, tabs and newlines.

    Percentages are relative to the number of counted characters.
    """
    source = text if case_sensitive else text.lower()
    counts = Counter(ch for ch in source if ch not in _IGNORED_CHARACTERS)
    return _frequency_table(counts, "character", limit)


def get_word_frequency(
    text: str, case_sensitive: bool = False, limit: Optional[int] = 10
) -> List[Dict[str, Any]]:
    """Most frequent word tokens. Percentages are relative to the total number
    of tokens, not the number of distinct words."""
    words = tokenize_words(text if case_sensitive else text.lower())
    return _frequency_table(Counter(words), "word", limit)


def get_text_statistics(text: str) -> Dict[str, Any]:
    stats = get_all_counts(text)
    words = tokenize_words(text)
    word_count = len(words)
    sentences = stats["sentences"]

    average_word_length = sum(len(w) for w in words) / word_count if word_count else 0
    average_sentence_length = word_count / sentences if sentences else 0
    by_length = sorted(words, key=len, reverse=True)

    stats.update({
        "average_word_length": _round1(average_word_length),
        "average_sentence_length": _round1(average_sentence_length),
        "longest_word": by_length[0] if by_length else "",
        "shortest_word": by_length[-1] if by_length else "",
        "unique_words": len({w.lower() for w in words}),
        "reading_time": get_reading_time_string(text),
    })
    return stats


def count_syllables_in_word(word: str) -> int:
    """Rough syllable count: vowel groups, minus a trailing silent 'e'."""
    word = word.lower()
    if len(word) <= 3:
        return 1
    count = len(_VOWEL_GROUP_RE.findall(word)) or 1
    if word.endswith("e"):
        count -= 1
    return max(1, count)


def count_syllables(text: str) -> int:
    return sum(count_syllables_in_word(w) for w in tokenize_words(text))


def calculate_readability_score(text: str) -> float:
    """Flesch Reading Ease, clamped to 0..100 and rounded to one decimal.

    Returns 0 for text without words or without sentences.
    """
    words = len(tokenize_words(text))
    sentences = count_sentences(text)
    if words == 0 or sentences == 0:
        return 0.0
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (count_syllables(text) / words)
    return max(0.0, min(100.0, _round1(score)))


def get_readability_level(score: float) -> str:
    for lower_bound, label in CFG["readability_bands"]:
        if score >= lower_bound:
            return label
    return CFG["readability_floor_label"]


def extract_urls(text: str) -> List[str]:
    return URL_RE.findall(text)


def extract_emails(text: str) -> List[str]:
    return EMAIL_RE.findall(text)


def extract_hashtags(text: str) -> List[str]:
    return HASHTAG_RE.findall(text)


def extract_mentions(text: str) -> List[str]:
    return MENTION_RE.findall(text)


def find_all_positions(text: str, substring: str, case_sensitive: bool = False) -> List[int]:
    """Start offsets of non-overlapping occurrences of `substring`.

    After a hit the search resumes past the whole match, so "aaaa" contains
    "aa" twice, not three times.
    """
    if not substring:
        return []
    # match against the original text so offsets index it even when lowercasing
    # would change its length
    flags = 0 if case_sensitive else re.IGNORECASE
    return [m.start() for m in re.finditer(re.escape(substring), text, flags)]


def count_occurrences(text: str, substring: str, case_sensitive: bool = False) -> int:
    return len(find_all_positions(text, substring, case_sensitive))
