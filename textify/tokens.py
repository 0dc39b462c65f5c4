"""
Shared tokenization rules: words, sentences, paragraphs and lines.

Every module that needs the notion of a "word" imports WORD_RE from here so
counts never disagree between counting, case and analysis helpers.
"""
import re
from typing import List

# word characters, apostrophes and hyphens, bounded by word boundaries
WORD_RE = re.compile(r"\b[\w'-]+\b")
SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
WHITESPACE_RE = re.compile(r"\s")
WHITESPACE_RUN_RE = re.compile(r"\s+")


def tokenize_words(text: str) -> List[str]:
    return WORD_RE.findall(text or "")


def sentence_split(text: str) -> List[str]:
    """Sentences as runs of non-terminal characters closed by `.`, `!` or `?`.

    No abbreviation handling: "Dr. Who" is two sentences.
    """
    return SENTENCE_RE.findall(text or "")


def paragraph_split(text: str) -> List[str]:
    if not text:
        return []
    return [p for p in PARAGRAPH_BREAK_RE.split(text) if p.strip()]


def split_lines(text: str) -> List[str]:
    # always on "\n" only; callers with "\r\n" input normalize first
    return text.split("\n")


