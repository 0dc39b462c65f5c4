"""
Case-style conversions. All functions are plain str -> str rewrites.
"""
import re

from .tokens import WHITESPACE_RUN_RE, WORD_RE

# Articles, coordinating conjunctions and short prepositions kept lowercase in
# title case unless they open or close the text.
MINOR_WORDS = frozenset([
    "a", "an", "the", "and", "but", "or", "for", "nor", "as", "at", "by",
    "from", "in", "into", "of", "on", "onto", "to", "with",
])

# a run of anything that is not a letter or digit
_SEPARATOR_RUN_RE = re.compile(r"[\W_]+")
_SEPARATOR_THEN_CHAR_RE = re.compile(r"[\W_]+(.)")


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


def to_title_case(text: str) -> str:
    """Title Case with minor words left lowercase.

    >>> to_title_case("the lord of the rings")
    'The Lord of the Rings'
    """
    words = WHITESPACE_RUN_RE.split(text.lower())
    last = len(words) - 1
    titled = []
    for i, word in enumerate(words):
        if i in (0, last) or word not in MINOR_WORDS:
            titled.append(_upper_first(word))
        else:
            titled.append(word)
    return " ".join(titled)


def to_sentence_case(text: str) -> str:
    return text[:1].upper() + text[1:].lower()


def _strip_separators(text: str) -> str:
    return _SEPARATOR_THEN_CHAR_RE.sub(lambda m: m.group(1).upper(), text)


def to_camel_case(text: str) -> str:
    joined = _strip_separators(text)
    # "İ".lower() is "i" plus a combining dot, which must not survive as a separator
    return _SEPARATOR_RUN_RE.sub("", joined[:1].lower() + joined[1:])


def to_pascal_case(text: str) -> str:
    return _SEPARATOR_RUN_RE.sub("", _upper_first(_strip_separators(text)))


def _starts_word(prev: str, ch: str) -> bool:
    # lowercase-to-uppercase step, e.g. the "W" in "helloWorld". Letters with
    # no uppercase form never count, so constant-case output is never re-split.
    return ch.isupper() and prev.islower() and prev.upper() != prev


def _join_with(text: str, joiner: str, upper: bool = False) -> str:
    marked = []
    prev = ""
    for ch in text:
        if _starts_word(prev, ch):
            marked.append(joiner)
        marked.append(ch)
        prev = ch
    joined = "".join(marked)
    # change case before collapsing: the mapping may emit combining marks
    joined = joined.upper() if upper else joined.lower()
    return _SEPARATOR_RUN_RE.sub(joiner, joined).strip(joiner)


def to_snake_case(text: str) -> str:
    return _join_with(text, "_")


def to_kebab_case(text: str) -> str:
    return _join_with(text, "-")


def to_dot_case(text: str) -> str:
    return _join_with(text, ".")


def to_constant_case(text: str) -> str:
    return _join_with(text, "_", upper=True)


def invert_case(text: str) -> str:
    return text.swapcase()


def to_alternating_case(text: str, start_with_upper: bool = False) -> str:
    """aLtErNaTiNg case. Non-letters pass through without using up a step."""
    upper = start_with_upper
    out = []
    for ch in text:
        if not ch.isalpha():
            out.append(ch)
            continue
        out.append(ch.upper() if upper else ch.lower())
        upper = not upper
    return "".join(out)


def capitalize_words(text: str) -> str:
    # only the first letter of each word token changes; the rest is untouched
    return WORD_RE.sub(lambda m: _upper_first(m.group(0)), text)


def capitalize_first(text: str) -> str:
    return _upper_first(text)
