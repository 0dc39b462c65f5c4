"""
Central configuration for the textify text-processing toolkit.

Values can be overridden through environment variables (a local .env file is
loaded first via python-dotenv).
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring non-integer value %r for %s; using %s", raw, name, default)
        return default


DEFAULT_CONFIG = {
    "log_level": os.getenv("TEXTIFY_LOG_LEVEL", "WARNING").upper(),
    "counting": {
        "words_per_minute": _env_int("TEXTIFY_WPM", 200),
    },
    "whitespace": {
        "wrap_width": _env_int("TEXTIFY_WRAP_WIDTH", 80),
        "indent_spaces": 2,
        "tab_size": 4,
    },
    "lines": {
        "number_separator": ". ",
        "join_separator": " ",
    },
    "analysis": {
        "word_frequency_limit": 10,
        # (lower bound, label) pairs, highest first. Anything below the last
        # bound falls into the final label.
        "readability_bands": [
            (90, "Very Easy (5th grade)"),
            (80, "Easy (6th grade)"),
            (70, "Fairly Easy (7th grade)"),
            (60, "Standard (8th-9th grade)"),
            (50, "Fairly Difficult (10th-12th grade)"),
            (30, "Difficult (College)"),
        ],
        "readability_floor_label": "Very Difficult (College graduate)",
    },
    "batch": {
        # Column names tried (case-insensitively) when looking for the text column
        "text_column_candidates": [
            "text", "input", "inputtext", "input_text", "content", "body",
            "document", "message", "output", "outputtext",
        ],
    },
}
