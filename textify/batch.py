"""
DataFrame helpers: run the analysis over a column of texts (e.g. a CSV export
of transformation history) and present frequency tables as DataFrames.
"""
from typing import Optional

import pandas as pd

from .analysis import (calculate_readability_score, get_character_frequency,
                       get_readability_level, get_text_statistics, get_word_frequency)
from .config import DEFAULT_CONFIG
from .operations import apply_operation

CFG = DEFAULT_CONFIG["batch"]

STAT_COLUMNS = [
    "characters", "characters_no_spaces", "words", "lines", "sentences",
    "paragraphs", "average_word_length", "average_sentence_length",
    "longest_word", "shortest_word", "unique_words", "reading_time",
    "readability", "readability_level",
]


def ensure_text_column(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize the column holding the texts to 'text'.

    Known names are tried first (case-insensitively); otherwise the most
    text-like object column is picked. Raises ValueError if nothing fits.
    """
    if "text" in df.columns:
        return df
    lower_map = {str(c).lower(): c for c in df.columns}
    for cand in CFG["text_column_candidates"]:
        if cand in lower_map:
            return df.rename(columns={lower_map[cand]: "text"})
    # heuristic: string column with many non-nulls and longer values
    best = None
    best_score = 0.0
    for c in df.columns:
        if pd.api.types.is_numeric_dtype(df[c]):
            continue
        values = df[c].dropna()
        if len(values) == 0:
            continue
        median_len = float(values.astype(str).map(len).median())
        score = (len(values) / max(1, len(df))) * (median_len / 100.0)
        if score > best_score:
            best_score = score
            best = c
    if best is not None and best_score > 0.05:
        return df.rename(columns={best: "text"})
    raise ValueError("Input dataframe has no recognizable text column")


def _texts(df: pd.DataFrame, text_col: str) -> pd.Series:
    if text_col not in df.columns:
        raise ValueError(f"Input dataframe is missing required column {text_col!r}")
    return df[text_col].fillna("").astype(str)


def analyze_frame(df: pd.DataFrame, text_col: str = "text") -> pd.DataFrame:
    """One row of text statistics (plus readability) per input row."""
    rows = []
    for text in _texts(df, text_col):
        stats = get_text_statistics(text)
        score = calculate_readability_score(text)
        stats["readability"] = score
        stats["readability_level"] = get_readability_level(score)
        rows.append(stats)
    return pd.DataFrame(rows, columns=STAT_COLUMNS, index=df.index)


def transform_frame(
    df: pd.DataFrame,
    operation: str,
    text_col: str = "text",
    out_col: Optional[str] = None,
    **params,
) -> pd.DataFrame:
    """Apply a named operation to every text. The result goes to `out_col`
    (default: '<text_col>_<operation>') on a copy of `df`."""
    texts = _texts(df, text_col)
    out = df.copy()
    out[out_col or f"{text_col}_{operation}"] = texts.map(lambda t: apply_operation(operation, t, **params))
    return out


def frequency_frame(
    text: str, kind: str = "word", case_sensitive: bool = False, limit: Optional[int] = None
) -> pd.DataFrame:
    if kind == "word":
        records = get_word_frequency(text, case_sensitive, limit)
        columns = ["word", "count", "percentage"]
    elif kind == "character":
        records = get_character_frequency(text, case_sensitive, limit)
        columns = ["character", "count", "percentage"]
    else:
        raise ValueError(f"Unknown frequency kind {kind!r}; expected 'word' or 'character'")
    return pd.DataFrame(records, columns=columns)
