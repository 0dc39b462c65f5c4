"""textify: pure text-processing and text-analysis helpers.

Every public function of the counting, case, whitespace, lines and analysis
modules is re-exported here.
"""

from .analysis import (calculate_readability_score, count_occurrences, count_syllables,
                       count_syllables_in_word, extract_emails, extract_hashtags,
                       extract_mentions, extract_urls, find_all_positions,
                       get_character_frequency, get_readability_level, get_text_statistics,
                       get_word_frequency)
from .case import (capitalize_first, capitalize_words, invert_case, to_alternating_case,
                   to_camel_case, to_constant_case, to_dot_case, to_kebab_case, to_lower_case,
                   to_pascal_case, to_sentence_case, to_snake_case, to_title_case, to_upper_case)
from .counting import (count_characters, count_lines, count_paragraphs, count_sentences,
                       count_words, estimate_reading_time, get_all_counts,
                       get_reading_time_string)
from .lines import (add_line_numbers, add_line_prefix, add_line_suffix, deduplicate_lines,
                    delete_lines, extract_lines, filter_lines, filter_lines_containing,
                    filter_lines_matching, join_lines, remove_line_numbers, reverse_lines,
                    shuffle_lines, sort_lines, sort_lines_alphabetically, sort_lines_by_length,
                    sort_lines_numerically, split_into_lines, wrap_lines)
from .operations import (OperationError, OperationParameterError, UnknownOperationError,
                         apply_operation, apply_pipeline, list_operations)
from .tokens import tokenize_words
from .whitespace import (dedent_lines, ensure_trailing_newline, indent_lines,
                         normalize_line_endings, normalize_whitespace, remove_all_whitespace,
                         remove_empty_lines, remove_extra_spaces, remove_trailing_newline,
                         spaces_to_tabs, tabs_to_spaces, to_crlf, to_lf, trim_end, trim_lines,
                         trim_start, trim_text, wrap_text)

__version__ = "0.1.0"

__all__ = [
    # counting
    "count_characters", "count_words", "count_lines", "count_sentences",
    "count_paragraphs", "get_all_counts", "estimate_reading_time",
    "get_reading_time_string",
    # case
    "to_upper_case", "to_lower_case", "to_title_case", "to_sentence_case",
    "to_camel_case", "to_pascal_case", "to_snake_case", "to_kebab_case",
    "to_constant_case", "to_dot_case", "invert_case", "to_alternating_case",
    "capitalize_words", "capitalize_first",
    # whitespace
    "trim_text", "trim_start", "trim_end", "remove_all_whitespace",
    "normalize_whitespace", "remove_extra_spaces", "remove_empty_lines",
    "trim_lines", "indent_lines", "dedent_lines", "tabs_to_spaces",
    "spaces_to_tabs", "normalize_line_endings", "to_crlf", "to_lf",
    "ensure_trailing_newline", "remove_trailing_newline", "wrap_text",
    # lines
    "sort_lines", "sort_lines_alphabetically", "sort_lines_numerically",
    "sort_lines_by_length", "deduplicate_lines", "reverse_lines",
    "shuffle_lines", "filter_lines", "filter_lines_containing",
    "filter_lines_matching", "add_line_numbers", "remove_line_numbers",
    "add_line_prefix", "add_line_suffix", "wrap_lines", "extract_lines",
    "delete_lines", "join_lines", "split_into_lines",
    # analysis
    "get_character_frequency", "get_word_frequency", "get_text_statistics",
    "calculate_readability_score", "get_readability_level", "count_syllables",
    "count_syllables_in_word", "extract_urls", "extract_emails",
    "extract_hashtags", "extract_mentions", "count_occurrences",
    "find_all_positions",
    # shared tokenization and named operations
    "tokenize_words", "apply_operation", "apply_pipeline", "list_operations",
    "OperationError", "OperationParameterError", "UnknownOperationError",
]
