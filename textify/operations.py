"""
Named text operations.

Front ends (the CLI, the batch helpers) pick a transformation by name and pass
keyword parameters, often as raw strings. This module maps the names to the
library functions, fills configured defaults and coerces string parameters to
the types the function declares.
"""
import inspect
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

from . import case, lines, whitespace
from .config import DEFAULT_CONFIG


class OperationError(ValueError):
    """Base error for operation lookup and parameter problems."""


class UnknownOperationError(OperationError):
    pass


class OperationParameterError(OperationError):
    pass


OPERATIONS: Dict[str, Callable[..., str]] = {
    # case
    "upper": case.to_upper_case,
    "lower": case.to_lower_case,
    "title": case.to_title_case,
    "sentence": case.to_sentence_case,
    "camel": case.to_camel_case,
    "pascal": case.to_pascal_case,
    "snake": case.to_snake_case,
    "kebab": case.to_kebab_case,
    "constant": case.to_constant_case,
    "dot": case.to_dot_case,
    "invert": case.invert_case,
    "alternating": case.to_alternating_case,
    "capitalize-words": case.capitalize_words,
    "capitalize-first": case.capitalize_first,
    # whitespace
    "trim": whitespace.trim_text,
    "trim-start": whitespace.trim_start,
    "trim-end": whitespace.trim_end,
    "remove-whitespace": whitespace.remove_all_whitespace,
    "normalize-whitespace": whitespace.normalize_whitespace,
    "remove-extra-spaces": whitespace.remove_extra_spaces,
    "remove-empty-lines": whitespace.remove_empty_lines,
    "trim-lines": whitespace.trim_lines,
    "indent": whitespace.indent_lines,
    "dedent": whitespace.dedent_lines,
    "tabs-to-spaces": whitespace.tabs_to_spaces,
    "spaces-to-tabs": whitespace.spaces_to_tabs,
    "lf": whitespace.to_lf,
    "crlf": whitespace.to_crlf,
    "ensure-newline": whitespace.ensure_trailing_newline,
    "remove-newline": whitespace.remove_trailing_newline,
    "wrap": whitespace.wrap_text,
    # lines
    "sort": lines.sort_lines,
    "sort-alpha": lines.sort_lines_alphabetically,
    "sort-numeric": lines.sort_lines_numerically,
    "sort-length": lines.sort_lines_by_length,
    "dedupe": lines.deduplicate_lines,
    "reverse": lines.reverse_lines,
    "shuffle": lines.shuffle_lines,
    "filter-containing": lines.filter_lines_containing,
    "filter-matching": lines.filter_lines_matching,
    "number": lines.add_line_numbers,
    "unnumber": lines.remove_line_numbers,
    "prefix": lines.add_line_prefix,
    "suffix": lines.add_line_suffix,
    "wrap-lines": lines.wrap_lines,
    "extract": lines.extract_lines,
    "delete": lines.delete_lines,
    "join": lines.join_lines,
    "split": lines.split_into_lines,
}

_WS = DEFAULT_CONFIG["whitespace"]
_LINES = DEFAULT_CONFIG["lines"]

# configured values used when the caller does not pass the parameter
CONFIG_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "wrap": {"max_length": _WS["wrap_width"]},
    "indent": {"spaces": _WS["indent_spaces"]},
    "tabs-to-spaces": {"tab_size": _WS["tab_size"]},
    "spaces-to-tabs": {"tab_size": _WS["tab_size"]},
    "number": {"separator": _LINES["number_separator"]},
    "join": {"separator": _LINES["join_separator"]},
}

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def list_operations() -> List[str]:
    return sorted(OPERATIONS)


def get_operation(name: str) -> Callable[..., str]:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation {name!r}") from None


def _coerce(name: str, value: Any, annotation: Any) -> Any:
    if not isinstance(value, str):
        return value
    if annotation is bool:
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise OperationParameterError(f"Parameter {name!r} expects a boolean, got {value!r}")
    if annotation is int:
        try:
            return int(value)
        except ValueError:
            raise OperationParameterError(f"Parameter {name!r} expects an integer, got {value!r}") from None
    if annotation in (str, inspect.Parameter.empty) or str in getattr(annotation, "__args__", ()):
        return value
    # e.g. shuffle's rng: only usable from Python, not as a text parameter
    raise OperationParameterError(f"Parameter {name!r} cannot be given as text")


def coerce_params(func: Callable[..., str], params: Dict[str, Any]) -> Dict[str, Any]:
    """Check `params` against the signature of `func` and convert string values
    to the annotated bool/int types."""
    signature = inspect.signature(func)
    coerced = {}
    for key, value in params.items():
        param = signature.parameters.get(key)
        if param is None or key == "text":
            raise OperationParameterError(f"{func.__name__}() does not accept parameter {key!r}")
        coerced[key] = _coerce(key, value, param.annotation)
    return coerced


def apply_operation(name: str, text: str, **params: Any) -> str:
    func = get_operation(name)
    merged = dict(CONFIG_DEFAULTS.get(name, {}))
    merged.update(params)
    kwargs = coerce_params(func, merged)
    try:
        inspect.signature(func).bind(text, **kwargs)
    except TypeError as e:
        # missing required parameters, e.g. "prefix" without prefix=
        raise OperationParameterError(f"{name}: {e}") from e
    try:
        return func(text, **kwargs)
    except re.error as e:
        raise OperationParameterError(f"{name}: invalid pattern: {e}") from e


Step = Union[str, Tuple[str, Dict[str, Any]]]


def apply_pipeline(text: str, steps: Iterable[Step]) -> str:
    """Run several named operations in order. Each step is a name or a
    (name, params) pair."""
    for step in steps:
        name, params = (step, {}) if isinstance(step, str) else step
        logging.debug("Applying operation %s with %s", name, params)
        text = apply_operation(name, text, **params)
    return text
