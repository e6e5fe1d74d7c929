"""Metadata filtering of search candidates."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, TypeVar

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _format_general(value: float) -> str:
    """Shortest general float format: exponent form below 1e-4 or from 1e6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign = "-" if value < 0 else ""
    number = Decimal(repr(abs(value)))
    _, digit_tuple, exponent = number.as_tuple()
    raw = "".join(str(digit) for digit in digit_tuple)
    scientific = exponent + len(raw) - 1
    digits = raw.lstrip("0").rstrip("0") or "0"
    if scientific < -4 or scientific >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if scientific < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(scientific):02d}"
    return sign + format(number.normalize(), "f")


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_bool(text: str) -> bool | None:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def compare_metadata_values(actual: Any, expected: Any) -> bool:
    """Compare a stored metadata value with a filter value, across types.

    Strings match numbers and booleans by their textual form; numbers and
    booleans match strings that parse to an equal value.
    """
    if actual is None and expected is None:
        return True
    if actual is None or expected is None:
        return False

    if isinstance(actual, str):
        if isinstance(expected, str):
            return actual == expected
        if isinstance(expected, bool):
            return actual == ("true" if expected else "false")
        if _is_int(expected):
            return actual == str(expected)
        if isinstance(expected, float):
            return actual == _format_general(expected)

    if isinstance(actual, float):
        if isinstance(expected, float):
            return actual == expected
        if _is_int(expected):
            return actual == float(expected)
        if isinstance(expected, str):
            parsed = _parse_float(expected)
            if parsed is not None:
                return actual == parsed

    if _is_int(actual):
        if _is_int(expected):
            return actual == expected
        if isinstance(expected, float):
            return float(actual) == expected
        if isinstance(expected, str) and _INTEGER.fullmatch(expected):
            return actual == int(expected)

    if isinstance(actual, bool):
        if isinstance(expected, bool):
            return actual == expected
        if isinstance(expected, str):
            parsed_bool = _parse_bool(expected)
            if parsed_bool is not None:
                return actual == parsed_bool

    return type(actual) is type(expected) and actual == expected


def matches_filter(
    metadata: Mapping[str, str] | None, filter: Mapping[str, str] | None
) -> bool:
    """Check exact string matches of metadata against a filter.

    The ``doc_id`` key is skipped, as it is applied to the document id column.
    A missing key reads as the empty string, but ``None`` metadata matches no
    other key.
    """
    for key, value in (filter or {}).items():
        if key == "doc_id":
            continue
        if metadata is None or metadata.get(key, "") != value:
            return False
    return True


def filter_by_metadata(
    candidates: Iterable[T], filters: Mapping[str, Any] | None
) -> list[T]:
    """Keep candidates whose metadata holds every filter key with a matching value."""
    if not filters:
        return list(candidates)
    kept = []
    for candidate in candidates:
        metadata = candidate.metadata
        if metadata is None:
            continue
        if all(
            key in metadata and compare_metadata_values(metadata[key], expected)
            for key, expected in filters.items()
        ):
            kept.append(candidate)
    return kept