# app/domain/parsing.py
from __future__ import annotations

import re
from typing import Any

# Matches the literal text "/x/g" (x in . ! ,); ordinary punctuation is kept.
_STRIP_PATTERN = re.compile(r"/[.!,]/g")


def to_int(x: Any) -> int | None:
    if x is None or x == "":
        return None
    try:
        return int(float(x))
    except (TypeError, ValueError):
        return None


def count_words(description: str) -> int:
    """
    Words are whatever sits between single spaces.

    Consecutive and leading spaces produce empty words that still count;
    trailing empty words are dropped ("a  b" -> 3, "a b " -> 2).
    """
    tokens = description.split(" ")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return len(tokens)


def normalize_description(description: str) -> str:
    return _STRIP_PATTERN.sub("", description).lower()
