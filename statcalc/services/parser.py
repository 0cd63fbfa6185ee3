# statcalc/services/parser.py
"""Freeform numeric text parsing."""
from __future__ import annotations

import math
import re

__all__: list[str] = [
    "parse_data",
    "parse_number",
]

# Any run of commas and whitespace (\s covers \n and \r) is one separator
DELIMITER_RE = re.compile(r"[,\s]+")
# Longest leading decimal literal: sign, ASCII digits with optional fraction, optional exponent
NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(token: str) -> float | None:
    """
    Parse the numeric prefix of a token ("12abc" -> 12.0).
    Returns None when the token has no numeric prefix or overflows to infinity.
    """
    match = NUMBER_PREFIX_RE.match(token.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_data(text: str) -> list[float]:
    """
    Turn raw user text into the ordered list of numbers it contains.
    Unparseable tokens are dropped; an empty list means no valid data.
    """
    text = text.strip()
    if not text:
        return []
    numbers = []
    for token in DELIMITER_RE.split(text):
        value = parse_number(token)
        if value is not None:
            numbers.append(value)
    return numbers
