"""Inputs with no defined value."""

import math

NAME = "negative"
DESCRIPTION = "Malformed or empty input evaluates to NaN"

CASES = [
    ("", math.nan),
    ("   ", math.nan),
    ("abc", math.nan),
    ("1 + a", math.nan),
    ("1.2.3", math.nan),
    ("*2+3+4", math.nan),
    ("()", math.nan),
    ("0/0", math.nan),
]
