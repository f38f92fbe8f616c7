"""Precedence tiers and left-to-right association within a tier."""

NAME = "precedence"
DESCRIPTION = "Power over multiplicative over additive, left to right"

CASES = [
    ("1+1+1+1+1", 5),
    ("-1+1-1+1-1", -1),
    ("1+2*3", 7),
    ("1*2+3", 5),
    ("1+2*2^3", 17),
    ("1^2+2*3", 7),
    ("1+2^2*3", 13),
    ("1*2*2*3", 12),
    ("1/2/2", 0.25),
    ("10 - 2 * 3 + 4 / 2", 6),
]
