"""Single literals, signs and plain sums."""

NAME = "simple"
DESCRIPTION = "Literals, unary signs and additive chains"

CASES = [
    ("0", 0),
    ("1", 1),
    ("+1", 1),
    ("-1", -1),
    ("0.07", 0.07),
    ("42", 42),
    ("3.25", 3.25),
    ("-1+1", 0),
    ("-1-2", -3),
    ("123+246", 369),
    ("  2  +  3  ", 5),
]
