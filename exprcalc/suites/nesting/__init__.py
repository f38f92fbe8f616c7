"""Parenthesized groups, including signed and deeply nested ones."""

NAME = "nesting"
DESCRIPTION = "Parenthesized groups nested to arbitrary depth"

CASES = [
    ("(1+2)*3", 9),
    ("1+(2*3)", 7),
    ("(77)", 77),
    ("-(77)", -77),
    ("-(((77)))", -77),
    ("-(-((77)))", 77),
    ("-(-(-(77)))", -77),
    ("1+(1 +(1+(1)))", 4),
    ("5^(1+1)", 25),
    ("(1+2+3)*2", 12),
    ("((2 + 3) * (4 - 1))", 15),
]
