"""Every binary operator on its own."""

NAME = "operators"
DESCRIPTION = "Each of + - * / % ^ with signed operands"

CASES = [
    ("5+2", 7),
    ("5-2", 3),
    ("2-5", -3),
    ("5*2", 10),
    ("5%2", 1),
    ("2%5", 2),
    ("5/2", 2.5),
    ("2/5", 0.4),
    ("5^2", 25),
    ("2^5", 32),
    ("2*-2", -4),
    ("-2*-2", 4),
]
