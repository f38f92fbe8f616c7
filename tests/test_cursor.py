"""Tests for the character Cursor."""

from exprcalc.cursor import Cursor


# --- Lookahead ---

def test_peek_does_not_consume():
    c = Cursor("<asdf/>")
    assert c.peek("<")
    assert c.peek("<>")
    assert not c.peek("a")
    assert c.position == 0


def test_peek_at_end_is_false():
    c = Cursor("")
    assert not c.has_more
    assert not c.peek("abc")
    assert c.next_char is None


def test_peek_literal_restores_position():
    c = Cursor("<asdf/>")
    assert not c.peek_literal("asdf")
    assert c.peek_literal("<asdf/>")
    assert c.position == 0
    assert not c.peek_literal("<asdf/>x")
    assert c.position == 0


def test_peek_literal_after_read():
    c = Cursor("<asdf/>")
    c.read_until("/")
    c.retreat(1)
    assert c.peek("/")
    assert not c.peek_literal("asdf")
    assert c.peek_literal("/>")
    assert c.peek("/")


# --- Movement ---

def test_retreat_clamps_at_zero():
    c = Cursor("abc")
    c.advance(2)
    c.retreat(5)
    assert c.position == 0


def test_advance_clamps_at_length():
    c = Cursor("abc")
    c.advance(10)
    assert c.position == 3
    assert not c.has_more


def test_position_setter_clamps():
    c = Cursor("abc")
    c.position = -4
    assert c.position == 0
    c.position = 99
    assert c.position == 3


# --- Consuming scans ---

def test_consume_while():
    c = Cursor("abc.def ghi")
    assert c.consume_while("abcdef") == "abc"
    assert c.next_char == "."
    c.advance(1)
    assert c.consume_while("abcdef") == "def"
    assert c.next_char == " "
    c.advance(1)
    assert c.consume_while("abcdef") == ""
    assert c.peek("g")


def test_consume_while_tracks_last_char():
    c = Cursor("12.5+3")
    assert c.last_char == ""
    assert c.consume_while("0123456789.") == "12.5"
    assert c.last_char == "5"


def test_read_until_single_chars():
    assert Cursor("abcabc").read_until("a") == ""
    assert Cursor("abcabc").read_until("b") == "a"
    assert Cursor("abcabc").read_until("c") == "ab"
    assert Cursor("abcabc").read_until("d") == "abcabc"
    assert Cursor("").read_until("d") == ""


def test_read_until_multiple_stops():
    c = Cursor("abc.def ghi")
    assert c.next_char == "a"
    assert c.read_until(".", " ") == "abc"
    assert c.last_char == "."
    assert c.next_char == "d"
    assert c.read_until(".", " ") == "def"
    assert c.last_char == " "
    assert c.has_more
    assert c.read_until() == "ghi"
    assert c.last_char == "i"
    assert c.next_char is None
    assert not c.has_more


def test_read_until_quoted_parameters():
    c = Cursor('"asdf asdf" 1 []')
    c.advance(1)
    assert c.read_until('"') == "asdf asdf"
    c.advance(1)
    assert c.read_until(" ") == "1"
    assert c.read_until(" ") == "[]"


def test_read_until_literal():
    c = Cursor("rubbish<h1>A headline</h1>")
    assert c.skip_until_literal("<h1>")
    assert c.read_until_literal("</h1>") == "A headline"
    c.position = 0
    assert c.read_until_literal("<h1>") == "rubbish"
    c.position = 0
    assert c.read_until_literal("<h2>") == "rubbish<h1>A headline</h1>"
    c.position = 0
    assert c.read_until_literal(">") == "rubbish<h1"
    assert c.read_until_literal(">") == "A headline</h1"


def test_skip_until_chars():
    c = Cursor("abcabc")
    assert not c.skip_until("x")
    assert not c.has_more

    c = Cursor("abcabc")
    assert c.skip_until("a")
    assert c.position == 1
    assert c.skip_until("b")
    assert c.position == 2
    assert c.skip_until("b")
    assert c.position == 5


def test_skip_until_literal():
    c = Cursor("<asdf/>")
    assert c.skip_until_literal("asdf")
    assert c.position == 5
    assert c.peek("/")

    c = Cursor("<aasasdasdf/>")
    assert c.skip_until_literal("asdf")
    assert c.peek("/")

    c = Cursor("<asdf/>")
    assert not c.skip_until_literal("xyz")
    assert not c.has_more


def test_skip_until_literal_longer_than_text():
    c = Cursor("ab")
    assert not c.skip_until_literal("abc")
    assert c.position == 0
