"""Character cursor over an immutable input string.

The cursor knows nothing about arithmetic. It offers lookahead, conditional
consumption and scan-until-delimiter primitives, and it never raises: every
operation degrades gracefully at the text boundary.

One cursor is shared by reference across every nested ExpressionNode of a
single evaluation, so the position advances monotonically as parenthesized
groups open and close.
"""

from __future__ import annotations

from typing import Iterable, Optional


class Cursor:
    """Position-tracking view over ``text``."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0
        self.last_char = ""  # sentinel until the first reading scan

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, remaining={self.remaining!r})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = max(0, min(value, len(self._text)))

    @property
    def has_more(self) -> bool:
        return self._position < len(self._text)

    @property
    def next_char(self) -> Optional[str]:
        """The current character, or None at the end of the text."""
        if self.has_more:
            return self._text[self._position]
        return None

    @property
    def remaining(self) -> str:
        return self._text[self._position:]

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def peek(self, candidates: Iterable[str]) -> bool:
        """True if the current character is one of ``candidates``. Never consumes."""
        if not self.has_more:
            return False
        return self._text[self._position] in candidates

    def peek_literal(self, expected: str) -> bool:
        """True if the upcoming characters spell ``expected`` exactly.

        The position is saved and restored around the check.
        """
        saved = self._position
        try:
            for ch in expected:
                if not self.peek(ch):
                    return False
                self.advance(1)
            return True
        finally:
            self._position = saved

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def advance(self, n: int = 1) -> None:
        self.position = self._position + n

    def retreat(self, n: int = 1) -> None:
        self.position = self._position - n

    # ------------------------------------------------------------------
    # Consuming scans
    # ------------------------------------------------------------------

    def consume_while(self, candidates: Iterable[str]) -> str:
        """Consume and return the longest run of characters found in ``candidates``.

        Returns an empty string if the current character does not match.
        """
        allowed = set(candidates)
        start = self._position
        end = start
        while end < len(self._text) and self._text[end] in allowed:
            end += 1
        if end > start:
            self.last_char = self._text[end - 1]
        self._position = end
        return self._text[start:end]

    def read_until(self, *stop_chars: str) -> str:
        """Read up to the first of ``stop_chars``.

        The stop character is consumed but not returned. With no stop
        characters, or none found, the rest of the text is returned.
        """
        chunk = []
        while self.has_more:
            ch = self._text[self._position]
            self.last_char = ch
            self._position += 1
            if ch in stop_chars:
                break
            chunk.append(ch)
        return "".join(chunk)

    def read_until_literal(self, expected: str) -> str:
        """Read up to the first occurrence of ``expected``.

        The literal is consumed but not returned. If it never occurs the rest
        of the text is returned.
        """
        if not expected:
            return ""
        start = self._position
        found = self._text.find(expected, start)
        if found < 0:
            self.position = len(self._text)
            if self._position > start:
                self.last_char = self._text[-1]
            return self._text[start:]
        self._position = found + len(expected)
        self.last_char = expected[-1]
        return self._text[start:found]

    def skip_until(self, *stop_chars: str) -> bool:
        """Skip past the first of ``stop_chars``. Returns whether one was found."""
        while self.has_more:
            ch = self._text[self._position]
            self.last_char = ch
            self._position += 1
            if ch in stop_chars:
                return True
        return False

    def skip_until_literal(self, expected: str) -> bool:
        """Skip past the first occurrence of ``expected``. Returns whether it was found."""
        if len(self._text) < len(expected):
            return False
        found = self._text.find(expected, self._position)
        if found < 0:
            self.position = len(self._text)
            return False
        self._position = found + len(expected)
        if expected:
            self.last_char = expected[-1]
        return True
