"""Line tokenizer for the `key = value` configuration format.

Responsibilities:
- Split one line of text into raw left/right assignment halves.
- Honor `#` comments and values quoted with `'` or `"`.
- Report malformed lines as `LexerError` without any path/line context;
  the parser adds that context.

The tokenizer is a small state machine. Each state is a method that consumes
characters and returns the next state, or `None` when the line is finished.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


_COMMENT = "#"
_ASSIGN = "="
_QUOTES = frozenset({'"', "'"})


class LexerError(ValueError):
    """Raised when a single line cannot be tokenized."""


@dataclass(frozen=True, slots=True)
class RawPair:
    """Unparsed halves of one assignment line.

    Attributes:
        left: Text before `=`, untrimmed.
        right: Text after `=`, untrimmed and without quotes or comment.
        skip: `True` when the line carried no assignment at all.
    """

    left: str
    right: str
    skip: bool = False


_State = Callable[["_Lexer"], Optional["_State"]]


class _Lexer:
    """Character cursor plus accumulated output for one line."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._left: list[str] = []
        self._right: list[str] = []
        self._quote = ""
        self.skip = False

    @property
    def left(self) -> str:
        return "".join(self._left)

    @property
    def right(self) -> str:
        return "".join(self._right)

    def _read(self) -> str | None:
        """Return the next character, or `None` at end of input."""

        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _unread(self) -> None:
        self._pos -= 1

    def _skip_whitespace(self) -> None:
        """Advance past whitespace, stopping before the next other character."""

        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def before_equals(self) -> _State | None:
        """Accumulate the key until `=`, a comment, or end of input."""

        while True:
            char = self._read()
            if char is None:
                if self._left:
                    raise LexerError("unexpected identifier")
                return None

            if char == _ASSIGN:
                self._skip_whitespace()
                following = self._read()
                if following is None:
                    return None
                if following in _QUOTES:
                    self._quote = following
                    return _Lexer.after_equals_string
                self._unread()
                return _Lexer.after_equals

            if char == _COMMENT:
                if self._left:
                    raise LexerError("unexpected identifier")
                self.skip = True
                return None

            self._left.append(char)

    def after_equals(self) -> _State | None:
        """Accumulate an unquoted value up to a comment or end of input."""

        while True:
            char = self._read()
            if char is None or char == _COMMENT:
                return None
            self._right.append(char)

    def after_equals_string(self) -> _State | None:
        """Accumulate a quoted value up to the matching quote."""

        while True:
            char = self._read()
            if char is None:
                # Unterminated strings run to end of line.
                return None
            if char == self._quote:
                break
            self._right.append(char)

        # Only whitespace and a comment are expected after the closing quote.
        # Anything else is ignored.
        self._skip_whitespace()
        return None


def tokenize_line(text: str) -> RawPair:
    """Run the tokenizer state machine over one line of text.

    Args:
        text: A single line without its line terminator.

    Returns:
        The raw left/right halves, or a pair with `skip=True` for comment lines.

    Raises:
        LexerError: If the line has a key without an assignment, or a `#`
            inside the key.
    """

    lexer = _Lexer(text)
    state: _State | None = _Lexer.before_equals
    while state is not None:
        state = state(lexer)
    return RawPair(left=lexer.left, right=lexer.right, skip=lexer.skip)
