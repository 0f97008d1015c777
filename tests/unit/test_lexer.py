"""Unit tests for the single-line tokenizer state machine."""

from __future__ import annotations

import pytest

from confbind.lexer import LexerError, RawPair, tokenize_line


def test_tokenize_line_splits_on_first_equals() -> None:
    """Text before `=` is the key and everything after it is the value."""

    pair = tokenize_line("url = http://host/?a=b")

    assert pair == RawPair(left="url ", right="http://host/?a=b")


def test_tokenize_line_stops_unquoted_value_at_comment() -> None:
    """An unquoted value ends at the first `#`."""

    pair = tokenize_line("cool = a#b")

    assert pair.left.strip() == "cool"
    assert pair.right == "a"
    assert pair.skip is False


@pytest.mark.parametrize("quote", ["'", '"'])
def test_tokenize_line_keeps_comment_character_inside_quotes(quote: str) -> None:
    """Quoted values may contain `#` and surrounding whitespace verbatim."""

    pair = tokenize_line(f"cool = {quote} a#b {quote}  # trailing comment")

    assert pair.right == " a#b "


def test_tokenize_line_quote_only_closes_on_matching_character() -> None:
    """A single-quoted value may contain double quotes and vice versa."""

    assert tokenize_line("""msg = 'say "hi"'""").right == 'say "hi"'
    assert tokenize_line('''msg = "it's"''').right == "it's"


def test_tokenize_line_tolerates_unterminated_quote() -> None:
    """An unterminated quoted value runs to the end of the line."""

    assert tokenize_line("cool = 'beans # not a comment").right == "beans # not a comment"


def test_tokenize_line_ignores_text_after_closing_quote() -> None:
    """Characters after the closing quote are silently dropped."""

    assert tokenize_line("cool = 'beans' extra").right == "beans"


def test_tokenize_line_marks_comment_lines_as_skip() -> None:
    """A line starting with `#` produces no assignment."""

    pair = tokenize_line("# just a comment = with equals")

    assert pair.skip is True
    assert pair.left == ""
    assert pair.right == ""


def test_tokenize_line_accepts_empty_value() -> None:
    """Nothing after `=` yields an empty value."""

    assert tokenize_line("cool =").right == ""
    assert tokenize_line("cool =   ").right == ""


def test_tokenize_line_empty_text_produces_nothing() -> None:
    """Empty input terminates without error and without a pair."""

    assert tokenize_line("") == RawPair(left="", right="", skip=False)


@pytest.mark.parametrize("line", ["justakey", "key # comment", "two words"])
def test_tokenize_line_rejects_key_without_assignment(line: str) -> None:
    """A key with no `=`, or a `#` inside the key, is a syntax error."""

    with pytest.raises(LexerError, match="unexpected identifier"):
        tokenize_line(line)


def test_tokenize_line_does_not_reject_empty_key() -> None:
    """An empty key is left for the parser to reject."""

    assert tokenize_line("= value") == RawPair(left="", right="value")
