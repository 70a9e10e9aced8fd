import pytest

from app.core import LexError, ParseRejected, TokenCursor, tokenize
from app.core.tokens import TokenKind, ident, symbol


def test_tokenize_arrows_are_split():
    assert tokenize("p -> q") == [ident("p"), symbol("-"), symbol(">"), ident("q")]
    assert tokenize("a<->b") == [ident("a"), symbol("<"), symbol("-"), symbol(">"), ident("b")]


def test_constants_and_names():
    toks = tokenize("T & True | F1 | F")
    assert toks == [symbol("T"), symbol("&"), ident("True"), symbol("|"),
                    ident("F1"), symbol("|"), symbol("F")]
    assert toks[0].kind == TokenKind.SYMBOL
    assert toks[2].kind == TokenKind.IDENTIFIER


def test_empty_text_has_no_tokens():
    assert tokenize("   ") == []


def test_unknown_character():
    with pytest.raises(LexError) as info:
        tokenize("p $ q")
    assert info.value.column == 3
    assert "'$'" in str(info.value)
    assert isinstance(info.value, ParseRejected)


def test_tokens_are_immutable():
    tok = ident("p")
    with pytest.raises(AttributeError):
        tok.value = "q"


def test_cursor_accepts_and_resets():
    cursor = TokenCursor(tokenize("p <- q"))
    assert cursor.accept_identifier() == ident("p")
    assert cursor.pos == 1
    assert not cursor.accept_sequence("<->")
    assert cursor.pos == 1
    assert cursor.accept_symbol("<")
    assert not cursor.accept_symbol(">")
    assert cursor.next() == symbol("-")
    assert cursor.peek() == ident("q")
    cursor.next()
    assert cursor.at_end()
    assert cursor.next() is None
