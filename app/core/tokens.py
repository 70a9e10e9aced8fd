import enum
from typing import List, Optional, Sequence

from pyparsing import Char, ParseException, Word, ZeroOrMore, alphanums, alphas

from app.core.errors import LexError


class TokenKind(enum.Enum):
    SYMBOL = 'symbol'
    IDENTIFIER = 'identifier'


class Token:
    """
    A single lexed token: either a one-character symbol or an identifier name.
    Tokens are immutable once produced.
    """
    __slots__ = ('kind', 'value')

    def __init__(self, kind: TokenKind, value: str):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        return (type(self) == type(other)
            and self.kind == other.kind
            and self.value == other.value)

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"Token({self.kind.value}, {self.value!r})"


def symbol(c: str) -> Token:
    return Token(TokenKind.SYMBOL, c)

def ident(name: str) -> Token:
    return Token(TokenKind.IDENTIFIER, name)


def _word_token(word):
    # the bare words T and F are the constants, anything longer is a name
    if word in ('T', 'F'):
        return symbol(word)
    return ident(word)


identifier_tok = Word(alphas, alphanums + "_").set_parse_action(lambda t: _word_token(t[0]))
symbol_tok = Char("()~&|-><").set_parse_action(lambda t: symbol(t[0]))

token_stream = ZeroOrMore(identifier_tok | symbol_tok)


def tokenize(text: str) -> List[Token]:
    """
    Split raw formula text into tokens.
    '->' and '<->' come out as separate one-character symbol tokens.
    """
    try:
        return list(token_stream.parse_string(text, parse_all=True))
    except ParseException as e:
        loc = e.loc
        while loc < len(text) and text[loc].isspace():
            loc += 1
        bad = text[loc] if loc < len(text) else ''
        raise LexError(f"Unexpected character {bad!r} at column {loc + 1}", column=loc + 1) from e


class TokenCursor:
    """
    Read-only view over a token sequence with a movable position.
    The parser only ever advances it or resets it to an earlier mark.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tuple(tokens)
        self.pos = 0
        # open parentheses the parser is currently inside
        self.nesting = 0

    def __repr__(self):
        return f"TokenCursor(pos={self.pos}, len={len(self.tokens)})"

    def at_end(self):
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def next(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int):
        self.pos = mark

    def accept_symbol(self, c: str) -> bool:
        tok = self.peek()
        if tok is not None and tok.kind == TokenKind.SYMBOL and tok.value == c:
            self.pos += 1
            return True
        return False

    def accept_identifier(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None and tok.kind == TokenKind.IDENTIFIER:
            self.pos += 1
            return tok
        return None

    def accept_sequence(self, chars: str) -> bool:
        """
        Match consecutive symbol tokens, e.g. '->' as '-' then '>'.
        On a partial match the cursor goes back to where it was.
        """
        start = self.mark()
        for c in chars:
            if not self.accept_symbol(c):
                self.reset(start)
                return False
        return True
