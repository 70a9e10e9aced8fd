"""
Recursive-descent parser for propositional formulas.

  <biconditional> ::= <conditional> [ '<' '-' '>' <conditional> ]
  <conditional>   ::= <disjunction> [ '-' '>' <disjunction> ]
  <disjunction>   ::= <conjunction> { '|' <conjunction> }
  <conjunction>   ::= <literal> { '&' <literal> }
  <literal>       ::= <atom> | '~' <atom>
  <atom>          ::= 'T' | 'F' | <identifier> | '(' <biconditional> ')'

Every rule takes a TokenCursor and returns the tree it built, or None.
On None the cursor is back where the rule started and whatever the rule
had built so far has been released.
"""

from typing import Optional, Sequence

from app.core import tree
from app.core.errors import ParseRejected
from app.core.tokens import Token, TokenCursor, tokenize
from app.core.tree import Node, release
from app.utils import get_logger

logger = get_logger("parser")

# each parenthesis level costs about a dozen Python frames
MAX_NESTING = 50


def parse_atom(cursor: TokenCursor) -> Optional[Node]:
    if cursor.accept_symbol('T'):
        return tree.true()
    if cursor.accept_symbol('F'):
        return tree.false()
    tok = cursor.accept_identifier()
    if tok is not None:
        return tree.identifier(tok.value)

    start = cursor.mark()
    if cursor.accept_symbol('('):
        if cursor.nesting >= MAX_NESTING:
            raise ParseRejected(f"Formula nested deeper than {MAX_NESTING} parentheses", position=start)
        cursor.nesting += 1
        try:
            inner = parse_biconditional(cursor)
        finally:
            cursor.nesting -= 1
        if inner is not None:
            if cursor.accept_symbol(')'):
                return inner
            release(inner)
        cursor.reset(start)
    return None


def parse_literal(cursor: TokenCursor) -> Optional[Node]:
    node = parse_atom(cursor)
    if node is not None:
        return node

    start = cursor.mark()
    if cursor.accept_symbol('~'):
        child = parse_atom(cursor)
        if child is not None:
            return tree.negation(child)
        cursor.reset(start)
    return None


def _parse_repeated(cursor, operand, tag):
    """
    operand { tag operand }, folded to the left:
    a & b & c  -->  ((a & b) & c)
    """
    start = cursor.mark()
    acc = operand(cursor)
    if acc is None:
        return None

    while cursor.accept_symbol(tag):
        right = operand(cursor)
        if right is None:
            release(acc)
            cursor.reset(start)
            return None
        acc = tree.binary(tag, acc, right)

    return acc


def _parse_optional(cursor, operand, arrow, tag):
    """
    operand [ arrow operand ], where arrow is matched one symbol at a time.
    Seeing the first character of the arrow commits the rule to it.
    """
    start = cursor.mark()
    left = operand(cursor)
    if left is None:
        return None

    if not cursor.accept_symbol(arrow[0]):
        return left

    right = None
    if cursor.accept_sequence(arrow[1:]):
        right = operand(cursor)
    if right is None:
        release(left)
        cursor.reset(start)
        return None

    return tree.binary(tag, left, right)


def parse_conjunction(cursor: TokenCursor) -> Optional[Node]:
    return _parse_repeated(cursor, parse_literal, '&')

def parse_disjunction(cursor: TokenCursor) -> Optional[Node]:
    return _parse_repeated(cursor, parse_conjunction, '|')

def parse_conditional(cursor: TokenCursor) -> Optional[Node]:
    return _parse_optional(cursor, parse_disjunction, '->', '>')

def parse_biconditional(cursor: TokenCursor) -> Optional[Node]:
    return _parse_optional(cursor, parse_conditional, '<->', '<')


def parse_tokens(tokens: Sequence[Token]) -> Node:
    """
    Parse a whole formula. The token sequence must be consumed completely,
    otherwise ParseRejected is raised and no tree is returned.
    """
    cursor = TokenCursor(tokens)
    result = parse_biconditional(cursor)

    if result is None:
        logger.debug(f"Rejected formula of {len(cursor.tokens)} tokens")
        raise ParseRejected("Formula rejected", position=cursor.pos)

    if not cursor.at_end():
        position = cursor.pos
        logger.debug(f"Rejected: trailing {cursor.peek()!r} at token {position}")
        release(result)
        raise ParseRejected(f"Formula rejected at token {position}", position=position)

    return result


def parse(text: str) -> Node:
    """Tokenize and parse raw formula text, e.g. '(p & q) -> ~r'."""
    return parse_tokens(tokenize(text))
