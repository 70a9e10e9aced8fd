import pytest

from app.core import copy_tree, parse, render, simplify, simplify_fully, tree


@pytest.mark.parametrize("text, expected", [
    ("~(~p)", "p"),
    ("~T", "F"),
    ("~F", "T"),
    ("T & p", "p"),
    ("F & p", "F"),
    ("p & T", "p"),
    ("p & F", "F"),
    ("T | p", "T"),
    ("F | p", "p"),
    ("p | T", "T"),
    ("p | F", "p"),
    ("T -> p", "p"),
    ("F -> p", "T"),
    ("p -> T", "T"),
    ("p -> F", "(~p)"),
    ("T <-> p", "p"),
    ("F <-> p", "(~p)"),
    ("p <-> T", "p"),
    ("p <-> F", "(~p)"),
])
def test_rewrite_table(text, expected):
    assert render(simplify(parse(text))) == expected


@pytest.mark.parametrize("text, expected", [
    ("~p & T", "(~p)"),
    ("F -> q", "T"),
    ("p & q", "(p & q)"),
    ("~p", "(~p)"),
    ("T & F", "F"),
    ("F | T", "T"),
    ("T -> F", "F"),
    ("F <-> T", "F"),
    ("F <-> F", "T"),
    ("~p -> F", "p"),
    ("~(p -> F)", "p"),
    ("(p & T) | (F & q)", "p"),
    ("(a | F) & (b -> T) & ~(~c)", "(a & c)"),
    ("(F <-> p) <-> F", "p"),
    ("~(q & T) <-> ~T", "q"),
])
def test_nested(text, expected):
    assert render(simplify(parse(text))) == expected


def test_constant_free_tree_is_unchanged():
    text = "((p & ~q) | (r -> s)) <-> ~t"
    once = simplify(parse(text))
    assert once == parse(text)
    assert simplify(copy_tree(once)) == once


def test_simplify_is_idempotent_after_one_pass():
    once = simplify(parse("(p & T) | (~(~q) -> (r <-> F))"))
    twice = simplify(copy_tree(once))
    assert twice == once
    assert render(once) == "(p | (q -> (~r)))"


def test_simplify_fully():
    assert render(simplify_fully(parse("(T & p) -> (F | ~(~q))"))) == "(p -> q)"
    assert simplify_fully(None) is None
    assert simplify(None) is None


def test_operands_are_reused():
    p = tree.identifier("p")
    result = simplify(tree.conjunction(tree.true(), p))
    assert result is p


@pytest.mark.parametrize("text", [
    "~p & T",
    "F -> q",
    "(p | F) <-> (T -> q)",
    "~(p <-> F) & (q -> F)",
    "((a & T) | (b -> F)) <-> ~(c | T)",
    "(F <-> ~a) -> (b & ~F)",
])
def test_simplification_is_sound(text, as_sympy, equivalent):
    original = parse(text)
    before = as_sympy(original)
    after = as_sympy(simplify(original))
    assert equivalent(before, after)
