import pytest
import sympy
from sympy.logic.boolalg import And, Equivalent, Implies, Not, Or, Xor
from sympy.logic.inference import satisfiable

from app import create_app


def to_sympy(node):
    """Independent reading of a tree as a sympy boolean expression."""
    if node.is_identifier:
        return sympy.Symbol(node.value)
    if node.is_true:
        return sympy.true
    if node.is_false:
        return sympy.false
    if node.is_negation:
        return Not(to_sympy(node.left))
    op = {'&': And, '|': Or, '>': Implies, '<': Equivalent}[node.value]
    return op(to_sympy(node.left), to_sympy(node.right))


@pytest.fixture
def as_sympy():
    return to_sympy


@pytest.fixture
def equivalent():
    def check(a, b):
        return not satisfiable(Xor(a, b))
    return check


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    return TestClient(create_app())
