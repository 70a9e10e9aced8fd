"""
Rewrites a formula into the {&, ~} basis using De Morgan:

  p | q    ==  ~(~p & ~q)
  p -> q   ==  ~p | q                ==  ~(~~p & ~q)
  p <-> q  ==  (p & q) | (~p & ~q)   ==  ~(~(p & q) & ~(~p & ~q))

Operands are moved into the result; the biconditional needs both of its
operands twice, so the first occurrence gets a deep copy.
"""

from app.core import tree
from app.core.simplifier import simplify_fully
from app.core.tokens import TokenKind
from app.core.tree import copy_tree, rewrite_bottom_up
from app.utils import get_logger

logger = get_logger("translator")


def translate_disjunction(node):
    left, right = node.left, node.right
    node.detach()
    return tree.negation(
        tree.conjunction(tree.negation(left), tree.negation(right)))

def translate_implication(node):
    left, right = node.left, node.right
    node.detach()
    return translate_disjunction(
        tree.disjunction(tree.negation(left), right))

def translate_biconditional(node):
    left, right = node.left, node.right
    node.detach()
    both = tree.conjunction(copy_tree(left), copy_tree(right))
    neither = tree.conjunction(tree.negation(left), tree.negation(right))
    return translate_disjunction(tree.disjunction(both, neither))


RULES = {
    '|': translate_disjunction,
    '>': translate_implication,
    '<': translate_biconditional,
}


def _translate_node(node):
    if node.kind == TokenKind.SYMBOL and node.value in RULES:
        return RULES[node.value](node)
    return node


def translate(node):
    """
    Bottom-up translation into conjunction/negation form. Children are
    translated first, so freshly built subtrees are never revisited.
    The input tree is consumed.
    """
    return rewrite_bottom_up(node, _translate_node)


def normalize(node):
    """translate() followed by simplify_fully()."""
    translated = translate(node)
    logger.debug(f"Translated to depth {tree.depth(translated)}")
    return simplify_fully(translated)
