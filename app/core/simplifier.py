from app.core import tree
from app.core.tokens import TokenKind
from app.core.tree import Node, copy_tree, release, rewrite_bottom_up
from app.utils import get_logger

logger = get_logger("simplifier")


def _move(node: Node, operand: Node) -> Node:
    """
    Hand back one operand of node and release everything else.
    node itself is unlinked and must not be used afterwards.
    """
    other = node.right if operand is node.left else node.left
    node.detach()
    release(other)
    return operand

def _replace(node: Node, result: Node) -> Node:
    release(node)
    return result


def simplify_negation(node):
    child = node.left
    if child.is_negation:                   # ~~p  -> p
        inner = _move(child, child.left)
        node.detach()
        return inner
    if child.is_true:                       # ~T   -> F
        return _replace(node, tree.false())
    if child.is_false:                      # ~F   -> T
        return _replace(node, tree.true())
    return node

def simplify_conjunction(node):
    left, right = node.left, node.right
    if left.is_true:                        # T & p -> p
        return _move(node, right)
    if left.is_false:                       # F & p -> F
        return _replace(node, tree.false())
    if right.is_true:                       # p & T -> p
        return _move(node, left)
    if right.is_false:                      # p & F -> F
        return _replace(node, tree.false())
    return node

def simplify_disjunction(node):
    left, right = node.left, node.right
    if left.is_true:                        # T | p -> T
        return _replace(node, tree.true())
    if left.is_false:                       # F | p -> p
        return _move(node, right)
    if right.is_true:                       # p | T -> T
        return _replace(node, tree.true())
    if right.is_false:                      # p | F -> p
        return _move(node, left)
    return node

def simplify_implication(node):
    left, right = node.left, node.right
    if left.is_true:                        # T -> p -> p
        return _move(node, right)
    if left.is_false:                       # F -> p -> T
        return _replace(node, tree.true())
    if right.is_true:                       # p -> T -> T
        return _replace(node, tree.true())
    if right.is_false:                      # p -> F -> ~p
        return tree.negation(_move(node, left))
    return node

def simplify_biconditional(node):
    left, right = node.left, node.right
    if left.is_true:                        # T <-> p -> p
        return _move(node, right)
    if left.is_false:                       # F <-> p -> ~p
        return tree.negation(_move(node, right))
    if right.is_true:                       # p <-> T -> p
        return _move(node, left)
    if right.is_false:                      # p <-> F -> ~p
        return tree.negation(_move(node, left))
    return node


RULES = {
    '~': simplify_negation,
    '&': simplify_conjunction,
    '|': simplify_disjunction,
    '>': simplify_implication,
    '<': simplify_biconditional,
}


def _simplify_node(node):
    if node.kind == TokenKind.SYMBOL and node.value in RULES:
        node = RULES[node.value](node)

    # an implication or biconditional may have just produced ~p
    if node.is_negation:
        node = simplify_negation(node)
    return node


def simplify(node):
    """
    One bottom-up simplification pass: constant folding and double negation
    elimination. The input tree is consumed; use the returned tree instead.

    Each node is rewritten once after its children, plus one extra negation
    check on the result, so a single pass is not always a fixed point.
    See simplify_fully().
    """
    return rewrite_bottom_up(node, _simplify_node)


def simplify_fully(node):
    """
    Repeat simplify() until the tree stops changing.
    """
    passes = 0
    while node is not None:
        before = copy_tree(node)
        node = simplify(node)
        passes += 1
        stable = node == before
        release(before)
        if stable:
            break
    logger.debug(f"Simplified to a fixed point in {passes} pass(es)")
    return node
