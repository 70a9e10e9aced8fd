from typing import Optional

from app.core.errors import MalformedTreeError
from app.core.tokens import TokenKind

CONSTANTS = ('T', 'F')
NEGATION = '~'
CONNECTIVES = ('&', '|', '>', '<')

# connective tag -> text used when rendering
SIGILS = {
    '&': '&',
    '|': '|',
    '>': '->',
    '<': '<->',
}


class Node:
    """
    One node of a formula syntax tree.

    kind is TokenKind.SYMBOL or TokenKind.IDENTIFIER and value is the token
    payload. Leaves are T, F or an identifier, a negation ('~') has only a
    left child, and a connective ('&', '|', '>' for implication, '<' for
    biconditional) has both.

    A node owns its children exclusively; trees are never shared. Rewrites
    that need an operand in two places must copy_tree() it.
    """

    def __init__(self, kind: TokenKind, value: str, left: 'Node' = None, right: 'Node' = None):
        self.kind = kind
        self.value = value
        self.left = left
        self.right = right
        self._check()

    def _check(self):
        if self.kind == TokenKind.IDENTIFIER:
            if not self.value:
                raise MalformedTreeError("Identifier node with empty name")
            if self.left is not None or self.right is not None:
                raise MalformedTreeError(f"Identifier '{self.value}' cannot have children")
        elif self.value in CONSTANTS:
            if self.left is not None or self.right is not None:
                raise MalformedTreeError(f"Constant {self.value} cannot have children")
        elif self.value == NEGATION:
            if self.left is None or self.right is not None:
                raise MalformedTreeError("Negation needs exactly a left child")
        elif self.value in CONNECTIVES:
            if self.left is None or self.right is None:
                raise MalformedTreeError(f"Connective '{self.value}' needs two children")
        else:
            raise MalformedTreeError(f"Unknown symbol '{self.value}'")

    def __eq__(self, other):
        return type(self) == type(other) and same_shape(self, other)

    __hash__ = None

    def __repr__(self):
        return fold(self, _repr_node)

    def __str__(self):
        return render(self)

    @property
    def is_identifier(self):
        return self.kind == TokenKind.IDENTIFIER

    @property
    def is_true(self):
        return self.kind == TokenKind.SYMBOL and self.value == 'T'

    @property
    def is_false(self):
        return self.kind == TokenKind.SYMBOL and self.value == 'F'

    @property
    def is_constant(self):
        return self.kind == TokenKind.SYMBOL and self.value in CONSTANTS

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    @property
    def is_negation(self):
        return self.kind == TokenKind.SYMBOL and self.value == NEGATION

    @property
    def is_binary(self):
        return self.kind == TokenKind.SYMBOL and self.value in CONNECTIVES

    @property
    def connective(self) -> Optional[str]:
        """The connective tag of a binary node, None otherwise."""
        return self.value if self.is_binary else None

    def detach(self):
        """
        Drop this single node's links to its children, which stay alive
        for whoever took ownership of them.
        """
        self.left = None
        self.right = None


def true():
    return Node(TokenKind.SYMBOL, 'T')

def false():
    return Node(TokenKind.SYMBOL, 'F')

def identifier(name: str):
    return Node(TokenKind.IDENTIFIER, name)

def negation(child: Node):
    return Node(TokenKind.SYMBOL, NEGATION, child)

def binary(tag: str, left: Node, right: Node):
    if tag not in CONNECTIVES:
        raise MalformedTreeError(f"'{tag}' is not a connective")
    return Node(TokenKind.SYMBOL, tag, left, right)

def conjunction(left, right):
    return binary('&', left, right)

def disjunction(left, right):
    return binary('|', left, right)

def implication(left, right):
    return binary('>', left, right)

def biconditional(left, right):
    return binary('<', left, right)


# The walks below keep their own stack instead of recursing: the parser
# folds 'a & b & c & ...' into a left-deep tree as long as the input.

def fold(tree: Optional[Node], combine, empty=None):
    """
    Post-order reduction. combine(node, left_value, right_value) is called
    once per node after both children; a missing child contributes `empty`.
    The children of a node are read before combine() runs, so combine may
    relink or consume the node it is given.
    """
    if tree is None:
        return empty

    stack = [(tree, False)]
    values = []
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
            continue

        # children were pushed right-then-left, so results come off reversed
        right = values.pop() if node.right is not None else empty
        left = values.pop() if node.left is not None else empty
        values.append(combine(node, left, right))

    return values.pop()

def rewrite_bottom_up(tree: Optional[Node], rule) -> Optional[Node]:
    """
    Replace every node by rule(node), children first. The rule sees a node
    whose children are already rewritten and returns its replacement.
    """
    def step(node, left, right):
        node.left = left
        node.right = right
        return rule(node)

    return fold(tree, step)


def depth(tree: Optional[Node]) -> int:
    """
    Height of the tree: -1 for an empty tree, 0 for a leaf.
    """
    return fold(tree, lambda node, left, right: 1 + max(left, right), empty=-1)

def size(tree: Optional[Node]) -> int:
    return fold(tree, lambda node, left, right: 1 + left + right, empty=0)

def copy_tree(tree: Optional[Node]) -> Optional[Node]:
    """Deep copy; the result shares no nodes with the original."""
    return fold(tree, lambda node, left, right: Node(node.kind, node.value, left, right))

def release(tree: Optional[Node]) -> int:
    """
    Release a whole tree, children before parents. Every node is unlinked
    so nothing can keep walking the released structure.
    Returns the number of nodes released; releasing None is a no-op.
    """
    def unlink(node, left, right):
        node.detach()
        return 1 + left + right

    return fold(tree, unlink, empty=0)

def nodes(tree: Optional[Node]):
    """Pre-order iteration over every node of the tree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)

def same_shape(a: Optional[Node], b: Optional[Node]) -> bool:
    pairs = [(a, b)]
    while pairs:
        x, y = pairs.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if x.kind != y.kind or x.value != y.value:
            return False
        pairs.append((x.right, y.right))
        pairs.append((x.left, y.left))
    return True

def _render_node(node, left, right):
    if node.is_identifier or node.is_constant:
        return node.value
    if node.is_negation:
        return f'(~{left})'
    return f'({left} {SIGILS[node.value]} {right})'

def render(tree: Optional[Node]) -> str:
    """
    Fully parenthesized infix text: '(~p)', '(p & q)', '(p -> q)', '(p <-> q)'.
    """
    return fold(tree, _render_node, empty='')

def _repr_node(node, left, right):
    if node.left is None:
        return f"Node({node.value!r})"
    if node.right is None:
        return f"Node({node.value!r}, {left})"
    return f"Node({node.value!r}, {left}, {right})"
