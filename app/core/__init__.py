from .errors import LexError, MalformedTreeError, ParseRejected
from .tokens import Token, TokenCursor, TokenKind, tokenize
from . import tree
from .tree import Node, copy_tree, depth, release, render, size
from .simplifier import simplify, simplify_fully
from .translator import normalize, translate
from .parser import parse, parse_tokens
