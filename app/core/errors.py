class ParseRejected(Exception):
    """
    The token sequence does not match the formula grammar.

    `position` is the token index where the top-level parse stopped
    (None when the rejection happened before any token was read).
    """
    def __init__(self, message="formula rejected", position=None):
        super().__init__(message)
        self.position = position


class LexError(ParseRejected):
    """Raised by the tokenizer on a character outside the token alphabet."""
    def __init__(self, message, column=None):
        super().__init__(message)
        self.column = column


class MalformedTreeError(ValueError):
    pass
