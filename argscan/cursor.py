"""
Token cursor with single-step putback.

The parser works in classification steps: step() hands out the token to
classify and remembers where the step started. While resolving that token the
resolver may look at the following token with next() and, if it decides the
token is not a value, hand it back once with putback().

putback() is an internal contract, not an input check: calling it twice in
one step, or without having consumed anything past the classified token,
raises CursorUnderflowError and means the calling logic is wrong.
"""
from .faults import CursorUnderflowError, FaultCode


class Cursor:
    __slots__ = ("_tokens", "_index", "_mark", "_returned")

    def __init__(self, tokens, /):
        self._tokens = tuple(tokens)
        self._index = 0
        self._mark = 0
        self._returned = False

    @property
    def index(self):
        return self._index

    def has_next(self):
        return self._index < len(self._tokens)

    def next(self):
        """
        consume and return the next token.
        """
        try:
            token = self._tokens[self._index]
        except IndexError:
            raise IndexError("cursor is exhausted") from None
        self._index += 1
        return token

    def step(self):
        """
        start a classification step and return the token to classify.
        """
        self._mark = self._index
        self._returned = False
        return self.next()

    def putback(self):
        """
        hand back the last token consumed after the classified one.
        """
        if self._returned or self._index <= self._mark + 1:
            raise CursorUnderflowError(
                "parser tried to put back more tokens than it consumed (at token %d)" % self._index,
                title="cursor underflow",
                code=FaultCode.CURSOR_UNDERFLOW,
                index=self._index,
                mark=self._mark,
            )
        self._returned = True
        self._index -= 1

    def __repr__(self):
        return "Cursor(%r, index=%d)" % (list(self._tokens), self._index)


__all__ = (
    "Cursor",
)
