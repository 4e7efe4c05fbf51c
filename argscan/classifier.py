"""
Argument classifier: decides what a token is, then hands it to its handler.

Classification is an explicit priority table (RULES); the first matching rule
wins:

    1. '--'                          breakout: every remaining token is positional
    2. '-'                           positional (stdin placeholder)
    3. starts with '--'              long option
    4. starts with '-'               short option cluster
    5. sub-command of the active node sub-command (descent)
    6. anything else                 positional

Order matters: '--' and '-' must be tested before the prefix rules, and the
option rules before the sub-command/positional rules, so that '-abc' is never
taken for a positional.
"""
from enum import Enum

from .resolver import long_option, short_option


class TokenKind(Enum):
    BREAKOUT = "breakout"
    DASH = "dash"
    LONG = "long"
    SHORT = "short"
    COMMAND = "command"
    POSITIONAL = "positional"


RULES = (
    (TokenKind.BREAKOUT, lambda token, command: token == "--"),
    (TokenKind.DASH, lambda token, command: token == "-"),
    (TokenKind.LONG, lambda token, command: token.startswith("--")),
    (TokenKind.SHORT, lambda token, command: token.startswith("-")),
    (TokenKind.COMMAND, lambda token, command: token in command.subcommands),
    (TokenKind.POSITIONAL, lambda token, command: True),
)


def classify(token, command, /):
    """
    return the TokenKind of 'token' when 'command' is the active schema node.
    """
    for kind, test in RULES:
        if test(token, command):
            return kind
    raise AssertionError("unreachable: the positional rule matches every token")


def _breakout(token, context, /):
    cursor = context.cursor
    while cursor.has_next():
        context.positional(cursor.next())


def _positional(token, context, /):
    context.positional(token)


def _subcommand(token, context, /):
    context.descend(token)


HANDLERS = {
    TokenKind.BREAKOUT: _breakout,
    TokenKind.DASH: _positional,
    TokenKind.LONG: long_option,
    TokenKind.SHORT: short_option,
    TokenKind.COMMAND: _subcommand,
    TokenKind.POSITIONAL: _positional,
}


def dispatch(token, context, /):
    """
    classify 'token' against the context's active node and run its handler.
    """
    kind = classify(token, context.active)
    HANDLERS[kind](token, context)
    return kind


__all__ = (
    "TokenKind",
    "RULES",
    "HANDLERS",
    "classify",
    "dispatch",
)
