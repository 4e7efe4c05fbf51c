"""
Completion suggestions for shell completion scripts.

Calling convention
- tokens are the words of the command line being completed, program name
  included (it is dropped before parsing).
- when the cursor follows a space, the last token is an explicit "" so the
  parse sees that the previous word is complete.

What is suggested
- every primary option name not yet used. An option counts as used once the
  parser resolved an option/flag token to it (the entry recorded with the
  event, not a second lookup of the emitted name) and its type is not plural;
  plural options may repeat, so they are always offered.
- the sub-command names of the node parsing ended at.
Option names come first, then sub-command names.

Value hint
- Suggestions.type reports the type of value expected next, when the last
  token is "" and either
  • the last event is an option that takes a value (the "" was parsed as
    its value), or
  • the last event is the "" placeholder positional: the type of the next
    positional of the active node not yet filled (a trailing plural
    positional keeps matching).
- Suggestions.files tells whether that type calls for path completion.
"""
from typing import NamedTuple

from .events import ArgType, PositionalArg
from .parser import parse_results


class Suggestions(NamedTuple):
    words: list
    type: object = None

    @property
    def files(self):
        return self.type is not None and self.type.pathlike


def _unused_options(context):
    consumed = set()
    for entry in context.entries:
        if entry is not None and not entry.option.plural:
            consumed.add(entry.name)
    return [name for name in context.registry.names if name not in consumed]


def _expected_type(tokens, context):
    results = context.results
    if not tokens or tokens[-1] != "" or not results:
        return None

    last = results[-1]
    if last.type is ArgType.OPTION:
        entry = context.entries[-1]
        if entry is None or entry.option.flaglike:
            return None
        return entry.option.type

    if last == PositionalArg(""):
        filled = 0
        for event in reversed(results[:-1]):
            if event.type is ArgType.COMMAND:
                break
            if event.type is ArgType.POSITIONAL:
                filled += 1
        positionals = context.active.positionals
        if filled < len(positionals):
            return positionals[filled].type
        if positionals and positionals[-1].type.plural:
            return positionals[-1].type

    return None


def suggest(command, tokens, /):
    """
    compute completion suggestions for a partial command line.

    parameters
    - command: root Command of the program.
    - tokens: list[str], program name first, "" last when the cursor follows a space.

    returns
    - Suggestions(words, type)
    """
    tokens = list(tokens)
    context = parse_results(command, tokens[1:])
    words = _unused_options(context) + list(context.active.subcommands)
    return Suggestions(words, _expected_type(tokens, context))


__all__ = (
    "Suggestions",
    "suggest",
)
