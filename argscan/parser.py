"""
argscan parser: tokenize an argument vector against a command schema.

What this module provides
- parse(command, tokens): list of events (see argscan.events) in token order.
- parse_results(command, tokens): the finished ParserContext, for callers that
  also need the registry or the node parsing ended at (completion does).
- ParserContext: per-parse state threaded through the classifier and resolver.

Per-parse state
- registry: flat option tables built from the whole tree (argscan.registry).
- cursor: position in the token list (argscan.cursor).
- active: the schema node tokens currently resolve against. It starts at the
  root and is reassigned, never copied, on each sub-command token; siblings
  of a node already descended into become unreachable.
- results: the events emitted so far, in order.
- entries: for each event, the registry entry it resolved to (None for
  commands, positionals and unknown options).

Nothing survives a call: every parse builds its own registry, cursor and
result list, so parsing is a pure function of (command, tokens) and the same
schema can be parsed concurrently as long as nobody mutates it.

Quick start
    from argscan import Command, Option, parse

    tool = Command(
        options={"verbose": Option("flag", aliases=["v"]), "out": Option("file")},
        subcommands={"build": Command()},
    )
    parse(tool, ["-v", "build", "--out", "a.txt", "--", "--raw"])
    # [FlagArg('verbose', True), CommandArg('build'),
    #  OptionArg('out', 'a.txt'), PositionalArg('--raw')]
"""
from . import registry as _registry
from .classifier import dispatch
from .cursor import Cursor
from .events import CommandArg, PositionalArg, OptionArg, FlagArg
from .registry import NEGATION


class ParserContext:
    """
    State of one parse: registry, cursor, active node and emitted events.

    Event helpers
    - descend(name): emit CommandArg and move the active node to the sub-command.
    - positional(value): emit PositionalArg.
    - option(name, value, entry=None): emit OptionArg with the canonical name.
    - flag(name, entry=None): emit FlagArg with the canonical name and polarity.

    Canonical names
    - a name reached through the registry is reported under the option's
      primary name; negated aliases ('no-x') turn flags to False.
    - an unknown name is reported as typed.
    - a flag name (primary or typed) starting with 'no-' loses the prefix
      and turns the flag to False.
    """

    def __init__(self, command, tokens, /):
        self._root = command
        self._active = command
        self._registry = _registry.build(command)
        self._cursor = Cursor(tokens)
        self._results = []
        self._entries = []

    @property
    def root(self):
        return self._root

    @property
    def active(self):
        return self._active

    @property
    def registry(self):
        return self._registry

    @property
    def cursor(self):
        return self._cursor

    @property
    def results(self):
        return list(self._results)

    @property
    def entries(self):
        return list(self._entries)

    def _emit(self, event, entry=None):
        self._results.append(event)
        self._entries.append(entry)

    def descend(self, name, /):
        self._emit(CommandArg(name))
        self._active = self._active.subcommands[name]

    def positional(self, value, /):
        self._emit(PositionalArg(value))

    def option(self, name, value, entry=None, /):
        if entry is not None and not entry.negated:
            name = entry.name
        self._emit(OptionArg(name, value), entry)

    def flag(self, name, entry=None, /):
        value = True
        if entry is not None:
            name, value = entry.name, not entry.negated
        if name.startswith(NEGATION):
            name, value = name.removeprefix(NEGATION), False
        self._emit(FlagArg(name, value), entry)

    def run(self):
        """
        classify every remaining token; returns self.
        """
        while self._cursor.has_next():
            dispatch(self._cursor.step(), self)
        return self


def parse_results(command, tokens, /):
    """
    parse 'tokens' against 'command' and return the finished ParserContext.

    raises
    - ConflictingOptionDefinitionError: the schema declares one alias with two
      option types (raised before any token is read).
    """
    return ParserContext(command, tokens).run()


def parse(command, tokens, /):
    """
    parse 'tokens' (program name already removed) against 'command'.

    returns
    - list of CommandArg | PositionalArg | OptionArg | FlagArg, in token order.
    """
    return parse_results(command, tokens).results


__all__ = (
    "ParserContext",
    "parse_results",
    "parse",
)
