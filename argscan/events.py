"""
Parsed argument events.

The tokenizer turns raw tokens into a flat, ordered list of events. Each event
is an immutable tuple tagged with its ArgType in the trailing 'type' field, so
two events of different kinds never compare equal even when their payloads
match.

- CommandArg(name)           a sub-command token; the active schema node changes.
- PositionalArg(value)       a literal value.
- OptionArg(name, value)     a named option with its string value.
- FlagArg(name, value=True)  a named option without value; False when negated.

Events support structural pattern matching:

    match event:
        case OptionArg(name, value): ...
        case FlagArg(name, False): ...
"""
from enum import StrEnum
from typing import NamedTuple


class ArgType(StrEnum):
    COMMAND = "command"
    POSITIONAL = "positional"
    OPTION = "option"
    FLAG = "flag"


class CommandArg(NamedTuple):
    name: str
    type: ArgType = ArgType.COMMAND


class PositionalArg(NamedTuple):
    value: str
    type: ArgType = ArgType.POSITIONAL


class OptionArg(NamedTuple):
    name: str
    value: str
    type: ArgType = ArgType.OPTION


class FlagArg(NamedTuple):
    name: str
    value: bool = True
    type: ArgType = ArgType.FLAG


__all__ = (
    "ArgType",
    "CommandArg",
    "PositionalArg",
    "OptionArg",
    "FlagArg",
)
