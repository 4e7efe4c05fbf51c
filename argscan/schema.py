r"""
argscan schema: declarative description of a command line.

Overview
- Types
  • OptionType: value vocabulary of named options (scalar, plural, flag, count).
  • PositionalType: value vocabulary of positionals (scalar and plural only).

- Specs
  • Option: a named option, keyed by its primary name in Command.options, with
    optional aliases. Flag-like options (flag, count) take no value.
  • Positional: a positional argument with one or more names.
  • Command: a node of the command tree with its positionals, options and
    sub-commands. The root Command describes the program itself.

- Loading
  • load(mapping): build a Command tree from plain data (JSON/TOML documents).

Metadata (sanitized on construction)
- description: Unset | str, non-empty when provided; explicit None is rejected.
- aliases / names: non-empty strings without leading dashes, '=' or whitespace;
  duplicates are rejected.
- required, default, choices, coerce, hidden, conflicts: carried for callers
  (validation, help, coercion). The tokenizer never reads them.

Immutability
- Every public attribute is a read-only property (see utils.field). Containers
  are handed out as copies; nested Command and Option objects are handed out by
  identity, so a parser may keep a pointer to the active node without copying.

Quick example:
    >>> from argscan.schema import Command, Option, Positional
    >>> tool = Command(
    ...     positionals=[Positional("path", type="file")],
    ...     options={"verbose": Option("flag", aliases=["v"])},
    ...     subcommands={"build": Command(options={"jobs": Option("number")})},
    ... )
"""
import builtins
import functools
import operator
import re
from collections.abc import Iterable, Mapping
from enum import StrEnum

from .utils import *


class OptionType(StrEnum):
    """
    Value kinds accepted by named options.

    Plural kinds may be given several times to build a list; flag and count
    take no value (presence toggles or counts).
    """
    FILE = "file"
    FILES = "files"
    DIR = "dir"
    DIRS = "dirs"
    STRING = "string"
    STRINGS = "strings"
    NUMBER = "number"
    NUMBERS = "numbers"
    FLAG = "flag"
    COUNT = "count"

    @property
    def flaglike(self):
        """
        true for kinds that never take a value (flag, count).
        """
        return self in (OptionType.FLAG, OptionType.COUNT)

    @property
    def plural(self):
        return self in (OptionType.FILES, OptionType.DIRS, OptionType.STRINGS, OptionType.NUMBERS)

    @property
    def pathlike(self):
        return self in (OptionType.FILE, OptionType.FILES, OptionType.DIR, OptionType.DIRS)


class PositionalType(StrEnum):
    """
    Value kinds accepted by positionals (same vocabulary as options, without
    the flag-like kinds).
    """
    FILE = "file"
    FILES = "files"
    DIR = "dir"
    DIRS = "dirs"
    STRING = "string"
    STRINGS = "strings"
    NUMBER = "number"
    NUMBERS = "numbers"

    @property
    def plural(self):
        return self in (PositionalType.FILES, PositionalType.DIRS, PositionalType.STRINGS, PositionalType.NUMBERS)

    @property
    def pathlike(self):
        return self in (PositionalType.FILE, PositionalType.FILES, PositionalType.DIR, PositionalType.DIRS)


class SchemaType(type):
    """
    Metaclass for schema specs.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the backing field "_{name}".
    - Provide stable __repr__/__rich_repr__ implementations limited to the
      names in __displayable__ (or __introspectable__ when Unset).
    - Derive __typename__ from the class name for messages.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: field(name) for name in namespace.get("__introspectable__", ())
            },
        )

        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        __repr__.__qualname__ = f"{name}.__repr__"
        self.__repr__ = __repr__

        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        __rich_repr__.__qualname__ = f"{name}.__rich_repr__"
        self.__rich_repr__ = __rich_repr__

        return self


_NAME = re.compile(r"[^\s=\-][^\s=]*")


def _sanitize_description(cls, description, /):
    """
    Internal: validate an optional description (Unset, or a non-empty string).
    """
    if not isinstance(description, str | UnsetType):
        raise TypeError(f"{cls.__typename__} 'description' must be a string")
    elif isinstance(description, str) and not (description := description.strip()):
        raise ValueError(f"{cls.__typename__} 'description' cannot be empty")
    return description


def _sanitize_names(cls, field, names, /):
    """
    Internal: validate a collection of option/positional/command names.

    Rules
    - every name is a string matching _NAME (no leading '-', no '=', no spaces).
    - duplicates are rejected.
    """
    if isinstance(names, str) or not isinstance(names, Iterable):
        raise TypeError(f"{cls.__typename__} {field!r} must be an iterable of strings")
    names = list(names)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} {field!r} must contain only strings")
        if not _NAME.fullmatch(name):
            raise ValueError(f"{cls.__typename__} name {name!r} is not a valid name")
    if len(set(names)) != len(names):
        raise ValueError(f"{cls.__typename__} {field!r} cannot contain duplicates")
    return names


def _sanitize_type(cls, enum, type, /):
    try:
        return enum(type)
    except ValueError:
        raise ValueError(f"{cls.__typename__} 'type' must be one of %s, not %r" % (
            ", ".join(map(repr, enum)), type
        )) from None


def _sanitize_iterable(cls, field, object, /):
    if isinstance(object, str) or not isinstance(object, Iterable):
        raise TypeError(f"{cls.__typename__} {field!r} must be an iterable")
    return list(object)


def _sanitize_coerce(cls, coerce, /):
    if coerce is not Unset and not callable(coerce):
        raise TypeError(f"{cls.__typename__} 'coerce' must be callable")
    return coerce


class Option(metaclass=SchemaType):
    """
    Named option specification.

    The primary name is the key under which the option is stored in
    Command.options; aliases add alternative spellings. Names of one character
    are short options ('-v'), longer names are long options ('--verbose').
    Flag-like options also answer to 'no-<alias>' for every long alias.
    """

    __introspectable__ = (
        "type",
        "aliases",
        "required",
        "default",
        "description",
        "choices",
        "coerce",
        "hidden",
        "conflicts",
    )
    __displayable__ = (
        "type",
        "aliases",
        "description",
    )

    def __init__(
            self,
            type,
            /,
            *,
            aliases=(),
            required=False,
            default=Unset,
            description=Unset,
            choices=(),
            coerce=Unset,
            hidden=False,
            conflicts=(),
    ):
        """
        Parameters
        - type: OptionType | str
        - aliases: Iterable[str], alternative names besides the primary one.
        - required / default / choices / coerce: caller-side validation and coercion.
        - description: Unset | str, short help text.
        - hidden: bool, suppress from help and completion listings.
        - conflicts: Iterable[str], primary names this option cannot be combined with.
        """
        cls = builtins.type(self)
        self._type = _sanitize_type(cls, OptionType, type)
        self._aliases = _sanitize_names(cls, "aliases", aliases)
        self._required = bool(required)
        self._default = default
        self._description = _sanitize_description(cls, description)
        self._choices = _sanitize_iterable(cls, "choices", choices)
        self._coerce = _sanitize_coerce(cls, coerce)
        self._hidden = bool(hidden)
        self._conflicts = _sanitize_names(cls, "conflicts", conflicts)

    @property
    def flaglike(self):
        return self._type.flaglike

    @property
    def plural(self):
        return self._type.plural


class Positional(metaclass=SchemaType):
    """
    Positional argument specification with one or more accepted names.
    """

    __introspectable__ = (
        "names",
        "type",
        "required",
        "default",
        "description",
        "choices",
        "coerce",
    )
    __displayable__ = (
        "names",
        "type",
    )

    def __init__(
            self,
            *names,
            type=PositionalType.STRING,
            required=False,
            default=Unset,
            description=Unset,
            choices=(),
            coerce=Unset,
    ):
        cls = builtins.type(self)
        if not names:
            raise TypeError(f"{cls.__typename__} requires at least one name")
        self._names = _sanitize_names(cls, "names", names)
        self._type = _sanitize_type(cls, PositionalType, type)
        self._required = bool(required)
        self._default = default
        self._description = _sanitize_description(cls, description)
        self._choices = _sanitize_iterable(cls, "choices", choices)
        self._coerce = _sanitize_coerce(cls, coerce)


class Command(metaclass=SchemaType):
    """
    Node of a command tree.

    Attributes
    - description: str | None
    - positionals: list[Positional], in declaration order.
    - options: dict[str, Option] keyed by primary name.
    - subcommands: dict[str, Command] keyed by invocation name.
    """

    __introspectable__ = (
        "description",
        "positionals",
        "options",
        "subcommands",
    )

    def __init__(self, *, description=Unset, positionals=(), options=None, subcommands=None):
        cls = builtins.type(self)
        options = options if options is not None else {}
        subcommands = subcommands if subcommands is not None else {}

        if not isinstance(options, Mapping):
            raise TypeError(f"{cls.__typename__} 'options' must be a mapping")
        if not isinstance(subcommands, Mapping):
            raise TypeError(f"{cls.__typename__} 'subcommands' must be a mapping")

        _sanitize_names(cls, "options", options.keys())
        for name, option in options.items():
            if not isinstance(option, Option):
                raise TypeError(f"{cls.__typename__} option {name!r} must be an Option")

        _sanitize_names(cls, "subcommands", subcommands.keys())
        for name, command in subcommands.items():
            if not isinstance(command, Command):
                raise TypeError(f"{cls.__typename__} subcommand {name!r} must be a Command")

        positionals = _sanitize_iterable(cls, "positionals", positionals)
        for positional in positionals:
            if not isinstance(positional, Positional):
                raise TypeError(f"{cls.__typename__} 'positionals' must contain only Positional specs")

        self._description = _sanitize_description(cls, description)
        self._positionals = tuple(positionals)
        self._options = dict(options)
        self._subcommands = dict(subcommands)


_KEYS = {
    Command: {"description", "positionals", "options", "subcommands"},
    Option: {"type", "aliases", "required", "default", "description", "choices", "hidden", "conflicts"},
    Positional: {"names", "type", "required", "default", "description", "choices"},
}


def _check_keys(cls, data, /):
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__typename__} definition must be a mapping")
    if unknown := data.keys() - _KEYS[cls]:
        raise ValueError(f"unknown {cls.__typename__} keys: %s" % ", ".join(sorted(map(repr, unknown))))


def load(data, /):
    """
    Build a Command tree from plain data.

    Shape
        {
          "description": "...",
          "positionals": [{"names": ["path"], "type": "file"}],
          "options": {"verbose": {"type": "flag", "aliases": ["v"]}},
          "subcommands": {"build": {...}}
        }

    Every key is optional. Callables (coerce) cannot be expressed in plain
    data and are therefore not accepted here.

    Raises
    - TypeError: a node is not a mapping (or a field has the wrong shape).
    - ValueError: unknown keys, bad names or unknown types.
    """
    _check_keys(Command, data)

    options = {}
    for name, option in data.get("options", {}).items():
        _check_keys(Option, option)
        option = dict(option)
        try:
            type = option.pop("type")
        except KeyError:
            raise ValueError(f"option {name!r} is missing its 'type'") from None
        options[name] = Option(type, **option)

    positionals = []
    for positional in data.get("positionals", ()):
        _check_keys(Positional, positional)
        positional = dict(positional)
        names = positional.pop("names", ())
        if isinstance(names, str):
            names = (names,)
        positionals.append(Positional(*names, **positional))

    subcommands = {name: load(command) for name, command in data.get("subcommands", {}).items()}

    return Command(
        description=data.get("description", Unset),
        positionals=positionals,
        options=options,
        subcommands=subcommands,
    )


__all__ = (
    "OptionType",
    "PositionalType",
    "Option",
    "Positional",
    "Command",
    "load",
)

# The metaclass is an implementation detail of the specs.
del SchemaType
