"""
Option registry: compiles a Command tree into lookup tables.

What it builds
- long table: every alias of two or more characters, searchable by exact key
  and by unique prefix ("--verb" finds "verbose" when nothing else starts
  with "verb").
- short table: every single-character alias.
- names: every primary option name, in registration order.

Rules
- the alias set of an option is its primary name plus its declared aliases.
- flag-like options (flag, count) also register 'no-<alias>' for each alias
  longer than one character; single characters never get a negated form.
- registering an alias again with the same option type replaces the previous
  entry; a different type raises ConflictingOptionDefinitionError.
- the scope is flat: options of every sub-command, at any depth, share the
  same tables, so a sub-command's options resolve before it is reached.
"""
import bisect
from typing import NamedTuple

from .faults import ConflictingOptionDefinitionError, FaultCode, getdoc

NEGATION = "no-"


class Entry(NamedTuple):
    """
    resolved option: primary name, definition, and whether the alias that
    reached it is a synthesized negation.
    """
    name: str
    option: object
    negated: bool = False


class Registry:
    """
    Flat lookup tables over every option of a command tree.

    Use build(command) rather than instantiating directly.
    """

    def __init__(self):
        self._longs = {}
        self._keys = []  # sorted keys of self._longs
        self._shorts = {}
        self._names = {}

    @property
    def names(self):
        """
        primary names of every known option, in registration order.
        """
        return list(self._names)

    def add(self, name, option, /):
        """
        register one option under its primary name, aliases and negations.
        """
        self._names.setdefault(name, None)

        aliases = [name, *option.aliases]
        entries = [Entry(name, option) for _ in aliases]
        if option.flaglike:
            negations = [alias for alias in aliases if len(alias) > 1]
            aliases += [NEGATION + alias for alias in negations]
            entries += [Entry(name, option, True) for _ in negations]

        for alias, entry in zip(aliases, entries):
            if len(alias) == 1:
                self._register(self._shorts, alias, entry)
            else:
                if alias not in self._longs:
                    bisect.insort(self._keys, alias)
                self._register(self._longs, alias, entry)

    def _register(self, table, alias, entry):
        try:
            previous = table[alias]
        except KeyError:
            pass
        else:
            if previous.option.type != entry.option.type:
                raise ConflictingOptionDefinitionError(
                    "option %r has conflicting definitions with types %s and %s" % (
                        alias, previous.option.type, entry.option.type
                    ),
                    title="conflicting option definition",
                    code=FaultCode.CONFLICTING_OPTION_DEFINITION,
                    hint="rename %r in one of %r or %r, or give both the same type" % (
                        alias, previous.name, entry.name
                    ),
                    alias=alias,
                    previous=previous.option.type,
                    current=entry.option.type,
                    docs=getdoc(FaultCode.CONFLICTING_OPTION_DEFINITION),
                )
        table[alias] = entry

    def long(self, name, /):
        """
        resolve a long option name by exact key, then by unique prefix.

        a prefix is unique when every key starting with it resolves to the same
        option through the same polarity (e.g. aliases 'color' and 'colour' are
        both reached by '--colo'). returns None when unknown or ambiguous.
        """
        try:
            return self._longs[name]
        except KeyError:
            pass
        if not name:
            return None

        candidates = set()
        index = bisect.bisect_left(self._keys, name)
        while index < len(self._keys) and self._keys[index].startswith(name):
            entry = self._longs[self._keys[index]]
            candidates.add((entry.name, entry.negated))
            index += 1
            if len(candidates) > 1:
                return None

        if not candidates:
            return None
        return self._longs[self._keys[index - 1]]

    def short(self, name, /):
        """
        resolve a single-character option name (exact only).
        """
        return self._shorts.get(name)

    def lookup(self, name, /):
        """
        resolve a name as short when it has one character, long otherwise.
        """
        return self.short(name) if len(name) == 1 else self.long(name)

    def __contains__(self, name):
        return self.lookup(name) is not None


def build(command, /):
    """
    compile a command tree into a Registry.

    the root and every sub-command are walked depth first; all options land in
    the same flat tables.

    raises
    - ConflictingOptionDefinitionError: an alias was declared with two types.
    """
    registry = Registry()

    def walk(command):
        for name, option in command.options.items():
            registry.add(name, option)
        for subcommand in command.subcommands.values():
            walk(subcommand)

    walk(command)
    return registry


__all__ = (
    "Entry",
    "Registry",
    "build",
)
