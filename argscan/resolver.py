"""
Option resolver: turns option tokens into flag/option events.

Forms
- long:  '--name', '--name=value'   (value may contain further '=')
- short: '-x', '-x=value', '-abc', '-abc=value'
  every character but the last of a short cluster is a flag; the last one is
  resolved like any other option.

Possible-parameter decision (no inline value)
- no token left                → flag.
- following token is '--'      → handed back; the breakout is never a value.
- known flag-like option       → following token handed back, flag.
- known value-taking option    → following token consumed as the value.
- unknown option               → following token is a value unless it starts
                                 with '-', in which case it is handed back and
                                 the option becomes a flag.

Tokens with nothing to name ('--=x', '-=x', or an unknown '--no-') are positionals.

The unknown-option rule is a best-effort guess and can misread a value that
starts with '-' or a positional that does not.
"""
from .registry import NEGATION


def long_option(token, context, /):
    """
    resolve a '--name' or '--name=value' token.
    """
    name, separator, value = token[2:].partition("=")
    entry = context.registry.long(name)
    if not name or (entry is None and name == NEGATION):
        context.positional(token)
        return
    if separator:
        context.option(name, value, entry)
    else:
        possible_parameter(name, entry, context)


def short_option(token, context, /):
    """
    resolve a '-abc' or '-abc=value' cluster.
    """
    names, separator, value = token[1:].partition("=")
    if not names:
        context.positional(token)
        return
    *bundled, last = names
    for name in bundled:
        context.flag(name, context.registry.short(name))
    entry = context.registry.short(last)
    if separator:
        context.option(last, value, entry)
    else:
        possible_parameter(last, entry, context)


def possible_parameter(name, entry, context, /):
    """
    decide whether the following token is the value of option 'name'.

    'entry' is the registry entry for the name, or None when unknown.
    """
    cursor = context.cursor
    if not cursor.has_next():
        context.flag(name, entry)
        return

    parameter = cursor.next()
    if parameter == "--":
        takes = False
    elif entry is not None:
        takes = not entry.option.flaglike
    else:
        takes = not parameter.startswith("-")

    if takes:
        context.option(name, parameter, entry)
    else:
        cursor.putback()
        context.flag(name, entry)


__all__ = (
    "long_option",
    "short_option",
    "possible_parameter",
)
