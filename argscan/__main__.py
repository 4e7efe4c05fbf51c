"""
argscan debugging tool.

Usage
    python -m argscan [--complete] [--fancy] [--no-color] SCHEMA [--] TOKENS...

- SCHEMA is a JSON (.json) or TOML (.toml) file in the shape accepted by
  argscan.schema.load().
- TOKENS are tokenized against SCHEMA; put them after '--' so options meant
  for SCHEMA are not read as options of this tool.
- --complete prints completion words for TOKENS (program name first, "" last
  when the cursor follows a space), one per line, followed by ':files' when a
  path is expected next.

The tool's own interface is an argscan schema, parsed with argscan itself.
"""
import json
import sys
import tomllib
from pathlib import Path

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from .completion import suggest
from .events import FlagArg, OptionArg, PositionalArg, CommandArg
from .faults import FaultCode, ParserException, UsageError, getdoc, trigger
from .parser import parse
from .schema import Command, Option, Positional, load

INTERFACE = Command(
    description="tokenize an argument vector against a command schema",
    positionals=[
        Positional("schema", type="file", required=True, description="JSON or TOML command schema"),
        Positional("tokens", type="strings", description="tokens to tokenize"),
    ],
    options={
        "complete": Option("flag", aliases=["c"], description="print completion suggestions instead of events"),
        "fancy": Option("flag", description="render faults inside panels"),
        "color": Option("flag", description="colorize output (use --no-color to disable)"),
    },
)


def _read(path, /):
    """
    load a Command from a JSON or TOML file.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        data = tomllib.loads(text) if path.suffix == ".toml" else json.loads(text)
        return load(data)
    except (OSError, ValueError, TypeError) as exception:
        raise UsageError(
            "cannot read schema %r: %s" % (str(path), exception),
            title="unreadable schema",
            code=FaultCode.UNREADABLE_SCHEMA,
            hint="check that the file exists and holds a command schema",
            docs=getdoc(FaultCode.UNREADABLE_SCHEMA),
        ) from None


def _arguments(argv, /):
    """
    read the tool's own arguments into (options, schema, tokens).
    """
    options = {"complete": False, "fancy": False, "color": True}
    values = []
    for event in parse(INTERFACE, argv):
        match event:
            case FlagArg(name, value) if name in options:
                options[name] = value
            case PositionalArg(value):
                values.append(value)
            case FlagArg(name) | OptionArg(name) | CommandArg(name):
                raise UsageError(
                    "unknown option or flag %r" % name,
                    title="unknown option or flag",
                    code=FaultCode.UNKNOWN_SWITCH,
                    hint="put the tokens to tokenize after '--' (for example: argscan schema.json -- --%s)" % name,
                    docs=getdoc(FaultCode.UNKNOWN_SWITCH),
                )
    if not values:
        raise UsageError(
            "missing schema file",
            title="missing schema",
            code=FaultCode.MISSING_SCHEMA,
            hint="pass a JSON or TOML schema as the first positional (for example: argscan schema.json -- ...)",
            docs=getdoc(FaultCode.MISSING_SCHEMA),
        )
    return options, values[0], values[1:]


def render(events, /):
    """
    build a rich table listing parsed events in order.
    """
    table = Table(box=ROUNDED, title="parsed arguments", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("type", style="bold #00E5FF")
    table.add_column("name", style="#FF4DA6")
    table.add_column("value", style="#9CE19C")
    for index, event in enumerate(events, 1):
        name = getattr(event, "name", "")
        value = "" if isinstance(event, CommandArg) else repr(event.value)
        table.add_row(str(index), str(event.type), name, value)
    return table


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    options = {"fancy": False, "color": True}
    try:
        options, schema, tokens = _arguments(argv)
        command = _read(schema)
        output = Console(no_color=not options["color"], highlight=False)
        if options["complete"]:
            suggestions = suggest(command, tokens)
            words = suggestions.words + ([":files"] if suggestions.files else [])
            for word in words:
                output.print(word, markup=False, emoji=False, soft_wrap=True)
        else:
            output.print(render(parse(command, tokens)))
    except ParserException as fault:
        trigger(fault, shell=True, fancy=options["fancy"], colorful=options["color"], prog="argscan")
    return 0


if __name__ == "__main__":
    sys.exit(main())
