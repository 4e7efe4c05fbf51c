"""
argscan faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every error the package
  can raise. Codes are grouped by domain so logs and searches stay predictable.
- ParserException: base type that carries a message plus options and knows how
  to render itself (rich) in a short, lowercased, actionable way.
- trigger(): central entry point to surface a fault (raise, or render and exit
  when running as a shell tool).
- getdoc(): optional description lookup for a code from the host application.

Fault families
- schema (112xx): the command tree cannot be compiled into lookup tables
  (ConflictingOptionDefinitionError). Raised by registry.build() and therefore
  by parse() before any token is read.
- internal (113xx): invariant violations inside the tokenizer
  (CursorUnderflowError). These indicate a defect in the resolver, never bad
  user input, and are not meant to be caught.
- usage (111xx): bad invocations of the argscan debugging tool (UsageError).

Everything else the tokenizer meets (unknown options, ambiguous prefixes, odd
short clusters) is resolved heuristically and never reported as a fault.

Host configuration (read from __main__ when present)
- __styles__: mapping of style names to rich styles.
- __codes__: mapping of FaultCode to replacement labels.
- __docs__: mapping of FaultCode to short documentation strings.
- __prog__: program name shown in headers.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, UnsetType

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - usage (111xx)
      • UNKNOWN_SWITCH, MISSING_SCHEMA, UNREADABLE_SCHEMA
    - schema (112xx)
      • CONFLICTING_OPTION_DEFINITION
    - internal (113xx)
      • CURSOR_UNDERFLOW
    """
    # --- usage errors (111xx) ---
    UNKNOWN_SWITCH                = 11112
    MISSING_SCHEMA                = 11125
    UNREADABLE_SCHEMA             = 11131

    # --- schema errors (112xx) ---
    CONFLICTING_OPTION_DEFINITION = 11201

    # --- internal errors (113xx) ---
    CURSOR_UNDERFLOW              = 11301

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParserException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(*((message,) if message else ()))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(self.options.get("prog", getattr(main, "__prog__", "argscan")), styler("prog-name"))
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code else "?", styler("code")),
            " | ",
            text(self.options.get("title", type(self).__name__).title(), styler("error-title")),
            " ]"
        )
        message = text(self.message or "", styler("error-message"))
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ConflictingOptionDefinitionError(ParserException): ...
class CursorUnderflowError(ParserException): ...
class UsageError(ParserException): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParserException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console and the process exits
      with status 1; otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, prog, title, code, hint.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    returns None when no documentation is registered.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ParserException",
    "ConflictingOptionDefinitionError",
    "CursorUnderflowError",
    "UsageError",
    "FaultCode",
    "trigger",
    "getdoc",
)
