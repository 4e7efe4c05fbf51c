# python
"""
Parser behavioral tests (classification, option resolution, descent).

Scope
- Validate the event stream produced by parse() for mixed command lines.
- Validate long options: exact, unique prefix, ambiguous prefix, inline values.
- Validate short clusters: bundling, inline values, absence of negation.
- Validate the possible-parameter decision for known and unknown options.
- Validate breakout, lone dash, sub-command descent and the flat option scope.

Conventions
- Test method names follow CamelCase per project convention.
- Schemas are built with the public API (Command, Option, Positional).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argscan import (
    Command,
    Option,
    Positional,
    CommandArg,
    PositionalArg,
    OptionArg,
    FlagArg,
    ConflictingOptionDefinitionError,
    parse,
    parse_results,
)


class TestMixedCommandLine(TestCase):
    """A full command line mixing known and unknown options across levels."""

    def setUp(self):
        self.command = Command(
            options={
                "opt1": Option("flag"),
                "opt2": Option("strings"),
                "a": Option("flag", aliases=["opt4"]),
            },
            positionals=[Positional("positional1")],
            subcommands={
                "cmd1": Command(
                    options={"b": Option("string")},
                    subcommands={"cmd2": Command()},
                ),
            },
        )

    def testMixedCommandLine(self):
        results = parse(self.command, [
            "--opt1",
            "--opt2",
            "param2.1",
            "cmd1",
            "pos1",
            "--opt2",
            "param2.2",
            "-abc",
            "arg-for-c",
            "--opt3",
            "--no-opt3",
            "--opt4",
            "--opt5",
            "param5",
            "cmd2",
            "pos2",
            "--opt6",
        ])
        self.assertEqual(results, [
            FlagArg("opt1", True),
            OptionArg("opt2", "param2.1"),
            CommandArg("cmd1"),
            PositionalArg("pos1"),
            OptionArg("opt2", "param2.2"),
            FlagArg("a", True),
            FlagArg("b", True),  # bundled characters are flags whatever their type
            OptionArg("c", "arg-for-c"),
            FlagArg("opt3", True),
            FlagArg("opt3", False),
            FlagArg("a", True),  # '--opt4' is an alias of 'a'
            OptionArg("opt5", "param5"),
            CommandArg("cmd2"),
            PositionalArg("pos2"),
            FlagArg("opt6", True),
        ])

    def testParsingIsRepeatable(self):
        tokens = ["--opt1", "cmd1", "-abc", "x", "--", "--opt2"]
        self.assertEqual(parse(self.command, tokens), parse(self.command, tokens))

    def testActiveNodeIsTheSubcommandItself(self):
        context = parse_results(self.command, ["cmd1", "cmd2"])
        self.assertIs(context.active, self.command.subcommands["cmd1"].subcommands["cmd2"])
        self.assertIs(context.root, self.command)


class TestLongOptions(TestCase):
    """Long option resolution and the possible-parameter decision."""

    def testKnownValueOptionConsumesNextToken(self):
        command = Command(options={"foobar": Option("string")})
        self.assertEqual(parse(command, ["--foobar", "trot"]), [OptionArg("foobar", "trot")])

    def testKnownValueOptionConsumesDashedToken(self):
        command = Command(options={"offset": Option("number")})
        self.assertEqual(parse(command, ["--offset", "-5"]), [OptionArg("offset", "-5")])

    def testKnownFlagLeavesNextToken(self):
        command = Command(options={"foobar": Option("flag")})
        self.assertEqual(parse(command, ["--foobar", "trot"]), [
            FlagArg("foobar", True),
            PositionalArg("trot"),
        ])

    def testCountBehavesLikeFlag(self):
        command = Command(options={"verbose": Option("count", aliases=["v"])})
        self.assertEqual(parse(command, ["-v", "-v", "file"]), [
            FlagArg("verbose", True),
            FlagArg("verbose", True),
            PositionalArg("file"),
        ])

    def testUniquePrefix(self):
        command = Command(options={"food": Option("flag"), "foobar": Option("string")})
        self.assertEqual(parse(command, ["--foob", "trot"]), [OptionArg("foobar", "trot")])

    def testAmbiguousPrefixIsTreatedAsUnknown(self):
        command = Command(options={"food": Option("flag"), "foobar": Option("string")})
        self.assertEqual(parse(command, ["--foo", "trot"]), [OptionArg("foo", "trot")])
        self.assertEqual(parse(command, ["--foo", "--food"]), [
            FlagArg("foo", True),
            FlagArg("food", True),
        ])

    def testPrefixSharedByAliasesOfOneOption(self):
        command = Command(options={"color": Option("string", aliases=["colour"]), "size": Option("number")})
        self.assertEqual(parse(command, ["--colo", "red"]), [OptionArg("color", "red")])

    def testAliasIsReportedUnderPrimaryName(self):
        command = Command(options={"output": Option("file", aliases=["out", "o"])})
        self.assertEqual(parse(command, ["--out", "a.txt", "-o", "b.txt"]), [
            OptionArg("output", "a.txt"),
            OptionArg("output", "b.txt"),
        ])

    def testInlineValue(self):
        command = Command(options={"define": Option("strings")})
        self.assertEqual(parse(command, ["--define=key=value", "next"]), [
            OptionArg("define", "key=value"),
            PositionalArg("next"),
        ])

    def testInlineValueOnUnknownOption(self):
        self.assertEqual(parse(Command(), ["--mode=", "x"]), [
            OptionArg("mode", ""),
            PositionalArg("x"),
        ])

    def testInlineValueThroughPrefix(self):
        command = Command(options={"foobar": Option("string")})
        self.assertEqual(parse(command, ["--foo=bar"]), [OptionArg("foobar", "bar")])

    def testTrailingValueOptionBecomesFlag(self):
        command = Command(options={"out": Option("file")})
        self.assertEqual(parse(command, ["--out"]), [FlagArg("out", True)])

    def testBreakoutIsNeverAValue(self):
        command = Command(options={"out": Option("file")})
        self.assertEqual(parse(command, ["--out", "--", "--in"]), [
            FlagArg("out", True),
            PositionalArg("--in"),
        ])

    def testEmptyOptionNameIsPositional(self):
        self.assertEqual(parse(Command(), ["--=x", "-=y"]), [
            PositionalArg("--=x"),
            PositionalArg("-=y"),
        ])


class TestNegation(TestCase):
    """'no-' handling for long flags."""

    def testKnownFlagNegation(self):
        command = Command(options={"x": Option("flag", aliases=["extra"])})
        self.assertEqual(parse(command, ["--extra", "--no-extra"]), [
            FlagArg("x", True),
            FlagArg("x", False),
        ])

    def testUnknownFlagNegation(self):
        self.assertEqual(parse(Command(), ["--cache", "--no-cache"]), [
            FlagArg("cache", True),
            FlagArg("cache", False),
        ])

    def testNegatedPrefix(self):
        command = Command(options={"verbose": Option("flag")})
        self.assertEqual(parse(command, ["--no-verb"]), [FlagArg("verbose", False)])

    def testValueOptionsHaveNoNegation(self):
        command = Command(options={"name": Option("string")})
        # 'no-name' is unknown, so the heuristic applies
        self.assertEqual(parse(command, ["--no-name", "x"]), [OptionArg("no-name", "x")])

    def testDeclaredNegativeFlagIsStripped(self):
        command = Command(options={"no-cache": Option("flag")})
        self.assertEqual(parse(command, ["--no-cache"]), [FlagArg("cache", False)])

    def testDeclaredNegativeFlagThroughSynthesizedAlias(self):
        command = Command(options={"no-cache": Option("flag")})
        self.assertEqual(parse(command, ["--no-no-cache"]), [FlagArg("cache", False)])

    def testBareNegationIsPositional(self):
        self.assertEqual(parse(Command(), ["--no-", "--no-=x", "y"]), [
            PositionalArg("--no-"),
            PositionalArg("--no-=x"),
            PositionalArg("y"),
        ])

    def testBareNegationAsUniquePrefix(self):
        command = Command(options={"verbose": Option("flag")})
        self.assertEqual(parse(command, ["--no-"]), [FlagArg("verbose", False)])

    def testShortOptionsHaveNoNegation(self):
        command = Command(options={"x": Option("flag")})
        self.assertEqual(parse(command, ["-x", "-no-x"]), [
            FlagArg("x", True),
            FlagArg("n", True),
            FlagArg("o", True),
            FlagArg("-", True),
            FlagArg("x", True),
        ])


class TestShortOptions(TestCase):
    """Short option clusters."""

    def setUp(self):
        self.command = Command(options={
            "a": Option("flag"),
            "b": Option("flag"),
            "c": Option("string"),
        })

    def testBundledFlagsThenValue(self):
        self.assertEqual(parse(self.command, ["-abc", "X"]), [
            FlagArg("a", True),
            FlagArg("b", True),
            OptionArg("c", "X"),
        ])

    def testBundledInlineValue(self):
        self.assertEqual(parse(self.command, ["-abc=X=Y", "Z"]), [
            FlagArg("a", True),
            FlagArg("b", True),
            OptionArg("c", "X=Y"),
            PositionalArg("Z"),
        ])

    def testKnownFlagLastInCluster(self):
        self.assertEqual(parse(self.command, ["-ca", "X"]), [
            FlagArg("c", True),
            FlagArg("a", True),
            PositionalArg("X"),
        ])

    def testShortAliasOfLongOption(self):
        command = Command(options={"jobs": Option("number", aliases=["j"])})
        self.assertEqual(parse(command, ["-j", "4"]), [OptionArg("jobs", "4")])


class TestUnknownOptions(TestCase):
    """Heuristic for options the schema does not know."""

    def testUnknownFollowedByOptionIsFlag(self):
        self.assertEqual(parse(Command(), ["--what", "-v", "x"]), [
            FlagArg("what", True),
            OptionArg("v", "x"),
        ])

    def testUnknownFollowedByValueIsOption(self):
        self.assertEqual(parse(Command(), ["--what", "x", "y"]), [
            OptionArg("what", "x"),
            PositionalArg("y"),
        ])

    def testUnknownFollowedByLoneDash(self):
        self.assertEqual(parse(Command(), ["--input", "-"]), [
            FlagArg("input", True),
            PositionalArg("-"),
        ])


class TestPositionalsAndBreakout(TestCase):
    """Positionals, '--' and '-'."""

    def testTokensWithoutOptionsArePositionals(self):
        command = Command(subcommands={"run": Command()})
        self.assertEqual(parse(command, ["a", "b", "c"]), [
            PositionalArg("a"),
            PositionalArg("b"),
            PositionalArg("c"),
        ])

    def testBreakout(self):
        command = Command(options={"x": Option("flag")}, subcommands={"run": Command()})
        self.assertEqual(parse(command, ["-x", "--", "-x", "--y=1", "run", "--", "-"]), [
            FlagArg("x", True),
            PositionalArg("-x"),
            PositionalArg("--y=1"),
            PositionalArg("run"),
            PositionalArg("--"),
            PositionalArg("-"),
        ])

    def testLoneDash(self):
        self.assertEqual(parse(Command(), ["-", "file"]), [
            PositionalArg("-"),
            PositionalArg("file"),
        ])

    def testEmptyInput(self):
        self.assertEqual(parse(Command(), []), [])


class TestSubcommandDescent(TestCase):
    """Descent into sub-commands and the flat option scope."""

    def testDescentThenOption(self):
        command = Command(subcommands={"cmd1": Command(options={"b": Option("flag")})})
        self.assertEqual(parse(command, ["cmd1", "-b"]), [
            CommandArg("cmd1"),
            FlagArg("b", True),
        ])

    def testSiblingsBecomeUnreachable(self):
        command = Command(subcommands={"left": Command(), "right": Command()})
        self.assertEqual(parse(command, ["left", "right"]), [
            CommandArg("left"),
            PositionalArg("right"),
        ])

    def testNestedSubcommandNameOnlyMatchesBelowItsParent(self):
        command = Command(subcommands={"remote": Command(subcommands={"add": Command()})})
        self.assertEqual(parse(command, ["add", "remote", "add"]), [
            PositionalArg("add"),
            CommandArg("remote"),
            CommandArg("add"),
        ])

    def testSubcommandOptionsAreVisibleFromTheRoot(self):
        command = Command(subcommands={"build": Command(options={"x": Option("flag")})})
        self.assertEqual(parse(command, ["-x", "y", "build"]), [
            FlagArg("x", True),
            PositionalArg("y"),
            CommandArg("build"),
        ])

    def testConflictIsRaisedBeforeParsing(self):
        command = Command(
            options={"mode": Option("flag")},
            subcommands={"run": Command(options={"mode": Option("string")})},
        )
        with self.assertRaises(ConflictingOptionDefinitionError):
            parse(command, [])


if __name__ == "__main__":
    unittest.main()
