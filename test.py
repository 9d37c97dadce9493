#! /usr/bin/env python
import doctest
import io
import logging
import unittest
from abc import ABC, abstractmethod
from contextlib import redirect_stdout
from pathlib import Path

import argument_map
from argument_map import ArgumentMap, KeyValue, is_flag, is_value, pairs
from argument_map import __main__ as cli
from argument_map import argument_map as argument_map_module
from argument_map import predicates

VALID_FLAGS = ["-a", "-1", "-hello", "--world", "-space ", "\t-tab\t"]
INVALID_FLAGS = [
    "1",
    "a-b-c",
    "hello",
    "hello world",
    "",
    " ",
    "\t",
    "-",
    "- ",
    "-\t",
    "-\t \n",
]
VALID_VALUES = ["1", "a-b-c", "hello", "hello world", " a", "\ta"]
INVALID_VALUES = [
    "-a",
    "-1",
    "-hello",
    "--world",
    "",
    " ",
    "\t",
    " \t\n",
    "-",
    "- ",
]
ARGS = ["-a", "42", "-b", "bat", "cat", "-d", "-e", "elk", "-e", "-f"]


def load_tests(_, tests, __):
    cli.PRINTING = True
    for mod in [
        argument_map,
        argument_map_module,
        cli,
        predicates,
    ]:
        tests.addTests(doctest.DocTestSuite(mod))
    return tests


class FlagTest(unittest.TestCase):
    def test_valid_flags(self):
        for flag in VALID_FLAGS:
            with self.subTest(flag=flag):
                self.assertTrue(is_flag(flag), repr(flag))

    def test_invalid_flags(self):
        for flag in INVALID_FLAGS:
            with self.subTest(flag=flag):
                self.assertFalse(is_flag(flag), repr(flag))

    def test_none_flag(self):
        self.assertFalse(is_flag(None))


class ValueTest(unittest.TestCase):
    def test_valid_values(self):
        for value in VALID_VALUES:
            with self.subTest(value=value):
                self.assertTrue(is_value(value), repr(value))

    def test_invalid_values(self):
        for value in INVALID_VALUES:
            with self.subTest(value=value):
                self.assertFalse(is_value(value), repr(value))

    def test_none_value(self):
        self.assertFalse(is_value(None))

    def test_dash_after_whitespace(self):
        self.assertTrue(is_flag(" -a"))
        self.assertFalse(is_value(" -a"))


class CountTest(unittest.TestCase):
    def assertNumFlags(self, args, expected):
        self.assertEqual(ArgumentMap(args).num_flags(), expected)

    def test_one_flag(self):
        self.assertNumFlags(["-loquat"], 1)

    def test_one_pair(self):
        self.assertNumFlags(["-grape", "raisin"], 1)

    def test_two_flags(self):
        self.assertNumFlags(["-tomato", "-potato"], 2)

    def test_only_value(self):
        self.assertNumFlags(["rhubarb"], 0)

    def test_two_values(self):
        self.assertNumFlags(["constant", "change"], 0)

    def test_pineapple(self):
        self.assertNumFlags(["pine", "-apple"], 1)

    def test_squash(self):
        self.assertNumFlags(["-aubergine", "eggplant", "-courgette", "zucchini"], 2)

    def test_fruit(self):
        args = [
            "-tangerine",
            "satsuma",
            "-tangerine",
            "clementine",
            "-tangerine",
            "mandarin",
        ]
        self.assertNumFlags(args, 1)
        self.assertEqual(ArgumentMap(args).get_string("-tangerine"), "mandarin")

    def test_empty(self):
        self.assertNumFlags([], 0)

    def test_none(self):
        with self.assertRaises(TypeError):
            ArgumentMap(None).num_flags()

    def test_len(self):
        self.assertEqual(len(ArgumentMap(ARGS)), 5)


class ParseTest(unittest.TestCase):
    def setUp(self):
        self.map = ArgumentMap()
        self.map.parse(ARGS)
        self.debug = f"\n{self.map}\n"

    def test_num_flags(self):
        self.assertEqual(self.map.num_flags(), 5, self.debug)

    def test_has_flag(self):
        self.assertTrue(self.map.has_flag("-d"), self.debug)

    def test_has_last_flag(self):
        self.assertTrue(self.map.has_flag("-f"), self.debug)

    def test_hasnt_flag(self):
        self.assertFalse(self.map.has_flag("-g"), self.debug)

    def test_has_value(self):
        self.assertTrue(self.map.has_value("-a"), self.debug)

    def test_has_flag_no_value(self):
        self.assertFalse(self.map.has_value("-d"), self.debug)

    def test_no_flag_no_value(self):
        self.assertFalse(self.map.has_value("-g"), self.debug)

    def test_get_value_exists(self):
        self.assertEqual(self.map.get_string("-b"), "bat", self.debug)

    def test_get_value_none(self):
        self.assertIsNone(self.map.get_string("-d"), self.debug)

    def test_get_value_no_flag(self):
        self.assertIsNone(self.map.get_string("-g"), self.debug)

    def test_get_value_repeated_flag(self):
        self.assertIsNone(self.map.get_string("-e"), self.debug)

    def test_get_default_exists(self):
        self.assertEqual(self.map.get_string("-b", "bee"), "bat", self.debug)

    def test_get_default_none(self):
        self.assertEqual(self.map.get_string("-d", "dog"), "dog", self.debug)

    def test_get_default_missing(self):
        self.assertEqual(self.map.get_string("-g", "goat"), "goat", self.debug)

    def test_double_parse(self):
        before = dict(self.map)
        self.map.parse(ARGS)
        self.assertEqual(self.map.num_flags(), 5, self.debug)
        self.assertEqual(dict(self.map), before, self.debug)

    def test_parse_merges(self):
        self.map.parse(["-a", "-g", "goat"])
        self.assertEqual(self.map.num_flags(), 6, self.debug)
        self.assertFalse(self.map.has_value("-a"), self.debug)
        self.assertEqual(self.map.get_string("-b"), "bat", self.debug)
        self.assertEqual(self.map.get_string("-g"), "goat", self.debug)

    def test_mapping(self):
        self.assertIn("-a", self.map)
        self.assertNotIn("42", self.map)
        self.assertEqual(self.map["-a"], "42")
        self.assertEqual(list(self.map), ["-a", "-b", "-d", "-e", "-f"])
        self.assertEqual(
            self.map, {"-a": "42", "-b": "bat", "-d": None, "-e": None, "-f": None}
        )
        with self.assertRaises(KeyError):
            self.map["-g"]

    def test_get_valid_path(self):
        self.assertEqual(ArgumentMap(["-p", "."]).get_path("-p"), Path("."))

    def test_get_invalid_path(self):
        self.assertIsNone(ArgumentMap(["-p"]).get_path("-p"))

    def test_get_path_default(self):
        self.assertEqual(ArgumentMap().get_path("-p", Path("/tmp")), Path("/tmp"))


class PairsTest(unittest.TestCase):
    def test_pairs(self):
        self.assertEqual(
            list(pairs(ARGS)),
            [
                KeyValue("-a", "42"),
                KeyValue("-b", "bat"),
                KeyValue("-d", None),
                KeyValue("-e", "elk"),
                KeyValue("-e", None),
                KeyValue("-f", None),
            ],
        )

    def test_blank_keeps_cursor(self):
        self.assertEqual(list(pairs(["-a", " ", "", "x"])), [KeyValue("-a", "x")])

    def test_leading_values(self):
        self.assertEqual(pairs(["x", "y"]), [])

    def test_keeps_tokens_as_given(self):
        m = ArgumentMap(["\t-tab\t", " a"])
        self.assertEqual(m.get_string("\t-tab\t"), " a")
        self.assertFalse(m.has_flag("-tab"))

    def test_none(self):
        with self.assertRaises(TypeError):
            pairs(None)


class MainTest(unittest.TestCase):
    def setUp(self):
        cli.PRINTING = True

    def run_main(self, *args: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(list(args))
        return out.getvalue()

    def test_main(self):
        self.assertEqual(self.run_main(*ARGS), "-a 42\n-b bat\n-d\n-e\n-f\n")

    def test_main_empty(self):
        self.assertEqual(self.run_main(), "")

    def test_main_not_printing(self):
        cli.PRINTING = False
        try:
            self.assertEqual(self.run_main(*ARGS), "")
        finally:
            cli.PRINTING = True

    def test_log_level(self):
        level = cli.LOG_LEVEL
        try:
            cli.LOG_LEVEL = "DEBUG"
            self.assertEqual(cli._log_level(), logging.DEBUG)
            cli.LOG_LEVEL = "LOUD"
            self.assertEqual(cli._log_level(), logging.WARNING)
            self.assertEqual(self.run_main(*ARGS), "-a 42\n-b bat\n-d\n-e\n-f\n")
        finally:
            cli.LOG_LEVEL = level


class MonoidLawTester(ABC):
    @abstractmethod
    def assertEqual(self, a, b):
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def zero():
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def values():
        raise NotImplementedError

    def test_left_identity(self):
        for a in self.values():
            self.assertEqual(self.zero() | a, a)

    def test_right_identity(self):
        for a in self.values():
            self.assertEqual(a | self.zero(), a)

    def test_associativity(self):
        values = self.values()
        for a in values:
            for b in values:
                for c in values:
                    self.assertEqual((a | b) | c, a | (b | c))


class TestArgumentMapMonoid(MonoidLawTester, unittest.TestCase):
    @staticmethod
    def zero():
        return ArgumentMap.zero()

    @staticmethod
    def values():
        return [
            ArgumentMap(),
            ArgumentMap(["-a", "1"]),
            ArgumentMap(["-a", "-b", "2"]),
            ArgumentMap(ARGS),
        ]

    def test_parse_is_or(self):
        for x in [[], ["-a", "1"], ARGS, ["2", "-e", "eel"]]:
            for y in [[], ["-a"], ["dangling", "-b", "bee", "-g"]]:
                m = ArgumentMap(x)
                m.parse(y)
                self.assertEqual(m, ArgumentMap(x) | ArgumentMap(y))

    def test_or_mapping(self):
        combined = ArgumentMap(["-a", "1"]) | {"-b": "2", "-a": None}
        self.assertIsInstance(combined, ArgumentMap)
        self.assertEqual(combined, {"-a": None, "-b": "2"})

    def test_or_not_a_mapping(self):
        with self.assertRaises(TypeError):
            ArgumentMap(["-a", "1"]) | ["-b", "2"]


if __name__ == "__main__":
    unittest.main()
