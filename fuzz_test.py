import sys
import unittest
from random import Random
from typing import Dict, List, NamedTuple, Optional

from hypothesis import given, register_random, settings
from hypothesis import strategies as st

from argument_map import ArgumentMap, is_flag, is_value

MAX_ARGS = 12
WHITESPACE = [" ", "\t", "\n"]


class StOutput(NamedTuple):
    args: List[str]
    repr: str


def expected_map(args: List[str]) -> Dict[str, Optional[str]]:
    """
    For every flag, the first value after its last occurrence, unless a flag comes first.
    """
    expected: Dict[str, Optional[str]] = {}
    for flag in [arg for arg in args if is_flag(arg)]:
        last = max(i for i, arg in enumerate(args) if arg == flag)
        expected[flag] = None
        for arg in args[last + 1 :]:
            if is_flag(arg):
                break
            if is_value(arg):
                expected[flag] = arg
                break
    return expected


@st.composite
def st_flag(draw) -> str:
    dashes = draw(st.sampled_from(["-", "--"]))
    name = draw(st.text(alphabet="abcdefg123", min_size=1, max_size=3))
    padding = draw(st.sampled_from(["", *WHITESPACE]))
    return f"{padding}{dashes}{name}{padding}"


@st.composite
def st_value(draw) -> str:
    head = draw(st.text(alphabet="abcxyz.123/", min_size=1, max_size=5))
    tail = draw(st.text(max_size=3))
    return head + tail


st_blank = st.text(alphabet=WHITESPACE, max_size=3)
st_dash = st.sampled_from(["-", "- ", "-\t", "-\t \n"])
st_token = st_flag() | st_value() | st_blank | st_dash | st.text()


@st.composite
def st_args(draw) -> StOutput:
    args = draw(st.lists(st_token, max_size=MAX_ARGS))
    return StOutput(args=args, repr=f"ArgumentMap({args!r})")


class FuzzTest(unittest.TestCase):
    @given(st_token)
    def test_flag_or_value(self, token: str):
        self.assertFalse(is_flag(token) and is_value(token), repr(token))

    @settings(deadline=2000)
    @given(st_args())
    def test_keys_and_values(self, output: StOutput):
        m = ArgumentMap(output.args)
        for flag, value in m.items():
            self.assertTrue(is_flag(flag), output.repr)
            self.assertTrue(value is None or is_value(value), output.repr)
            self.assertEqual(m.has_value(flag), value is not None, output.repr)

    @settings(deadline=2000)
    @given(st_args())
    def test_num_flags(self, output: StOutput):
        flags = {arg for arg in output.args if is_flag(arg)}
        self.assertEqual(ArgumentMap(output.args).num_flags(), len(flags), output.repr)

    @settings(deadline=2000)
    @given(st_args())
    def test_last_occurrence_wins(self, output: StOutput):
        self.assertEqual(ArgumentMap(output.args), expected_map(output.args), output.repr)

    @settings(deadline=2000)
    @given(st_args(), st_flag(), st_value(), st.lists(st_value() | st_blank, max_size=3))
    def test_extra_values_dropped(
        self, prefix: StOutput, flag: str, value: str, extras: List[str]
    ):
        args = [*prefix.args, flag, value, *extras]
        self.assertEqual(ArgumentMap(args).get_string(flag), value, repr(args))

    @settings(deadline=2000)
    @given(st_args())
    def test_idempotent(self, output: StOutput):
        m = ArgumentMap(output.args)
        m.parse(output.args)
        self.assertEqual(m, ArgumentMap(output.args), output.repr)

    @settings(deadline=2000)
    @given(st_args(), st_args())
    def test_parse_merges(self, first: StOutput, second: StOutput):
        m = ArgumentMap(first.args)
        m.parse(second.args)
        self.assertEqual(
            m,
            ArgumentMap(first.args) | ArgumentMap(second.args),
            f"{first.repr} | {second.repr}",
        )


if __name__ == "__main__":
    random = Random(0)
    register_random(random)
    unittest.main(argv=sys.argv)
