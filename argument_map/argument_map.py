"""
Defines :py:func:`pairs`, which splits command-line words into flag/value pairs, and the
:py:class:`ArgumentMap <argument_map.argument_map.ArgumentMap>` that stores them.
"""
from __future__ import annotations

import logging
import typing
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from pytypeclass import Monoid

from argument_map.key_value import KeyValue
from argument_map.predicates import is_flag, is_value

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="ArgumentMap")


def pairs(args: Iterable[str]) -> List[KeyValue[Optional[str]]]:
    """
    Splits ``args`` into flags and the values that immediately follow them, in a
    single left-to-right pass.

    A flag followed by another flag (or by nothing) is paired with ``None``.
    Only the first value after a flag is kept. Values that do not follow a flag
    and blank words are dropped.

    >>> from argument_map import pairs
    >>> pairs(["-a", "42", "-b", "bat", "cat", "-d"])
    [KeyValue(key='-a', value='42'), KeyValue(key='-b', value='bat'), KeyValue(key='-d', value=None)]
    >>> pairs(["pine", "-apple"])
    [KeyValue(key='-apple', value=None)]

    Repeated flags are reported every time they occur:

    >>> [kv.value for kv in pairs(["-e", "elk", "-e"])]
    ['elk', None]

    Parameters
    ----------
    args : Iterable[str]
        The words to split, typically ``sys.argv[1:]``. Passing ``None`` raises
        :external:py:exc:`TypeError`.
    """

    def g() -> Iterator[KeyValue[Optional[str]]]:
        flag: Optional[str] = None
        for token in args:
            if is_flag(token):
                if flag is not None:
                    yield KeyValue(flag, None)
                flag = token
            elif flag is not None and is_value(token):
                yield KeyValue(flag, token)
                flag = None
            else:
                logger.debug("Discarding %r", token)
        if flag is not None:
            yield KeyValue(flag, None)

    return list(g())


class ArgumentMap(Monoid[Optional[str]], typing.Mapping[str, Optional[str]]):
    """
    Maps each flag found on the command line to the value that followed it, or to ``None``.

    >>> from argument_map import ArgumentMap
    >>> m = ArgumentMap(["-a", "42", "-b", "bat", "cat", "-d", "-e", "elk", "-e", "-f"])
    >>> m
    ArgumentMap({'-a': '42', '-b': 'bat', '-d': None, '-e': None, '-f': None})
    >>> m.num_flags()
    5
    >>> m.get_string("-b")
    'bat'
    >>> m.get_string("-d", "dog")
    'dog'

    Calling :py:meth:`parse` again adds to the map instead of starting over:

    >>> m.parse(["-g", "goat", "-a"])
    >>> m
    ArgumentMap({'-a': None, '-b': 'bat', '-d': None, '-e': None, '-f': None, '-g': 'goat'})

    Parameters
    ----------
    args : Iterable[str]
        Words to parse immediately. Defaults to nothing, producing an empty map.
    """

    def __init__(self, args: Iterable[str] = ()):
        self.flags: Dict[str, Optional[str]] = {}
        self.parse(args)

    def __getitem__(self, flag: str) -> Optional[str]:
        return self.flags[flag]

    def __iter__(self) -> Iterator[str]:
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.flags!r})"

    def __or__(self: A, other: typing.Mapping[str, Optional[str]]) -> A:  # type: ignore[override]
        """
        Combines this map with any other mapping. Flags in ``other`` take precedence.

        >>> ArgumentMap(["-a", "1", "-b"]) | ArgumentMap(["-b", "2", "-c"])
        ArgumentMap({'-a': '1', '-b': '2', '-c': None})
        >>> ArgumentMap(["-a", "1"]) | {"-b": "2"}
        ArgumentMap({'-a': '1', '-b': '2'})
        """
        if not isinstance(other, typing.Mapping):
            return NotImplemented
        combined = type(self)()
        combined.flags.update(self.flags)
        combined.flags.update(other)
        return combined

    def __add__(self: A, other: typing.Mapping[str, Optional[str]]) -> A:  # type: ignore[override]
        return self | other

    def get_path(self, flag: str, default: Optional[Path] = None) -> Optional[Path]:
        """
        Returns the value of ``flag`` as a :external:py:class:`pathlib.Path`,
        or ``default`` if ``flag`` is missing or has no value.

        >>> ArgumentMap(["-p", "."]).get_path("-p") == Path(".")
        True
        >>> ArgumentMap(["-p"]).get_path("-p") is None
        True
        """
        value = self.get_string(flag)
        if value is None:
            return default
        return Path(value)

    def get_string(self, flag: str, default: Optional[str] = None) -> Optional[str]:
        """
        Returns the value of ``flag``, or ``default`` if ``flag`` is missing or has no value.
        """
        value = self.flags.get(flag)
        return default if value is None else value

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def has_value(self, flag: str) -> bool:
        return self.flags.get(flag) is not None

    def num_flags(self) -> int:
        return len(self.flags)

    def parse(self, args: Iterable[str]) -> None:
        """
        Adds the flags in ``args`` to the map. A flag that was already present is
        overwritten, including by a later occurrence in the same ``args``.

        Parameters
        ----------
        args : Iterable[str]
            The words to parse. Passing ``None`` raises :external:py:exc:`TypeError`.
        """
        for kv in pairs(args):
            self.flags[kv.key] = kv.value
        logger.debug("Parsed %d flags: %r", len(self.flags), self)

    @classmethod
    def zero(cls: Type[A]) -> A:
        """
        >>> ArgumentMap.zero()
        ArgumentMap({})
        """
        return cls()
