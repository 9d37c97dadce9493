"""
Defines the predicates that decide whether a single command-line word is a flag or a value.
"""
from typing import Optional

FLAG_PREFIX = "-"


def is_flag(token: Optional[str]) -> bool:
    """
    Checks whether ``token`` is a flag: once surrounding whitespace is removed,
    it starts with a dash and has something after the dash.

    >>> from argument_map import is_flag
    >>> is_flag("-a")
    True
    >>> is_flag("--world")
    True
    >>> is_flag("\\t-tab\\t")
    True
    >>> is_flag("-")
    False
    >>> is_flag("-\\t \\n")
    False
    >>> is_flag("a-b-c")
    False
    >>> is_flag(None)
    False
    """
    if token is None:
        return False
    stripped = token.strip()
    return stripped.startswith(FLAG_PREFIX) and len(stripped) > len(FLAG_PREFIX)


def is_value(token: Optional[str]) -> bool:
    """
    Checks whether ``token`` is a value: it is not blank and does not start with a dash.

    >>> from argument_map import is_value
    >>> is_value("hello world")
    True
    >>> is_value("\\ta")
    True
    >>> is_value("-1")
    False
    >>> is_value("- ")
    False
    >>> is_value(" \\t\\n")
    False
    >>> is_value(None)
    False
    """
    if token is None:
        return False
    stripped = token.strip()
    return bool(stripped) and not stripped.startswith(FLAG_PREFIX)
