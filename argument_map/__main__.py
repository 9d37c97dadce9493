"""
Prints the flags and values parsed from the command line, one flag per line.

.. code-block:: console

    $ python -m argument_map -a 42 -b bat cat -d
    -a 42
    -b bat
    -d
"""
import logging
import os
import sys
from typing import List, Optional

from argument_map.argument_map import ArgumentMap

PRINTING = os.environ.get("ARGUMENT_MAP_PRINTING", "1").lower() not in (
    "",
    "0",
    "false",
    "no",
)
LOG_LEVEL = os.environ.get("ARGUMENT_MAP_LOG_LEVEL", "WARNING").upper()


def _log_level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def _print(*args, **kwargs):
    if PRINTING:
        print(*args, **kwargs)


def main(args: Optional[List[str]] = None) -> None:
    """
    Parses ``args`` (``sys.argv[1:]`` if not given) and prints the result.

    >>> main(["-a", "42", "-b", "bat", "cat", "-d"])
    -a 42
    -b bat
    -d
    """
    logging.basicConfig(level=_log_level())
    argument_map = ArgumentMap(sys.argv[1:] if args is None else args)
    for flag, value in argument_map.items():
        _print(flag if value is None else f"{flag} {value}")


if __name__ == "__main__":
    main()
