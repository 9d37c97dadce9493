from argument_map.argument_map import ArgumentMap, pairs
from argument_map.key_value import KeyValue
from argument_map.predicates import is_flag, is_value

__all__ = [
    "ArgumentMap",
    "pairs",
    "is_flag",
    "is_value",
    "KeyValue",
]
