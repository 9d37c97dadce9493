"""
Defines ``KeyValue``, a flag paired with the value that followed it on the command line.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A", covariant=True)


@dataclass
class KeyValue(Generic[A]):
    key: str
    value: A
