"""Grammar symbols are plain strings, variables and terminals alike."""

from typing import Iterable, NewType

Symbol = NewType("Symbol", str)
EPSILON = "ε"


def sentential_to_str(symbols: Iterable[Symbol]) -> str:
    return " ".join(symbols) or EPSILON
