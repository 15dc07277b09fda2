from dataclasses import dataclass
from typing import Optional, Tuple

from .symbol import Symbol, sentential_to_str


@dataclass(frozen=True)
class Production:
    """
    Context-free production ``lhs ::= s1 s2 ... sn``, the variable
    ``lhs`` derives the sentential form ``rhs``. An empty ``rhs`` is an
    epsilon production.
    """

    lhs: Symbol
    rhs: Tuple[Symbol, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rhs", tuple(self.rhs))

    @property
    def is_epsilon(self) -> bool:
        return not self.rhs

    @property
    def first(self) -> Optional[Symbol]:
        """Leading symbol of the right-hand side, None on epsilon"""
        return self.rhs[0] if self.rhs else None

    def __str__(self):
        return "{} ::= {}".format(self.lhs, " ".join(self.rhs)).rstrip()

    def __repr__(self):
        return "<{} {} ::= {}>".format(
            self.__class__.__name__, self.lhs, sentential_to_str(self.rhs))
