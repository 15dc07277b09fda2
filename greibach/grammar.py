"""
A context-free grammar is a start variable and a set of productions of
the form ``v ::= s1 s2 ... sn`` where ``v`` is a single variable.
"""


from typing import Iterable

from . import transformations
from .orderedset import FrozenOrderedSet, OrderedSet
from .production import Production
from .symbol import Symbol


class Grammar:
    """
    Immutable context-free grammar

    Symbols are not declared: a symbol is a *variable* when it is the
    left-hand side of some production, a *terminal* otherwise.

    Two grammars are equal when they share the same start variable and
    the same productions, regardless of the order of the productions.
    Transformations never modify a grammar, they return a new one.
    """

    __slots__ = ("start_variable", "productions")

    def __init__(self, start_variable: Symbol, productions: Iterable[Production]):
        object.__setattr__(self, "start_variable", start_variable)
        object.__setattr__(self, "productions", FrozenOrderedSet(productions))

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def symbols(self) -> OrderedSet:
        """Variables and terminals, by order of first appearance"""
        symbols = OrderedSet()
        for production in self.productions:
            symbols.add(production.lhs)
            symbols.update(production.rhs)
        return symbols

    def variables(self) -> OrderedSet:
        return OrderedSet(production.lhs for production in self.productions)

    def terminals(self) -> OrderedSet:
        return self.symbols() - self.variables()

    def productions_of(self, variable: Symbol) -> OrderedSet:
        """Productions deriving the given variable"""
        return OrderedSet(
            production
            for production in self.productions
            if production.lhs == variable
        )

    def __eq__(self, other):
        if not isinstance(other, Grammar):
            return NotImplemented
        return (self.start_variable == other.start_variable
                and self.productions == other.productions)

    def __hash__(self):
        return hash((self.start_variable, self.productions))

    def __str__(self):
        # The start variable is the left-hand side of the first line
        productions = sorted(
            self.productions,
            key=lambda production: production.lhs != self.start_variable)
        return "\n".join(map(str, productions))

    def __repr__(self):
        return "<{} {} ({} productions)>".format(
            self.__class__.__name__, self.start_variable, len(self.productions))

    # Transformations, see :mod:`greibach.transformations`

    def simplify(self) -> "Grammar":
        return transformations.simplify(self)

    def reversed(self) -> "Grammar":
        return transformations.reversed(self)

    def remove_initial_variable_from_rhs(self) -> "Grammar":
        return transformations.remove_initial_variable_from_rhs(self)

    def remove_epsilon_productions(self) -> "Grammar":
        return transformations.remove_epsilon_productions(self)

    def has_left_recursion(self) -> bool:
        return transformations.has_left_recursion(self)

    def remove_left_recursion(self) -> "Grammar":
        return transformations.remove_left_recursion(self)

    def to_greibach_normal_form(self) -> "Grammar":
        return transformations.to_greibach_normal_form(self)

    def in_greibach_normal_form(self) -> bool:
        return transformations.in_greibach_normal_form(self)

    def apply_options(self, flags: int) -> "Grammar":
        return transformations.apply_options(self, flags)
