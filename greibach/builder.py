from .grammar import Grammar
from .orderedset import OrderedSet
from .production import Production
from .symbol import Symbol


class GrammarBuilder:
    """
    Fluent grammar builder::

        grammar = (GrammarBuilder.start("S")
            .derive("S").to("(", "S", ")")
            .derive("S").to_epsilon()
            .build())

    Nothing is validated, a variable can be used before it is derived.
    """

    def __init__(self, start_variable: Symbol):
        self.start_variable = start_variable
        self.productions = OrderedSet()

    @classmethod
    def start(cls, start_variable: Symbol) -> "GrammarBuilder":
        return cls(start_variable)

    def derive(self, lhs: Symbol) -> "Derivation":
        return Derivation(self, lhs)

    def build(self) -> Grammar:
        return Grammar(self.start_variable, self.productions)


class Derivation:
    """Production of a :func:`GrammarBuilder` waiting for its right-hand side"""

    def __init__(self, builder: GrammarBuilder, lhs: Symbol):
        self.builder = builder
        self.lhs = lhs

    def to(self, *rhs: Symbol) -> GrammarBuilder:
        self.builder.productions.add(Production(self.lhs, rhs))
        return self.builder

    def to_epsilon(self) -> GrammarBuilder:
        return self.to()
