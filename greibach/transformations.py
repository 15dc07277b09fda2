"""
Context-free grammar transformations.

Every transformation takes a :func:`Grammar <greibach.grammar.Grammar>`
and returns a new one, the given grammar is left untouched. The
transformations that build a new grammar end by verifying that no
variable got lost along the way, see :func:`verify_consistency`.

The chain used to reach the Greibach normal form is::

    remove_initial_variable_from_rhs
        -> (remove_epsilon_productions
            -> remove_left_recursion
            -> substitute leading variables)*
"""


import logging
from itertools import count
from typing import Iterable

from .orderedset import OrderedSet
from .production import Production
from .symbol import Symbol

logger = logging.getLogger("greibach")

REVERSED = 0b1


class MalformedGrammarError(ValueError):
    """A variable is used but never derived"""

    def __init__(self, variable: Symbol):
        super().__init__(
            "Grammar is malformed: variable {} cannot be derived".format(variable))
        self.variable = variable


class PreconditionError(ValueError):
    pass


def verify_consistency(old_grammar, new_grammar):
    """
    Ensure the variables of the old grammar did not become terminals of
    the new one, return the new grammar.
    """
    old_variables = old_grammar.variables()
    for terminal in new_grammar.terminals():
        if terminal in old_variables:
            raise MalformedGrammarError(terminal)
    return new_grammar


def generate_auxiliary_variable(used_symbols: Iterable[Symbol], base: Symbol) -> Symbol:
    """
    Find a fresh variable name out of the given base name. Numerical
    suffixes are incremented: ``S`` gives ``S2`` then ``S3``, ``A12``
    gives ``A13``.
    """
    if base not in used_symbols:
        return base
    stem = base.rstrip("0123456789")
    start = int(base[len(stem):]) if stem != base else 2
    for index in count(start):
        name = "{}{}".format(stem, index)
        if name not in used_symbols:
            return name


def apply_options(grammar, flags: int):
    """
    Apply the grammar options. Available flags are:

    * :func:`<greibach.transformations.REVERSED>`: reverse the grammar.
    """
    if flags & REVERSED:
        return reversed(grammar)
    return grammar


def simplify(grammar):
    """
    Remove the productions of the variables unreachable from the start
    variable and the productions of the form ``V ::= V``.
    """
    productions = OrderedSet()
    seen_symbols = OrderedSet()
    new_symbols = OrderedSet([grammar.start_variable])
    while new_symbols:
        seen_symbols |= new_symbols
        next_symbols = OrderedSet()
        for production in grammar.productions:
            if production.lhs not in new_symbols:
                continue
            if production.rhs == (production.lhs,):
                continue
            productions.add(production)
            next_symbols.update(
                symbol
                for symbol in production.rhs
                if symbol not in seen_symbols)
        new_symbols = next_symbols
    return verify_consistency(grammar, type(grammar)(grammar.start_variable, productions))


def reversed(grammar):
    """Reverse the right-hand side of every production"""
    return verify_consistency(grammar, type(grammar)(grammar.start_variable, (
        Production(production.lhs, production.rhs[::-1])
        for production in grammar.productions
    )))


def remove_initial_variable_from_rhs(grammar):
    """
    Make sure the start variable is not found on any right-hand side by
    introducing a new start variable ``S' ::= S``.
    """
    if not _start_variable_in_rhs(grammar):
        return grammar
    start_variable = generate_auxiliary_variable(grammar.symbols(), grammar.start_variable)
    logger.debug("Start variable %s replaced by %s", grammar.start_variable, start_variable)
    productions = OrderedSet([Production(start_variable, (grammar.start_variable,))])
    productions |= grammar.productions
    return verify_consistency(grammar, type(grammar)(start_variable, productions))


def remove_epsilon_productions(grammar):
    """
    Remove epsilon productions. Only the start variable may still derive
    epsilon afterward, in which case it is not found on any right-hand
    side.
    """
    nullables = _nullable_variables(grammar.productions)
    start_variable = grammar.start_variable
    if start_variable in nullables and _start_variable_in_rhs(grammar):
        new_start_variable = generate_auxiliary_variable(grammar.symbols(), start_variable)
        logger.debug("Nullable start variable %s replaced by %s", start_variable, new_start_variable)
        productions = OrderedSet(grammar.productions)
        productions.add(Production(new_start_variable, (start_variable,)))
        productions.add(Production(new_start_variable))
        new_grammar = remove_epsilon_productions(
            type(grammar)(new_start_variable, productions))
        return verify_consistency(grammar, new_grammar)

    if not nullables - {start_variable}:
        return grammar

    productions = grammar.productions
    for round_ in count(1):
        nullables = _nullable_variables(productions)
        if not nullables - {start_variable}:
            break
        nulls = _null_variables(productions, nullables)
        logger.debug("Epsilon removal round %d, nullable: %s, null: %s",
                     round_, ", ".join(nullables), ", ".join(nulls) or "-")

        new_productions = OrderedSet()
        for production in productions:
            rhss = OrderedSet([()])
            for symbol in production.rhs:
                new_rhss = OrderedSet()
                for rhs in rhss:
                    if symbol in nulls:
                        new_rhss.add(rhs)
                    elif symbol in nullables:
                        new_rhss.add(rhs)
                        new_rhss.add(rhs + (symbol,))
                    else:
                        new_rhss.add(rhs + (symbol,))
                rhss = new_rhss
            for rhs in rhss:
                if rhs or production.lhs == start_variable:
                    new_productions.add(Production(production.lhs, rhs))
        productions = new_productions

    return verify_consistency(grammar, simplify(type(grammar)(start_variable, productions)))


def has_left_recursion(grammar) -> bool:
    """
    Whether some variable derives a sentential form starting with itself,
    either directly ``V ::= V s...`` or through other variables.
    """
    variables = grammar.variables()
    first_variables = {variable: OrderedSet() for variable in variables}
    for production in grammar.productions:
        if production.first in variables:
            first_variables[production.lhs].add(production.first)

    for variable in variables:
        seen = OrderedSet()
        new_variables = first_variables[variable]
        while new_variables:
            if variable in new_variables:
                return True
            seen |= new_variables
            next_variables = OrderedSet()
            for new_variable in new_variables:
                next_variables |= first_variables[new_variable]
            new_variables = next_variables - seen
    return False


def remove_left_recursion(grammar):
    """
    Remove both direct and indirect left recursion, implementation of
    Paull's algorithm.

    The variables are ordered ``v1 ... vn``. For each ``vi``, every
    production ``vi ::= vj a`` with ``j < i`` gets the leading ``vj``
    substituted by each of its alternatives, then the direct left
    recursion of ``vi`` is removed using an auxiliary variable.
    """
    if not has_left_recursion(grammar):
        return grammar
    original = grammar
    grammar = remove_epsilon_productions(simplify(grammar))
    if not has_left_recursion(grammar):
        return verify_consistency(original, grammar)

    # The start variable epsilon production, if any, has no leading
    # symbol and the start variable is not found on any right-hand side.
    start_epsilon = Production(grammar.start_variable)
    epsilon_is_derived = start_epsilon in grammar.productions
    productions = OrderedSet(grammar.productions)
    productions.discard(start_epsilon)

    variables = list(grammar.variables())
    used_symbols = grammar.symbols()
    for i, vi in enumerate(variables):
        for vj in variables[:i]:
            new_productions = OrderedSet()
            for production in productions:
                if production.lhs == vi and production.first == vj:
                    logger.debug("Substitute %s in %r", vj, production)
                    for vj_production in productions:
                        if vj_production.lhs == vj:
                            new_productions.add(Production(
                                vi, vj_production.rhs + production.rhs[1:]))
                else:
                    new_productions.add(production)
            productions = new_productions

        vi_productions = OrderedSet()
        other_productions = OrderedSet()
        for production in productions:
            if production.lhs == vi:
                vi_productions.add(production)
            else:
                other_productions.add(production)
        other_productions |= _remove_direct_left_recursion(used_symbols, vi, vi_productions)
        productions = other_productions

    if epsilon_is_derived:
        productions.add(start_epsilon)
    return verify_consistency(original, type(grammar)(grammar.start_variable, productions))


def _remove_direct_left_recursion(used_symbols: OrderedSet, variable: Symbol,
                                  productions: OrderedSet) -> OrderedSet:
    """
    Rewrite ``V ::= V a | b`` as ``V ::= b | b V'`` and ``V' ::= a | a V'``.
    The unit productions ``V ::= V`` are dropped. Extend the used symbols
    with the auxiliary variable.
    """
    productions = OrderedSet(
        production
        for production in productions
        if production.rhs != (variable,)
    )
    left_recursives = OrderedSet()
    non_left_recursives = OrderedSet()
    for production in productions:
        if production.first == variable:
            left_recursives.add(production)
        else:
            non_left_recursives.add(production)
    if not left_recursives:
        return productions

    auxiliary = generate_auxiliary_variable(used_symbols, variable)
    used_symbols.add(auxiliary)
    logger.debug("Direct left recursion on %s removed using %s", variable, auxiliary)

    new_productions = OrderedSet()
    for production in non_left_recursives:
        new_productions.add(production)
        new_productions.add(Production(variable, production.rhs + (auxiliary,)))
    for production in left_recursives:
        alpha = production.rhs[1:]
        new_productions.add(Production(auxiliary, alpha))
        new_productions.add(Production(auxiliary, alpha + (auxiliary,)))
    return new_productions


def to_greibach_normal_form(grammar):
    """
    Transform the grammar into Greibach normal form, every production is
    of the form ``v ::= t s1 s2 ...`` with ``t`` a terminal. The start
    variable may derive epsilon, ``v0 ::=``, it is then not found on any
    right-hand side.
    """
    if in_greibach_normal_form(grammar):
        return grammar
    original = grammar
    grammar = remove_initial_variable_from_rhs(grammar)
    for round_ in count(1):
        grammar = remove_left_recursion(remove_epsilon_productions(grammar))
        terminals = grammar.terminals()
        productions = OrderedSet()
        for production in grammar.productions:
            if production.is_epsilon or production.first in terminals:
                productions.add(production)
                continue
            for leading_production in grammar.productions_of(production.first):
                productions.add(Production(
                    production.lhs, leading_production.rhs + production.rhs[1:]))
        grammar = verify_consistency(grammar, type(grammar)(grammar.start_variable, productions))
        logger.debug("Greibach normal form round %d, %d productions",
                     round_, len(grammar.productions))
        if in_greibach_normal_form(grammar):
            return verify_consistency(original, grammar)


def in_greibach_normal_form(grammar) -> bool:
    """
    Whether every production is of the form ``v ::= t s1 s2 ...`` with
    ``t`` a terminal, but the start variable epsilon production. When the
    start variable derives epsilon, it must not be found on any
    right-hand side.
    """
    terminals = grammar.terminals()
    nullable_start_variable = False
    for production in grammar.productions:
        if production.is_epsilon:
            if production.lhs != grammar.start_variable:
                return False
            nullable_start_variable = True
        elif production.first not in terminals:
            return False
    return not (nullable_start_variable and _start_variable_in_rhs(grammar))


def ensure_greibach_normal_form(grammar):
    """Fail unless the grammar is in Greibach normal form, return it"""
    if not in_greibach_normal_form(grammar):
        terminals = grammar.terminals()
        for production in grammar.productions:
            if not production.is_epsilon and production.first not in terminals:
                raise PreconditionError(
                    "Grammar is not in Greibach normal form: {!r} does not "
                    "start with a terminal".format(production))
        raise PreconditionError(
            "Grammar is not in Greibach normal form: only the start variable "
            "{} may derive epsilon and it may not be found on a right-hand "
            "side".format(grammar.start_variable))
    return grammar


def _start_variable_in_rhs(grammar) -> bool:
    return any(
        grammar.start_variable in production.rhs
        for production in grammar.productions
    )


def _nullable_variables(productions: Iterable[Production]) -> OrderedSet:
    """Variables deriving epsilon, directly or through other variables"""
    productions = list(productions)
    nullables = OrderedSet()
    new_nullables = True
    while new_nullables:
        new_nullables = False
        for production in productions:
            if production.lhs in nullables:
                continue
            if all(symbol in nullables for symbol in production.rhs):
                nullables.add(production.lhs)
                new_nullables = True
    return nullables


def _null_variables(productions: Iterable[Production], nullables: OrderedSet) -> OrderedSet:
    """
    Nullable variables deriving nothing but epsilon. A variable derives
    something else as soon as one of its productions holds a terminal or
    a variable that does.
    """
    productions = list(productions)
    variables = OrderedSet(production.lhs for production in productions)
    non_empty = OrderedSet()
    new_non_empty = True
    while new_non_empty:
        new_non_empty = False
        for production in productions:
            if production.lhs in non_empty:
                continue
            if any(symbol not in variables or symbol in non_empty
                   for symbol in production.rhs):
                non_empty.add(production.lhs)
                new_non_empty = True
    return nullables - non_empty

