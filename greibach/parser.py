from .grammar import Grammar
from .orderedset import OrderedSet
from .production import Production

DELIMITER = "::="


class ParseError(Exception):
    def __init__(self, message, line, lineno):
        super().__init__("{}. At line {}: {}".format(message, lineno, line))
        self.line = line
        self.lineno = lineno


def parse(text: str) -> Grammar:
    """
    Parse a grammar, one production per line::

        S ::= ( S ) S
        S ::=

    The symbols are separated by whitespaces, an empty right-hand side
    is an epsilon production. Blank lines are ignored. The left-hand side
    of the first production is the start variable.
    """
    start_variable = None
    productions = OrderedSet()
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        lhs, delimiter, rhs = line.partition(DELIMITER)
        if not delimiter:
            raise ParseError("Missing {}".format(DELIMITER), line, lineno)
        lhs = lhs.strip()
        if not lhs:
            raise ParseError("Missing left-hand side", line, lineno)
        if len(lhs.split()) > 1:
            raise ParseError("Left-hand side is not a single symbol", line, lineno)

        if start_variable is None:
            start_variable = lhs
        productions.add(Production(lhs, rhs.split()))

    if start_variable is None:
        raise ParseError("No production found", "", 0)
    return Grammar(start_variable, productions)


def parse_file(path: str) -> Grammar:
    """Parse the UTF-8 grammar file found at path"""
    with open(path, encoding="utf-8") as fd:
        return parse(fd.read())
