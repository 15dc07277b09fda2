"""Context-free grammars and their Greibach normal form."""

import logging

from .builder import GrammarBuilder
from .grammar import Grammar
from .normalize import normalize
from .orderedset import FrozenOrderedSet, OrderedSet
from .parser import ParseError, parse, parse_file
from .production import Production
from .transformations import (
    REVERSED,
    MalformedGrammarError,
    PreconditionError,
    ensure_greibach_normal_form,
    generate_auxiliary_variable,
)

logging.getLogger("greibach").addHandler(logging.NullHandler())
