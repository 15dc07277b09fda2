from functools import partial

from .grammar import Grammar
from .parser import parse
from .transformations import apply_options, ensure_greibach_normal_form, to_greibach_normal_form


def greibach_normal_form(grammar: Grammar) -> Grammar:
    return ensure_greibach_normal_form(to_greibach_normal_form(grammar))


def stages(flags: int = 0):
    """Titled transformations from a parsed grammar to its Greibach normal form"""
    return (
        ("Grammar options applied", partial(apply_options, flags=flags)),
        ("Greibach normal form", greibach_normal_form),
    )


def normalize(text: str, flags: int = 0) -> Grammar:
    """Parse the grammar and transform it into Greibach normal form"""
    grammar = parse(text)
    for _, construct in stages(flags):
        grammar = construct(grammar)
    return grammar
