"""Test grammar data model and builder"""


import unittest
from greibach import Grammar, GrammarBuilder, Production


def grammar_a():
    return (GrammarBuilder.start("a")
        .derive("a").to("b", "c")
        .derive("a").to("d", "e", "f")
        .derive("b").to("a")
        .derive("c").to_epsilon()
        .build())


class TestProduction(unittest.TestCase):
    def test_structural_equality(self):
        self.assertEqual(Production("a", ("b", "c")), Production("a", ["b", "c"]))
        self.assertEqual(hash(Production("a", ("b", "c"))), hash(Production("a", ["b", "c"])))
        self.assertNotEqual(Production("a", ("b", "c")), Production("a", ("c", "b")))
        self.assertNotEqual(Production("a", ("b",)), Production("b", ("b",)))

    def test_epsilon(self):
        self.assertTrue(Production("a").is_epsilon)
        self.assertEqual(Production("a"), Production("a", ()))
        self.assertFalse(Production("a", ("b",)).is_epsilon)

    def test_first(self):
        self.assertEqual(Production("a", ("b", "c")).first, "b")
        self.assertIsNone(Production("a").first)

    def test_immutable(self):
        production = Production("a", ("b",))
        with self.assertRaises(AttributeError):
            production.lhs = "c"

    def test_str(self):
        self.assertEqual(str(Production("a", ("b", "c"))), "a ::= b c")
        self.assertEqual(str(Production("a")), "a ::=")
        self.assertEqual(repr(Production("a")), "<Production a ::= ε>")


class TestGrammar(unittest.TestCase):
    def test_sanity(self):
        grammar = grammar_a()
        self.assertEqual(grammar.start_variable, "a")
        self.assertEqual(len(grammar.productions), 4)
        self.assertEqual(grammar.productions, {
            Production("a", ("b", "c")),
            Production("a", ("d", "e", "f")),
            Production("b", ("a",)),
            Production("c"),
        })

    def test_symbols(self):
        grammar = grammar_a()
        self.assertEqual(list(grammar.symbols()), ["a", "b", "c", "d", "e", "f"])
        self.assertEqual(list(grammar.variables()), ["a", "b", "c"])
        self.assertEqual(list(grammar.terminals()), ["d", "e", "f"])

    def test_symbols_partition(self):
        grammar = grammar_a()
        variables = grammar.variables()
        terminals = grammar.terminals()
        self.assertEqual(variables | terminals, grammar.symbols())
        self.assertFalse(variables & terminals)

    def test_productions_of(self):
        grammar = grammar_a()
        self.assertEqual(list(grammar.productions_of("a")), [
            Production("a", ("b", "c")),
            Production("a", ("d", "e", "f")),
        ])
        self.assertFalse(grammar.productions_of("d"))

    def test_equality_ignores_production_order(self):
        grammar = Grammar("a", [Production("a", ("b",)), Production("a")])
        same = Grammar("a", [Production("a"), Production("a", ("b",))])
        self.assertEqual(grammar, same)
        self.assertEqual(hash(grammar), hash(same))

    def test_equality_start_variable(self):
        productions = [Production("a", ("b",)), Production("b")]
        self.assertNotEqual(Grammar("a", productions), Grammar("b", productions))

    def test_duplicates_collapse(self):
        grammar = Grammar("a", [Production("a", ("b",)), Production("a", ("b",))])
        self.assertEqual(len(grammar.productions), 1)

    def test_immutable(self):
        grammar = grammar_a()
        with self.assertRaises(AttributeError):
            grammar.start_variable = "b"
        with self.assertRaises(TypeError):
            grammar.productions.add(Production("d"))
        self.assertEqual(grammar, grammar_a())

    def test_copy_productions(self):
        productions = [Production("a", ("b",))]
        grammar = Grammar("a", productions)
        productions.append(Production("a"))
        self.assertEqual(len(grammar.productions), 1)

    def test_str(self):
        self.assertEqual(str(grammar_a()), "a ::= b c\na ::= d e f\nb ::= a\nc ::=")


class TestGrammarBuilder(unittest.TestCase):
    def test_build(self):
        grammar = GrammarBuilder.start("S").derive("S").to("a", "S").derive("S").to_epsilon().build()
        self.assertEqual(grammar, Grammar("S", [Production("S", ("a", "S")), Production("S")]))

    def test_empty(self):
        grammar = GrammarBuilder.start("S").build()
        self.assertEqual(grammar.start_variable, "S")
        self.assertFalse(grammar.productions)

    def test_duplicates_collapse(self):
        grammar = (GrammarBuilder.start("S")
            .derive("S").to("a")
            .derive("S").to("a")
            .build())
        self.assertEqual(len(grammar.productions), 1)

    def test_open_grammar(self):
        grammar = GrammarBuilder.start("S").derive("S").to("A", "b").build()
        self.assertEqual(list(grammar.terminals()), ["A", "b"])

    def test_snapshot(self):
        builder = GrammarBuilder.start("S").derive("S").to("a")
        grammar = builder.build()
        builder.derive("S").to("b")
        self.assertEqual(len(grammar.productions), 1)
        self.assertEqual(len(builder.build().productions), 2)
