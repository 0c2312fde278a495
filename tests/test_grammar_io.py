import io
import unittest

from cnf.formal_models.cfg import Grammar, Rule, Nonterminal, Terminal, MalformedGrammar
from cnf.formal_models.grammar_io import (
    grammar_from_dict, grammar_to_dict, read_grammar, write_grammar)
from cnf.grammars.worked_example import WorkedExampleGrammar

WORKED_EXAMPLE = {
    'VN' : ['S', 'A', 'B', 'C', 'D'],
    'VT' : ['a', 'b'],
    'S' : 'S',
    'P' : [
        ['S', ['b', 'A']],
        ['S', ['B', 'C']],
        ['A', ['a']],
        ['A', ['a', 'S']],
        ['A', ['b', 'C', 'a', 'C', 'a']],
        ['B', ['A']],
        ['B', ['b', 'S']],
        ['B', ['b', 'C', 'A', 'a']],
        ['C', ['ε']],
        ['C', ['A', 'B']],
        ['D', ['A', 'B']]
    ]
}

class TestGrammarIO(unittest.TestCase):

    def test_from_dict(self):
        self.assertEqual(grammar_from_dict(WORKED_EXAMPLE), WorkedExampleGrammar())

    def test_to_dict(self):
        self.assertEqual(grammar_to_dict(WorkedExampleGrammar()), WORKED_EXAMPLE)

    def test_write_and_read(self):
        G = WorkedExampleGrammar()
        fout = io.StringIO()
        write_grammar(G, fout)
        self.assertIn('"ε"', fout.getvalue())
        self.assertEqual(read_grammar(io.StringIO(fout.getvalue())), G)

    def test_epsilon_must_be_alone(self):
        data = dict(WORKED_EXAMPLE, P=[['S', ['a', 'ε']]])
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_empty_right_side(self):
        data = dict(WORKED_EXAMPLE, P=[['S', []]])
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_undeclared_symbol(self):
        data = dict(WORKED_EXAMPLE, P=[['S', ['c']]])
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_terminal_left_side(self):
        data = dict(WORKED_EXAMPLE, P=[['a', ['b']]])
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_missing_field(self):
        data = dict(WORKED_EXAMPLE)
        del data['VT']
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_overlapping_vocabularies(self):
        data = dict(WORKED_EXAMPLE, VT=['a', 'b', 'S'])
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_undeclared_start(self):
        data = dict(WORKED_EXAMPLE, S='Z')
        with self.assertRaises(MalformedGrammar):
            grammar_from_dict(data)

    def test_wrongly_shaped_fields(self):
        for field, value in [
            ('VN', 3),
            ('VN', [['S']]),
            ('VT', 'ab'),
            ('P', { 'S' : ['a'] }),
            ('S', ['S'])
        ]:
            with self.subTest(field=field, value=value):
                with self.assertRaises(MalformedGrammar):
                    grammar_from_dict(dict(WORKED_EXAMPLE, **{ field : value }))

    def test_wrongly_shaped_productions(self):
        for production in [
            [['S'], ['a']],
            ['S', 'a'],
            ['S', [['a']]],
            ['S', [1]],
            'Sa'
        ]:
            with self.subTest(production=production):
                with self.assertRaises(MalformedGrammar):
                    grammar_from_dict(dict(WORKED_EXAMPLE, P=[production]))

    def test_empty_language(self):
        S = Nonterminal('S')
        G = Grammar(S, [], nonterminals=[], terminals=[Terminal('a')])
        data = grammar_to_dict(G)
        self.assertEqual(data, { 'VN' : [], 'VT' : ['a'], 'P' : [], 'S' : 'S' })
        self.assertTrue(grammar_from_dict(data).is_empty)

if __name__ == '__main__':
    unittest.main()
