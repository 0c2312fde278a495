import unittest

from cnf.formal_models.cfg import Grammar, Rule, Nonterminal, Terminal
from cnf.transformations.pipeline import normalize
from cnf.transformations.unary import unary_closure, remove_unary_rules
from cnf.util import dfs

S = Nonterminal('S')
A = Nonterminal('A')
B = Nonterminal('B')
a = Terminal('a')
b = Terminal('b')

class TestUnaryClosure(unittest.TestCase):

    def test_chain(self):
        G = Grammar(S, [
            Rule(S, (A,)),
            Rule(A, (B,)),
            Rule(B, (b,)),
            Rule(A, (a,))
        ])
        self.assertEqual(unary_closure(G), {
            S : [A, B],
            A : [B],
            B : []
        })

    def test_cycle(self):
        G = Grammar(S, [
            Rule(S, (A,)),
            Rule(A, (B,)),
            Rule(B, (A,)),
            Rule(A, (a,)),
            Rule(B, (b,))
        ])
        closure = unary_closure(G)
        self.assertEqual(set(closure[S]), {A, B})
        self.assertEqual(set(closure[A]), {A, B})
        self.assertEqual(set(closure[B]), {A, B})

def unary_chain(length):
    chain = [Nonterminal(f'A{i}') for i in range(length)]
    rules = [Rule(X, (Y,)) for X, Y in zip(chain, chain[1:])]
    rules.append(Rule(chain[-1], (a,)))
    return chain, Grammar(chain[0], rules)

class TestLongUnaryChain(unittest.TestCase):

    def test_dfs_does_not_recurse(self):
        order = list(dfs(0, lambda i: [i + 1] if i < 5000 else []))
        self.assertEqual(order, list(range(5001)))

    def test_dfs_preorder(self):
        graph = { 0 : [1, 2], 1 : [2, 3], 2 : [], 3 : [0] }
        self.assertEqual(list(dfs(0, graph.__getitem__)), [0, 1, 2, 3])

    def test_closure(self):
        chain, G = unary_chain(1500)
        closure = unary_closure(G)
        self.assertEqual(closure[chain[0]], chain[1:])
        self.assertEqual(closure[chain[-1]], [])

    def test_normalize(self):
        chain, G = unary_chain(1500)
        result = normalize(G)
        self.assertEqual(result.rules, [Rule(chain[0], (a,))])
        self.assertEqual(result.nonterminals, [chain[0]])

class TestRemoveUnaryRules(unittest.TestCase):

    def test_chain(self):
        G = Grammar(S, [
            Rule(S, (A,)),
            Rule(A, (B,)),
            Rule(B, (b,)),
            Rule(A, (a,))
        ])
        result = remove_unary_rules(G)
        self.assertEqual(result.rules, [
            Rule(B, (b,)),
            Rule(A, (a,)),
            Rule(S, (a,)),
            Rule(S, (b,)),
            Rule(A, (b,))
        ])
        self.assertFalse(result.has_unary_rules)

    def test_cycle(self):
        G = Grammar(S, [
            Rule(S, (A,)),
            Rule(A, (B,)),
            Rule(B, (A,)),
            Rule(A, (a,)),
            Rule(B, (b,))
        ])
        result = remove_unary_rules(G)
        self.assertFalse(result.has_unary_rules)
        self.assertEqual(set(result.rules), {
            Rule(S, (a,)),
            Rule(S, (b,)),
            Rule(A, (a,)),
            Rule(A, (b,)),
            Rule(B, (a,)),
            Rule(B, (b,))
        })
        self.assertEqual(len(result.rules), 6)

    def test_existing_rules_are_not_repeated(self):
        G = Grammar(S, [
            Rule(S, (A,)),
            Rule(S, (a, A)),
            Rule(A, (a, A)),
            Rule(A, (b,))
        ])
        result = remove_unary_rules(G)
        self.assertEqual(result.rules, [
            Rule(S, (a, A)),
            Rule(A, (a, A)),
            Rule(A, (b,)),
            Rule(S, (b,))
        ])

if __name__ == '__main__':
    unittest.main()
