from cnf.formal_models.cfg import Grammar, Rule, Nonterminal, Terminal

class WorkedExampleGrammar(Grammar):
    """
    A small grammar that exercises every phase of the normalization: an
    epsilon rule (C), unary rules (S -> B C with nullable C, B -> A), long
    right sides mixing terminals and nonterminals, and a nonterminal (D)
    that is not accessible from the start symbol.
    """

    S = Nonterminal('S')
    A = Nonterminal('A')
    B = Nonterminal('B')
    C = Nonterminal('C')
    D = Nonterminal('D')
    a = Terminal('a')
    b = Terminal('b')

    def __init__(self):
        S, A, B, C, D = self.S, self.A, self.B, self.C, self.D
        a, b = self.a, self.b
        super().__init__(
            start=S,
            rules=[
                Rule(S, (b, A)),
                Rule(S, (B, C)),
                Rule(A, (a,)),
                Rule(A, (a, S)),
                Rule(A, (b, C, a, C, a)),
                Rule(B, (A,)),
                Rule(B, (b, S)),
                Rule(B, (b, C, A, a)),
                Rule(C, ()),
                Rule(C, (A, B)),
                Rule(D, (A, B))
            ],
            nonterminals=[S, A, B, C, D],
            terminals=[a, b]
        )
