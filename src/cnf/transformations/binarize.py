import logging

from ..formal_models.cfg import Rule
from .symbols import SymbolAllocator

logger = logging.getLogger(__name__)

def binarize(grammar, allocator=None):
    """
    Put a grammar without epsilon rules or unary rules into Chomsky normal
    form.

    Rules of the form A -> a are kept. In every other rule, each terminal a
    is replaced by a nonterminal X with the rule X -> a; the same X is used
    for every occurrence of a. Then, while a right side has more than two
    symbols, its first two symbols are replaced by a new nonterminal that
    derives them.

    An epsilon rule is only accepted for the start symbol, and is kept
    unchanged.

    Parameters
    ----------
    grammar : cnf.formal_models.cfg.Grammar
    allocator : SymbolAllocator, optional
        Names the new nonterminals.

    Returns
    -------
    cnf.formal_models.cfg.Grammar
    """
    if allocator is None:
        allocator = SymbolAllocator()
    taken = grammar.symbol_names
    nonterminals = list(grammar.nonterminals)
    rules = []
    preterminals = {}

    def new_nonterminal():
        X = allocator.fresh(taken)
        nonterminals.append(X)
        return X

    def get_preterminal(a):
        X = preterminals.get(a)
        if X is None:
            X = new_nonterminal()
            rules.append(Rule(X, (a,)))
            preterminals[a] = X
        return X

    for rule in grammar.rules:
        if rule.is_lexical or (rule.is_epsilon and rule.left == grammar.start):
            rules.append(rule)
        elif rule.is_epsilon or rule.is_unary:
            raise ValueError(
                f'grammar may not contain epsilon rules or unary rules: {rule}')
        else:
            right = [get_preterminal(X) if X.is_terminal else X for X in rule.right]
            while len(right) > 2:
                X = new_nonterminal()
                rules.append(Rule(X, right[:2]))
                right[:2] = [X]
            rules.append(Rule(rule.left, right))
    logger.debug(
        'binarization introduced %d nonterminals',
        len(nonterminals) - len(grammar.nonterminals))
    return grammar.replaced(rules=rules, nonterminals=nonterminals)
