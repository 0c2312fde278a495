import logging

import more_itertools

from ..formal_models.cfg import Rule
from .symbols import SymbolAllocator

logger = logging.getLogger(__name__)

class ExpansionLimitExceeded(ValueError):
    pass

def nullable_nonterminals(grammar):
    """
    Compute the set of nonterminals that can derive the empty string.

    A nonterminal is nullable if it has a rule whose right side is empty or
    consists only of nullable nonterminals. The set is grown until a full
    pass over the rules adds nothing, which takes at most one pass per
    nonterminal.
    """
    nullable = set()
    changed = True
    while changed:
        changed = False
        for rule in grammar.rules:
            if rule.left not in nullable and all(X in nullable for X in rule.right):
                nullable.add(rule.left)
                changed = True
    return nullable

def remove_epsilon_rules(grammar, nullable=None, augment_start=False,
        allocator=None, max_nullable_positions=None):
    """
    Return an equivalent grammar without epsilon rules, except possibly for
    the start symbol.

    Every epsilon rule is dropped. Every other rule is kept, together with
    one copy for each non-empty subset of the positions of nullable
    nonterminals on its right side, with those positions deleted. Copies
    whose right side would become empty are skipped. A rule with k nullable
    positions therefore produces up to 2^k rules; use
    ``max_nullable_positions`` to reject grammars where that gets out of
    hand.

    The copies may duplicate rules that are already present.

    Parameters
    ----------
    grammar : cnf.formal_models.cfg.Grammar
    nullable : set, optional
        The nullable nonterminals, if they have already been computed.
    augment_start : bool
        If true and the start symbol is nullable, keep the empty string in
        the language. If the start symbol appears on the right side of a
        rule, a new start symbol S0 is introduced with the rules S0 -> S and
        S0 -> ε; otherwise the rule S -> ε is kept as-is.
    allocator : SymbolAllocator, optional
        Used to name the new start symbol.
    max_nullable_positions : int, optional
        Raise ExpansionLimitExceeded if a rule has more nullable positions
        than this.

    Returns
    -------
    cnf.formal_models.cfg.Grammar
    """
    if nullable is None:
        nullable = nullable_nonterminals(grammar)
    logger.debug('nullable nonterminals: %s', ' '.join(map(str, sorted(nullable))))
    rules = []
    for rule in grammar.rules:
        if rule.is_epsilon:
            continue
        indexes = [i for i, X in enumerate(rule.right) if X in nullable]
        if max_nullable_positions is not None and len(indexes) > max_nullable_positions:
            raise ExpansionLimitExceeded(
                f'rule {rule} has {len(indexes)} nullable positions, more than '
                f'the limit of {max_nullable_positions}')
        for right in _nullable_expansions(rule.right, indexes):
            rules.append(Rule(rule.left, right))
        rules.append(rule)
    start = grammar.start
    nonterminals = list(grammar.nonterminals)
    if augment_start and start in nullable:
        if any(start in r.right for r in rules):
            if allocator is None:
                allocator = SymbolAllocator()
            new_start = allocator.named(f'{start.value}0', grammar.symbol_names)
            rules[:0] = [Rule(new_start, (start,)), Rule(new_start, ())]
            nonterminals.insert(0, new_start)
            start = new_start
        else:
            rules.insert(0, Rule(start, ()))
    return grammar.replaced(
        start=start,
        rules=rules,
        nonterminals=nonterminals
    )

def _nullable_expansions(right, indexes):
    # Every non-empty subset of the nullable positions is dropped once, smaller
    # subsets first.
    for removed in more_itertools.powerset(indexes):
        if removed:
            result = tuple(X for i, X in enumerate(right) if i not in removed)
            if result:
                yield result
