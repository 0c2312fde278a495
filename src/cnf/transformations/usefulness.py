import logging

logger = logging.getLogger(__name__)

def productive_nonterminals(grammar):
    """
    Compute the set of nonterminals that derive at least one string of
    terminals.
    """
    productive = set()
    changed = True
    while changed:
        changed = False
        for rule in grammar.rules:
            if rule.left not in productive and _is_productive_rule(rule, productive):
                productive.add(rule.left)
                changed = True
    return productive

def accessible_nonterminals(grammar):
    """
    Compute the set of nonterminals that appear in some sentential form
    derived from the start symbol.
    """
    if grammar.is_empty:
        return set()
    accessible = {grammar.start}
    changed = True
    while changed:
        changed = False
        for rule in grammar.rules:
            if rule.left in accessible:
                for X in rule.right:
                    if X.is_nonterminal and X not in accessible:
                        accessible.add(X)
                        changed = True
    return accessible

def remove_nonproductive_symbols(grammar):
    productive = productive_nonterminals(grammar)
    _log_removed('nonproductive', grammar, productive)
    return _restrict(
        grammar,
        productive,
        [
            r for r in grammar.rules
            if r.left in productive and _is_productive_rule(r, productive)
        ]
    )

def remove_inaccessible_symbols(grammar):
    accessible = accessible_nonterminals(grammar)
    _log_removed('inaccessible', grammar, accessible)
    return _restrict(
        grammar,
        accessible,
        [r for r in grammar.rules if r.left in accessible]
    )

def remove_useless_symbols(grammar):
    """
    Remove nonproductive nonterminals, and then nonterminals that are not
    accessible from the start symbol, together with every rule that
    mentions them. The terminals are never changed.

    The order matters: accessibility is computed on the rules that survive
    the first step.

    If the start symbol itself is removed, the result is the empty grammar,
    with no nonterminals and no rules.
    """
    return remove_inaccessible_symbols(remove_nonproductive_symbols(grammar))

def _is_productive_rule(rule, productive):
    return all(X.is_terminal or X in productive for X in rule.right)

def _restrict(grammar, kept, rules):
    if grammar.start not in kept:
        return grammar.replaced(rules=[], nonterminals=[])
    return grammar.replaced(
        rules=rules,
        nonterminals=[X for X in grammar.nonterminals if X in kept]
    )

def _log_removed(kind, grammar, kept):
    removed = [X for X in grammar.nonterminals if X not in kept]
    if removed:
        logger.debug('removing %s nonterminals: %s', kind, ' '.join(map(str, removed)))
