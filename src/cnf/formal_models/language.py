def strings_up_to_length(grammar, max_length):
    """
    Enumerate every string of terminals that a grammar generates, up to a
    maximum length.

    The sets of strings generated by each nonterminal are grown together
    until none of them changes. Since only finitely many strings are no
    longer than ``max_length``, this terminates even for grammars with
    epsilon rules, cycles of unary rules, or left recursion.

    Parameters
    ----------
    grammar : cnf.formal_models.cfg.Grammar
    max_length : int

    Returns
    -------
    set
        A set of tuples of terminal values.
    """
    if max_length < 0:
        raise ValueError('max_length cannot be negative')
    if grammar.is_empty:
        return set()
    strings = { X : set() for X in grammar.nonterminals }
    changed = True
    while changed:
        changed = False
        for rule in grammar.rules:
            generated = strings[rule.left]
            for s in _concatenations(rule.right, strings, max_length):
                if s not in generated:
                    generated.add(s)
                    changed = True
    return set(strings[grammar.start])

def _concatenations(right, strings, max_length):
    prefixes = {()}
    for X in right:
        if X.is_terminal:
            suffixes = [(X.value,)]
        else:
            suffixes = strings[X]
        prefixes = {
            p + s
            for p in prefixes
            for s in suffixes
            if len(p) + len(s) <= max_length
        }
        if not prefixes:
            break
    return prefixes
