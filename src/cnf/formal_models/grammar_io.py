import json

from .cfg import Grammar, Rule, Nonterminal, Terminal, MalformedGrammar

EPSILON = 'ε'

def grammar_from_dict(data):
    """
    Build a grammar from its literal form.

    Parameters
    ----------
    data : dict
        A dict with the keys ``VN`` (list of nonterminal names), ``VT``
        (list of terminal names), ``P`` (list of ``[lhs, rhs]`` pairs, where
        ``rhs`` is a list of symbol names, or ``["ε"]`` for an empty body)
        and ``S`` (the name of the start symbol).

    Returns
    -------
    Grammar
    """
    try:
        nonterminal_names = data['VN']
        terminal_names = data['VT']
        production_literals = data['P']
        start_name = data['S']
    except (KeyError, TypeError) as e:
        raise MalformedGrammar(f'grammar literal is missing field {e}')
    _check_names(nonterminal_names, 'VN')
    _check_names(terminal_names, 'VT')
    if not isinstance(production_literals, list):
        raise MalformedGrammar('P must be a list of productions')
    if not isinstance(start_name, str):
        raise MalformedGrammar(f'S must be a symbol name, not {start_name!r}')
    if EPSILON in nonterminal_names or EPSILON in terminal_names:
        raise MalformedGrammar(f'{EPSILON} cannot be declared as a symbol')
    nonterminals = [Nonterminal(name) for name in nonterminal_names]
    terminals = [Terminal(name) for name in terminal_names]
    symbols = {X.value : X for X in terminals}
    symbols.update((X.value, X) for X in nonterminals)
    def get_symbol(name):
        try:
            return symbols[name]
        except KeyError:
            raise MalformedGrammar(f'symbol {name!r} is not declared')
    rules = []
    for literal in production_literals:
        try:
            lhs, rhs = literal
        except (TypeError, ValueError):
            raise MalformedGrammar(f'production {literal!r} is not an [lhs, rhs] pair')
        if not isinstance(lhs, str):
            raise MalformedGrammar(
                f'left side of production {literal!r} must be a symbol name')
        if not isinstance(rhs, list) or not rhs:
            raise MalformedGrammar(
                f'right side of production {literal!r} must be a non-empty list')
        _check_names(rhs, f'right side of production {literal!r}')
        left = get_symbol(lhs)
        if not left.is_nonterminal:
            raise MalformedGrammar(
                f'left side of production {literal!r} is not a nonterminal')
        if EPSILON in rhs:
            if len(rhs) != 1:
                raise MalformedGrammar(
                    f'{EPSILON} must be the only symbol in production {literal!r}')
            right = ()
        else:
            right = tuple(get_symbol(name) for name in rhs)
        rules.append(Rule(left, right))
    if start_name in symbols:
        start = symbols[start_name]
    elif not nonterminals and not rules:
        # The empty language has no declared nonterminals at all.
        start = Nonterminal(start_name)
    else:
        raise MalformedGrammar(f'start symbol {start_name!r} is not declared')
    if not start.is_nonterminal:
        raise MalformedGrammar(f'start symbol {start_name!r} is not a nonterminal')
    return Grammar(
        start=start,
        rules=rules,
        nonterminals=nonterminals,
        terminals=terminals
    )

def grammar_to_dict(grammar):
    return {
        'VN' : [X.value for X in grammar.nonterminals],
        'VT' : [a.value for a in grammar.terminals],
        'P' : [
            [r.left.value, [X.value for X in r.right] if r.right else [EPSILON]]
            for r in grammar.rules
        ],
        'S' : grammar.start.value
    }

def read_grammar(fin):
    return grammar_from_dict(json.load(fin))

def write_grammar(grammar, fout):
    json.dump(grammar_to_dict(grammar), fout, indent=1, ensure_ascii=False)
    fout.write('\n')

def _check_names(names, field):
    if not isinstance(names, list):
        raise MalformedGrammar(f'{field} must be a list of symbol names')
    for name in names:
        if not isinstance(name, str):
            raise MalformedGrammar(f'{field} contains {name!r}, which is not a symbol name')
