class Symbol:

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return 'Symbol(%r)' % (self.value,)

    def __eq__(self, other):
        return type(self) == type(other) and self.value == other.value

    def __hash__(self):
        return hash((self.value, type(self)))

    def __lt__(self, other):
        if not isinstance(other, Symbol):
            raise TypeError
        return (self.is_terminal, self.value) < (other.is_terminal, other.value)

    @property
    def is_terminal(self):
        raise NotImplementedError

    @property
    def is_nonterminal(self):
        raise NotImplementedError

class Terminal(Symbol):

    def __repr__(self):
        return 'Terminal(%r)' % (self.value,)

    @property
    def is_terminal(self):
        return True

    @property
    def is_nonterminal(self):
        return False

class Nonterminal(Symbol):

    def __repr__(self):
        return 'Nonterminal(%r)' % (self.value,)

    @property
    def is_terminal(self):
        return False

    @property
    def is_nonterminal(self):
        return True

class MalformedGrammar(ValueError):
    pass

class Rule:

    def __init__(self, left, right):
        if not isinstance(left, Nonterminal):
            raise TypeError('left side must be a nonterminal')
        if not isinstance(right, tuple):
            right = tuple(right)
        for x in right:
            if not isinstance(x, Symbol):
                raise TypeError('right side must be a sequence of symbols')
        self.left = left
        self.right = right

    @property
    def is_epsilon(self):
        return len(self.right) == 0

    @property
    def is_unary(self):
        return len(self.right) == 1 and self.right[0].is_nonterminal

    @property
    def is_lexical(self):
        return len(self.right) == 1 and self.right[0].is_terminal

    @property
    def is_binary(self):
        return len(self.right) == 2 and all(X.is_nonterminal for X in self.right)

    def replaced(self, **kwargs):
        _kwargs = self._get_kwargs()
        _kwargs.update(kwargs)
        return type(self)(**_kwargs)

    def _get_kwargs(self):
        return dict(left=self.left, right=self.right)

    def _key(self):
        return (self.left, self.right)

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        return type(self) == type(other) and self._key() == other._key()

    def __str__(self):
        return '%s -> %s' % (
            self.left,
            ' '.join(map(str, self.right)) if self.right else 'ε'
        )

    def __repr__(self):
        return 'Rule(%r, %r)' % (self.left, self.right)

class Grammar:
    """
    A context-free grammar with a declared start symbol, an ordered list of
    rules, and ordered lists of nonterminals and terminals.

    If the symbol lists are not given, they are inferred from the rules in
    order of first appearance. Every grammar is validated on construction,
    so no grammar that violates the invariants below can exist:

    * no symbol name is both a nonterminal and a terminal
    * the left side of every rule is a declared nonterminal
    * every symbol on the right side of a rule is declared
    * the start symbol is a declared nonterminal

    The grammar with no nonterminals and no rules is allowed; it generates
    the empty language.
    """

    rule_type = Rule

    def __init__(self, start, rules, nonterminals=None, terminals=None):
        if not isinstance(start, Nonterminal):
            raise TypeError('start symbol must be a nonterminal')
        rules = list(rules)
        for rule in rules:
            if not isinstance(rule, self.rule_type):
                raise TypeError('rules must be instances of %s' % self.rule_type)
        if nonterminals is None or terminals is None:
            inferred_nonterminals, inferred_terminals = _infer_symbols(start, rules)
            if nonterminals is None:
                nonterminals = inferred_nonterminals
            if terminals is None:
                terminals = inferred_terminals
        self.start = start
        self.rules = rules
        self.nonterminals = _as_symbol_list(nonterminals, Nonterminal, 'nonterminals')
        self.terminals = _as_symbol_list(terminals, Terminal, 'terminals')
        self._validate()

    def _validate(self):
        nonterminal_set = set(self.nonterminals)
        terminal_set = set(self.terminals)
        shared = (
            {X.value for X in nonterminal_set} &
            {a.value for a in terminal_set}
        )
        if shared:
            raise MalformedGrammar(
                f'symbols declared as both nonterminal and terminal: '
                f'{", ".join(sorted(map(str, shared)))}')
        if self.is_empty:
            return
        if self.start not in nonterminal_set:
            raise MalformedGrammar(
                f'start symbol {self.start} is not a declared nonterminal')
        for rule in self.rules:
            if rule.left not in nonterminal_set:
                raise MalformedGrammar(
                    f'left side of rule {rule} is not a declared nonterminal')
            for X in rule.right:
                if X not in (terminal_set if X.is_terminal else nonterminal_set):
                    raise MalformedGrammar(
                        f'symbol {X} in rule {rule} is not declared')

    @property
    def is_empty(self):
        return not self.nonterminals and not self.rules

    @property
    def symbol_names(self):
        return (
            {X.value for X in self.nonterminals} |
            {a.value for a in self.terminals}
        )

    @property
    def has_epsilon_rules(self):
        return any(r.is_epsilon for r in self.rules)

    @property
    def has_unary_rules(self):
        return any(r.is_unary for r in self.rules)

    @property
    def is_in_cnf(self):
        # An epsilon rule is only allowed for a start symbol that does not
        # appear on the right side of any rule.
        start_on_right = any(self.start in r.right for r in self.rules)
        return all(
            r.is_lexical or
            r.is_binary or
            (r.is_epsilon and r.left == self.start and not start_on_right)
            for r in self.rules
        )

    def replaced(self, **kwargs):
        _kwargs = dict(
            start=self.start,
            rules=self.rules,
            nonterminals=self.nonterminals,
            terminals=self.terminals
        )
        _kwargs.update(kwargs)
        # Subclasses may define their own constructors, so build a plain
        # Grammar.
        return Grammar(**_kwargs)

    def _key(self):
        return (
            self.start,
            tuple(self.rules),
            tuple(self.nonterminals),
            tuple(self.terminals)
        )

    def __eq__(self, other):
        return isinstance(other, Grammar) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return '\n'.join(map(str, self.rules))

    def __repr__(self):
        return 'Grammar(%r, %r, %r, %r)' % (
            self.start, self.rules, self.nonterminals, self.terminals)

def _infer_symbols(start, rules):
    nonterminals = {start : None}
    terminals = {}
    for rule in rules:
        nonterminals[rule.left] = None
        for X in rule.right:
            (terminals if X.is_terminal else nonterminals)[X] = None
    return list(nonterminals), list(terminals)

def _as_symbol_list(symbols, symbol_type, name):
    result = []
    seen = set()
    for X in symbols:
        if not isinstance(X, symbol_type):
            raise TypeError(f'{name} must be instances of {symbol_type.__name__}')
        if X in seen:
            raise MalformedGrammar(f'{name} contain {X} more than once')
        seen.add(X)
        result.append(X)
    return result
