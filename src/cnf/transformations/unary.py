import logging

from ..util import dfs, group_by, unique

logger = logging.getLogger(__name__)

def unary_graph(grammar):
    """
    Map each nonterminal A to the nonterminals B such that A -> B is a rule,
    in rule order.
    """
    graph = { X : [] for X in grammar.nonterminals }
    for rule in grammar.rules:
        if rule.is_unary:
            B, = rule.right
            if B not in graph[rule.left]:
                graph[rule.left].append(B)
    return graph

def unary_closure(grammar):
    """
    Map each nonterminal A to the list of nonterminals reachable from A
    through one or more unary rules. A itself is only included if it lies
    on a cycle of unary rules.
    """
    graph = unary_graph(grammar)
    result = {}
    for A in grammar.nonterminals:
        result[A] = unique(
            C
            for B in graph[A]
            for C in dfs(B, graph.__getitem__)
        )
    return result

def remove_unary_rules(grammar):
    """
    Return an equivalent grammar without unary rules A -> B.

    All non-unary rules are kept. Then, for every nonterminal A and every
    nonterminal B reachable from A through unary rules, A receives a copy
    of each non-unary rule of B, unless A already has an identical rule.
    """
    closure = unary_closure(grammar)
    rules = [r for r in grammar.rules if not r.is_unary]
    rules_by_left = group_by(rules, key=lambda r: r.left)
    rule_set = set(rules)
    for A in grammar.nonterminals:
        for B in closure[A]:
            for rule in rules_by_left.get(B, ()):
                new_rule = rule.replaced(left=A)
                if new_rule not in rule_set:
                    rules.append(new_rule)
                    rule_set.add(new_rule)
        if closure[A]:
            logger.debug('unary closure of %s: %s', A, ' '.join(map(str, closure[A])))
    return grammar.replaced(rules=rules)
