import logging

import attr

from ..logging import NullLogger
from ..util import unique
from .symbols import SymbolAllocator
from .epsilon import nullable_nonterminals, remove_epsilon_rules
from .unary import remove_unary_rules
from .usefulness import remove_useless_symbols
from .binarize import binarize

logger = logging.getLogger(__name__)

class EmptyGrammarAfterPruning(ValueError):
    pass

@attr.s
class NormalizationConfig:
    # Keep the empty string in the language with an augmented start symbol.
    augment_start = attr.ib(default=False)
    # Drop repeated rules after the epsilon phase and in the result.
    deduplicate = attr.ib(default=True)
    fresh_prefix = attr.ib(default='X')
    max_nullable_positions = attr.ib(default=None)
    # If false, raise EmptyGrammarAfterPruning instead of returning the
    # empty grammar.
    allow_empty = attr.ib(default=True)

def normalize(grammar, config=None, event_logger=None):
    """
    Convert a context-free grammar to Chomsky normal form.

    The phases always run in the same order: epsilon rules, unary rules,
    useless symbols, and binarization. The result generates the same
    non-empty strings as the input. The empty string is only kept if
    ``config.augment_start`` is set.

    Parameters
    ----------
    grammar : cnf.formal_models.cfg.Grammar
    config : NormalizationConfig, optional
    event_logger : cnf.logging.Logger, optional
        Receives a ``start`` event, one ``phase`` event per phase, and a
        ``done`` event, each with the size of the grammar at that point.

    Returns
    -------
    cnf.formal_models.cfg.Grammar
        A grammar in Chomsky normal form. If the start symbol generates no
        strings, this is the empty grammar.
    """
    if config is None:
        config = NormalizationConfig()
    if event_logger is None:
        event_logger = NullLogger()
    # Validate again, in case the rule list was modified after construction.
    grammar = grammar.replaced()
    allocator = SymbolAllocator(config.fresh_prefix)
    event_logger.log_grammar('start', grammar)

    nullable = nullable_nonterminals(grammar)
    grammar = remove_epsilon_rules(
        grammar,
        nullable=nullable,
        augment_start=config.augment_start,
        allocator=allocator,
        max_nullable_positions=config.max_nullable_positions
    )
    if config.deduplicate:
        grammar = remove_duplicate_rules(grammar)
    event_logger.log_grammar('phase', grammar, phase='epsilon',
        nullable=[str(X) for X in sorted(nullable)])

    grammar = remove_unary_rules(grammar)
    event_logger.log_grammar('phase', grammar, phase='unary')

    grammar = remove_useless_symbols(grammar)
    event_logger.log_grammar('phase', grammar, phase='useless')
    if grammar.is_empty:
        logger.warning(
            'the start symbol %s does not generate any strings; the language '
            'is empty', grammar.start)
        event_logger.log('empty_language', { 'start' : str(grammar.start) })
        if not config.allow_empty:
            raise EmptyGrammarAfterPruning(
                f'the start symbol {grammar.start} does not generate any strings')

    grammar = binarize(grammar, allocator)
    if config.deduplicate:
        grammar = remove_duplicate_rules(grammar)
    event_logger.log_grammar('phase', grammar, phase='binarize',
        new_nonterminals=[str(X) for X in allocator.minted])

    event_logger.log_grammar('done', grammar)
    return grammar

def remove_duplicate_rules(grammar):
    return grammar.replaced(rules=unique(grammar.rules))
