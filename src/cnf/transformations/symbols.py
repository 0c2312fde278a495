import logging

from ..formal_models.cfg import Nonterminal

logger = logging.getLogger(__name__)

class SymbolNamespaceCollision(ValueError):
    pass

class SymbolAllocator:
    """
    Mints the names of nonterminals introduced by the normalization
    pipeline, numbered ``<prefix>1``, ``<prefix>2``, ... from a single
    counter.

    One allocator belongs to one call of the pipeline, so independent
    normalizations never share a counter. A name that is already taken is
    never reused; asking for one raises SymbolNamespaceCollision.
    """

    def __init__(self, prefix='X'):
        super().__init__()
        if not prefix:
            raise ValueError('prefix cannot be empty')
        self.prefix = prefix
        self.counter = 0
        self.minted = []

    def fresh(self, taken):
        """
        Parameters
        ----------
        taken : set
            Names of the symbols already in the grammar.

        Returns
        -------
        cnf.formal_models.cfg.Nonterminal
        """
        self.counter += 1
        return self.named(f'{self.prefix}{self.counter}', taken)

    def named(self, value, taken):
        if value in taken or any(X.value == value for X in self.minted):
            raise SymbolNamespaceCollision(
                f'cannot introduce nonterminal {value!r}; the name is already '
                f'in use')
        result = Nonterminal(value)
        self.minted.append(result)
        logger.debug('introduced nonterminal %s', result)
        return result
