import argparse
import json
import logging
import pathlib
import sys

from cnf.formal_models.cfg import MalformedGrammar
from cnf.formal_models.grammar_io import read_grammar, write_grammar
from cnf.grammars.worked_example import WorkedExampleGrammar
from cnf.logging import FileLogger, NullLogger
from cnf.transformations.epsilon import ExpansionLimitExceeded
from cnf.transformations.symbols import SymbolNamespaceCollision
from cnf.transformations.pipeline import (
    NormalizationConfig, EmptyGrammarAfterPruning, normalize)

def add_normalization_arguments(parser):
    group = parser.add_argument_group('Normalization options')
    group.add_argument('--augment-start', action='store_true', default=False,
        help='If the start symbol derives the empty string, keep the empty '
             'string in the language by adding a new start symbol S0 with '
             'the rules S0 -> S and S0 -> ε.')
    group.add_argument('--no-deduplicate', dest='deduplicate',
        action='store_false', default=True,
        help='Keep repeated rules in the output.')
    group.add_argument('--fresh-prefix', default='X',
        help='Prefix of the names of the nonterminals introduced during '
             'binarization. Default is X.')
    group.add_argument('--max-nullable-positions', type=int,
        help='Fail if a rule has more than this many nullable nonterminals '
             'on its right side. The epsilon phase creates up to 2^k rules '
             'for a rule with k nullable positions.')
    group.add_argument('--fail-on-empty', dest='allow_empty',
        action='store_false', default=True,
        help='Exit with an error if the grammar generates no strings.')

def parse_normalization_config(args):
    return NormalizationConfig(
        augment_start=args.augment_start,
        deduplicate=args.deduplicate,
        fresh_prefix=args.fresh_prefix,
        max_nullable_positions=args.max_nullable_positions,
        allow_empty=args.allow_empty
    )

def main(argv=None):

    logger = logging.getLogger('main')
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.setLevel(logging.INFO)

    parser = argparse.ArgumentParser(
        description=
        'Convert a context-free grammar to Chomsky normal form. The grammar '
        'is read from a JSON file with the fields VN, VT, P, and S. If no '
        'input file is given, a built-in example grammar is used.'
    )
    parser.add_argument('--input', type=pathlib.Path,
        help='Input grammar in JSON format.')
    parser.add_argument('--output', type=pathlib.Path,
        help='Output file for the normalized grammar in JSON format.')
    parser.add_argument('--log', type=pathlib.Path,
        help='Optional file where events for each phase will be written.')
    add_normalization_arguments(parser)
    args = parser.parse_args(argv)

    if args.input is not None:
        logger.info(f'reading grammar from {args.input}')
        with args.input.open(encoding='utf-8') as fin:
            try:
                grammar = read_grammar(fin)
            except (json.JSONDecodeError, MalformedGrammar) as e:
                parser.error(f'invalid grammar in {args.input}: {e}')
    else:
        logger.info('using the built-in example grammar')
        grammar = WorkedExampleGrammar()
    config = parse_normalization_config(args)
    logger.info(f'input: {len(grammar.nonterminals)} nonterminals, {len(grammar.rules)} rules')

    if args.log is not None:
        log_file = args.log.open('w', encoding='utf-8')
        event_logger = FileLogger(log_file, flush=True)
    else:
        log_file = None
        event_logger = NullLogger()
    try:
        result = normalize(grammar, config, event_logger)
    except (
        EmptyGrammarAfterPruning,
        ExpansionLimitExceeded,
        SymbolNamespaceCollision
    ) as e:
        parser.error(str(e))
    finally:
        if log_file is not None:
            log_file.close()

    logger.info(f'output: {len(result.nonterminals)} nonterminals, {len(result.rules)} rules')
    write_grammar(result, sys.stdout)
    if args.output is not None:
        with args.output.open('w', encoding='utf-8') as fout:
            write_grammar(result, fout)
        logger.info(f'wrote {args.output}')

if __name__ == '__main__':
    main()
