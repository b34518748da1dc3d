"""Minimize DFAs from the command line.

Usage:

    python -m minauto [dfa_1 ... dfa_N]

Each argument is a file holding a DFA transition table (see
`minauto.table_parse`). With no arguments, the table is read from
standard input. For every table, the original and the minimized DFA are
printed.

"""

import argparse
import logging
import sys

from .automaton import MAX_STATES, MAX_SYMBOLS
from .base import AutomatonError
from .minimize import minimize
from .table_format import format_automaton
from .table_parse import parse_table
from .trace import logging_tracer

logger = logging.getLogger("minauto")

ORIGINAL_BANNER = "\n------- Original  DFA -------\n"
MINIMIZED_BANNER = "\n\n------- Minimized DFA -------\n"


def process_text(text, out, max_states=MAX_STATES,
                 max_symbols=MAX_SYMBOLS, trace=None):
    dfa = parse_table(text, max_states=max_states, max_symbols=max_symbols)
    logger.info("Read DFA with %d states over %d symbols",
                dfa.state_count, dfa.alphabet_size)

    out.write(ORIGINAL_BANNER + "\n")
    out.write(format_automaton(dfa))

    minimal = minimize(dfa, trace=trace)
    logger.info("Minimized to %d states, %d live",
                minimal.state_count, len(minimal.live_states()))

    out.write(MINIMIZED_BANNER + "\n")
    out.write(format_automaton(minimal))


def process_file(filename, out, **kwargs):
    """Minimize the DFA in one file and print the result.

    Parameters
    ----------
    filename : string or None
        file to read. If `None`, read standard input.

    Returns
    -------
    bool
        `True` on success. Failures are logged, not raised.

    """
    name = filename if filename is not None else "<stdin>"
    try:
        if filename is None:
            text = sys.stdin.read()
        else:
            with open(filename, 'r', encoding='utf-8') as table_file:
                text = table_file.read()
    except OSError as e:
        logger.error("%s: %s", name, e.strerror or e)
        return False
    except UnicodeDecodeError as e:
        logger.error("%s: not a text file (%s)", name, e.reason)
        return False

    try:
        process_text(text, out, **kwargs)
    except AutomatonError as e:
        logger.error("%s: %s", name, e)
        return False

    return True


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minauto",
        description="Minimize deterministic finite automata given as"
        " transition tables."
    )
    parser.add_argument(
        "files", nargs="*",
        help="DFA description files (default: read standard input)"
    )
    parser.add_argument(
        "--max-states", type=int, default=MAX_STATES,
        help="Largest number of states accepted (default: %(default)s)"
    )
    parser.add_argument(
        "--max-symbols", type=int, default=MAX_SYMBOLS,
        help="Largest alphabet size accepted (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING). DEBUG traces every"
        " step of the minimization."
    )
    return parser


def main(argv=None, out=None):
    args = build_parser().parse_args(argv)
    if out is None:
        out = sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    trace = None
    if logger.isEnabledFor(logging.DEBUG):
        trace = logging_tracer(logger)

    filenames = args.files or [None]
    ok = True
    for filename in filenames:
        ok = process_file(filename, out,
                          max_states=args.max_states,
                          max_symbols=args.max_symbols,
                          trace=trace) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
