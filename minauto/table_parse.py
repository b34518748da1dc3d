"""table_parse.py: read DFAs written as plain-text transition tables.

The expected format is:

```
NSTATES NAB
L1 L2 ... Ln
S S ... S
.
.
.
S S ... S
A1 A2 ... Am
```

where `NSTATES` is the number of states, `NAB` the number of alphabet
symbols, `L1 ... Ln` are the symbols (single non-white characters),
followed by `NSTATES` rows of `NAB` states each (the transition table,
with `-1` for a missing transition), and finally the list of accept
states, up to the end of the input. States are numbered from 0 and
state 0 is the initial state. Any amount of whitespace can separate
the tokens.

"""

import re
from importlib import resources

from .automaton import Automaton, MAX_STATES, MAX_SYMBOLS, check_capacity
from .base import AutomatonError

WHITESPACE = " \n\t\r\f\v"
MAX_ERRLEN = 40

BUILTIN_DIR = "builtin"
TABLE_SUFFIX = ".dfa"

INTEGER = re.compile(r"[+-]?\d+")


class TableInputException(AutomatonError):
    pass


def _skip_whitespace(text, i):
    while i < len(text) and text[i] in WHITESPACE:
        i += 1
    return i


def _read_int(text, i, what):
    i = _skip_whitespace(text, i)
    match = INTEGER.match(text, i)
    if not match:
        if i >= len(text):
            raise TableInputException(
                "Unexpected end of input while reading {}".format(what))
        raise TableInputException(
            "Bad input while reading {}: '{}'".format(
                what, text[i:i + MAX_ERRLEN]))
    return int(match.group()), match.end()


def parse_table(text, max_states=MAX_STATES, max_symbols=MAX_SYMBOLS):
    """Build an automaton from a transition table in text form.

    Parameters
    ----------
    text : string
        the table, in the format described in this module's
        docstring.

    max_states, max_symbols : int
        sanity limits on the size of the automaton.

    Returns
    -------
    Automaton
        the automaton described by the table.

    Raises
    ------
    TableInputException
        if the text is not a well-formed table.
    CapacityError
        if the table is larger than the given limits.

    """
    i = _skip_whitespace(text, 0)
    if i >= len(text):
        raise TableInputException(
            "Input must begin with no_of_states alphabet_size")

    nstates, i = _read_int(text, i, "the number of states")
    nab, i = _read_int(text, i, "the alphabet size")

    if nstates < 1:
        raise TableInputException(
            "Nonsensible number of states ({})".format(nstates))
    if nab < 1:
        raise TableInputException(
            "Nonsensible number of alphabet symbols ({})".format(nab))
    check_capacity(nstates, nab, max_states, max_symbols)

    alphabet = []
    for _ in range(nab):
        i = _skip_whitespace(text, i)
        if i >= len(text):
            raise TableInputException("Bad input while reading alphabet")
        alphabet.append(text[i])
        i += 1

    if len(set(alphabet)) != nab:
        raise TableInputException(
            "Alphabet symbols must be distinct: {}".format(" ".join(alphabet)))

    transitions = []
    for state in range(nstates):
        row = []
        for _ in range(nab):
            target, i = _read_int(text, i, "states")
            if target >= nstates:
                raise TableInputException(
                    "State ({}) - out of range".format(target))
            row.append(target if target >= 0 else None)
        transitions.append(row)

    accept_states = []
    i = _skip_whitespace(text, i)
    while i < len(text):
        s, i = _read_int(text, i, "accept states")
        if s < 0 or s >= nstates:
            raise TableInputException(
                "Accept state ({}) - out of range".format(s))
        accept_states.append(s)
        i = _skip_whitespace(text, i)

    return Automaton(transitions, accept_states, alphabet,
                     max_states=max_states, max_symbols=max_symbols)


def load_table_file(filename, **kwargs):
    """Build an automaton from a file containing a transition table.

    Keyword arguments are passed on to `parse_table`.

    """
    with open(filename, 'r') as table_file:
        return parse_table(table_file.read(), **kwargs)


def load_builtin(filename, **kwargs):
    """Load one of the example transition tables shipped with this
    package.

    Parameters
    ----------
    filename : string
        Name of the table file to load

    Returns
    -------
    Automaton
        automaton read from this file

    """
    table = resources.files(__package__).joinpath(BUILTIN_DIR).joinpath(filename)
    return parse_table(table.read_text(encoding="utf-8"), **kwargs)


def list_builtins():
    """Return a sorted list of the example tables included with this
    package.

    """
    builtin_dir = resources.files(__package__).joinpath(BUILTIN_DIR)
    return sorted(entry.name for entry in builtin_dir.iterdir()
                  if entry.name.endswith(TABLE_SUFFIX))
