"""Work with deterministic finite-state automata given by a transition
table.

A DFA here is a table with one row per state and one column per
alphabet symbol. The entry in row `i`, column `j` is the state the
automaton moves to from state `i` on symbol `j`, or `None` if there is
no such transition. One of the states is the "initial state;" a word
`w` is accepted if following `w` from the initial state ends at an
accept state.

This module provides the `Automaton` class:

```python
from minauto import automaton

dfa = automaton.Automaton([
    [1, 2],
    [1, 2],
    [1, 2]
], accept_states=[1], alphabet="ab")

# list all accepted words of length at most 2
list(dfa.enumerate_words(2))

```
    [('a',), ('a', 'a'), ('b', 'a')]

"""

import numbers
import warnings
from enum import Enum

import numpy as np

from .base import AutomatonError, CapacityError

MAX_STATES = 4096
MAX_SYMBOLS = 256

NO_TRANSITION = -1

SIMPLE_SYMBOL_NAMES = "abcdefghijklmnopqrstuvwxyz"


class StateAttribute(Enum):
    """Enumerate the liveness attributes a state can carry.

    The value of each member is the letter used for it when the
    automaton is printed.

    """
    ACCEPT = "A"
    DEAD = "D"
    NORMAL = "s"


def default_alphabet(size):
    if size <= len(SIMPLE_SYMBOL_NAMES):
        return tuple(SIMPLE_SYMBOL_NAMES[:size])
    return tuple("s{}".format(i) for i in range(size))


def check_capacity(state_count, alphabet_size,
                   max_states=MAX_STATES, max_symbols=MAX_SYMBOLS):
    """Check a state count and alphabet size against configured limits.

    Raises
    ------
    AutomatonError
        If either count is less than 1.
    CapacityError
        If either count exceeds its limit.

    """
    if state_count < 1:
        raise AutomatonError(
            "Nonsensible number of states ({})".format(state_count)
        )
    if state_count > max_states:
        raise CapacityError(
            "Number of states ({}) too large, raise max_states to at least {}".format(
                state_count, state_count)
        )
    if alphabet_size < 1:
        raise AutomatonError(
            "Nonsensible number of alphabet symbols ({})".format(alphabet_size)
        )
    if alphabet_size > max_symbols:
        raise CapacityError(
            "Number of alphabet symbols ({}) too large, raise max_symbols to"
            " at least {}".format(alphabet_size, alphabet_size)
        )


class Automaton:
    """Automaton: a deterministic finite-state automaton.

    The underlying data structure is a numpy integer array of shape
    `(state_count, alphabet_size)`. Missing transitions are stored as
    `NO_TRANSITION`.

    The transition table is fixed once the automaton is built. The
    only thing that can change afterwards is the per-state attribute,
    via `mark_dead`.

    """
    def __init__(self, transitions, accept_states=(), alphabet=None,
                 initial_state=0, max_states=MAX_STATES,
                 max_symbols=MAX_SYMBOLS):
        """

        Parameters
        ----------
        transitions : sequence of sequences
            transition table. `transitions[i][j]` is the target of
            state `i` on symbol `j`, or `None` (or any negative
            number) if there is no transition.

        accept_states : iterable of ints
            the accept states of the automaton.

        alphabet : iterable of strings
            labels for the alphabet symbols, in column order. If
            `None`, use `a`, `b`, `c`, ... (or `s0`, `s1`, ... for
            alphabets with more than 26 symbols).

        initial_state : int
            the initial state. Defaults to the first state.

        max_states, max_symbols : int
            sanity limits on the size of the automaton.

        Raises
        ------
        CapacityError
            if the automaton is larger than the given limits.
        AutomatonError
            if the transition data is inconsistent.

        """
        rows = [list(row) for row in transitions]
        state_count = len(rows)
        alphabet_size = len(rows[0]) if state_count > 0 else 0

        check_capacity(state_count, alphabet_size, max_states, max_symbols)

        for i, row in enumerate(rows):
            if len(row) != alphabet_size:
                raise AutomatonError(
                    "State {} has {} transitions, expected {}".format(
                        i, len(row), alphabet_size)
                )

        table = np.array(
            [[NO_TRANSITION if s is None else s for s in row]
             for row in rows]
        )
        if not np.issubdtype(table.dtype, np.integer):
            raise AutomatonError("Transition targets must be integers")

        table[table < 0] = NO_TRANSITION
        out_of_range = np.argwhere(table >= state_count)
        if len(out_of_range) > 0:
            i, j = out_of_range[0]
            raise AutomatonError(
                "State ({}) - out of range (transition from state {}"
                " on symbol {})".format(table[i, j], i, j)
            )

        table.flags.writeable = False
        self._table = table

        if alphabet is None:
            alphabet = default_alphabet(alphabet_size)
        alphabet = tuple(alphabet)
        if len(alphabet) != alphabet_size:
            raise AutomatonError(
                "Alphabet has {} symbols but the table has {} columns".format(
                    len(alphabet), alphabet_size)
            )
        if len(set(alphabet)) != alphabet_size:
            raise AutomatonError("Alphabet symbols must be distinct")
        self._alphabet = alphabet
        self._symbol_index = {label: j for j, label in enumerate(alphabet)}

        if not 0 <= initial_state < state_count:
            raise AutomatonError(
                "Initial state ({}) - out of range".format(initial_state)
            )
        self._initial_state = int(initial_state)

        self._max_states = max_states
        self._max_symbols = max_symbols

        accept = []
        for s in accept_states:
            if not isinstance(s, numbers.Integral):
                raise AutomatonError(
                    "Accept state ({!r}) - not an integer".format(s)
                )
            if not 0 <= s < state_count:
                raise AutomatonError(
                    "Accept state ({}) - out of range".format(s)
                )
            if s in accept:
                warnings.warn(
                    "Accept state {} listed more than once".format(s)
                )
                continue
            accept.append(int(s))
        self._accept_states = tuple(sorted(accept))

        self._accepting = [False] * state_count
        for s in self._accept_states:
            self._accepting[s] = True
        self._dead = [False] * state_count

    @classmethod
    def from_graph_dict(cls, graph_dict, accept_states=(), alphabet=None,
                        initial_state=0, **kwargs):
        """Build an automaton from a python dictionary of the form:

        ```
        {
          state1: {label_a: target_a, label_b: target_b, ...},
          state2: ....,
        }
        ```

        States must be the integers `0, ..., N-1`. Labels missing
        from a state's dictionary are missing transitions.

        Parameters
        ----------
        graph_dict : dict
            the transitions of the automaton.
        alphabet : iterable of strings
            column order of the labels. If `None`, use the labels
            appearing in `graph_dict`, sorted.

        """
        if alphabet is None:
            alphabet = sorted({label for neighbors in graph_dict.values()
                               for label in neighbors})

        state_count = max(graph_dict) + 1 if graph_dict else 0
        transitions = [
            [graph_dict.get(state, {}).get(label) for label in alphabet]
            for state in range(state_count)
        ]
        return cls(transitions, accept_states, alphabet,
                   initial_state, **kwargs)

    def __str__(self):
        return "Automaton with {} states over {}:\n{}".format(
            self.state_count, self._alphabet, self._table.__str__())

    def __repr__(self):
        return "Automaton({}, accept_states={})".format(
            self.graph_dict.__repr__(), list(self._accept_states))

    @property
    def state_count(self):
        return self._table.shape[0]

    @property
    def alphabet_size(self):
        return self._table.shape[1]

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def initial_state(self):
        return self._initial_state

    @property
    def accept_states(self):
        return self._accept_states

    @property
    def table(self):
        """Read-only view of the transition table, with missing
        transitions given as `NO_TRANSITION`.

        """
        return self._table

    @property
    def max_states(self):
        return self._max_states

    @property
    def max_symbols(self):
        return self._max_symbols

    @property
    def graph_dict(self):
        """Dictionary `{state: {label: target}}` describing the
        transitions of the automaton.

        """
        return {
            state: {label: int(target)
                    for label, target in zip(self._alphabet, row)
                    if target != NO_TRANSITION}
            for state, row in enumerate(self._table)
        }

    def states(self):
        return range(self.state_count)

    def transition(self, state, symbol):
        """Get the target of a transition.

        Parameters
        ----------
        state : int
            source state
        symbol : int
            column index of the alphabet symbol

        Returns
        -------
        int or None
            The target state, or `None` if there is no transition.

        """
        target = self._table[state, symbol]
        if target == NO_TRANSITION:
            return None
        return int(target)

    def symbol_index(self, label):
        try:
            return self._symbol_index[label]
        except KeyError:
            raise AutomatonError(
                "'{}' is not a symbol of this automaton's alphabet".format(label)
            )

    def attribute(self, state):
        """Get the liveness attribute of a state. A dead state is
        reported as dead even if it is an accept state.

        """
        if self._dead[state]:
            return StateAttribute.DEAD
        if self._accepting[state]:
            return StateAttribute.ACCEPT
        return StateAttribute.NORMAL

    def attributes(self):
        return [self.attribute(s) for s in self.states()]

    def is_accept(self, state):
        return self._accepting[state]

    def is_dead(self, state):
        return self._dead[state]

    def mark_dead(self, state):
        self._dead[state] = True

    def live_states(self):
        return [s for s in self.states() if not self.is_dead(s)]

    def is_empty(self):
        """Return `True` if every state is marked dead, i.e. the
        automaton (as analyzed) accepts the empty language.

        """
        return all(self.is_dead(s) for s in self.states())

    def follow_word(self, word, start_state=None):
        """Find the final state of the automaton when it reads a word.

        Parameters
        ----------
        word : iterable
            sequence of alphabet labels (a string works when every
            label is a single character).

        start_state : int
            The start state for the automaton. If `None` (the
            default), use the automaton's initial state.

        Returns
        -------
        int
            The state of the automaton after reading `word`.

        Raises
        ------
        AutomatonError
            Raised if the automaton has no transition for some
            letter of the word, or a letter is not in the alphabet.

        """
        if start_state is None:
            start_state = self._initial_state
        state = start_state

        for letter in word:
            target = self._table[state, self.symbol_index(letter)]
            if target == NO_TRANSITION:
                raise AutomatonError(
                    "The automaton has no transition from state {} on"
                    " '{}'".format(state, letter)
                )
            state = int(target)

        return state

    def accepts(self, word, start_state=None):
        """Determine if this automaton accepts a given word.

        Returns
        -------
        bool
            True if reading `word` ends at an accept state, False
            otherwise (including when the automaton gets stuck).

        """
        try:
            state = self.follow_word(word, start_state)
        except AutomatonError:
            return False

        return self._accepting[state]

    def enumerate_fixed_length_paths(self, length, start_state=None,
                                     with_states=False):
        """Enumerate all words of a fixed length which can be read by the
        automaton without getting stuck, starting at a given state.

        Parameters
        ----------
        length : int
            the length of the words we want to enumerate

        start_state : int
            which state to start at. If `None`, use the initial state.

        with_states : bool
            if `True`, also yield the state of the automaton after
            each word.

        Yields
        ------
        tuple or (tuple, int)
            words as tuples of alphabet labels, or pairs of the form
            `(word, end_state)` if `with_states` is true.
        """
        if start_state is None:
            start_state = self._initial_state

        if length <= 0:
            if with_states:
                yield ((), start_state)
            else:
                yield ()
        else:
            for word, state in self.enumerate_fixed_length_paths(
                    length - 1, start_state=start_state, with_states=True):
                for label, target in zip(self._alphabet, self._table[state]):
                    if target == NO_TRANSITION:
                        continue
                    if with_states:
                        yield (word + (label,), int(target))
                    else:
                        yield word + (label,)

    def enumerate_words(self, max_length, start_state=None):
        """Enumerate all words up to a given length accepted by the
        automaton, shortest first.

        Parameters
        ----------
        max_length : int
            maximum length of a word to enumerate
        start_state : int
            the start state for accepting words. If `None`, use the
            automaton's initial state

        Yields
        ------
        tuple
            accepted words, as tuples of alphabet labels

        """
        for i in range(max_length + 1):
            for word, state in self.enumerate_fixed_length_paths(
                    i, start_state=start_state, with_states=True):
                if self._accepting[state]:
                    yield word
