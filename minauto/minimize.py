"""Minimize a DFA.

The algorithm is the one outlined in Aho and Ullman's "Principles of
Compiler Design": partition the states into accept and non-accept
states, refine the partition until every class has consistent
transitions, then build a new automaton with one state per class.
Classes are kept in a union-find forest (see `minauto.unionfind`).

```python
from minauto import automaton, minimize

dfa = automaton.Automaton([
    [1, 2],
    [1, 2],
    [1, 2]
], accept_states=[1], alphabet="ab")

small = minimize.minimize(dfa)
small.graph_dict
```
    {0: {'a': 0, 'b': 1}, 1: {'a': 0, 'b': 1}}

"""

from .automaton import Automaton
from .partition import PartitionRefiner
from .dead import find_dead_states
from . import trace as tr


def compress(automaton, groups, trace=None) -> Automaton:
    """Build the automaton whose states are the classes of a partition.

    Each class is represented by its representative state. New state
    numbers are handed out to representatives in increasing order of
    their old numbers, so the compressed automaton does not keep the
    original state names.

    Parameters
    ----------
    automaton : Automaton
        the automaton to compress
    groups : UnionFind
        a partition of the states of `automaton` in which all members
        of a class have the same transitions (up to the partition)
    trace : callable
        optional hook called with the old-to-new mapping of every
        representative.

    Returns
    -------
    Automaton
        the compressed automaton. Its attributes are fresh: no state is
        marked dead.

    """
    if len(groups) != automaton.state_count:
        raise ValueError(
            "Partition has {} elements but the automaton has {} states".format(
                len(groups), automaton.state_count)
        )

    rep = groups.representatives().tolist()
    new_state = {}
    for state in automaton.states():
        if rep[state] == state:
            new_state[state] = len(new_state)
            tr.emit(trace, tr.STATE_COMPRESSION, old_state=state,
                    new_state=new_state[state])

    transitions = []
    accept_states = []
    for old in new_state:
        row = []
        for symbol in range(automaton.alphabet_size):
            target = automaton.transition(old, symbol)
            row.append(None if target is None else new_state[rep[target]])
        transitions.append(row)

        if automaton.is_accept(old):
            accept_states.append(new_state[old])

    return Automaton(
        transitions,
        accept_states=accept_states,
        alphabet=automaton.alphabet,
        initial_state=new_state[rep[automaton.initial_state]],
        max_states=automaton.max_states,
        max_symbols=automaton.max_symbols
    )


def minimize(automaton, trace=None) -> Automaton:
    """Get a minimal automaton accepting the same language.

    The states of the result which are unreachable from its initial
    state, or cannot reach an accept state, are marked dead but not
    removed.

    Parameters
    ----------
    automaton : Automaton
        the automaton to minimize. It is not modified.
    trace : callable
        optional hook called at every checkpoint of the computation. See
        `minauto.trace` for the list of events.

    Returns
    -------
    Automaton
        the minimized automaton.

    """
    refiner = PartitionRefiner(automaton, trace=trace)
    refiner.init_partitions()
    refiner.refine()

    minimal = compress(automaton, refiner.groups, trace=trace)
    find_dead_states(minimal, trace=trace)

    return minimal
