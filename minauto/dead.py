"""Find the dead states of a DFA.

A state is dead if it is unreachable from the initial state, or if no
accept state can be reached from it. Both conditions are read off the
transitive closure of the transition graph, computed with Warshall's
algorithm.

"""

import numpy as np

from . import trace as tr


def reachability_matrix(automaton):
    """Compute which states can reach which.

    Parameters
    ----------
    automaton : Automaton
        the automaton to analyze

    Returns
    -------
    ndarray
        boolean array of shape `(N, N)` whose entry `[i, j]` is `True`
        iff state `j` can be reached from state `i` in zero or more
        steps.

    """
    n = automaton.state_count
    connected = np.eye(n, dtype=bool)

    sources, _ = np.nonzero(automaton.table >= 0)
    targets = automaton.table[automaton.table >= 0]
    connected[sources, targets] = True

    for i in range(n):
        # every state reaching i reaches everything i reaches
        connected[connected[:, i]] |= connected[i]

    return connected


def find_dead_states(automaton, trace=None):
    """Mark the dead states of an automaton.

    States not reachable from the initial state are marked first (accept
    states included); then every remaining state which is neither an
    accept state nor able to reach one. States are marked in place and
    never removed.

    Parameters
    ----------
    automaton : Automaton
        the automaton to analyze. Its state attributes are modified.
    trace : callable
        optional hook called for every state marked dead.

    Returns
    -------
    list of ints
        the states marked dead by this call, in ascending order.

    """
    connected = reachability_matrix(automaton)
    accept = list(automaton.accept_states)
    dead = []

    for state in automaton.states():
        if automaton.is_dead(state):
            continue
        if not connected[automaton.initial_state, state]:
            automaton.mark_dead(state)
            dead.append(state)
            tr.emit(trace, tr.DEAD_STATE, state=state,
                    reason=tr.UNREACHABLE)

    for state in automaton.states():
        if automaton.is_dead(state) or automaton.is_accept(state):
            continue

        if not connected[state, accept].any():
            automaton.mark_dead(state)
            dead.append(state)
            tr.emit(trace, tr.DEAD_STATE, state=state,
                    reason=tr.UNPRODUCTIVE)

    return sorted(dead)
