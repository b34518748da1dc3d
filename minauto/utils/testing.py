"""Slow but obviously correct reference computations, used to check
the minimization code in the test suite.

"""

from collections import deque

import numpy as np

from ..automaton import Automaton

SINK = -1


def random_automaton(rng, state_count, alphabet_size, missing=0.0,
                     accept_probability=0.3):
    """Build a random automaton.

    Parameters
    ----------
    rng : numpy.random.Generator
        source of randomness
    missing : float
        probability that any given transition is left out
    accept_probability : float
        probability that any given state is an accept state

    """
    table = rng.integers(0, state_count, size=(state_count, alphabet_size))
    table[rng.random((state_count, alphabet_size)) < missing] = -1
    accept = np.nonzero(rng.random(state_count) < accept_probability)[0]
    return Automaton(table.tolist(), accept_states=accept.tolist())


def accepted_words(aut, max_length):
    return set(aut.enumerate_words(max_length))


def all_words(alphabet, max_length):
    words = [()]
    for word in words:
        if len(word) < max_length:
            words.extend(word + (label,) for label in alphabet)
    return words


def same_language(aut1, aut2, max_length):
    """Check that two automata agree on every word up to a given length,
    by trying all of them.

    """
    return all(aut1.accepts(word) == aut2.accepts(word)
               for word in all_words(aut1.alphabet, max_length))


def reachable_states(aut):
    seen = {aut.initial_state}
    to_visit = deque([aut.initial_state])
    while to_visit:
        state = to_visit.popleft()
        for symbol in range(aut.alphabet_size):
            target = aut.transition(state, symbol)
            if target is not None and target not in seen:
                seen.add(target)
                to_visit.append(target)
    return seen


def productive_states(aut):
    preimages = {s: set() for s in aut.states()}
    for state in aut.states():
        for symbol in range(aut.alphabet_size):
            target = aut.transition(state, symbol)
            if target is not None:
                preimages[target].add(state)

    seen = set(aut.accept_states)
    to_visit = deque(aut.accept_states)
    while to_visit:
        state = to_visit.popleft()
        for source in preimages[state]:
            if source not in seen:
                seen.add(source)
                to_visit.append(source)
    return seen


def myhill_nerode_count(aut):
    """Count the Myhill-Nerode classes of the reachable, productive
    states of an automaton, by marking distinguishable pairs until
    nothing changes.

    Missing transitions and transitions to unproductive states all go
    to a single implicit sink.

    """
    live = sorted(reachable_states(aut) & productive_states(aut))

    def target(state, symbol):
        t = aut.transition(state, symbol)
        if t is None or t not in live:
            return SINK
        return t

    def accepting(state):
        return state != SINK and aut.is_accept(state)

    states = live + [SINK]
    distinct = set()
    for p in states:
        for q in states:
            if accepting(p) != accepting(q) or (p == SINK) != (q == SINK):
                distinct.add((p, q))

    changed = True
    while changed:
        changed = False
        for p in states:
            for q in states:
                if (p, q) in distinct:
                    continue
                for symbol in range(aut.alphabet_size):
                    if (target(p, symbol), target(q, symbol)) in distinct:
                        distinct.add((p, q))
                        distinct.add((q, p))
                        changed = True
                        break

    representatives = []
    for p in live:
        if all((p, r) in distinct for r in representatives):
            representatives.append(p)
    return len(representatives)


def two_phase_classes(aut):
    """Refine the accept/non-accept partition of an automaton, computing
    each pass entirely from the previous one.

    Returns
    -------
    set of frozensets
        the classes of the stable partition.

    """
    label = [int(aut.is_accept(s)) for s in aut.states()]
    count = len(set(label))
    while True:
        keys = [
            (label[s],) + tuple(
                None if aut.transition(s, j) is None
                else label[aut.transition(s, j)]
                for j in range(aut.alphabet_size))
            for s in aut.states()
        ]
        numbering = {}
        label = [numbering.setdefault(k, len(numbering)) for k in keys]
        if len(numbering) == count:
            break
        count = len(numbering)

    classes = {}
    for s in aut.states():
        classes.setdefault(label[s], set()).add(s)
    return {frozenset(c) for c in classes.values()}


def as_partition(classes):
    return {frozenset(c) for c in classes}


def isomorphism(aut1, aut2):
    """Find a renumbering of states taking one automaton to another.

    Both automata must have all of their states reachable from the
    initial state.

    Returns
    -------
    dict or None
        the map from states of `aut1` to states of `aut2`, or `None` if
        the automata are not isomorphic.

    """
    if (aut1.state_count != aut2.state_count or
        aut1.alphabet_size != aut2.alphabet_size):
        return None

    mapping = {aut1.initial_state: aut2.initial_state}
    to_visit = deque([aut1.initial_state])
    while to_visit:
        s1 = to_visit.popleft()
        s2 = mapping[s1]
        if aut1.is_accept(s1) != aut2.is_accept(s2):
            return None
        for symbol in range(aut1.alphabet_size):
            t1 = aut1.transition(s1, symbol)
            t2 = aut2.transition(s2, symbol)
            if (t1 is None) != (t2 is None):
                return None
            if t1 is None:
                continue
            if t1 in mapping:
                if mapping[t1] != t2:
                    return None
            else:
                mapping[t1] = t2
                to_visit.append(t1)

    if (len(mapping) != aut1.state_count or
        len(set(mapping.values())) != len(mapping)):
        return None
    return mapping
