import pytest
import numpy as np

from minauto import trace as tr
from minauto.automaton import Automaton, StateAttribute
from minauto.dead import reachability_matrix, find_dead_states
from minauto.table_parse import load_builtin
from minauto.utils import testing

@pytest.fixture
def chain():
    # 0 -> 1 -> 2 -> 3, with 3 looping; 4 is unreachable and goes to 1
    return Automaton([
        [1, None],
        [2, None],
        [3, None],
        [3, 3],
        [1, 4],
    ], accept_states=[2])

@pytest.fixture
def rng():
    return np.random.default_rng(77)

def test_reachability_matrix(chain):
    connected = reachability_matrix(chain)
    assert connected.shape == (5, 5)
    assert connected.dtype == bool
    assert np.all(np.diag(connected))

    assert np.array_equal(connected[0], [True, True, True, True, False])
    assert np.array_equal(connected[3], [False, False, False, True, False])
    assert np.array_equal(connected[4], [False, True, True, True, True])

def test_reachability_matches_search(rng):
    for _ in range(40):
        dfa = testing.random_automaton(rng, rng.integers(1, 15), 2,
                                       missing=0.4)
        connected = reachability_matrix(dfa)
        for state in dfa.states():
            reached = testing.reachable_states(
                Automaton(dfa.table.tolist(), initial_state=state))
            assert set(np.nonzero(connected[state])[0]) == reached

def test_find_dead_states(chain):
    dead = find_dead_states(chain)
    assert dead == [3, 4]
    assert chain.attributes() == [
        StateAttribute.NORMAL, StateAttribute.NORMAL, StateAttribute.ACCEPT,
        StateAttribute.DEAD, StateAttribute.DEAD
    ]

def test_unreachable_accept_state_is_dead():
    dfa = Automaton([[0], [1]], accept_states=[1])
    assert find_dead_states(dfa) == [0, 1]
    assert dfa.is_empty()

def test_no_accept_states():
    dfa = load_builtin("empty.dfa")
    assert find_dead_states(dfa) == [0, 1, 2]
    assert dfa.is_empty()

def test_initial_accept_state():
    dfa = Automaton([[None]], accept_states=[0])
    assert find_dead_states(dfa) == []
    assert dfa.attribute(0) == StateAttribute.ACCEPT

def test_dead_state_correctness(rng):
    for _ in range(60):
        dfa = testing.random_automaton(rng, rng.integers(1, 12),
                                       rng.integers(1, 4), missing=0.3,
                                       accept_probability=0.2)
        find_dead_states(dfa)

        live = (testing.reachable_states(dfa) &
                testing.productive_states(dfa))
        for state in dfa.states():
            assert dfa.is_dead(state) == (state not in live)

def test_rerun_marks_nothing_new(chain):
    find_dead_states(chain)
    assert find_dead_states(chain) == []
    assert chain.live_states() == [0, 1, 2]

def test_trace_reasons(chain):
    events = []
    find_dead_states(chain, trace=lambda event, **d: events.append((event, d)))
    assert events == [
        (tr.DEAD_STATE, {"state": 4, "reason": tr.UNREACHABLE}),
        (tr.DEAD_STATE, {"state": 3, "reason": tr.UNPRODUCTIVE}),
    ]
