import pytest
import numpy as np

from minauto import trace as tr
from minauto.automaton import Automaton
from minauto.partition import PartitionRefiner
from minauto.table_parse import load_builtin
from minauto.utils import testing

@pytest.fixture
def dragon():
    # the (a|b)*abb automaton of Aho and Ullman, states A-E as 0-4
    return load_builtin("dragon.dfa")

@pytest.fixture
def three_way():
    # on "a", state 1 goes to an accept state, state 2 has no
    # transition and states 0 and 3 stay non-accepting, so the
    # non-accepting class splits three ways in the first pass
    return Automaton([
        [1, 0],
        [4, 0],
        [None, 0],
        [0, 0],
        [4, 4],
    ], accept_states=[4])

@pytest.fixture
def rng():
    return np.random.default_rng(20240611)

def test_init_partitions(dragon):
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()
    assert refiner.classes() == [[0, 1, 2, 3], [4]]

def test_init_partitions_no_accept_states():
    refiner = PartitionRefiner(Automaton([[1], [0], [2]]))
    refiner.init_partitions()
    assert refiner.classes() == [[0, 1, 2]]

def test_init_partitions_all_accept_states():
    refiner = PartitionRefiner(Automaton([[1], [0]], accept_states=[0, 1]))
    refiner.init_partitions()
    assert refiner.classes() == [[0, 1]]

def test_transition_signatures(dragon):
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()
    snapshot = refiner.groups.representatives()
    rest = snapshot[0]
    final = snapshot[4]

    assert refiner.transition_signatures([0, 1, 2, 3], snapshot) == [
        (rest, rest), (rest, rest), (rest, rest), (rest, final)
    ]

def test_signatures_with_missing_transitions():
    dfa = Automaton([[1, None], [None, 1]], accept_states=[1])
    refiner = PartitionRefiner(dfa)
    refiner.init_partitions()
    snapshot = refiner.groups.representatives()
    assert refiner.transition_signatures([0, 1], snapshot) == [
        (1, None), (None, 1)
    ]

def test_refine_one_pass(dragon):
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()

    assert refiner.refine_one_pass()
    assert testing.as_partition(refiner.classes()) == {
        frozenset([0, 1, 2]), frozenset([3]), frozenset([4])
    }

    assert refiner.refine_one_pass()
    assert testing.as_partition(refiner.classes()) == {
        frozenset([0, 2]), frozenset([1]), frozenset([3]), frozenset([4])
    }

    assert not refiner.refine_one_pass()

def test_refine(dragon):
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()
    assert refiner.refine() == 3
    assert refiner.classes() == [[0, 2], [1], [3], [4]]

def test_fixpoint_is_closed(dragon, three_way):
    for dfa in [dragon, three_way]:
        refiner = PartitionRefiner(dfa)
        refiner.init_partitions()
        refiner.refine()
        stable = refiner.classes()

        assert not refiner.refine_one_pass()
        assert refiner.classes() == stable

def test_multiway_split(three_way):
    refiner = PartitionRefiner(three_way)
    refiner.init_partitions()

    assert refiner.refine_one_pass()
    assert testing.as_partition(refiner.classes()) == {
        frozenset([0, 3]), frozenset([1]), frozenset([2]), frozenset([4])
    }

    refiner.refine()
    assert (testing.as_partition(refiner.classes()) ==
            testing.two_phase_classes(three_way))

def test_matches_two_phase_refinement(rng):
    for _ in range(60):
        size = rng.integers(1, 12)
        dfa = testing.random_automaton(rng, size, rng.integers(1, 4),
                                       missing=0.2)
        refiner = PartitionRefiner(dfa)
        refiner.init_partitions()
        refiner.refine()

        assert (testing.as_partition(refiner.classes()) ==
                testing.two_phase_classes(dfa))
        assert not refiner.refine_one_pass()

def test_pass_count_bounded(rng):
    for _ in range(30):
        size = rng.integers(1, 15)
        dfa = testing.random_automaton(rng, size, 2)
        refiner = PartitionRefiner(dfa)
        refiner.init_partitions()
        assert refiner.refine() <= size + 1

def test_refiner_does_not_modify_automaton(dragon):
    table = dragon.table.copy()
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()
    refiner.refine()
    assert np.array_equal(dragon.table, table)
    assert dragon.live_states() == [0, 1, 2, 3, 4]

def test_init_resets_partition(dragon):
    refiner = PartitionRefiner(dragon)
    refiner.init_partitions()
    refiner.refine()
    refiner.init_partitions()
    assert refiner.classes() == [[0, 1, 2, 3], [4]]
    assert refiner.pass_count == 0

def test_trace_events(dragon):
    events = []

    def record(event, **details):
        events.append((event, details))

    refiner = PartitionRefiner(dragon, trace=record)
    refiner.init_partitions()
    refiner.refine()

    starts = [d for e, d in events if e == tr.PASS_START]
    splits = [d for e, d in events if e == tr.CLASS_SPLIT]

    assert [d["pass_number"] for d in starts] == [1, 2, 3]
    assert [d["class_count"] for d in starts] == [2, 3, 4]

    assert len(splits) == 2
    assert splits[0]["classes"] == [[0, 1, 2], [3]]
    assert splits[1]["classes"] == [[0, 2], [1]]
