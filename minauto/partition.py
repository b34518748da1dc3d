"""Split the states of a DFA into classes of equivalent states.

Two states stay in the same class if and only if they go to the same
class on every alphabet symbol (the "same transitions" criterion of Aho
and Ullman's DFA minimization). Starting from the split into accept
and non-accept states, classes are refined pass by pass until nothing
changes.

Each class is split in two stages: first every member becomes a
singleton of a scratch union-find forest, then members with the same
transitions are merged back together. A class that ends up split is
written back into the global partition right away, instead of waiting
for the end of the pass. Since all comparisons within a pass use the
partition as it stood when the pass started, this changes how fast the
refinement converges but not where it ends up.

"""

import numpy as np

from .automaton import NO_TRANSITION
from .unionfind import UnionFind
from . import trace as tr


class PartitionRefiner:
    """Refine the partition of the states of one automaton.

    A refiner owns its union-find forest, sized for its automaton. Use
    a new refiner for every automaton.

    """
    def __init__(self, automaton, trace=None):
        """

        Parameters
        ----------
        automaton : Automaton
            the automaton whose states are partitioned. It is not
            modified.

        trace : callable
            optional hook called at the start of each pass and for
            every class split. See `minauto.trace`.

        """
        self.automaton = automaton
        self.trace = trace
        self.pass_count = 0
        self.groups = UnionFind(automaton.state_count)

    def init_partitions(self):
        """Reset the partition to two classes: the accept states and the
        other states. A class with no members is left out.

        """
        self.groups = UnionFind(self.automaton.state_count)
        self.pass_count = 0

        accept_rep = None
        others_rep = None
        for state in self.automaton.states():
            if self.automaton.is_accept(state):
                if accept_rep is None:
                    accept_rep = state
                else:
                    self.groups.union(accept_rep, state)
            else:
                if others_rep is None:
                    others_rep = state
                else:
                    self.groups.union(others_rep, state)

    def transition_signatures(self, members, snapshot):
        """Compute the transition signature of each of a list of states.

        Parameters
        ----------
        members : list of ints
            the states to compute signatures for
        snapshot : ndarray
            representative of every state, as returned by
            `UnionFind.representatives`

        Returns
        -------
        list of tuples
            for each member, the tuple over all symbols of the
            representative of the transition target (or `None`).

        """
        rows = self.automaton.table[members]
        targets = np.where(rows == NO_TRANSITION, NO_TRANSITION,
                           snapshot[rows])
        return [
            tuple(None if t == NO_TRANSITION else t for t in row)
            for row in targets.tolist()
        ]

    def refine_one_pass(self):
        """Run one refinement pass over every class.

        Returns
        -------
        bool
            `True` if at least one class was split.

        """
        self.pass_count += 1
        snapshot = self.groups.representatives()
        classes = self.groups.classes()

        tr.emit(self.trace, tr.PASS_START, pass_number=self.pass_count,
                class_count=len(classes))

        updated = False
        for members in classes:
            if len(members) < 2:
                continue

            signatures = self.transition_signatures(members, snapshot)
            finer = UnionFind(len(members))
            unified = [False] * len(members)

            # a member already merged with an earlier one has been
            # compared against everything that member matches
            for i in range(len(members) - 1):
                if unified[i]:
                    continue
                unified[i] = True
                for j in range(i + 1, len(members)):
                    if unified[j]:
                        continue
                    if signatures[i] == signatures[j]:
                        finer.union(i, j)
                        unified[j] = True

            if finer.class_count() > 1:
                self.groups.rebuild_class(members, finer)
                updated = True
                tr.emit(self.trace, tr.CLASS_SPLIT,
                        representative=int(snapshot[members[0]]),
                        classes=[[members[k] for k in sub]
                                 for sub in finer.classes()])

        return updated

    def refine(self):
        """Run refinement passes until one of them changes nothing.

        Returns
        -------
        int
            the number of passes run, including the last one.

        """
        while self.refine_one_pass():
            pass
        return self.pass_count

    def classes(self):
        return self.groups.classes()

    def find(self, state):
        return self.groups.find(state)
