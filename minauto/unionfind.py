"""Union-find (disjoint set) forest over the integers `0, ..., size-1`.

This is the weighted, path-compressing variant described in Sedgewick's
"Algorithms" after Tarjan: a sequence of operations on a forest of `n`
elements costs `O(n * a(n))` in total, where `a` is the inverse of
Ackermann's function.

Each element `i` stores one integer:

- `-m` (with `m >= 1`) if `i` is the root of a tree of `m` elements. A
  singleton is a root with weight 1.

- `j >= 0` if `i` is a child of element `j` in the same class.

This encoding never leaves this module.

"""

import numbers

import numpy as np


class UnionFind:
    def __init__(self, size):
        if size < 0:
            raise ValueError("Union-find size must be nonnegative")
        self._rep = [-1] * size

    def __len__(self):
        return len(self._rep)

    def __repr__(self):
        return "UnionFind({})".format(self.classes())

    def _check(self, elem):
        if not isinstance(elem, numbers.Integral):
            raise IndexError("Element {!r} is not an integer".format(elem))
        if not 0 <= elem < len(self._rep):
            raise IndexError(
                "Element {} out of range for union-find of size {}".format(
                    elem, len(self._rep))
            )

    def find(self, elem):
        """Return the representative of the class containing `elem`.

        Every element visited on the way to the root is made a direct
        child of the root.

        """
        self._check(elem)
        rep = self._rep

        elem = int(elem)
        root = elem
        while rep[root] >= 0:
            root = rep[root]

        while rep[elem] >= 0:
            parent = rep[elem]
            rep[elem] = root
            elem = parent

        return root

    def union(self, elem1, elem2):
        """Merge the classes of `elem1` and `elem2`.

        The tree with fewer elements is attached under the root of the
        larger one. On a tie, the root of `elem1` goes under the root
        of `elem2`.

        """
        i = self.find(elem1)
        j = self.find(elem2)

        if i == j:
            return

        rep = self._rep
        # weights are stored negated, so the larger tree has the
        # smaller value
        if rep[j] > rep[i]:
            rep[i] += rep[j]
            rep[j] = i
        else:
            rep[j] += rep[i]
            rep[i] = j

    def is_representative(self, elem):
        self._check(elem)
        return self._rep[elem] < 0

    def class_count(self):
        return sum(1 for r in self._rep if r < 0)

    def representatives(self):
        """Get the representative of every element.

        Returns
        -------
        ndarray
            integer array whose `i`th entry is `find(i)`.

        """
        return np.array([self.find(i) for i in range(len(self._rep))],
                        dtype=int)

    def classes(self):
        """Get the partition as a list of classes.

        Returns
        -------
        list of lists
            each class as an ascending list of its elements, with the
            classes ordered by their smallest element.

        """
        members = {}
        for i in range(len(self._rep)):
            members.setdefault(self.find(i), []).append(i)
        return list(members.values())

    def rebuild_class(self, members, finer):
        """Replace one class of this forest with a finer partition of it.

        Parameters
        ----------
        members : list of ints
            every element of a single class of this forest.

        finer : UnionFind
            a forest of size `len(members)` whose element `k` stands
            for `members[k]`.

        Raises
        ------
        ValueError
            if `members` is not exactly one class, or `finer` has the
            wrong size.

        """
        if len(finer) != len(members):
            raise ValueError(
                "Finer partition has {} elements, expected {}".format(
                    len(finer), len(members))
            )

        roots = {self.find(m) for m in members}
        if len(roots) != 1:
            raise ValueError("Members do not all belong to the same class")
        root, = roots
        if -self._rep[root] != len(members):
            raise ValueError(
                "Members cover {} of the {} elements of class {}".format(
                    len(members), -self._rep[root], root)
            )

        for k, elem in enumerate(members):
            local = finer._rep[k]
            if local < 0:
                self._rep[elem] = local
            else:
                self._rep[elem] = members[local]
