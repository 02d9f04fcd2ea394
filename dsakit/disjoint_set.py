"""Disjoint-set union with path compression and union by rank."""


class UnionFind:
    """Keeps ``size`` elements, numbered from 0, partitioned into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._count = size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1

    def same_set(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` belong to the same set."""
        return self.find(a) == self.find(b)

    def set_size(self, item: int) -> int:
        """Return the number of elements in the set holding ``item``."""
        return self._size[self.find(item)]

    def num_sets(self) -> int:
        """Return the number of disjoint sets."""
        return self._count