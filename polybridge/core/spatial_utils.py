"""Connectivity utilities shared by the corridor graph code."""

from typing import Dict, List


class DisjointSet:
    """Array-backed union-find over the indices ``0 .. n-1``.

    ``find`` compresses paths and ``union`` links by rank, giving amortised
    near-constant time per operation. Two indices share a representative iff
    they have been joined, directly or transitively, by ``union`` calls.

    Examples:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        True
        >>> ds.union(1, 0)
        False
        >>> ds.connected(0, 1), ds.connected(0, 2)
        (True, False)
        >>> ds.component_count
        3
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self._components = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def component_count(self) -> int:
        return self._components

    def find(self, x: int) -> int:
        """Representative of ``x``'s set."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``.

        Returns:
            True if two distinct sets were merged, False if they were
            already the same set
        """
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False

        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1

        self._components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> List[List[int]]:
        """Members of every set, each sorted, ordered by smallest member.

        Examples:
            >>> ds = DisjointSet(5)
            >>> ds.union(0, 1); ds.union(2, 3)
            True
            True
            >>> ds.groups()
            [[0, 1], [2, 3], [4]]
        """
        members: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            members.setdefault(self.find(i), []).append(i)
        return sorted(members.values(), key=lambda g: g[0])


__all__ = ['DisjointSet']
