"""Union-find over a fixed universe of dense integer ids."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import List


class InvalidArgumentError(ValueError):
    """Raised when a :class:`DisjointSet` is requested with an unusable size."""


class OutOfRangeError(IndexError):
    """Raised when an element id falls outside ``[0, size)``."""


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union-by-size.

    Elements are the integers ``0 .. size - 1``. Each starts as its own
    singleton component; :meth:`unify` merges components and nothing ever
    splits them. Finds and merges run in near-constant amortized time.

    ``component_sizes`` is only meaningful at roots. An index that has been
    absorbed by another root holds 0 there.

    ``size`` is fixed once constructed; assigning to it raises
    :class:`AttributeError`.

    Not thread-safe: callers sharing an instance must serialize access.
    """

    size: int
    parent: List[int] = field(init=False, repr=False)
    component_sizes: List[int] = field(init=False, repr=False)
    component_count: int = field(init=False)

    def __post_init__(self) -> None:
        if not _is_integer(self.size):
            raise InvalidArgumentError(f"size must be an integer, got {type(self.size).__name__}")
        if self.size <= 0:
            raise InvalidArgumentError(f"size must be positive, got {self.size}")
        object.__setattr__(self, "size", int(self.size))
        self.parent = list(range(self.size))
        self.component_sizes = [1] * self.size
        self.component_count = self.size

    def __setattr__(self, name: str, value: object) -> None:
        if name == "size" and "size" in self.__dict__:
            raise AttributeError("size is fixed at construction")
        super().__setattr__(name, value)

    def __len__(self) -> int:
        return self.size

    def find(self, p: int) -> int:
        """Return the root of `p`'s component, pointing the whole path at it."""

        p = self._element(p)
        parent = self.parent
        root = p
        while parent[root] != root:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p
        return root

    def connected(self, p: int, q: int) -> bool:
        """Return True when `p` and `q` belong to the same component."""

        p = self._element(p)
        q = self._element(q)
        return self.find(p) == self.find(q)

    def component_size(self, p: int) -> int:
        """Return the number of elements in `p`'s component."""

        return self.component_sizes[self.find(p)]

    def components(self) -> int:
        """Return the number of distinct components."""

        return self.component_count

    def unify(self, p: int, q: int) -> None:
        """Merge the components of `p` and `q`.

        The smaller component is attached under the larger one. On a tie the
        root of `p` survives. Calling this on already connected elements
        changes nothing.
        """

        p = self._element(p)
        q = self._element(q)
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        sizes = self.component_sizes
        if sizes[root_p] < sizes[root_q]:
            root_p, root_q = root_q, root_p

        sizes[root_p] += sizes[root_q]
        sizes[root_q] = 0
        self.parent[root_q] = root_p
        self.component_count -= 1

    union = unify

    def _element(self, p: int) -> int:
        if not _is_integer(p):
            raise TypeError(f"element id must be an integer, got {type(p).__name__}")
        if not 0 <= p < self.size:
            raise OutOfRangeError(f"element {p} is outside [0, {self.size})")
        return int(p)


__all__ = ["DisjointSet", "InvalidArgumentError", "OutOfRangeError"]
