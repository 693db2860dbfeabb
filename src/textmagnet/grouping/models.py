"""Clustering results: Group, VectorGroup and Groups."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

import numpy as np

from ..exceptions import ItemTypeError
from ..matrices import Matrices

T = TypeVar("T")
K = TypeVar("K")


class Group(Generic[T]):
    """An ordered bag of clustered items.

    None is never stored. An item repeats only if it was added twice.
    Groups compare equal when they hold the same items in the same order.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = []
        for item in items:
            self.add(item)

    @classmethod
    def of(cls, *items: T) -> Group[T]:
        return cls(items)

    @staticmethod
    def merge(groups: Iterable[Group], klass: type[K]) -> Group[K]:
        """Concatenate groups into one, casting every item to klass.

        Raises:
            ItemTypeError: On the first item that is not a klass instance
        """
        merged: Group[K] = Group()
        for group in groups:
            for item in group.items_of(klass):
                merged.add(item)
        return merged

    def add(self, item: T) -> None:
        if item is not None:
            self._items.append(item)

    def remove(self, item: T) -> bool:
        """Remove the first occurrence of item; False if absent."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def items_of(self, klass: type[K]) -> list[K]:
        """Items cast to klass.

        Raises:
            ItemTypeError: On the first item that is not a klass instance
        """
        for item in self._items:
            if not isinstance(item, klass):
                raise ItemTypeError(item, klass)
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> T:
        return self._items[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(item) for item in self._items]})"


class VectorGroup(Group[T]):
    """A group whose items carry vectors, plus the centroid of those vectors.

    The centroid changes only when compute_center() is called.
    """

    def __init__(self) -> None:
        super().__init__()
        self._vectors: dict[T, np.ndarray] = {}
        self._center: Optional[np.ndarray] = None

    def add(self, item: T, vector: Optional[np.ndarray] = None) -> None:  # type: ignore[override]
        if item is None:
            return
        super().add(item)
        if vector is not None:
            self._vectors[item] = np.asarray(vector, dtype=float)

    def remove(self, item: T) -> bool:
        removed = super().remove(item)
        if removed and item not in self:
            self._vectors.pop(item, None)
        return removed

    def vector(self, item: T) -> Optional[np.ndarray]:
        return self._vectors.get(item)

    @property
    def center(self) -> Optional[np.ndarray]:
        return self._center

    def compute_center(self) -> Optional[np.ndarray]:
        """Recompute the centroid as the mean of the member vectors."""
        vectors = [self._vectors[item] for item in self._items if item in self._vectors]
        self._center = np.mean(vectors, axis=0) if vectors else None
        return self._center

    def proximity(self, vector: np.ndarray) -> float:
        """Project score between vector and the centroid (0.0 without one)."""
        if self._center is None:
            return 0.0
        return Matrices.similarity(self._center, vector)


class Groups(Generic[T]):
    """Immutable view over non-empty groups and the Index that produced them."""

    def __init__(self, groups: Iterable[Group[T]] = (), index=None):
        self._groups: tuple[Group[T], ...] = tuple(
            g for g in groups if g is not None and not g.is_empty()
        )
        self._index = index

    @classmethod
    def of(cls, groups: Iterable[Group[T]], index=None) -> Groups[T]:
        return cls(groups, index)

    @classmethod
    def empty(cls) -> Groups:
        return cls()

    @property
    def index(self):
        """The Index used to build these groups, or None."""
        return self._index

    @property
    def group_list(self) -> list[Group[T]]:
        return list(self._groups)

    def items(self) -> list[T]:
        """Every item of every group, in group order."""
        return [item for group in self._groups for item in group]

    def is_empty(self) -> bool:
        return not self._groups

    def __iter__(self) -> Iterator[Group[T]]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __getitem__(self, i: int) -> Group[T]:
        return self._groups[i]

    def __repr__(self) -> str:
        return f"Groups({len(self._groups)} groups)"
