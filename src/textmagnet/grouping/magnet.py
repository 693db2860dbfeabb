"""The clustering strategy interface."""

from __future__ import annotations

from typing import Protocol, TypeVar

R = TypeVar("R", covariant=True)
I = TypeVar("I", contravariant=True)  # noqa: E741


class Magnet(Protocol[R, I]):
    """A clustering strategy: pulls related items together.

    Implementations are plain objects passed by value to
    grouping.engine.groups().
    """

    def apply(self, items: list[I]) -> R:
        """Cluster items."""
        ...
