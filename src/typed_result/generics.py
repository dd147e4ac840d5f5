"""
Generic helpers — written once, used for any element type.

Python has no inout parameters, so a mutable binding is modelled as a Ref
cell. swap() is parametric in T: it never inspects the values it moves.

    a, b = Ref(3), Ref(107)
    swap(a, b)
    a.value, b.value  # (107, 3)
"""

from __future__ import annotations

from collections.abc import Hashable, MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


@dataclass(slots=True)
class Ref(Generic[T]):
    """A mutable cell holding one value of type T."""

    value: T


def swap(a: Ref[T], b: Ref[T]) -> None:
    """Exchange the values held by two cells. ``swap(a, a)`` is a no-op."""
    temporary = a.value
    a.value = b.value
    b.value = temporary


@overload
def swap_items(container: MutableSequence[T], i: int, j: int) -> None: ...


@overload
def swap_items(container: MutableMapping[K, T], i: K, j: K) -> None: ...


def swap_items(container, i, j):
    """
    Exchange two slots of a mutable sequence or mapping in place.

    A missing index or key raises the container's own IndexError/KeyError
    before anything is modified.
    """
    temporary = container[i]
    container[i] = container[j]
    container[j] = temporary
