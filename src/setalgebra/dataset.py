"""DataSet: a named, insertion-ordered, duplicate-free set of values.

Membership is a linear scan using ``==``, so any element type with a
meaningful equality works, including DataSet itself (set-equality) and
Pair (component-wise equality).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


# ============================================================
# Pair
# ============================================================


@dataclass(frozen=True)
class Pair(Generic[T, U]):
    """Ordered pair, the element type of a Cartesian product."""

    first: T
    second: U

    def __str__(self) -> str:
        return f"({format_value(self.first)}, {format_value(self.second)})"


# ============================================================
# DataSet
# ============================================================


class DataSet(Generic[T]):
    """Generic mathematical set backed by a list."""

    def __init__(self, name: str = "", elements: Iterable[T] | None = None):
        self._name: str = name
        self._elements: list[T] = []
        if elements is not None:
            for value in elements:
                self.insert(value)

    # ── Naming ──────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    def rename(self, new_name: str) -> None:
        self._name = new_name

    # ── Membership ──────────────────────────────────────────

    def insert(self, value: T) -> None:
        """Add value unless an equal element is already present."""
        if not self.contains(value):
            self._elements.append(value)

    def contains(self, value: T) -> bool:
        for element in self._elements:
            if element == value:
                return True
        return False

    def size(self) -> int:
        return len(self._elements)

    def elements(self) -> list[T]:
        """Copy of the stored elements, in insertion order."""
        return list(self._elements)

    def copy(self) -> DataSet[T]:
        result: DataSet[T] = DataSet(self._name)
        result._elements = list(self._elements)
        return result

    # ── Algebra ─────────────────────────────────────────────

    def union_with(self, other: DataSet[T]) -> DataSet[T]:
        result: DataSet[T] = DataSet(self._name + " ∪ " + other.name)
        for value in self._elements:
            result.insert(value)
        for value in other.elements():
            result.insert(value)
        return result

    def intersection_with(self, other: DataSet[T]) -> DataSet[T]:
        result: DataSet[T] = DataSet(self._name + " ∩ " + other.name)
        for value in self._elements:
            if other.contains(value):
                result.insert(value)
        return result

    def difference_with(self, other: DataSet[T]) -> DataSet[T]:
        result: DataSet[T] = DataSet(self._name + " - " + other.name)
        for value in self._elements:
            if not other.contains(value):
                result.insert(value)
        return result

    def symmetric_difference_with(self, other: DataSet[T]) -> DataSet[T]:
        """Elements in exactly one of the two sets.

        This set's exclusive elements come first, followed by the other
        set's exclusive elements, each group in its source order.
        """
        result: DataSet[T] = DataSet(self._name + " △ " + other.name)
        for value in self._elements:
            if not other.contains(value):
                result.insert(value)
        for value in other.elements():
            if not self.contains(value):
                result.insert(value)
        return result

    def is_subset_of(self, other: DataSet[T]) -> bool:
        for value in self._elements:
            if not other.contains(value):
                return False
        return True

    def is_equal_to(self, other: DataSet[T]) -> bool:
        """Double inclusion: A = B iff A ⊆ B and B ⊆ A."""
        return self.is_subset_of(other) and other.is_subset_of(self)

    def power_set(self) -> DataSet[DataSet[T]]:
        """All 2^n subsets, enumerated by bitmask over the element order.

        Mask 0 gives the empty set and the all-ones mask gives a copy of
        this set. Subsets are unnamed.
        """
        source = self.elements()
        result: DataSet[DataSet[T]] = DataSet("P(" + self._name + ")")
        for mask in range(1 << len(source)):
            subset: DataSet[T] = DataSet()
            for i, value in enumerate(source):
                if mask & (1 << i):
                    subset.insert(value)
            result.insert(subset)
        return result

    def cartesian_product_with(self, other: DataSet[U]) -> DataSet[Pair[T, U]]:
        """Row-major pairs (a, b) for a in self, b in other."""
        result: DataSet[Pair[T, U]] = DataSet(self._name + " × " + other.name)
        right = other.elements()
        for a in self._elements:
            for b in right:
                result.insert(Pair(a, b))
        return result

    # ── Rendering ───────────────────────────────────────────

    def braced(self) -> str:
        """Elements only, e.g. ``{1, 2, 3}``."""
        inner = ", ".join(format_value(v) for v in self._elements)
        return "{" + inner + "}"

    def to_string(self) -> str:
        if self._name:
            return self._name + " = " + self.braced()
        return self.braced()

    # ── Python protocols ────────────────────────────────────

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self.is_equal_to(other)

    # Mutable, and equal sets may differ in order.
    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: DataSet[T]) -> DataSet[T]:
        return self.union_with(other)

    def __and__(self, other: DataSet[T]) -> DataSet[T]:
        return self.intersection_with(other)

    def __sub__(self, other: DataSet[T]) -> DataSet[T]:
        return self.difference_with(other)

    def __xor__(self, other: DataSet[T]) -> DataSet[T]:
        return self.symmetric_difference_with(other)

    def __le__(self, other: DataSet[T]) -> bool:
        return self.is_subset_of(other)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DataSet({self._name!r}, {self.braced()})"


def format_value(value: object) -> str:
    """Render a set element; nested sets print braced without their name."""
    if isinstance(value, DataSet):
        return value.braced()
    return str(value)
