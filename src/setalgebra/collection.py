"""DataSetCollection: a name-indexed registry of DataSets."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

from .dataset import DataSet, Pair

T = TypeVar("T")

logger = logging.getLogger(__name__)

BINARY_OPERATIONS: dict[str, Callable[[DataSet, DataSet], DataSet]] = {
    "union": DataSet.union_with,
    "intersection": DataSet.intersection_with,
    "difference": DataSet.difference_with,
    "symmetric_difference": DataSet.symmetric_difference_with,
}

UNARY_OPERATIONS: dict[str, Callable[[DataSet], DataSet]] = {
    "powerset": DataSet.power_set,
}


# ============================================================
# Errors
# ============================================================


class SetCollectionError(Exception):
    """Base error for collection lookups and dispatch."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg: str = msg


class SetNotFoundError(SetCollectionError):
    """A referenced set name is not registered."""

    def __init__(self, name: str):
        super().__init__("Set '" + name + "' not found.")
        self.name: str = name


class UnsupportedOperationError(SetCollectionError):
    """An operation keyword is not recognised for the call shape."""

    def __init__(self, msg: str, op: str):
        super().__init__(msg)
        self.op: str = op


# ============================================================
# Collection
# ============================================================


class DataSetCollection(Generic[T]):
    """Registry of uniquely named sets, in first-registration order.

    Sets are stored and handed out as copies, so no caller ever holds a
    reference into the registry.
    """

    def __init__(self) -> None:
        self._sets: dict[str, DataSet[T]] = {}

    def _lookup(self, name: str) -> DataSet[T]:
        dataset = self._sets.get(name)
        if dataset is None:
            raise SetNotFoundError(name)
        return dataset

    def add_set(self, dataset: DataSet[T]) -> None:
        """Register dataset under its name, replacing any set of that name."""
        if dataset.name in self._sets:
            logger.debug("overwriting set %r", dataset.name)
        else:
            logger.debug("registering set %r", dataset.name)
        self._sets[dataset.name] = dataset.copy()

    def has_set(self, name: str) -> bool:
        return name in self._sets

    def insert_into(self, name: str, value: T) -> None:
        self._lookup(name).insert(value)

    def get_set(self, name: str) -> DataSet[T]:
        return self._lookup(name).copy()

    def get_set_names(self) -> list[str]:
        return list(self._sets)

    def operate(self, name_a: str, op: str, name_b: str) -> DataSet[T]:
        """Apply a binary operation to two registered sets.

        The result is renamed ``(A op B)``. Missing operands are reported
        before an unrecognised keyword.
        """
        a = self._lookup(name_a)
        b = self._lookup(name_b)
        fn = BINARY_OPERATIONS.get(op)
        if fn is None:
            raise UnsupportedOperationError("Invalid operation: '" + op + "'", op)
        result = fn(a, b)
        result.rename("(" + name_a + " " + op + " " + name_b + ")")
        return result

    def operate_unary_set(self, name: str, op: str) -> DataSet[DataSet[T]]:
        a = self._lookup(name)
        fn = UNARY_OPERATIONS.get(op)
        if fn is None:
            raise UnsupportedOperationError(
                "Unsupported unary operation: '" + op + "'", op
            )
        return fn(a)

    def cartesian_product(self, name_a: str, name_b: str) -> DataSet[Pair[T, T]]:
        a = self._lookup(name_a)
        b = self._lookup(name_b)
        return a.cartesian_product_with(b)

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_set_names())
