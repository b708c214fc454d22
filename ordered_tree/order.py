from __future__ import annotations

import operator
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T, T], bool]


class Ordering(Generic[T]):
    """A pair of strict order predicates over T.

    `is_lesser(a, b)` and `is_greater(a, b)` together define a total order;
    two values for which neither holds are considered equal.
    """

    def __init__(self, is_lesser: Predicate, is_greater: Predicate):
        if not callable(is_lesser) or not callable(is_greater):
            raise TypeError("Ordering predicates must be callable")

        self.is_lesser: Predicate = is_lesser
        self.is_greater: Predicate = is_greater

    @classmethod
    def natural(cls) -> Ordering[T]:
        return cls(operator.lt, operator.gt)

    @classmethod
    def from_comparator(cls, cmp: Callable[[T, T], int]) -> Ordering[T]:
        """Build an ordering from a three-way comparator.

        `cmp(a, b)` must return a negative number when `a` sorts before `b`,
        a positive number when it sorts after, and zero otherwise.
        """
        return cls(lambda a, b: cmp(a, b) < 0, lambda a, b: cmp(a, b) > 0)

    @classmethod
    def from_key(cls, key: Callable[[T], Any]) -> Ordering[T]:
        return cls(lambda a, b: key(a) < key(b), lambda a, b: key(a) > key(b))

    def equal(self, a: T, b: T) -> bool:
        return not (self.is_lesser(a, b) or self.is_greater(a, b))

    def reversed(self) -> Ordering[T]:
        return Ordering(self.is_greater, self.is_lesser)

    def __repr__(self) -> str:
        return "Ordering({!r}, {!r})".format(self.is_lesser, self.is_greater)
