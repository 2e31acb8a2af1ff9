"""
The RichIterable contract.

A ``RichIterable`` is an immutable container with chainable, functional
operations. Concrete containers implement the abstract transformations
(``filter``, ``filter_not``, ``map``, ``flat_map``) and the iteration
primitive (``__iter__`` / ``__len__``); everything else here is derived from
iteration and never needs re-implementing.

Caller-supplied functions (predicates, transforms, actions) are never
wrapped: if one raises, the exception reaches the caller unchanged and the
receiver is left as it was.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")
V = TypeVar("V")
K = TypeVar("K", bound=Hashable)


class RichIterable(ABC, Generic[T]):
    """Read-only container with filter / map / flat_map / peek."""

    # ── Primitives ───────────────────────────────────────────────

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    # ── Transformations (always return a new container) ──────────

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "RichIterable[T]":
        """Elements for which ``predicate`` holds, in their original order."""

    @abstractmethod
    def filter_not(self, predicate: Callable[[T], bool]) -> "RichIterable[T]":
        """Elements for which ``predicate`` does not hold (complement of ``filter``)."""

    @abstractmethod
    def map(self, function: Callable[[T], V]) -> "RichIterable[V]":
        """Each element replaced by ``function(element)``."""

    @abstractmethod
    def flat_map(self, function: Callable[[T], Iterable[V]]) -> "RichIterable[V]":
        """Concatenation of ``function(element)`` for every element."""

    # ── Traversal ────────────────────────────────────────────────

    def for_each(self, action: Callable[[T], object]) -> None:
        for each in self:
            action(each)

    def peek(self, action: Callable[[T], object]):
        """Run ``action`` on every element and return this same container.

        Meant for logging and debugging inside a chain of calls.
        """
        self.for_each(action)
        return self

    # ── Queries ──────────────────────────────────────────────────

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def not_empty(self) -> bool:
        return not self.is_empty()

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for each in self if predicate(each))

    def any_satisfy(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(each) for each in self)

    def all_satisfy(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(each) for each in self)

    def none_satisfy(self, predicate: Callable[[T], bool]) -> bool:
        return not self.any_satisfy(predicate)

    def detect(self, predicate: Callable[[T], bool]) -> T | None:
        """First element matching ``predicate``, or ``None``."""
        return next((each for each in self if predicate(each)), None)

    def partition(self, predicate: Callable[[T], bool]):
        """``(selected, rejected)`` pair, equal to ``filter`` / ``filter_not``."""
        return self.filter(predicate), self.filter_not(predicate)

    def group_by(self, function: Callable[[T], K]) -> dict:
        """Map each key to a container (of this kind) of the elements with that key.

        Keys appear in the order they are first produced.
        """
        groups: dict = {}
        for each in self:
            groups.setdefault(function(each), []).append(each)
        return {key: type(self)(members) for key, members in groups.items()}

    def count_by(self, function: Callable[[T], K]) -> dict:
        counts: dict = {}
        for each in self:
            key = function(each)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def sum_of(self, function: Callable[[T], int]) -> int:
        return sum(function(each) for each in self)

    # ── Conversions ──────────────────────────────────────────────

    def make_string(self, separator: str = ", ") -> str:
        return separator.join(str(each) for each in self)

    def to_list(self) -> list[T]:
        return list(self)

    def to_set(self) -> set[T]:
        return set(self)
