"""
Immutable concrete containers.

``ImmutableList`` is the ordered variant (tuple-backed, positional ``get``).
``ImmutableSet`` is the unordered variant: no positional access, duplicates
collapse, iteration follows first insertion so output stays deterministic.
"""

from typing import Callable, Hashable, Iterable, Iterator, TypeVar

from codekatas.collections.errors import IndexOutOfRangeError
from codekatas.collections.rich_iterable import RichIterable

T = TypeVar("T")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


class ImmutableList(RichIterable[T]):
    """Ordered, tuple-backed container."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)

    @classmethod
    def of(cls, *items: T) -> "ImmutableList[T]":
        return cls(items)

    @classmethod
    def empty(cls) -> "ImmutableList[T]":
        return cls()

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImmutableList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ImmutableList[{', '.join(repr(each) for each in self._items)}]"

    # ── Transformations ──────────────────────────────────────────

    def filter(self, predicate: Callable[[T], bool]) -> "ImmutableList[T]":
        return ImmutableList(each for each in self._items if predicate(each))

    def filter_not(self, predicate: Callable[[T], bool]) -> "ImmutableList[T]":
        return ImmutableList(each for each in self._items if not predicate(each))

    def map(self, function: Callable[[T], V]) -> "ImmutableList[V]":
        return ImmutableList(function(each) for each in self._items)

    def flat_map(self, function: Callable[[T], Iterable[V]]) -> "ImmutableList[V]":
        return ImmutableList(value for each in self._items for value in function(each))

    # ── Positional access ────────────────────────────────────────

    def get(self, index: int) -> T:
        """Element at zero-based ``index``; negative indices are out of range."""
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))
        return self._items[index]

    def first(self) -> T:
        return self.get(0)

    def last(self) -> T:
        return self.get(len(self._items) - 1)

    def take(self, count: int) -> "ImmutableList[T]":
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return ImmutableList(self._items[:count])

    def drop(self, count: int) -> "ImmutableList[T]":
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return ImmutableList(self._items[count:])

    def reverse_this(self) -> "ImmutableList[T]":
        return ImmutableList(reversed(self._items))


class ImmutableSet(RichIterable[H]):
    """Unordered container of distinct, hashable elements."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[H] = ()) -> None:
        # dict keeps first-insertion order while dropping duplicates
        self._items: tuple[H, ...] = tuple(dict.fromkeys(items))

    @classmethod
    def of(cls, *items: H) -> "ImmutableSet[H]":
        return cls(items)

    @classmethod
    def empty(cls) -> "ImmutableSet[H]":
        return cls()

    def __iter__(self) -> Iterator[H]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImmutableSet):
            return NotImplemented
        return frozenset(self._items) == frozenset(other._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __repr__(self) -> str:
        return f"ImmutableSet{{{', '.join(repr(each) for each in self._items)}}}"

    def filter(self, predicate: Callable[[H], bool]) -> "ImmutableSet[H]":
        return ImmutableSet(each for each in self._items if predicate(each))

    def filter_not(self, predicate: Callable[[H], bool]) -> "ImmutableSet[H]":
        return ImmutableSet(each for each in self._items if not predicate(each))

    def map(self, function: Callable[[H], V]) -> "ImmutableSet[V]":
        return ImmutableSet(function(each) for each in self._items)

    def flat_map(self, function: Callable[[H], Iterable[V]]) -> "ImmutableSet[V]":
        return ImmutableSet(value for each in self._items for value in function(each))

    def union(self, other: Iterable[H]) -> "ImmutableSet[H]":
        return ImmutableSet((*self._items, *other))
