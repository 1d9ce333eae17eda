from __future__ import annotations
import copy
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, Literal, Optional, SupportsIndex, Type, TypeVar, overload

from .comparable import SupportsRichComparison
from .keyed import _check_keyed, is_keyed
from .operations import get_by_key, index_of_key, is_presorted, merge, presort, put
from .semigroup import KeyedSemigroup

__all__ = ["PresortedList"]

logger = logging.getLogger(__name__)

Self = TypeVar("Self", bound="PresortedList")
T = TypeVar("T", bound=KeyedSemigroup)
D = TypeVar("D")

reprs_seen = {0} - {0}

# Re-check the invariant after every mutation.
CHECK_INVARIANTS: bool = False


class PresortedList(Sequence[T], Generic[T]):
    """
    A list kept sorted by key, without duplicate keys.

    Inserting an element whose key is already present combines it into
    the existing element, ``existing.combine(incoming)``, instead of
    adding a duplicate. Elements are never removed.
    """
    _data: list[T]

    __slots__ = {
        "_data":
            "The presorted elements, owned exclusively by the list.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /) -> None:
        if iterable is None:
            self._data = []
        elif isinstance(iterable, Iterable):
            self._data = presort(iterable)
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")

    def __add__(self: Self, other: Any, /) -> Self:
        if not isinstance(other, PresortedList):
            return NotImplemented
        result = self.copy()
        result.merge(other)
        return result

    def __contains__(self: Self, element: Any, /) -> bool:
        if not is_keyed(element):
            return False
        return self.has_key(element.key())

    def __copy__(self: Self, /) -> Self:
        return type(self).from_sorted(self._data)

    def __deepcopy__(self: Self, memo: Optional[dict[int, Any]] = None, /) -> Self:
        return type(self).from_sorted(copy.deepcopy(self._data, memo))

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, PresortedList):
            return self._data == other._data
        elif isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return len(self) == len(other) and all(x == y for x, y in zip(self, other))
        else:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @overload
    def __getitem__(self: Self, index: int, /) -> T: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> Self: ...

    def __getitem__(self, index, /):
        if isinstance(index, slice):
            # Any slice of a presorted list is presorted, reversed ones excepted.
            range_ = range(len(self._data))[index]
            if range_.step < 0:
                range_ = range_[::-1]
            return type(self).from_sorted([self._data[i] for i in range_])
        return self._data[index]

    def __iadd__(self: Self, other: Any, /) -> Self:
        if not isinstance(other, PresortedList):
            return NotImplemented
        self.merge(other)
        return self

    def __iter__(self: Self, /) -> Iterator[T]:
        return iter(self._data)

    def __len__(self: Self, /) -> int:
        return len(self._data)

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "..."
        elif len(self) == 0:
            return f"{type(self).__name__}()"
        reprs_seen.add(id(self))
        try:
            data = ", ".join([repr(x) for x in self])
            return f"{type(self).__name__}([{data}])"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T]:
        return reversed(self._data)

    def _check_invariants(self: Self, /) -> None:
        if CHECK_INVARIANTS and not is_presorted(self._data):
            raise AssertionError(f"{type(self).__name__} is no longer sorted by unique keys")

    @classmethod
    def from_sorted(cls: Type[Self], iterable: Iterable[T], /, *, validate: bool = False) -> Self:
        """
        Trust that the elements are already presorted, skipping the
        sort. Use ``validate=True`` for data from untrusted sources.
        """
        if isinstance(iterable, Iterable):
            data = [*iterable]
        else:
            raise TypeError(f"{cls.__name__}.from_sorted expected an iterable, got {iterable!r}")
        if validate:
            for element in data:
                _check_keyed(element, f"{cls.__name__}.from_sorted")
            if not is_presorted(data):
                logger.debug("rejected unsorted input of %d elements for %s", len(data), cls.__name__)
                raise ValueError(f"{cls.__name__}.from_sorted expected elements with strictly increasing keys")
        self = cls()
        self._data = data
        return self

    def between(self: Self, start: Any = None, stop: Any = None, /) -> Iterator[T]:
        """Iterate over the elements with ``start <= key < stop``."""
        i = 0 if start is None else index_of_key(self._data, start, mode="left")
        j = len(self._data) if stop is None else index_of_key(self._data, stop, mode="left")
        return (self._data[k] for k in range(i, max(i, j)))

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    def count(self: Self, element: Any, /) -> int:
        return int(element in self)

    @overload
    def get_by_key(self: Self, key: Any, /) -> Optional[T]: ...

    @overload
    def get_by_key(self: Self, key: Any, default: D, /) -> T | D: ...

    def get_by_key(self, key, default=None, /):
        return get_by_key(self._data, key, default)

    def has_key(self: Self, key: Any, /) -> bool:
        try:
            index_of_key(self._data, key)
        except KeyError:
            return False
        return True

    def index(
        self: Self,
        key: Any,
        /,
        start: SupportsIndex = 0,
        stop: Optional[SupportsIndex] = None,
        *,
        mode: Literal["left", "exact", "right"] = "exact",
    ) -> int:
        return index_of_key(self._data, key, start, stop, mode=mode)

    def keys(self: Self, /) -> Iterator[SupportsRichComparison]:
        return (x.key() for x in self._data)

    def merge(self: Self, other: Iterable[T], /) -> None:
        """
        Merge another presorted sequence into this one in linear time.
        Plain iterables are trusted to be presorted, use `update` otherwise.
        """
        if not isinstance(other, Iterable):
            raise TypeError(f"{type(self).__name__}.merge expected an iterable, got {other!r}")
        elif isinstance(other, PresortedList):
            other = other._data
        else:
            other = [*other]
            for element in other:
                _check_keyed(element, f"{type(self).__name__}.merge")
        merge(self._data, other)
        self._check_invariants()

    def put(self: Self, element: T, /) -> None:
        _check_keyed(element, f"{type(self).__name__}.put")
        put(self._data, element)
        self._check_invariants()

    def update(self: Self, iterable: Iterable[T], /) -> None:
        """Insert arbitrary elements, cheaper than repeated `put` calls."""
        if not isinstance(iterable, Iterable):
            raise TypeError(f"{type(self).__name__}.update expected an iterable, got {iterable!r}")
        elements = [*iterable]
        for element in elements:
            _check_keyed(element, f"{type(self).__name__}.update")
        merge(self._data, presort(elements))
        self._check_invariants()
