"""
Operations keeping a plain mutable sequence presorted.

A sequence is presorted when the keys of its elements are strictly
increasing: it is sorted by key and no two elements share a key.
These functions preserve that invariant but never check it, passing
a sequence which is not presorted gives meaningless results.
"""
import logging
import operator
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import groupby, pairwise
from typing import Any, Literal, Optional, SupportsIndex, TypeVar, overload

from .keyed import key_of
from .semigroup import KeyedSemigroup, combine_all

__all__ = ["get_by_key", "index_of_key", "is_presorted", "merge", "presort", "put"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=KeyedSemigroup)
D = TypeVar("D")


def put(sequence: MutableSequence[T], element: T, /) -> None:
    """
    Insert an element, combining it into the element with the same key
    if there is one. Use `merge` when inserting many elements.
    """
    key = element.key()
    i = bisect_left(sequence, key, key=key_of)
    if i < len(sequence) and sequence[i].key() == key:
        sequence[i] = sequence[i].combine(element)
    else:
        sequence.insert(i, element)


def merge(sequence: MutableSequence[T], other: Iterable[T], /) -> None:
    """
    Merge another presorted sequence into this one in linear time.

    Elements with equal keys are combined as ``mine.combine(theirs)``.
    The sequence must support slice assignment, `other` is left as is.
    """
    if not isinstance(other, Sequence):
        other = [*other]
    len1 = len(sequence)
    len2 = len(other)
    results: list[T] = []
    combined = 0
    i = j = 0
    if len1 > 0 and len2 > 0:
        x = sequence[0]
        y = other[0]
        x_key = x.key()
        y_key = y.key()
        while True:
            if x_key == y_key:
                results.append(x.combine(y))
                combined += 1
                i += 1
                j += 1
                if i == len1 or j == len2:
                    break
                x = sequence[i]
                y = other[j]
                x_key = x.key()
                y_key = y.key()
            elif x_key < y_key:
                results.append(x)
                i += 1
                if i == len1:
                    break
                x = sequence[i]
                x_key = x.key()
            else:
                results.append(y)
                j += 1
                if j == len2:
                    break
                y = other[j]
                y_key = y.key()
    results.extend(sequence[k] for k in range(i, len1))
    results.extend(other[k] for k in range(j, len2))
    sequence[:] = results
    logger.debug("merged %d elements into %d, %d combined", len2, len1, combined)


@overload
def get_by_key(sequence: Sequence[T], key: Any, /) -> Optional[T]: ...

@overload
def get_by_key(sequence: Sequence[T], key: Any, default: D, /) -> "T | D": ...

def get_by_key(sequence, key, default=None, /):
    """Binary search for the element with the given key, or the default."""
    i = bisect_left(sequence, key, key=key_of)
    if i < len(sequence):
        element = sequence[i]
        if element.key() == key:
            return element
    return default


def index_of_key(
    sequence: Sequence[T],
    key: Any,
    /,
    start: SupportsIndex = 0,
    stop: Optional[SupportsIndex] = None,
    *,
    mode: Literal["left", "exact", "right"] = "exact",
) -> int:
    if isinstance(start, int):
        pass
    elif isinstance(start, SupportsIndex):
        start = operator.index(start)
    else:
        raise TypeError(f"could not interpret the start as an integer, got {start!r}")
    if stop is None:
        stop = len(sequence)
    elif isinstance(stop, int):
        pass
    elif isinstance(stop, SupportsIndex):
        stop = operator.index(stop)
    else:
        raise TypeError(f"could not interpret the stop as an integer, got {stop!r}")
    start, stop, _ = slice(start, stop).indices(len(sequence))
    if not isinstance(mode, str):
        raise TypeError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")
    elif mode == "left":
        return bisect_left(sequence, key, start, max(start, stop), key=key_of)
    elif mode == "right":
        return bisect_right(sequence, key, start, max(start, stop), key=key_of)
    elif mode == "exact":
        i = bisect_left(sequence, key, start, max(start, stop), key=key_of)
        if i < stop and sequence[i].key() == key:
            return i
        raise KeyError(key)
    else:
        raise ValueError(f"expected 'left', 'exact', or 'right' for the mode, got {mode!r}")


def is_presorted(iterable: Iterable[T], /) -> bool:
    return all(x.key() < y.key() for x, y in pairwise(iterable))


def presort(iterable: Iterable[T], /) -> list[T]:
    """
    Build a presorted list out of arbitrary elements.

    The sort is stable, so elements sharing a key are combined in the
    order they were given.
    """
    if not isinstance(iterable, Iterable):
        raise TypeError(f"presort expected an iterable, got {iterable!r}")
    return [
        combine_all(*group)
        for _, group in groupby(sorted(iterable, key=key_of), key=key_of)
    ]
