from functools import reduce
from typing import Protocol, TypeVar, runtime_checkable

from .comparable import SupportsRichComparison
from .keyed import Keyed

__all__ = ["KeyedSemigroup", "Semigroup", "combine_all"]

K_co = TypeVar("K_co", bound=SupportsRichComparison, covariant=True)

Self = TypeVar("Self", bound="Semigroup")
S = TypeVar("S", bound="Semigroup")


@runtime_checkable
class Semigroup(Protocol):
    """
    Associative binary operator.

    Presorted sequences always call ``existing.combine(incoming)``, so
    the argument order may be used for right-biased or accumulating
    semantics. Commutativity is not required.
    """

    def combine(self: Self, other: Self, /) -> Self: ...


@runtime_checkable
class KeyedSemigroup(Keyed[K_co], Semigroup, Protocol[K_co]):
    """The elements stored in a presorted sequence."""


def combine_all(first: S, /, *rest: S) -> S:
    """Left fold of ``combine``, oldest element first."""
    return reduce(lambda existing, incoming: existing.combine(incoming), rest, first)
