from typing import Any, Protocol, TypeVar, runtime_checkable

from .comparable import SupportsRichComparison

__all__ = ["Keyed", "key_of"]

K_co = TypeVar("K_co", bound=SupportsRichComparison, covariant=True)
K = TypeVar("K", bound=SupportsRichComparison)

Self = TypeVar("Self", bound="Keyed")


@runtime_checkable
class Keyed(Protocol[K_co]):
    """
    Something with a key.

    The key must be a pure projection of the element: presorted
    sequences look it up repeatedly and assume it never changes
    while the element is stored.
    """

    def key(self: Self, /) -> K_co: ...


def key_of(element: Keyed[K], /) -> K:
    return element.key()


def is_keyed(element: Any, /) -> bool:
    return callable(getattr(type(element), "key", None))


def _check_keyed(element: Any, method: str, /) -> None:
    if not is_keyed(element):
        raise TypeError(f"{method} expected an element with a key() method, got {element!r}")
