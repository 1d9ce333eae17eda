from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = ["SupportsRichComparison"]

Self = TypeVar("Self", bound="SupportsRichComparison")


@runtime_checkable
class SupportsRichComparison(Protocol):
    """
    Keys only need to be totally ordered, hashing is never used.

    Every object defines these methods, so this is a bound for type
    checkers and not a useful runtime check.
    """

    def __eq__(self: Self, other: Any, /) -> bool: ...
    def __ge__(self: Self, other: Any, /) -> bool: ...
    def __gt__(self: Self, other: Any, /) -> bool: ...
    def __le__(self: Self, other: Any, /) -> bool: ...
    def __lt__(self: Self, other: Any, /) -> bool: ...
    def __ne__(self: Self, other: Any, /) -> bool: ...
