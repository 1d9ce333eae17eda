from ._src.comparable import SupportsRichComparison
from ._src.keyed import Keyed
from ._src.semigroup import KeyedSemigroup, Semigroup

__all__ = ["Keyed", "KeyedSemigroup", "Semigroup", "SupportsRichComparison"]
