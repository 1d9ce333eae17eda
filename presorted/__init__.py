"""
Presorted sequences: lists kept sorted by a key derived from their
elements, where inserting an element with a key already present
combines the two elements instead of storing a duplicate. Useful for
in-memory aggregation, such as accumulating partial sums keyed by an
identifier and merging the results of independent shards.
"""
import logging

from . import abc
from ._src.keyed import key_of
from ._src.operations import get_by_key, index_of_key, is_presorted, merge, presort, put
from ._src.presorted_list import PresortedList
from ._src.semigroup import combine_all

__all__ = [
    "PresortedList",
    "combine_all",
    "get_by_key",
    "index_of_key",
    "is_presorted",
    "key_of",
    "merge",
    "presort",
    "put",
]

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
