"""Shared element types and fixtures for the presorted tests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from presorted._src import presorted_list


@dataclass(frozen=True)
class Thing:
    """Sums values sharing a key."""

    id: int
    value: float

    def key(self) -> int:
        return self.id

    def combine(self, other: Thing) -> Thing:
        return Thing(self.id, self.value + other.value)


@dataclass(frozen=True)
class Log:
    """Concatenates entries, so the combine order is observable."""

    name: str
    entries: tuple[str, ...]

    def key(self) -> str:
        return self.name

    def combine(self, other: Log) -> Log:
        return Log(self.name, self.entries + other.entries)


@pytest.fixture(scope="session", autouse=True)
def check_invariants() -> Iterator[None]:
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(presorted_list, "CHECK_INVARIANTS", True)
        yield
