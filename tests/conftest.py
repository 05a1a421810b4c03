"""Shared items and helpers for the tests."""

from typing import Iterable, Optional

import pytest
from bucketstore import Bucket, HashComputationError, Store


class Person:
    """Item identified by its uid only."""

    def __init__(self, name: str, surname: str = "", uid: Optional[int] = None):
        self.name = name
        self.surname = surname
        self.uid = uid

    def hash(self) -> str:
        if self.uid is None:
            raise HashComputationError(f"{self.name} has no uid")
        return str(self.uid)


class BucketCursor:
    """Single-pass cursor over buckets, sortable by bucket size."""

    def __init__(self, buckets: Iterable[Bucket]):
        self._buckets = list(buckets)
        self._next = 0

    def __len__(self) -> int:
        return len(self._buckets)

    def less(self, i: int, j: int) -> bool:
        return len(self._buckets[i]) < len(self._buckets[j])

    def swap(self, i: int, j: int) -> None:
        self._buckets[i], self._buckets[j] = self._buckets[j], self._buckets[i]

    def sort(self) -> "BucketCursor":
        self._buckets.sort(key=len)
        self._next = 0
        return self

    def next(self) -> bool:
        return self._next < len(self._buckets)

    def result(self) -> Bucket:
        bucket = self._buckets[self._next]
        self._next += 1
        return bucket


@pytest.fixture
def foo() -> Person:
    return Person("Foo", uid=1)


@pytest.fixture
def bar() -> Person:
    return Person("Bar", uid=2)


@pytest.fixture
def cat() -> Person:
    return Person("Cat", uid=3)


@pytest.fixture
def store() -> Store:
    store = Store()
    store.add_bucket("nodes", Bucket())
    store.add_bucket("edges", Bucket())
    return store
