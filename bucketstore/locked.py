"""Buckets and stores that can be shared between threads."""

import threading
from typing import Iterable, Iterator, Optional

from .bucket import Bucket, T
from .hashing import Hashable, Identity
from .store import Store


class LockedBucket(Bucket[T]):
    """Bucket guarding every operation with a single lock."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        """Init the lock and the bucket."""
        self.lock = threading.RLock()
        super().__init__(items)

    def __iter__(self) -> Iterator[T]:
        """Return iterator over a snapshot of the items."""
        with self.lock:
            return iter(list(self._items.values()))

    def __len__(self) -> int:
        """Return the number of unique items."""
        with self.lock:
            return super().__len__()

    def has(self, item: T) -> bool:
        """Check if an equal item is stored under the identity of item."""
        with self.lock:
            return super().has(item)

    def add(self, item: T) -> None:
        """Add an item to the bucket."""
        with self.lock:
            super().add(item)

    def remove(self, item: T) -> None:
        """Remove an item from the bucket."""
        with self.lock:
            super().remove(item)

    def update(self, items: Iterable[T]) -> None:
        """Add multiple items to the bucket."""
        with self.lock:
            super().update(items)

    def get(self, identity: Identity) -> T:
        """Return the item stored under an identity."""
        with self.lock:
            return super().get(identity)

    def identities(self) -> list[Identity]:
        """Return the identities of all items in insertion order."""
        with self.lock:
            return super().identities()

    def clear(self) -> None:
        """Remove all items from the bucket."""
        with self.lock:
            super().clear()


class LockedStore(Store):
    """Store guarding every operation with a single lock."""

    bucket_class = LockedBucket

    def __init__(self) -> None:
        """Init the lock and an empty store."""
        self.lock = threading.RLock()
        super().__init__()

    def __contains__(self, name: object) -> bool:
        """Check if a bucket is registered under name."""
        with self.lock:
            return super().__contains__(name)

    def __iter__(self) -> Iterator[str]:
        """Return iterator over a snapshot of the bucket names."""
        with self.lock:
            return super().__iter__()

    def __len__(self) -> int:
        """Return the number of registered buckets."""
        with self.lock:
            return super().__len__()

    @property
    def item_count(self) -> int:
        """Total number of items in all buckets."""
        with self.lock:
            return sum(len(bucket) for bucket in self._buckets.values())

    def has_bucket(self, name: str) -> bool:
        """Check there is a bucket with name in the store."""
        with self.lock:
            return super().has_bucket(name)

    def get_bucket(self, name: str) -> Bucket:
        """Return the bucket with name from the store."""
        with self.lock:
            return super().get_bucket(name)

    def add_bucket(self, name: str, bucket: Optional[Bucket] = None) -> Bucket:
        """Register a bucket under a new name."""
        with self.lock:
            return super().add_bucket(name, bucket)

    def remove_bucket(self, name: str) -> None:
        """Drop the bucket with name if there is one."""
        with self.lock:
            super().remove_bucket(name)

    def names(self) -> list[str]:
        """Return the names of all registered buckets."""
        with self.lock:
            return super().names()

    def buckets(self) -> list[Bucket]:
        """Return all registered buckets."""
        with self.lock:
            return super().buckets()

    def buckets_which_contain(self, *items: Hashable) -> list[Bucket]:
        """Return the buckets containing at least one of items."""
        with self.lock:
            return super().buckets_which_contain(*items)

    def has(self, bucket_name: str, item: Hashable) -> bool:
        """Check if the named bucket contains item."""
        with self.lock:
            return super().has(bucket_name, item)

    def add(self, bucket_name: str, item: Hashable) -> None:
        """Add an item to the named bucket."""
        with self.lock:
            super().add(bucket_name, item)

    def remove(self, bucket_name: str, item: Hashable) -> None:
        """Remove an item from the named bucket."""
        with self.lock:
            super().remove(bucket_name, item)
