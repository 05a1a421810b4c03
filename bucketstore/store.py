"""Stores of named buckets."""

import logging
from typing import Iterator, Optional

from . import Logger, logger
from .bucket import Bucket
from .errors import BucketAlreadyExistsError, NoSuchBucketError
from .hashing import Hashable


class Store:
    """A collection of buckets registered under unique names."""

    bucket_class: type[Bucket] = Bucket

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._buckets: dict[str, Bucket] = {}

    def __contains__(self, name: object) -> bool:
        """Check if a bucket is registered under name."""
        return name in self._buckets

    def __getitem__(self, name: str) -> Bucket:
        """Return the bucket registered under name."""
        return self.get_bucket(name)

    def __iter__(self) -> Iterator[str]:
        """Return iterator over the bucket names."""
        return iter(list(self._buckets))

    def __len__(self) -> int:
        """Return the number of registered buckets."""
        return len(self._buckets)

    def __repr__(self) -> str:
        """Return a short description of the store."""
        return (
            f"<{self.__class__.__name__} buckets={len(self._buckets)} "
            f"items={self.item_count}>"
        )

    def _log(self, name: str) -> Logger:
        return logging.LoggerAdapter(logger, {"bucket": name})

    @property
    def item_count(self) -> int:
        """Total number of items in all buckets."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def has_bucket(self, name: str) -> bool:
        """Check there is a bucket with name in the store."""
        return name in self._buckets

    def get_bucket(self, name: str) -> Bucket:
        """Return the bucket with name from the store."""
        try:
            return self._buckets[name]
        except KeyError:
            raise NoSuchBucketError(name) from None

    def add_bucket(self, name: str, bucket: Optional[Bucket] = None) -> Bucket:
        """
        Register a bucket under a new name.

        Without a bucket, an empty one is created. The registered bucket is
        returned.
        """
        if self.has_bucket(name):
            raise BucketAlreadyExistsError(name)

        if bucket is None:
            bucket = self.bucket_class()
        self._buckets[name] = bucket
        self._log(name).debug("registered (%d items)", len(bucket))
        return bucket

    def remove_bucket(self, name: str) -> None:
        """Drop the bucket with name if there is one."""
        if self._buckets.pop(name, None) is not None:
            self._log(name).debug("removed")

    def names(self) -> list[str]:
        """Return the names of all registered buckets."""
        return list(self._buckets)

    def buckets(self) -> list[Bucket]:
        """Return all registered buckets."""
        return list(self._buckets.values())

    def buckets_which_contain(self, *items: Hashable) -> list[Bucket]:
        """Return the buckets containing at least one of items."""
        return [
            bucket
            for bucket in self._buckets.values()
            if any(bucket.has(item) for item in items)
        ]

    def has(self, bucket_name: str, item: Hashable) -> bool:
        """Check if the named bucket contains item."""
        return self.get_bucket(bucket_name).has(item)

    def add(self, bucket_name: str, item: Hashable) -> None:
        """Add an item to the named bucket."""
        self.get_bucket(bucket_name).add(item)
        self._log(bucket_name).debug("added %r", item)

    def remove(self, bucket_name: str, item: Hashable) -> None:
        """Remove an item from the named bucket."""
        self.get_bucket(bucket_name).remove(item)
        self._log(bucket_name).debug("removed %r", item)
