"""A module for the 'bucket'."""

import collections.abc
from typing import Generic, Iterable, Iterator, TypeVar

from .errors import NoItemError, NoKeyError, ZeroItemsError
from .hashing import Hashable, Identity, identity_of

T = TypeVar("T", bound=Hashable)


class Bucket(collections.abc.Collection[T], Generic[T]):
    """
    A set of items de-duplicated by their identity.

    An item is stored under the identity it had when it was added. Stored
    items are not copied and never re-keyed, so mutating one after adding it
    is visible through the bucket but does not move it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        """Init the bucket, optionally adding some items."""
        self._items: dict[Identity, T] = {}
        self._count = 0
        self.update(items)

    def __contains__(self, item: object) -> bool:
        """Check if item is contained in the bucket."""
        return isinstance(item, Hashable) and self.has(item)

    def __iter__(self) -> Iterator[T]:
        """Return iterator for all items in insertion order."""
        return iter(self._items.values())

    def __len__(self) -> int:
        """Return the number of unique items."""
        return self._count

    def __repr__(self) -> str:
        """Return a short description of the bucket."""
        return f"<{self.__class__.__name__} items={self._count}>"

    def len(self) -> int:
        """Return the number of unique items."""
        return len(self)

    def has(self, item: T) -> bool:
        """
        Check if an equal item is stored under the identity of item.

        Items whose identity cannot be computed are never contained.
        """
        try:
            identity = identity_of(item)
        except Exception:
            return False

        if identity not in self._items:
            return False
        stored = self._items[identity]
        return stored is item or stored == item

    def add(self, item: T) -> None:
        """
        Add an item to the bucket.

        Adding an item that is already contained does nothing. An unequal
        item with the identity of a stored one replaces it.
        """
        if self.has(item):
            return

        identity = identity_of(item)
        if identity not in self._items:
            self._count += 1
        self._items[identity] = item

    def remove(self, item: T) -> None:
        """Remove an item from the bucket."""
        if self._count <= 0:
            raise ZeroItemsError()

        if not self.has(item):
            raise NoItemError()

        identity = identity_of(item)
        del self._items[identity]
        self._count -= 1

    def update(self, items: Iterable[T]) -> None:
        """Add multiple items to the bucket."""
        for item in items:
            self.add(item)

    def get(self, identity: Identity) -> T:
        """Return the item stored under an identity."""
        try:
            return self._items[identity]
        except KeyError:
            raise NoKeyError(identity) from None

    def identities(self) -> list[Identity]:
        """Return the identities of all items in insertion order."""
        return list(self._items)

    def clear(self) -> None:
        """Remove all items from the bucket."""
        self._items.clear()
        self._count = 0
