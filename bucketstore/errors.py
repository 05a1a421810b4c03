"""Errors raised by buckets and stores."""


class StoreError(Exception):
    """Base class for all bucket and store errors."""


class NoKeyError(StoreError, KeyError):
    """Raised when no item is stored under an identity."""

    def __init__(self, key: object) -> None:
        """Initialize the exception."""
        super().__init__(f"No such key {key!r}")
        self.key = key

    def __str__(self) -> str:
        """Return the message without KeyError's quoting."""
        return str(self.args[0])


class NoItemError(StoreError):
    """Raised when removing an item that is not in a non-empty bucket."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("No such item found")


class ZeroItemsError(StoreError):
    """Raised when removing from an empty bucket."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("Zero items")


class NoSuchBucketError(StoreError, KeyError):
    """Raised when a store has no bucket registered under a name."""

    def __init__(self, name: str) -> None:
        """Initialize the exception."""
        super().__init__(f"No such bucket {name!r}")
        self.name = name

    def __str__(self) -> str:
        """Return the message without KeyError's quoting."""
        return str(self.args[0])


class BucketAlreadyExistsError(StoreError):
    """Raised when registering a bucket under a name that is taken."""

    def __init__(self, name: str) -> None:
        """Initialize the exception."""
        super().__init__(f"Bucket {name!r} already exists")
        self.name = name


class HashComputationError(StoreError):
    """Raised when the identity of an item cannot be computed."""
