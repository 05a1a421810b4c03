"""Identities of stored items."""

import hashlib
import json
from typing import Protocol, Union, runtime_checkable

from .errors import HashComputationError

Identity = Union[str, int]

HASH_PREFIX = "sha256:"


@runtime_checkable
class Hashable(Protocol):
    """An item that can compute a reproducible identity from its content."""

    def hash(self) -> Identity:
        """
        Return the identity of the item.

        Equal content must give an equal identity every time this is called.
        Raise HashComputationError if the content cannot be identified.
        """
        ...


def identity_of(item: Hashable) -> Identity:
    """Compute the identity of an item and check its type."""
    identity = item.hash()
    if isinstance(identity, bool) or not isinstance(identity, (str, int)):
        raise HashComputationError(
            f"Invalid identity {identity!r} of {type(item).__name__}: "
            "expected str or int",
        )
    return identity


def canonical_json(obj: object) -> bytes:
    """Encode obj as JSON with sorted keys and no whitespace."""
    try:
        text = json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise HashComputationError(f"Cannot encode {obj!r}: {e}") from e
    return text.encode("utf-8")


def content_hash(*parts: object) -> str:
    """Return a 'sha256:<hex>' identity of the given content."""
    return HASH_PREFIX + hashlib.sha256(canonical_json(list(parts))).hexdigest()
