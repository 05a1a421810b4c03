"""Tests for item identities."""

import math

import pytest
from bucketstore import HashComputationError, Hashable, content_hash, identity_of
from bucketstore.hashing import canonical_json
from bucketstore.items import Record
from conftest import Person


def test_hashable_protocol():
    assert isinstance(Person("Foo", uid=1), Hashable)
    assert isinstance(Record("foo"), Hashable)
    assert not isinstance("foo", Hashable)
    assert not isinstance(1, Hashable)


@pytest.mark.parametrize(
    ("obj", "encoded"),
    {
        ("foo", b'"foo"'),
        (1, b"1"),
        (None, b"null"),
        ("hällö", '"hällö"'.encode()),
    },
)
def test_canonical_json(obj: object, encoded: bytes):
    assert canonical_json(obj) == encoded


def test_canonical_json_sorts_keys():
    assert canonical_json({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'


@pytest.mark.parametrize("obj", [object(), {1, 2}, math.nan, b"bytes"])
def test_canonical_json_error(obj: object):
    with pytest.raises(HashComputationError, match="Cannot encode"):
        canonical_json(obj)


def test_content_hash():
    digest = content_hash({"a": 1, "b": 2})
    assert digest.startswith("sha256:")
    assert len(digest) == len("sha256:") + 64
    assert digest == content_hash({"b": 2, "a": 1})
    assert digest != content_hash({"a": 1}, {"b": 2})
    assert content_hash("a", "b") != content_hash("b", "a")


def test_identity_of():
    assert identity_of(Person("Foo", uid=1)) == "1"

    with pytest.raises(HashComputationError, match="no uid"):
        identity_of(Person("Foo"))
