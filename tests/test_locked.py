"""Tests for the thread-safe variants."""

import threading

import pytest
from bucketstore import NoSuchBucketError, ZeroItemsError
from bucketstore.locked import LockedBucket, LockedStore
from conftest import Person


def test_locked_store_creates_locked_buckets():
    store = LockedStore()
    assert isinstance(store.add_bucket("nodes"), LockedBucket)


def test_locked_store_behaves_like_store(foo: Person, bar: Person):
    store = LockedStore()
    store.add_bucket("nodes")
    store.add("nodes", foo)
    store.add("nodes", foo)

    assert store.has("nodes", foo)
    assert store.item_count == 1
    assert store.buckets_which_contain(foo, bar) == [store["nodes"]]

    store.remove("nodes", foo)
    with pytest.raises(ZeroItemsError):
        store.remove("nodes", foo)
    with pytest.raises(NoSuchBucketError):
        store.add("edges", foo)

    store.remove_bucket("nodes")
    assert "nodes" not in store
    assert len(store) == 0


def test_concurrent_adds():
    store = LockedStore()
    bucket = store.add_bucket("nodes")
    people = [Person(str(uid), uid=uid) for uid in range(200)]

    def worker():
        for person in people:
            store.add("nodes", person)
            bucket.add(person)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(bucket) == 200
    assert bucket.identities() == [str(uid) for uid in range(200)]
    assert list(bucket) == people


def test_concurrent_add_and_remove():
    bucket = LockedBucket()
    people = [Person(str(uid), uid=uid) for uid in range(100)]

    def adder():
        bucket.update(people)

    def remover():
        for person in people:
            bucket.add(person)
            bucket.remove(person)

    threads = [threading.Thread(target=adder), threading.Thread(target=remover)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(bucket) == len(bucket.identities())
