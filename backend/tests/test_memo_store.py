"""
MemoPad Backend — MemoStore Unit Tests
========================================

What:  Tests for the in-memory store: id assignment, lookups, mutations, locking.
How:   Plain store instances; no HTTP involved.

What we test:
    ✅ max_plus_one ids (1, 2, reuse of deleted top id)
    ✅ sequence ids never reused
    ✅ NotFoundError for every id-based operation on a missing id
    ✅ Title-only replace leaves contents untouched
    ✅ Concurrent creates receive unique ids
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from memopad.exceptions import NotFoundError
from memopad.models.memo import Memo
from memopad.store import MemoStore


class TestIdAssignment:
    """Tests for the two id strategies."""

    def test_first_memo_gets_id_1_then_2(self, store):
        assert store.create("A", "B").id == 1
        assert store.create("C", "D").id == 2

    def test_max_plus_one_reuses_deleted_top_id(self, store):
        store.create("one", "1")
        store.create("two", "2")
        store.delete(2)

        assert store.create("again", "x").id == 2

    def test_max_plus_one_skips_gaps_below_max(self, store):
        for i in range(3):
            store.create(f"t{i}", f"c{i}")
        store.delete(2)

        assert store.create("next", "x").id == 4

    def test_max_plus_one_restarts_at_1_when_emptied(self, store):
        store.create("only", "x")
        store.delete(1)

        assert store.create("fresh", "y").id == 1

    def test_sequence_never_reuses_ids(self, sequence_store):
        sequence_store.create("one", "1")
        sequence_store.create("two", "2")
        sequence_store.delete(2)

        assert sequence_store.create("three", "3").id == 3

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError, match="id_strategy"):
            MemoStore(id_strategy="random")

    def test_clear_resets_sequence(self, sequence_store):
        sequence_store.create("a", "b")
        sequence_store.create("c", "d")
        sequence_store.clear()

        assert len(sequence_store) == 0
        assert sequence_store.create("e", "f").id == 1


class TestLookups:
    """Tests for find_by_id and find_all."""

    def test_find_by_id_returns_stored_fields(self, store):
        created = store.create("title", "body")

        found = store.find_by_id(created.id)

        assert found.title == "title"
        assert found.contents == "body"

    def test_create_without_fields_keeps_none(self, store):
        memo = store.create()

        assert store.find_by_id(memo.id) == Memo(id=1, title=None, contents=None)

    def test_find_by_id_missing_raises(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.find_by_id(42)
        assert exc_info.value.resource_id == 42

    def test_find_after_delete_raises(self, store):
        memo = store.create("gone", "soon")
        store.delete(memo.id)

        with pytest.raises(NotFoundError):
            store.find_by_id(memo.id)

    def test_find_all_empty(self, store):
        assert store.find_all() == []

    def test_find_all_returns_every_memo(self, store):
        for i in range(5):
            store.create(f"title {i}", f"contents {i}")

        memos = store.find_all()

        assert len(memos) == 5
        assert {(m.title, m.contents) for m in memos} == {
            (f"title {i}", f"contents {i}") for i in range(5)
        }

    def test_find_all_is_a_snapshot(self, store):
        store.create("a", "b")
        snapshot = store.find_all()
        store.create("c", "d")

        assert len(snapshot) == 1
        assert store.count() == 2


class TestMutations:
    """Tests for replace_fields, replace_title and delete."""

    def test_replace_fields_overwrites_both(self, store):
        memo = store.create("old", "old body")

        updated = store.replace_fields(memo.id, "new", "new body")

        assert (updated.title, updated.contents) == ("new", "new body")
        assert store.find_by_id(memo.id).contents == "new body"

    def test_replace_fields_accepts_none(self, store):
        memo = store.create("old", "old body")

        updated = store.replace_fields(memo.id, None, None)

        assert updated.title is None
        assert updated.contents is None

    def test_replace_fields_missing_does_not_create(self, store):
        with pytest.raises(NotFoundError):
            store.replace_fields(7, "t", "c")

        assert len(store) == 0
        assert 7 not in store

    def test_replace_title_leaves_contents(self, store):
        memo = store.create("old", "keep me")

        updated = store.replace_title(memo.id, "new")

        assert updated.title == "new"
        assert updated.contents == "keep me"

    def test_replace_title_missing_raises(self, store):
        with pytest.raises(NotFoundError):
            store.replace_title(1, "t")

    def test_delete_missing_raises(self, store):
        store.create("a", "b")

        with pytest.raises(NotFoundError):
            store.delete(2)
        assert len(store) == 1

    def test_memo_id_is_immutable(self, store):
        memo = store.create("a", "b")

        with pytest.raises(AttributeError):
            memo.id = 99
        assert store.find_by_id(1) is memo


class TestConcurrency:
    """The lock must serialize id assignment with the insert."""

    @pytest.mark.parametrize("strategy", ["max_plus_one", "sequence"])
    def test_concurrent_creates_get_unique_ids(self, strategy):
        store = MemoStore(id_strategy=strategy)
        workers, per_worker = 8, 50
        barrier = threading.Barrier(workers)

        def create_many(worker):
            barrier.wait()
            return [store.create(f"w{worker}", str(i)).id for i in range(per_worker)]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(create_many, range(workers)))

        ids = [memo_id for batch in results for memo_id in batch]
        assert len(ids) == workers * per_worker
        assert set(ids) == set(range(1, workers * per_worker + 1))
        assert len(store) == workers * per_worker
