"""
Unit tests for CollectionStore.
"""

import logging
import threading

import pytest

from core.domain.exceptions import (
    CorruptRecordError,
    DuplicateIdError,
    DuplicateValueError,
    RecordNotFoundError,
)
from core.infrastructure.storage.codec import RecordCodec
from core.infrastructure.storage.collection_store import COMPACTION_MIN_SLOTS, CollectionStore
from core.infrastructure.storage.cursor import encode_cursor
from licenses.domain.license import License
from users.domain.user import User


def _all_ids(store, limit):
    """Walk every page of a store and collect record ids."""
    ids = []
    cursor = None
    while True:
        page = store.list(cursor, limit)
        ids.extend(record.id for record in page.items)
        if page.next is None:
            return ids
        cursor = page.next


@pytest.mark.unit
class TestCollectionStoreWrites:
    """Tests for create, delete and update."""

    def test_create_and_get(self, user_store):
        """A created record can be fetched back."""
        user = User(id="u1", name="Admin User")

        assert user_store.create(user) is user
        assert user_store.get("u1") == user
        assert user_store.exists("u1") is True
        assert user_store.count() == 1

    def test_get_missing_raises(self, user_store):
        """Fetching an unknown id raises RecordNotFoundError."""
        with pytest.raises(RecordNotFoundError) as exc_info:
            user_store.get("missing")

        assert exc_info.value.record_id == "missing"

    def test_create_duplicate_id_raises(self, user_store):
        """Ids are unique within a collection."""
        user_store.create(User(id="u1", name="A"))

        with pytest.raises(DuplicateIdError):
            user_store.create(User(id="u1", name="B"))

        assert user_store.get("u1").name == "A"

    def test_deleted_id_is_never_reused(self, user_store):
        """An id stays claimed after its record is deleted."""
        user_store.create(User(id="u1", name="A"))
        user_store.delete("u1")

        with pytest.raises(DuplicateIdError):
            user_store.create(User(id="u1", name="B"))

    def test_unique_field_is_enforced_after_delete(self):
        """Unique values stay claimed for the life of the store."""
        store = CollectionStore("licenses", RecordCodec(License), unique_fields=("key",))
        first = License.create(product_id="prod_1", key="SK-" + "1" * 32)
        store.create(first)
        store.delete(first.id)

        with pytest.raises(DuplicateValueError):
            store.create(License.create(product_id="prod_2", key=first.key))

    def test_delete_reports_presence(self, user_store):
        """Deleting returns whether a record was removed."""
        user_store.create(User(id="u1", name="A"))

        assert user_store.delete("u1") is True
        assert user_store.delete("u1") is False
        assert user_store.exists("u1") is False

    def test_delete_many_counts_only_present_ids(self, user_store, make_users):
        """Missing and repeated ids are not counted."""
        for user in make_users(5):
            user_store.create(user)

        removed = user_store.delete_many(["u1", "u3", "u3", "nope", "u5"])

        assert removed == 3
        assert user_store.count() == 2
        assert _all_ids(user_store, 10) == ["u2", "u4"]

    def test_update_replaces_record_in_place(self, user_store, make_users):
        """Updates keep the record's position."""
        for user in make_users(3):
            user_store.create(user)

        user_store.update("u2", lambda user: User(id=user.id, name="Renamed"))

        assert _all_ids(user_store, 10) == ["u1", "u2", "u3"]
        assert user_store.get("u2").name == "Renamed"

    def test_update_cannot_change_id(self, user_store):
        """The mutation must keep the record id."""
        user_store.create(User(id="u1", name="A"))

        with pytest.raises(ValueError):
            user_store.update("u1", lambda user: User(id="u9", name="A"))

    def test_update_missing_raises(self, user_store):
        """Updating an unknown id raises RecordNotFoundError."""
        with pytest.raises(RecordNotFoundError):
            user_store.update("missing", lambda user: user)


@pytest.mark.unit
class TestCollectionStorePagination:
    """Tests for cursor pagination."""

    def test_empty_store_lists_nothing(self, user_store):
        """An empty collection has a single empty page."""
        page = user_store.list()

        assert page.items == []
        assert page.next is None

    @pytest.mark.parametrize("limit", [1, 3, 7, 25])
    def test_pages_cover_every_record_once(self, user_store, make_users, limit):
        """Walking all pages yields every record in insertion order."""
        users = make_users(25)
        for user in users:
            user_store.create(user)

        assert _all_ids(user_store, limit) == [user.id for user in users]

    def test_last_page_has_no_next(self, user_store, make_users):
        """An exactly full final page still ends the listing."""
        for user in make_users(4):
            user_store.create(user)

        first = user_store.list(None, 2)
        second = user_store.list(first.next, 2)

        assert first.next is not None
        assert [user.id for user in second.items] == ["u3", "u4"]
        assert second.next is None

    def test_limit_is_clamped(self, user_store, make_users):
        """Limits are clamped to the store's bounds."""
        for user in make_users(120):
            user_store.create(user)

        assert len(user_store.list(None, 0).items) == 1
        assert len(user_store.list(None, -5).items) == 1
        assert len(user_store.list(None, 1000).items) == user_store.max_page_size
        assert len(user_store.list().items) == user_store.default_page_size

    def test_cursor_survives_deletion_of_anchor(self, user_store, make_users):
        """Deleting the last record seen does not disturb the next page."""
        for user in make_users(6):
            user_store.create(user)
        page = user_store.list(None, 2)

        user_store.delete("u2")
        user_store.delete("u3")

        assert [user.id for user in user_store.list(page.next, 2).items] == ["u4", "u5"]

    def test_records_created_after_cursor_are_reached(self, user_store, make_users):
        """New records appear at the tail of an in-progress walk."""
        for user in make_users(2):
            user_store.create(user)
        page = user_store.list(None, 2)
        assert page.next is None

        user_store.create(User(id="u3", name="Late"))

        cursor = encode_cursor("users", 2)
        assert [user.id for user in user_store.list(cursor, 5).items] == ["u3"]

    def test_invalid_cursor_restarts_from_beginning(self, user_store, make_users, caplog):
        """Unknown cursors are logged and treated as no cursor."""
        for user in make_users(3):
            user_store.create(user)

        with caplog.at_level(logging.WARNING):
            page = user_store.list("garbage", 2)

        assert [user.id for user in page.items] == ["u1", "u2"]
        assert "Invalid users cursor" in caplog.text

    def test_cursor_from_future_position_restarts(self, user_store, make_users):
        """A position that was never issued is not trusted."""
        for user in make_users(3):
            user_store.create(user)

        page = user_store.list(encode_cursor("users", 999), 5)

        assert [user.id for user in page.items] == ["u1", "u2", "u3"]

    def test_next_is_none_when_only_deleted_records_follow(self, user_store, make_users):
        """Tombstones after the page do not produce a dangling cursor."""
        for user in make_users(4):
            user_store.create(user)
        user_store.delete_many(["u3", "u4"])

        page = user_store.list(None, 2)

        assert [user.id for user in page.items] == ["u1", "u2"]
        assert page.next is None

    def test_compaction_keeps_cursors_valid(self, user_store, make_users):
        """Rebuilding the order index does not move issued cursors."""
        total = COMPACTION_MIN_SLOTS * 2
        for user in make_users(total):
            user_store.create(user)
        page = user_store.list(None, 10)

        user_store.delete_many([f"u{i}" for i in range(1, total + 1) if i % 4])

        assert user_store._tombstones == 0
        assert len(user_store._order_ids) == total // 4
        assert _all_ids(user_store, 7) == [f"u{i}" for i in range(4, total + 1, 4)]
        resumed = user_store.list(page.next, 3)
        assert [user.id for user in resumed.items] == ["u12", "u16", "u20"]


@pytest.mark.unit
class TestCollectionStoreCorruption:
    """Tests for handling of undecodable stored records."""

    def _corrupt(self, store, record_id, payload="{broken"):
        seq, _ = store._rows[record_id]
        store._rows[record_id] = (seq, payload)

    def test_list_skips_corrupt_records(self, user_store, make_users, caplog):
        """A bad record never fails a listing."""
        for user in make_users(3):
            user_store.create(user)
        self._corrupt(user_store, "u2")

        with caplog.at_level(logging.ERROR):
            page = user_store.list()

        assert [user.id for user in page.items] == ["u1", "u3"]
        assert "Skipping corrupt users record u2" in caplog.text

    def test_get_raises_for_corrupt_record(self, user_store):
        """Single reads surface corruption."""
        user_store.create(User(id="u1", name="A"))
        self._corrupt(user_store, "u1", '{"id": "u1"}')

        with pytest.raises(CorruptRecordError) as exc_info:
            user_store.get("u1")

        assert exc_info.value.record_id == "u1"


@pytest.mark.unit
class TestCollectionStoreSeeding:
    """Tests for seed()."""

    def test_seed_inserts_once(self, user_store, make_users):
        """A second seed is a no-op."""
        assert user_store.seed(lambda: make_users(2)) == 2
        assert user_store.seed(lambda: make_users(2, prefix="x")) == 0
        assert user_store.count() == 2

    def test_seed_skips_non_empty_collection(self, user_store, make_users):
        """Existing records block seeding for good."""
        user_store.create(User(id="mine", name="Mine"))

        assert user_store.seed(lambda: make_users(2)) == 0
        user_store.delete("mine")
        assert user_store.seed(lambda: make_users(2)) == 0
        assert user_store.count() == 0

    def test_failed_seed_can_be_retried(self, user_store, make_users):
        """A batch that fails validation leaves the store unseeded and empty."""
        duplicate_batch = [User(id="u1", name="A"), User(id="u1", name="B")]

        with pytest.raises(DuplicateIdError):
            user_store.seed(lambda: duplicate_batch)

        assert user_store.count() == 0
        assert user_store.seed(lambda: make_users(2)) == 2

    def test_concurrent_seed_inserts_one_batch(self, user_store, make_users):
        """Racing first readers seed exactly once."""
        barrier = threading.Barrier(8)
        results = []

        def seed():
            barrier.wait()
            results.append(user_store.seed(lambda: make_users(5)))

        threads = [threading.Thread(target=seed) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == [0] * 7 + [5]
        assert user_store.count() == 5
