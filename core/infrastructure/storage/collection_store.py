"""
Paginated collection store.

An in-memory, insertion-ordered collection of encoded records keyed by
id. Every record receives a monotonically increasing sequence number at
insertion; the sequence number is what cursors point at, so deleting
records never shifts or invalidates positions already handed out.

All mutations of one store are serialized by a single re-entrant lock.
Readers take the same lock only while copying the rows they need, and
decode outside of it.
"""
import logging
import threading
from bisect import bisect_right
from typing import Callable, Dict, Generic, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar

from core.domain.exceptions import (
    CorruptRecordError,
    DuplicateIdError,
    DuplicateValueError,
    InvalidCursorError,
    RecordNotFoundError,
)
from core.domain.value_objects import Page
from core.infrastructure.storage.codec import RecordCodec
from core.infrastructure.storage.cursor import decode_cursor, encode_cursor
from core.metrics import (
    store_corrupt_records_total,
    store_operations_total,
    store_records,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
COMPACTION_RATIO = 0.5
# Below this many index slots tombstones are left in place.
COMPACTION_MIN_SLOTS = 64


class CollectionStore(Generic[R]):
    """
    Generic append/lookup/delete/list engine for one collection.

    Ids, and the values of any declared unique fields, are claimed for
    the life of the store: a deleted record's id or key is never accepted
    again.
    """

    def __init__(
        self,
        name: str,
        codec: RecordCodec,
        unique_fields: Sequence[str] = (),
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        compaction_ratio: float = COMPACTION_RATIO,
    ):
        self.name = name
        self.codec = codec
        self.unique_fields = tuple(unique_fields)
        self.default_page_size = max(1, default_page_size)
        self.max_page_size = max(self.default_page_size, max_page_size)
        self.compaction_ratio = compaction_ratio

        self._lock = threading.RLock()
        self._rows: Dict[str, Tuple[int, str]] = {}
        self._order_seqs: List[int] = []
        self._order_ids: List[str] = []
        self._tombstones = 0
        self._next_seq = 1
        self._claimed_ids: Set[str] = set()
        self._claimed_values: Dict[str, Set[object]] = {field: set() for field in self.unique_fields}
        self._seeded = False

    def __repr__(self) -> str:
        return f"<CollectionStore {self.name} records={len(self._rows)}>"

    # Mutations

    def create(self, record: R) -> R:
        """
        Append a record at the tail of the collection.

        Returns:
            The record, unchanged

        Raises:
            DuplicateIdError: If the id is or was present
            DuplicateValueError: If a unique field value was already stored
        """
        payload = self.codec.encode(record)
        with self._lock:
            self._check_claims(record)
            self._insert(record, payload)
        store_operations_total.labels(collection=self.name, operation="create").inc()
        logger.debug("Created %s record %s", self.name, record.id)
        return record

    def update(self, record_id: str, mutate: Callable[[R], R]) -> R:
        """
        Atomically replace a record with the result of `mutate`.

        The record keeps its position. Returning the same object skips
        the write.

        Raises:
            RecordNotFoundError: If the record is absent
            CorruptRecordError: If the stored record cannot be decoded
        """
        with self._lock:
            row = self._rows.get(record_id)
            if row is None:
                raise RecordNotFoundError(f"{self.name} record not found", record_id)
            seq, payload = row
            current = self.codec.decode(payload, record_id)
            updated = mutate(current)
            if updated is not current:
                if updated.id != record_id:
                    raise ValueError("Record id cannot change on update")
                for field in self.unique_fields:
                    if getattr(updated, field) != getattr(current, field):
                        raise ValueError(f"Unique field '{field}' cannot change on update")
                self._rows[record_id] = (seq, self.codec.encode(updated))
        store_operations_total.labels(collection=self.name, operation="update").inc()
        return updated

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns True if it was present."""
        with self._lock:
            removed = self._remove(record_id)
            self._maybe_compact()
        store_operations_total.labels(collection=self.name, operation="delete").inc()
        if removed:
            logger.debug("Deleted %s record %s", self.name, record_id)
        return removed

    def delete_many(self, record_ids: Iterable[str]) -> int:
        """
        Remove every listed record that is present.

        Missing ids are skipped. Returns the number of records removed.
        """
        with self._lock:
            removed = sum(1 for record_id in dict.fromkeys(record_ids) if self._remove(record_id))
            self._maybe_compact()
        store_operations_total.labels(collection=self.name, operation="delete_many").inc()
        logger.info("Bulk deleted %d %s record(s)", removed, self.name)
        return removed

    def seed(self, factory: Callable[[], Iterable[R]]) -> int:
        """
        Populate an empty collection once per store lifetime.

        The check and the insertion happen under the collection lock, so
        racing callers insert exactly one batch. If the collection already
        holds records when first checked, nothing is inserted and later
        calls stay no-ops.

        Returns:
            Number of records inserted
        """
        with self._lock:
            if self._seeded:
                return 0
            if self._rows:
                self._seeded = True
                return 0

            batch = [(record, self.codec.encode(record)) for record in factory()]
            seen_ids = set()
            for record, _ in batch:
                self._check_claims(record)
                if record.id in seen_ids:
                    raise DuplicateIdError(record.id, self.name)
                seen_ids.add(record.id)
            for record, payload in batch:
                self._insert(record, payload)
            self._seeded = True
        store_operations_total.labels(collection=self.name, operation="seed").inc()
        return len(batch)

    # Reads

    def get(self, record_id: str) -> R:
        """
        Fetch one record.

        Raises:
            RecordNotFoundError: If the record is absent
            CorruptRecordError: If the stored record cannot be decoded
        """
        with self._lock:
            row = self._rows.get(record_id)
        if row is None:
            raise RecordNotFoundError(f"{self.name} record not found", record_id)
        try:
            return self.codec.decode(row[1], record_id)
        except CorruptRecordError:
            store_corrupt_records_total.labels(collection=self.name).inc()
            logger.error("Corrupt %s record %s", self.name, record_id)
            raise

    def exists(self, record_id: str) -> bool:
        with self._lock:
            return record_id in self._rows

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def list(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[R]:
        """
        List up to `limit` records after the cursor position.

        An empty cursor starts at the beginning of the collection. A
        cursor that names no known position is logged and treated as the
        beginning. Corrupt records are skipped and counted.
        """
        limit = self.clamp_limit(limit)
        with self._lock:
            start = self._resolve_cursor(cursor) if cursor else 0
            rows: List[Tuple[str, int, str]] = []
            index = start
            total = len(self._order_ids)
            while index < total and len(rows) < limit:
                record_id = self._order_ids[index]
                row = self._rows.get(record_id)
                if row is not None:
                    rows.append((record_id, row[0], row[1]))
                index += 1
            has_more = any(self._order_ids[i] in self._rows for i in range(index, total))

        items = []
        for record_id, _, payload in rows:
            try:
                items.append(self.codec.decode(payload, record_id))
            except CorruptRecordError as e:
                store_corrupt_records_total.labels(collection=self.name).inc()
                logger.error(
                    "Skipping corrupt %s record %s: %s",
                    self.name,
                    record_id,
                    e.message,
                    extra={"collection": self.name, "record_id": record_id},
                )

        next_cursor = encode_cursor(self.name, rows[-1][1]) if rows and has_more else None
        store_operations_total.labels(collection=self.name, operation="list").inc()
        return Page(items=items, next=next_cursor)

    def clamp_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.default_page_size
        return min(max(1, int(limit)), self.max_page_size)

    # Internals (callers hold the lock)

    def _check_claims(self, record: R) -> None:
        if record.id in self._claimed_ids:
            raise DuplicateIdError(record.id, self.name)
        for field in self.unique_fields:
            if getattr(record, field) in self._claimed_values[field]:
                raise DuplicateValueError(field, self.name)

    def _insert(self, record: R, payload: str) -> None:
        seq = self._next_seq
        self._next_seq += 1
        self._rows[record.id] = (seq, payload)
        self._order_seqs.append(seq)
        self._order_ids.append(record.id)
        self._claimed_ids.add(record.id)
        for field in self.unique_fields:
            self._claimed_values[field].add(getattr(record, field))
        store_records.labels(collection=self.name).set(len(self._rows))

    def _remove(self, record_id: str) -> bool:
        if self._rows.pop(record_id, None) is None:
            return False
        self._tombstones += 1
        store_records.labels(collection=self.name).set(len(self._rows))
        return True

    def _resolve_cursor(self, cursor: str) -> int:
        try:
            seq = decode_cursor(cursor, self.name)
            if seq < 1 or seq >= self._next_seq:
                raise InvalidCursorError(f"Cursor position {seq} was never issued")
        except InvalidCursorError as e:
            logger.warning(
                "Invalid %s cursor, restarting from the beginning: %s",
                self.name,
                e.message,
                extra={"collection": self.name},
            )
            return 0
        return bisect_right(self._order_seqs, seq)

    def _maybe_compact(self) -> None:
        slots = len(self._order_ids)
        if slots < COMPACTION_MIN_SLOTS or self._tombstones <= slots * self.compaction_ratio:
            return
        live = [
            (seq, record_id)
            for seq, record_id in zip(self._order_seqs, self._order_ids)
            if record_id in self._rows
        ]
        self._order_seqs = [seq for seq, _ in live]
        self._order_ids = [record_id for _, record_id in live]
        self._tombstones = 0
        logger.debug("Compacted %s order index from %d to %d slots", self.name, slots, len(live))
