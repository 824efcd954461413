"""
JSON document store.

The whole dataset lives in memory as one document of named collections and
is written back to a single JSON file after every mutation. A re-entrant
lock serializes access so that each operation runs read-modify-persist
without interleaving with another.

Collections are identity-keyed ordered maps with optional unique secondary
indexes. They are handed to repositories only; services expose records, never
the containers.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .config import get_settings
from .exceptions import PersistenceError
from .models import StoreRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=StoreRecord)

DocumentFactory = Callable[[], dict[str, list[dict[str, Any]]]]


class StoreLoadError(PersistenceError):
    """Raised when the store file exists but cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not load store from {path}: {reason}",
            path=path,
            code="STORE_LOAD_FAILED",
            details={"reason": reason},
        )


class StoreWriteError(PersistenceError):
    """Raised when the store file cannot be rewritten after a mutation."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not write store to {path}: {reason}",
            path=path,
            code="STORE_WRITE_FAILED",
            details={"reason": reason},
        )


class DuplicateKeyError(ValueError):
    """A record would violate a unique index."""


class Collection(Generic[R]):
    """
    Ordered, identity-keyed set of records of one model type.

    Iteration follows insertion order. Unique indexes map a field value to
    the record id; None values are not indexed.
    """

    def __init__(
        self,
        name: str,
        model: type[R],
        unique: tuple[str, ...] = (),
    ) -> None:
        self.name = name
        self.model = model
        self._records: dict[str, R] = {}
        self._indexes: dict[str, dict[Any, str]] = {field: {} for field in unique}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records.values()))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def get(self, record_id: str) -> Optional[R]:
        return self._records.get(record_id)

    def find(self, field: str, value: Any) -> Optional[R]:
        """Look up a record through a unique index."""
        record_id = self._indexes[field].get(value)
        if record_id is None:
            return None
        return self._records[record_id]

    def first(self) -> Optional[R]:
        return next(iter(self._records.values()), None)

    def add(self, record: R) -> R:
        if record.id in self._records:
            raise DuplicateKeyError(f"{self.name}: duplicate id {record.id}")
        self._check_unique(record)
        self._records[record.id] = record
        self._index(record)
        return record

    def replace(self, record: R) -> R:
        """Swap in a new version of an existing record, keeping its position."""
        current = self._records[record.id]
        self._unindex(current)
        try:
            self._check_unique(record)
        except DuplicateKeyError:
            self._index(current)
            raise
        self._records[record.id] = record
        self._index(record)
        return record

    def remove(self, record_id: str) -> bool:
        record = self._records.pop(record_id, None)
        if record is None:
            return False
        self._unindex(record)
        return True

    def load(self, rows: list[dict[str, Any]]) -> None:
        for row in rows:
            self.add(self.model.model_validate(row))

    def reset(self, rows: list[dict[str, Any]]) -> None:
        """Drop every record and reload from persisted rows."""
        self._records.clear()
        for index in self._indexes.values():
            index.clear()
        self.load(rows)

    def dump(self) -> list[dict[str, Any]]:
        return [record.to_document() for record in self._records.values()]

    def _check_unique(self, record: R) -> None:
        for field, index in self._indexes.items():
            value = getattr(record, field)
            if value is None:
                continue
            owner = index.get(value)
            if owner is not None and owner != record.id:
                raise DuplicateKeyError(f"{self.name}: duplicate {field} {value!r}")

    def _index(self, record: R) -> None:
        for field, index in self._indexes.items():
            value = getattr(record, field)
            if value is not None:
                index[value] = record.id

    def _unindex(self, record: R) -> None:
        for field, index in self._indexes.items():
            value = getattr(record, field)
            if value is not None and index.get(value) == record.id:
                del index[value]


class JsonDocumentStore:
    """
    In-memory document persisted as a single JSON file.

    The raw document is read once at construction. Collections are
    materialized on first registration; collections nobody registers are
    written back untouched.

    Example:
        store = JsonDocumentStore("data/store.json")
        signups = store.collection("signups", Signup, unique=("email",))
        with store.transaction():
            signups.add(record)
    """

    def __init__(
        self,
        path: str | os.PathLike,
        default_document: Optional[DocumentFactory] = None,
    ) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()
        self._depth = 0
        self._collections: dict[str, Collection] = {}

        raw = self._read()
        if raw is None:
            self._document = default_document() if default_document else {}
            logger.info(f"Initialized new store at {self.path}")
            self._last_persisted = self._write(self._document)
        else:
            self._document = raw
            self._last_persisted = None
            logger.info(f"Loaded store from {self.path}")

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the whole document; hold it for any read."""
        return self._lock

    def collection(
        self,
        name: str,
        model: type[R],
        unique: tuple[str, ...] = (),
    ) -> Collection[R]:
        """Return the named collection, materializing it on first use."""
        with self._lock:
            existing = self._collections.get(name)
            if existing is not None:
                return existing
            collection: Collection[R] = Collection(name, model, unique)
            collection.load(self._document.get(name, []))
            self._collections[name] = collection
            return collection

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        Run a mutation under the lock and persist the document afterwards.

        Nested transactions join the outermost one. If the body raises, or
        the write fails, every registered collection is restored to the last
        persisted document before the exception propagates.
        """
        with self._lock:
            if self._last_persisted is None:
                self._last_persisted = self._serialize(self._snapshot())
            self._depth += 1
            try:
                yield
            except BaseException:
                self._depth -= 1
                if self._depth == 0:
                    self._restore()
                raise
            self._depth -= 1
            if self._depth == 0:
                self.persist()

    def persist(self) -> None:
        """Rewrite the store file with the full current document."""
        with self._lock:
            document = self._snapshot()
            try:
                self._last_persisted = self._write(document)
            except StoreWriteError:
                self._restore()
                raise

    def _snapshot(self) -> dict[str, list[dict[str, Any]]]:
        document = dict(self._document)
        for name, collection in self._collections.items():
            document[name] = collection.dump()
        return document

    def _restore(self) -> None:
        if self._last_persisted is None:
            return
        logger.warning(f"Rolling back in-memory store to last persisted state ({self.path})")
        self._document = json.loads(self._last_persisted)
        for name, collection in self._collections.items():
            collection.reset(self._document.get(name, []))

    def _read(self) -> Optional[dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreLoadError(str(self.path), str(e)) from e
        if not raw.strip():
            return None
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreLoadError(str(self.path), str(e)) from e
        if not isinstance(document, dict):
            raise StoreLoadError(str(self.path), "top-level value is not an object")
        return document

    @staticmethod
    def _serialize(document: dict[str, Any]) -> str:
        return json.dumps(document, indent=2, ensure_ascii=False)

    def _write(self, document: dict[str, Any]) -> str:
        payload = self._serialize(document)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Failed to write store {self.path}: {e}")
            raise StoreWriteError(str(self.path), str(e)) from e
        return payload


# Module-level store cache
_store: Optional[JsonDocumentStore] = None


def get_document_store(
    default_document: Optional[DocumentFactory] = None,
) -> JsonDocumentStore:
    """
    Get the process-wide document store.

    The file location comes from settings (DATA_FILE). The default document
    factory is only consulted when the file does not exist yet.

    Returns:
        Shared JsonDocumentStore instance
    """
    global _store

    if _store is None:
        settings = get_settings()
        _store = JsonDocumentStore(settings.data_file, default_document)

    return _store


def reset_store_cache() -> None:
    """
    Reset the cached document store.

    Useful for testing or when configuration changes.
    """
    global _store
    _store = None
