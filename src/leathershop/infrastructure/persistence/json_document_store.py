"""JSON-file-backed document store.

Each collection is one JSON file mapping document id -> document.  Every
stored document carries a ``_rev`` counter that is bumped on each write;
transactions are optimistic: reads remember the revision they saw and
the commit only goes through if none of them changed meanwhile.

Commits are serialised with a process-local lock.  Several processes
sharing one data directory are not coordinated.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, TypeVar

from leathershop.domain.exceptions import EntityNotFoundError, TransientStoreError
from leathershop.domain.repository.transaction import (
    BatchWriter,
    Transaction,
    TransactionRunner,
    WriteBatch,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_REV = "_rev"

DocKey = tuple[str, str]


def _strip(doc: dict[str, Any]) -> dict[str, Any]:
    return {k: copy.deepcopy(v) for k, v in doc.items() if k != _REV}


def _matches(doc: dict[str, Any], equals: dict[str, Any]) -> bool:
    return all(doc.get(field) == value for field, value in equals.items())


class JsonDocumentStore(TransactionRunner, BatchWriter):

    def __init__(self, data_dir: Path, max_attempts: int = 5) -> None:
        self._data_dir = data_dir
        self._max_attempts = max_attempts
        self._lock = threading.RLock()
        self._data_dir.mkdir(parents=True, exist_ok=True)

    # --- Plain reads and writes -----------------------------------------------

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = self._load(collection).get(doc_id)
        return _strip(doc) if doc is not None else None

    def find(self, collection: str, **equals: Any) -> list[dict[str, Any]]:
        return [
            _strip(doc)
            for doc in self._load(collection).values()
            if _matches(doc, equals)
        ]

    def all(self, collection: str) -> list[dict[str, Any]]:
        return [_strip(doc) for doc in self._load(collection).values()]

    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        with self._lock:
            docs = self._load(collection)
            docs[doc_id] = self._next_revision(docs.get(doc_id), data)
            self._persist(collection, docs)

    # --- TransactionRunner interface ------------------------------------------

    def run_transaction(self, fn: Callable[[Transaction], T]) -> T:
        for attempt in range(1, self._max_attempts + 1):
            tx = _JsonTransaction(self)
            result = fn(tx)
            with self._lock:
                if self._reads_unchanged(tx.reads):
                    self._apply_writes(tx.writes)
                    return result
            logger.debug("Transaction conflict on attempt %d, retrying", attempt)
        raise TransientStoreError(
            f"Transaction aborted after {self._max_attempts} conflicting attempts",
            attempts=self._max_attempts,
        )

    # --- BatchWriter interface ------------------------------------------------

    def batch(self) -> WriteBatch:
        return _JsonWriteBatch(self)

    # --- Internals used by transactions and batches ---------------------------

    def _revision(self, collection: str, doc_id: str) -> int | None:
        doc = self._load(collection).get(doc_id)
        return doc[_REV] if doc is not None else None

    def _reads_unchanged(self, reads: dict[DocKey, int | None]) -> bool:
        return all(
            self._revision(collection, doc_id) == rev
            for (collection, doc_id), rev in reads.items()
        )

    def _apply_writes(self, writes: dict[DocKey, dict[str, Any]]) -> None:
        by_collection: dict[str, list[tuple[str, dict[str, Any]]]] = {}
        for (collection, doc_id), data in writes.items():
            by_collection.setdefault(collection, []).append((doc_id, data))
        for collection, entries in by_collection.items():
            docs = self._load(collection)
            for doc_id, data in entries:
                docs[doc_id] = self._next_revision(docs.get(doc_id), data)
            self._persist(collection, docs)

    def _apply_updates(self, updates: list[tuple[str, str, dict[str, Any]]]) -> int:
        with self._lock:
            loaded: dict[str, dict[str, dict[str, Any]]] = {}
            for collection, doc_id, _ in updates:
                docs = loaded.setdefault(collection, self._load(collection))
                if doc_id not in docs:
                    raise EntityNotFoundError(
                        f"Document '{doc_id}' not found in '{collection}'",
                        collection=collection,
                        doc_id=doc_id,
                    )
            for collection, doc_id, fields in updates:
                docs = loaded[collection]
                merged = {**_strip(docs[doc_id]), **fields}
                docs[doc_id] = self._next_revision(docs[doc_id], merged)
            for collection, docs in loaded.items():
                self._persist(collection, docs)
            return len(updates)

    @staticmethod
    def _next_revision(existing: dict[str, Any] | None, data: dict[str, Any]) -> dict[str, Any]:
        rev = existing[_REV] + 1 if existing is not None else 1
        return {**copy.deepcopy(data), _REV: rev}

    # --- File helpers ---------------------------------------------------------

    def _path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _load(self, collection: str) -> dict[str, dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return {}
        return json.loads(path.read_text(encoding="utf-8"))

    def _persist(self, collection: str, docs: dict[str, dict[str, Any]]) -> None:
        path = self._path(collection)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp, path)


class _JsonTransaction(Transaction):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self.reads: dict[DocKey, int | None] = {}
        self.writes: dict[DocKey, dict[str, Any]] = {}

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        key = (collection, doc_id)
        if key in self.writes:
            return copy.deepcopy(self.writes[key])
        doc = self._store._load(collection).get(doc_id)
        self.reads.setdefault(key, doc[_REV] if doc is not None else None)
        return _strip(doc) if doc is not None else None

    def find(self, collection: str, **equals: Any) -> list[dict[str, Any]]:
        results = []
        for doc_id, doc in self._store._load(collection).items():
            if _matches(doc, equals):
                self.reads.setdefault((collection, doc_id), doc[_REV])
                results.append(_strip(doc))
        return results

    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.writes[(collection, doc_id)] = copy.deepcopy(data)


class _JsonWriteBatch(WriteBatch):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self._updates: list[tuple[str, str, dict[str, Any]]] = []

    def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        self._updates.append((collection, doc_id, dict(fields)))

    def commit(self) -> int:
        if not self._updates:
            return 0
        return self._store._apply_updates(self._updates)
