"""Store primitives the domain relies on for multi-step writes.

``TransactionRunner`` executes a function against a consistent view of
the store and commits every write it made atomically, or none of them.
``BatchWriter`` applies several independent field updates as one unit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Transaction(ABC):

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Read a document; the read is validated again at commit time."""

    @abstractmethod
    def find(self, collection: str, **equals: Any) -> list[dict[str, Any]]:
        """Read every document whose fields equal the given values."""

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Stage a full-document write, applied on commit."""


class TransactionRunner(ABC):

    @abstractmethod
    def run_transaction(self, fn: Callable[[Transaction], T]) -> T:
        """Run *fn* and commit its staged writes atomically.

        Exceptions raised by *fn* abort the transaction and propagate.
        Raises TransientStoreError when the commit keeps conflicting.
        """


class WriteBatch(ABC):

    @abstractmethod
    def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        """Stage a partial update of one document."""

    @abstractmethod
    def commit(self) -> int:
        """Apply every staged update at once; return how many were applied."""


class BatchWriter(ABC):

    @abstractmethod
    def batch(self) -> WriteBatch:
        """Start a new, empty write batch."""
