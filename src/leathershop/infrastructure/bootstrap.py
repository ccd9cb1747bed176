"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from leathershop.config import Settings, load_settings
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore
from leathershop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from leathershop.infrastructure.persistence.json_price_repository import (
    JsonPriceRepository,
)
from leathershop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from leathershop.infrastructure.persistence.json_stock_repository import (
    JsonStockRepository,
)


@lru_cache(maxsize=None)
def settings() -> Settings:
    return load_settings()


# One store per process: its lock is what serialises commits.
@lru_cache(maxsize=None)
def document_store() -> JsonDocumentStore:
    cfg = settings()
    return JsonDocumentStore(cfg.data_dir, max_attempts=cfg.transaction_attempts)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(document_store())


def price_repository() -> JsonPriceRepository:
    return JsonPriceRepository(document_store())


def stock_repository() -> JsonStockRepository:
    return JsonStockRepository(document_store())


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(document_store())


def sequence_generator() -> SequenceGenerator:
    return SequenceGenerator(document_store(), initial_values=settings().initial_sequences)


def reset() -> None:
    """Drop cached settings and store (used when the environment changes)."""
    settings.cache_clear()
    document_store.cache_clear()
