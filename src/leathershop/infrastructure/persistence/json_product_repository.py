"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from leathershop.domain.model.product import Product
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore
from leathershop.infrastructure.persistence.serialization import (
    dt_from_raw,
    dt_to_raw,
    lifecycle_from_raw,
    lifecycle_to_raw,
)

COLLECTION = "productos"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._store.get(COLLECTION, product_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for product in self.list_active():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_active(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.find(COLLECTION, active=True)]

    def save(self, product: Product) -> None:
        self._store.set(COLLECTION, product.id, self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "category_id": product.category_id,
            "description": product.description,
            "material": product.material,
            "color": product.color,
            "created_at": dt_to_raw(product.created_at),
            **lifecycle_to_raw(product.lifecycle),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category_id=raw["category_id"],
            description=raw.get("description", ""),
            material=raw.get("material", ""),
            color=raw.get("color", ""),
            lifecycle=lifecycle_from_raw(raw),
            created_at=dt_from_raw(raw["created_at"]),
        )
