"""Product aggregate.

Products live independently of prices, stock and orders.  The core only
reads them to check that a referenced product exists; the add-product
use case is the one place that creates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from leathershop.domain.exceptions import ValidationError
from leathershop.domain.model.value_objects import Lifecycle


@dataclass
class Product:
    """A product in the catalog.

    ``category_id`` references a category owned by the category
    collaborator; it is stored as given.
    """

    id: str
    name: str
    category_id: str
    description: str = ""
    material: str = ""
    color: str = ""
    lifecycle: Lifecycle = field(default_factory=Lifecycle)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_id: str,
        name: str,
        category_id: str,
        description: str = "",
        material: str = "",
        color: str = "",
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required", field="name")
        if not category_id or not category_id.strip():
            raise ValidationError("Product category is required", field="category_id")
        return Product(
            id=product_id,
            name=name.strip(),
            category_id=category_id.strip(),
            description=description,
            material=material,
            color=color,
        )

    @property
    def active(self) -> bool:
        return self.lifecycle.active
