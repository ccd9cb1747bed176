"""Entity types and their human-readable external identifiers.

Every entity gets an external id such as ``PROD-1000`` or ``PED-02000``.
The numeric part comes from the sequence generator; this module only
knows how to turn ``(entity type, number)`` into the display string.
"""

from __future__ import annotations

from enum import Enum


class EntityType(Enum):
    PRODUCTS = "productos"
    ORDERS = "pedidos"
    CATEGORIES = "categorias"
    USERS = "usuarios"
    PRICES = "precios"
    STOCKS = "stocks"


# prefix, zero-pad width
_FORMATS: dict[str, tuple[str, int]] = {
    EntityType.PRODUCTS.value: ("PROD", 4),
    EntityType.ORDERS.value: ("PED", 5),
    EntityType.CATEGORIES.value: ("CAT", 3),
    EntityType.USERS.value: ("USER", 3),
    EntityType.PRICES.value: ("PRICE", 4),
    EntityType.STOCKS.value: ("STOCK", 4),
}

# Distinct numeric ranges keep ids of different entities visually apart.
INITIAL_SEQUENCE_VALUES: dict[str, int] = {
    EntityType.PRODUCTS.value: 1000,
    EntityType.ORDERS.value: 2000,
    EntityType.CATEGORIES.value: 10,
    EntityType.USERS.value: 10,
    EntityType.PRICES.value: 5000,
    EntityType.STOCKS.value: 3000,
}

DEFAULT_INITIAL_SEQUENCE = 1


def entity_key(entity_type: EntityType | str) -> str:
    """Normalise an EntityType member or raw collection name to its key."""
    if isinstance(entity_type, EntityType):
        return entity_type.value
    return entity_type


def format_id(entity_type: EntityType | str, sequence_number: int) -> str:
    """Format a sequence number as the external id for *entity_type*.

    Numbers wider than the pad width are never truncated.  Unknown
    entity types fall back to ``ID-<n>``.
    """
    fmt = _FORMATS.get(entity_key(entity_type))
    if fmt is None:
        return f"ID-{sequence_number}"
    prefix, width = fmt
    return f"{prefix}-{str(sequence_number).zfill(width)}"
