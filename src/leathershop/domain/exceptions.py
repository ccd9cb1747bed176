"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Every exception carries a stable ``reason`` token (one per subclass) and a
``context`` dict with the ids and field names a caller needs to react.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    reason = "domain_error"

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class ValidationError(DomainException):
    """Malformed or out-of-domain input."""

    reason = "invalid_argument"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    reason = "not_found"


class ConflictError(DomainException):
    """A uniqueness invariant would be violated."""

    reason = "conflict"


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the available stock."""

    reason = "insufficient_stock"

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int | None,
        **context: object,
    ) -> None:
        if available is None:
            message = f"No stock record for product {product_id}"
        else:
            message = (
                f"Insufficient stock for product {product_id} "
                f"(need {requested}, have {available})"
            )
        super().__init__(
            message,
            product_id=product_id,
            requested=requested,
            available=available,
            **context,
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ForbiddenError(DomainException):
    """The caller's role or ownership does not allow the operation."""

    reason = "forbidden"


class TransientStoreError(DomainException):
    """A store transaction aborted (e.g. repeated write conflicts)."""

    reason = "transient_store_failure"
