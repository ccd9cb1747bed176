"""Conversions between domain value objects and JSON-safe primitives."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from leathershop.domain.model.value_objects import DEFAULT_CURRENCY, Lifecycle, Money


def dt_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def dt_from_raw(raw: str | None) -> datetime | None:
    return datetime.fromisoformat(raw) if raw else None


def money_to_raw(value: Money | None) -> str | None:
    return str(value.amount) if value is not None else None


def money_from_raw(raw: str | None, currency: str = DEFAULT_CURRENCY) -> Money | None:
    return Money(Decimal(raw), currency) if raw is not None else None


def lifecycle_to_raw(lifecycle: Lifecycle, flag: str = "active") -> dict[str, Any]:
    return {flag: lifecycle.active, "retired_at": dt_to_raw(lifecycle.retired_at)}


def lifecycle_from_raw(raw: dict[str, Any], flag: str = "active") -> Lifecycle:
    return Lifecycle(active=raw.get(flag, True), retired_at=dt_from_raw(raw.get("retired_at")))
