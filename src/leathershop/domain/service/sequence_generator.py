"""Domain service: Sequence Generator.

Hands out strictly increasing integers per counter key (normally an
entity type such as ``productos``).  The read-increment-write runs as a
single store transaction, so two callers can never get the same value
and an aborted attempt never leaks a half-applied increment.

When the store gives up on the transaction the generator trades strict
sequentiality for liveness: it returns a wall-clock-derived value
instead of failing the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from leathershop.domain.exceptions import TransientStoreError
from leathershop.domain.model.identifiers import (
    DEFAULT_INITIAL_SEQUENCE,
    INITIAL_SEQUENCE_VALUES,
    EntityType,
    entity_key,
    format_id,
)
from leathershop.domain.repository.transaction import Transaction, TransactionRunner

logger = logging.getLogger(__name__)

COUNTERS_COLLECTION = "counters"


class SequenceGenerator:

    def __init__(
        self,
        runner: TransactionRunner,
        initial_values: dict[str, int] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._runner = runner
        self._initial_values = dict(INITIAL_SEQUENCE_VALUES)
        if initial_values:
            self._initial_values.update(initial_values)
        self._clock = clock

    def initial_value(self, entity_type: EntityType | str) -> int:
        return self._initial_values.get(entity_key(entity_type), DEFAULT_INITIAL_SEQUENCE)

    def next(self, entity_type: EntityType | str, initial: int | None = None) -> int:
        """Return the next value of the counter for *entity_type*.

        The first call for an unseen key seeds the counter with its
        initial value (or *initial*) inside the same transaction and
        returns that seed.
        """
        key = entity_key(entity_type)
        seed = self.initial_value(key) if initial is None else initial

        def _increment(tx: Transaction) -> int:
            counter = tx.get(COUNTERS_COLLECTION, key)
            value = seed if counter is None else int(counter["sequence"]) + 1
            tx.set(COUNTERS_COLLECTION, key, {"sequence": value})
            return value

        try:
            return self._runner.run_transaction(_increment)
        except TransientStoreError as exc:
            fallback = int(self._clock() * 1000)
            logger.warning(
                "Sequence transaction for '%s' failed (%s); using fallback value %d",
                key,
                exc,
                fallback,
            )
            return fallback

    def next_id(self, entity_type: EntityType | str) -> str:
        """Mint the next external id, e.g. ``PROD-1001``."""
        return format_id(entity_type, self.next(entity_type))
