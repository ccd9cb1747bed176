"""Application service: Next Sequence Id use case."""

from __future__ import annotations

from leathershop.domain.service.sequence_generator import SequenceGenerator


class NextSequenceIdHandler:

    def __init__(self, sequences: SequenceGenerator) -> None:
        self._sequences = sequences

    def handle(self, entity_type: str) -> str:
        return self._sequences.next_id(entity_type)
