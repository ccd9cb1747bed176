"""CLI commands for the id sequences."""

from __future__ import annotations

import click

from leathershop.application.next_sequence import NextSequenceIdHandler
from leathershop.infrastructure.bootstrap import sequence_generator


@click.command("next")
@click.argument("entity_type")
def sequence_next(entity_type: str) -> None:
    """Mint the next external id for ENTITY_TYPE (e.g. productos)."""
    handler = NextSequenceIdHandler(sequences=sequence_generator())
    click.echo(handler.handle(entity_type))
