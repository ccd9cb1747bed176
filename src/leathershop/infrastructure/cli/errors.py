"""Translation of domain errors into CLI failures."""

from __future__ import annotations

import click

from leathershop.domain.exceptions import DomainException


def to_click_error(exc: DomainException) -> click.ClickException:
    return click.ClickException(f"[{exc.reason}] {exc.message}")
