"""Runtime settings.

Defaults can be overridden by a JSON file named in ``LEATHERSHOP_CONFIG``
and, on top of that, by individual environment variables.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from leathershop.domain.model.value_objects import DEFAULT_CURRENCY

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"
    default_currency: str = DEFAULT_CURRENCY
    transaction_attempts: int = 5
    initial_sequences: dict[str, int] = field(default_factory=dict)


def _read_config_file(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    config_path = env.get("LEATHERSHOP_CONFIG")
    if config_path:
        values.update(_read_config_file(Path(config_path)))

    if env.get("LEATHERSHOP_DATA_DIR"):
        values["data_dir"] = env["LEATHERSHOP_DATA_DIR"]
    if env.get("LEATHERSHOP_LOG_LEVEL"):
        values["log_level"] = env["LEATHERSHOP_LOG_LEVEL"]

    return Settings(
        data_dir=Path(values.get("data_dir", _DEFAULT_DATA_DIR)),
        log_level=str(values.get("log_level", "INFO")).upper(),
        default_currency=values.get("default_currency", DEFAULT_CURRENCY),
        transaction_attempts=int(values.get("transaction_attempts", 5)),
        initial_sequences={k: int(v) for k, v in values.get("initial_sequences", {}).items()},
    )
