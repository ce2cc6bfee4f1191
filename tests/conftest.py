from __future__ import annotations

from collections.abc import Mapping
import json
from pathlib import Path
from typing import Any

import pytest


class RecordingEmitter:
    """Emitter capturing diagnostics for assertions."""

    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def write_metadata(tmp_path: Path):
    def _write(name: str, payload: Mapping[str, Any]) -> Path:
        target = tmp_path / name
        target.write_text(json.dumps(payload), encoding="utf-8")
        return target

    return _write
