from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Make tests deterministic even when run in a shell that exports GRID_*
    settings (e.g. a lowered GRID_MAX_CELL_CONTENT_CHARS).
    """
    monkeypatch.delenv("GRID_MAX_CELL_CONTENT_CHARS", raising=False)
    monkeypatch.delenv("GRID_CORS_ORIGINS", raising=False)
    monkeypatch.delenv("GRID_LOG_LEVEL", raising=False)
