from __future__ import annotations

import os
from pathlib import Path

import pytest

from mystcomplete.core.types import TocHeading
from tests.fakes import FakeOutline


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.startswith("MYSTCOMPLETE_"):
            monkeypatch.delenv(key, raising=False)
    # pydantic-settings reads .env from the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_outline() -> FakeOutline:
    return FakeOutline(
        [
            TocHeading(slug="introduction", raw_content="Introduction", level=1, line=0),
            TocHeading(slug="getting-started", raw_content="Getting *started*", level=2, line=4),
        ]
    )
