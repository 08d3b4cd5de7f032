# ruff: noqa: E402

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import eachwise.log as log


@pytest.fixture(autouse=True)
def _isolated_log_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("EACHWISE_LOG_LEVEL", "EACHWISE_NO_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    log.reset()
    yield
    log.reset()
