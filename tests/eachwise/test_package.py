import os
import sys
from pathlib import Path

import pytest

import eachwise
import eachwise.log as log


def test_package_exports_helpers() -> None:
    values = [1]
    seen: list[int] = []
    assert eachwise.for_each(values, seen.append) is values
    assert seen == [1]
    assert callable(eachwise.for_each_indexed)
    assert callable(eachwise.for_each_with_source)
    assert callable(eachwise.apply)


def test_package_exposes_version_string() -> None:
    assert isinstance(eachwise.__version__, str)


def test_log_isolation_applies_to_source_doctests(request: pytest.FixtureRequest) -> None:
    conftest = sys.modules["conftest"]
    src = Path(eachwise.__file__).resolve().parents[1]

    assert "_isolated_log_settings" in request.fixturenames
    assert src.is_relative_to(Path(conftest.__file__).resolve().parent)
    assert os.environ.get("EACHWISE_LOG_LEVEL") is None
    assert log.configured_level() is log.LogLevel.INFO
