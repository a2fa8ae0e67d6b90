"""
Pytest configuration for the token top-up processor.

Provides fixtures for:
- Raw company and user records
- A scratch working directory holding the input files
- Resetting the application loggers between tests
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from token_topup.logger import teardown_logging


def make_company_record(**overrides: Any) -> Dict[str, Any]:
    record = {"id": 1, "name": "Acme", "top_up": 10, "email_status": True}
    record.update(overrides)
    return record


def make_user_record(**overrides: Any) -> Dict[str, Any]:
    record = {
        "id": 1,
        "first_name": "A",
        "last_name": "Z",
        "email": "a.z@example.com",
        "company_id": 1,
        "email_status": True,
        "active_status": True,
        "tokens": 5,
    }
    record.update(overrides)
    return record


@pytest.fixture
def company_record() -> Callable[..., Dict[str, Any]]:
    return make_company_record


@pytest.fixture
def user_record() -> Callable[..., Dict[str, Any]]:
    return make_user_record


@pytest.fixture
def verification_logger() -> logging.Logger:
    """Logger injected into the validators; propagates so caplog sees it."""
    logger = logging.getLogger("tests.verification")
    logger.setLevel(logging.WARNING)
    return logger


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory, where the input files are read."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_inputs(workdir: Path) -> Callable[[List[Any], List[Any]], None]:
    def _write(companies: List[Any], users: List[Any]) -> None:
        (workdir / "companies.json").write_text(json.dumps(companies), encoding="utf-8")
        (workdir / "users.json").write_text(json.dumps(users), encoding="utf-8")

    return _write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() so tests stay isolated."""
    yield
    teardown_logging()
