"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import pytest

from tagged_result.result import Result


@pytest.fixture
def ok_int() -> Result[int, str]:
    return Result.ok(42)


@pytest.fixture
def error_str() -> Result[int, str]:
    return Result.error("boom")
