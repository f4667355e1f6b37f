"""Shared pytest fixtures and configuration for the colsel test suite.

Guidelines
----------
* No test reads the real standard input; it is injected or monkeypatched.
* Static input files live in ``tests/testdata``.
* Core tests must be pure, with no side effects.
"""

from __future__ import annotations

from pathlib import Path

import pytest

TESTDATA: Path = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Directory holding the static input files."""
    return TESTDATA
