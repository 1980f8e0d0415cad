# tests/conftest.py

"""Shared pytest fixtures for all analyzer tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_reports_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Point REPORTS_DIR at a temp dir so tests never write into the repo."""
    reports_dir = tmp_path / "reports"
    with patch("src.config.settings.Settings.REPORTS_DIR", reports_dir):
        yield reports_dir
