"""
Repository-level pytest configuration.

Why this exists:
  - Provide CI-safe defaults (headless browser) when nothing else is set
  - Keep behavior explicit and discoverable

Important:
  Target instance URL and credentials come from config/config.yaml or the
  UI_* environment variables; nothing secret is embedded here.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _ci_safe_env_defaults() -> Generator[None, None, None]:
    """Set CI-safe environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_HEADLESS": "true",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
