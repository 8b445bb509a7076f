"""Shared pytest fixtures for undoredo tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from omegaconf import OmegaConf


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() side effects so caplog sees records again."""
    yield
    root = logging.getLogger("undoredo")
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
