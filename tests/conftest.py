"""
genotype test configuration and fixtures.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers added by setup_logging() during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from GENOTYPE_* variables and the cached config."""
    from genotype import config

    for key in list(os.environ):
        if key.startswith("GENOTYPE_"):
            monkeypatch.delenv(key, raising=False)
    config.reset_config()
    yield
    config.reset_config()
