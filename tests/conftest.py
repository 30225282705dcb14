"""Pytest configuration shared by unit and integration tests"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path for porterstem imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from porterstem.cli import read_vocabulary

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def vocabulary_path() -> Path:
    return FIXTURES_DIR / "vocabulary.txt"


@pytest.fixture(scope="session")
def vocabulary(vocabulary_path):
    """
    Golden (word, stem) pairs.

    Every pair was traced by hand through the six stages and matches the
    output of Martin Porter's reference C implementation.
    """
    return read_vocabulary(vocabulary_path)


@pytest.fixture
def clean_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
