"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from readiness.ui_logic import StateManager

Without relying on external environment variables. Shared fixtures for the
default catalog and a fully answered form live here too.
"""

import logging
import os
import sys

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from readiness import io_paths, utils_logging  # noqa: E402
from readiness.catalog import default_catalog  # noqa: E402


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def complete_answers():
    """A form state that passes both validation phases."""
    return {
        "name": "Ana Mwangi",
        "email": "ana@example.org",
        "organization": "Acme Logistics",
        "country": "KE",
        "contact": "+254712345678",
        "q1": "Efficiency",
        "q2": "Yes",
        "q3": "Digital",
        "q4": "Partially",
        "q5": "Yes",
        "q6": ["CRM", "ERP"],
        "q7": "Somewhat",
        "q8": "Partially",
        "q9": "Yes",
        "q10": "In progress",
        "q11": "In development",
    }


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Send application logs to a temporary directory for one test.

    Handlers attached to the root logger during the test are removed again.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    path = tmp_path / "logs"
    monkeypatch.setattr(io_paths, "LOGS_DIR", path)
    monkeypatch.setattr(utils_logging, "_configured", False)
    yield path
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
