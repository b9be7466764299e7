"""Root conftest for all tests - provides shared fixtures."""

import copy
import json
import logging
import sys
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root logging after each test.

    The CLI reconfigures root handlers against the runner's temporary
    stderr, which is closed once the invocation ends.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(scope="session")
def _commercial_invoice_source():
    with open(FIXTURES_DIR / "commercial_invoice.json") as f:
        return json.load(f)


@pytest.fixture
def commercial_invoice(_commercial_invoice_source):
    """Sample UN/CEFACT commercial invoice credential (fresh copy per test)."""
    return copy.deepcopy(_commercial_invoice_source)


@pytest.fixture
def deep_record():
    """A record nested deeper than the interpreter recursion limit.

    Each level holds {"next": <child>, "a": i, "b": i}, built iteratively.
    """
    record = {"leaf": True}
    for i in range(sys.getrecursionlimit() + 500):
        record = {"next": record, "a": i, "b": i}
    return record


@pytest.fixture
def make_document():
    """Build a minimal credential document around a subject."""

    def _make(subject=None, **root):
        document = {"type": ["VerifiableCredential", "BillOfLading"], **root}
        if subject is not None:
            document["credentialSubject"] = subject
        return document

    return _make
