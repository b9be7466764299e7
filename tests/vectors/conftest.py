"""Pytest fixtures and configuration for layout vectors.

Each vector is a JSON file holding an input document and the expected
layout: title, verification keys, claim keys, and the block sequence.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

VECTORS_DIR = Path(__file__).parent / "data"


class ExpectedBlock(BaseModel):
    """Expected block: a paired row (left/right keys) or a table (title/columns)."""

    kind: Literal["paired_row", "array_table"]
    left: Optional[str] = None
    right: Optional[str] = None
    title: Optional[str] = None
    columns: Optional[List[str]] = None


class ExpectedLayout(BaseModel):
    """Expected plan contents."""

    title: str
    verification_keys: List[str] = []
    simple_field_keys: List[str] = []
    blocks: List[ExpectedBlock] = []


class VectorCase(BaseModel):
    """A single layout vector."""

    id: str
    description: str
    document: Dict[str, Any]
    expected: ExpectedLayout


def load_all_vectors() -> List[VectorCase]:
    """Load all layout vectors from JSON files."""
    vectors = []
    for path in sorted(VECTORS_DIR.glob("v*.json")):
        with open(path) as f:
            vectors.append(VectorCase(**json.load(f)))
    return vectors


def pytest_generate_tests(metafunc):
    """Parametrize layout_vector fixture with all vectors."""
    if "layout_vector" in metafunc.fixturenames:
        vectors = load_all_vectors()
        metafunc.parametrize("layout_vector", vectors, ids=[v.id for v in vectors])
