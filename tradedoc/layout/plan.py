"""End-to-end layout plan construction."""

import logging
from typing import Any, Dict, Mapping

from tradedoc.core.config import MAX_FLATTEN_DEPTH
from tradedoc.layout.classifier import classify
from tradedoc.layout.composer import compose
from tradedoc.layout.labels import extract_document_title
from tradedoc.layout.models import ArrayTable, ComplexField, LayoutBlock, LayoutPlan, PairedRow

log = logging.getLogger(__name__)


def build_layout_plan(
    document: Mapping[str, Any],
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> LayoutPlan:
    """Build the layout plan for a trade document.

    Args:
        document: Parsed credential document.
        max_depth: Flattening depth bound for table rows.

    Returns:
        LayoutPlan with title, verification, claims, and ordered blocks.

    Raises:
        DocumentShapeError: If the document or its subject is not a record.
    """
    classification = classify(document)
    blocks = compose(classification.complex_fields, max_depth=max_depth)
    plan = LayoutPlan(
        title=extract_document_title(document),
        verification=classification.verification,
        simple_fields=classification.simple_fields,
        blocks=blocks,
    )

    tables = sum(1 for b in blocks if isinstance(b, ArrayTable))
    log.debug(
        f"layout_plan_built title={plan.title!r} simple={len(plan.simple_fields)} "
        f"paired_rows={len(blocks) - tables} tables={tables}"
    )
    return plan


# =============================================================================
# Serialization
# =============================================================================


def _field_to_dict(field: ComplexField) -> Dict[str, Any]:
    return {"key": field.key, "kind": field.kind.value, "value": field.value}


def block_to_dict(block: LayoutBlock) -> Dict[str, Any]:
    """Convert a layout block to a JSON-ready dict tagged with its kind."""
    if isinstance(block, PairedRow):
        return {
            "kind": "paired_row",
            "left": _field_to_dict(block.left),
            "right": _field_to_dict(block.right) if block.right is not None else None,
        }
    return {
        "kind": "array_table",
        "title": block.title,
        "columns": list(block.columns),
        "rows": [dict(row) for row in block.rows],
    }


def plan_to_dict(plan: LayoutPlan) -> Dict[str, Any]:
    """Convert a layout plan to a JSON-ready dict."""
    return {
        "title": plan.title,
        "verification": dict(plan.verification),
        "simple_fields": dict(plan.simple_fields),
        "blocks": [block_to_dict(b) for b in plan.blocks],
    }
