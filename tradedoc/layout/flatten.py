"""Nested object flattening for table rows.

Nested records are collapsed into a single level: child keys become
siblings of the parent's other keys and the parent key is discarded.
Monetary amounts and quantities collapse into one formatted value kept
under the parent key.

Sibling collisions are last-write-wins:
    {"product": {"id": "P1"}, "seller": {"id": "S1", "name": "X", "city": "Y"}}
flattens to {"id": "S1", "name": "X", "city": "Y"}. The key keeps the
position where it was first seen.
"""

import logging
from typing import Any, Mapping

from tradedoc.core.config import MAX_FLATTEN_DEPTH
from tradedoc.layout.models import FlattenedRecord
from tradedoc.layout.values import detect_compound_shape, format_value

log = logging.getLogger(__name__)


def is_leaf_compound(value: Mapping[str, Any]) -> bool:
    """Check whether a nested record is small enough to keep as one value.

    True for recognised compound shapes (monetary amount, quantity) and
    for any record with at most two keys.
    """
    return detect_compound_shape(value) is not None or len(value) <= 2


def _flatten_into(
    result: FlattenedRecord,
    record: Mapping[str, Any],
    depth: int,
    max_depth: int,
) -> None:
    for key, value in record.items():
        if not isinstance(value, Mapping):
            result[key] = value
            continue

        if is_leaf_compound(value) and "amount" in value:
            result[key] = format_value(value)
        elif depth >= max_depth:
            log.warning(
                f"flatten depth limit reached key={key} max_depth={max_depth}"
            )
            result[key] = format_value(value)
        else:
            _flatten_into(result, value, depth + 1, max_depth)


def flatten_object(
    record: Mapping[str, Any],
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> FlattenedRecord:
    """Flatten a nested record into a single-level leaf map.

    Args:
        record: Record to flatten (e.g. one line item).
        max_depth: Nested levels to descend before a branch is kept as
            its serialized string instead.

    Returns:
        Mapping of leaf key to raw value, or to the formatted string for
        collapsed compound values. Lists are passed through unchanged.
    """
    result: FlattenedRecord = {}
    _flatten_into(result, record, 0, max_depth)
    return result
