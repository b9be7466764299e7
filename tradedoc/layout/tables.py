"""Array field to table conversion."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from tradedoc.core.config import MAX_FLATTEN_DEPTH
from tradedoc.layout.flatten import flatten_object
from tradedoc.layout.models import ArrayTable, FlattenedRecord


def build_array_table(
    title: str,
    items: Sequence[Any],
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> Optional[ArrayTable]:
    """Build a table from an array of records.

    Each record is flattened; the columns are the union of all flattened
    keys, in the order each key is first seen across the items. Items
    that are not records are skipped.

    Args:
        title: Subject field name of the array.
        items: Array items, normally line-item records.
        max_depth: Flattening depth bound, see flatten_object().

    Returns:
        ArrayTable, or None when there are no record items to show.
    """
    rows: List[FlattenedRecord] = []
    columns: Dict[str, None] = {}

    for item in items:
        if not isinstance(item, Mapping):
            continue
        flattened = flatten_object(item, max_depth=max_depth)
        rows.append(flattened)
        for key in flattened:
            columns.setdefault(key, None)

    if not rows:
        return None

    return ArrayTable(title=title, columns=tuple(columns), rows=tuple(rows))
