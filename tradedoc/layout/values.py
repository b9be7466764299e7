"""Value to display string conversion.

Compound values are recognised against the closed set of shapes in
COMPOUND_SHAPE_KEYS: monetary amounts and quantities.
"""

import json
from typing import Any, Mapping, Optional

from tradedoc.core.config import MAX_SERIALIZE_DEPTH
from tradedoc.layout.models import CompoundShape

# Shape -> the key paired with "amount", checked in this order
COMPOUND_SHAPE_KEYS = (
    (CompoundShape.MONETARY_AMOUNT, "currency"),
    (CompoundShape.QUANTITY, "unit"),
)


def detect_compound_shape(value: Any) -> Optional[CompoundShape]:
    """Return the compound shape of a value, or None if it has none.

    A monetary amount has "amount" and "currency"; a quantity has
    "amount" and "unit". Extra keys do not prevent a match.
    """
    if not isinstance(value, Mapping) or "amount" not in value:
        return None
    for shape, key in COMPOUND_SHAPE_KEYS:
        if key in value:
            return shape
    return None


def _scalar_to_str(value: Any) -> str:
    """Stringify a scalar the way it reads in the source JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _truncate(value: Any, depth: int, max_depth: int) -> Any:
    """Copy nested containers, replacing those past max_depth with markers.

    Recursion stops at max_depth, so the JSON encoder only ever sees a
    bounded structure ("{...}" / "[...]" stand in for deeper branches).
    """
    if isinstance(value, Mapping):
        if depth >= max_depth:
            return "{...}"
        return {k: _truncate(v, depth + 1, max_depth) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        if depth >= max_depth:
            return "[...]"
        return [_truncate(v, depth + 1, max_depth) for v in value]
    return value


def _serialize(value: Any, max_depth: int = MAX_SERIALIZE_DEPTH) -> str:
    return json.dumps(
        _truncate(value, 0, max_depth),
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def format_value(value: Any) -> str:
    """Format a value for display.

    Args:
        value: Scalar, mapping, or list from the document.

    Returns:
        "" for None (callers omit the field), "{amount} {currency}" or
        "{amount} {unit}" for compound values, compact JSON for any other
        mapping or list (nesting past MAX_SERIALIZE_DEPTH shown as "{...}"
        or "[...]"), otherwise the scalar's string form.
    """
    if value is None:
        return ""

    shape = detect_compound_shape(value)
    if shape is CompoundShape.MONETARY_AMOUNT:
        return f"{_scalar_to_str(value['amount'])} {_scalar_to_str(value['currency'])}"
    if shape is CompoundShape.QUANTITY:
        return f"{_scalar_to_str(value['amount'])} {_scalar_to_str(value['unit'])}"

    if isinstance(value, (Mapping, list, tuple)):
        return _serialize(value)

    return _scalar_to_str(value)
