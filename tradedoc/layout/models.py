"""Layout plan models.

A layout plan is the renderer-agnostic description of a trade document:
verification metadata, scalar claims, and an ordered sequence of blocks
(paired object panels and full-width tables). All models are frozen;
a plan is rebuilt per document rather than mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


# Leaf key -> raw value, or a pre-formatted string for collapsed compounds
FlattenedRecord = Dict[str, Any]


class FieldKind(str, Enum):
    """Kind of a non-scalar subject field, decided once at classification."""
    OBJECT = "object"
    ARRAY = "array"


class CompoundShape(str, Enum):
    """Closed set of compound values rendered as a single scalar."""
    MONETARY_AMOUNT = "monetary_amount"  # amount + currency
    QUANTITY = "quantity"                # amount + unit


@dataclass(frozen=True)
class ComplexField:
    """A classified object or array field of the credential subject.

    Attributes:
        key: Subject field name.
        kind: OBJECT for nested records, ARRAY for lists.
        value: The raw field value.
    """
    key: str
    kind: FieldKind
    value: Any


@dataclass(frozen=True)
class Classification:
    """Result of splitting a document into display categories.

    Attributes:
        verification: Root credential metadata (id, issuer, issuance and
            expiration dates), only for fields present in the document.
        simple_fields: Scalar subject fields in document order.
        complex_fields: Object and array subject fields in document order.
    """
    verification: Dict[str, Any] = field(default_factory=dict)
    simple_fields: Dict[str, Any] = field(default_factory=dict)
    complex_fields: Tuple[ComplexField, ...] = ()


@dataclass(frozen=True)
class PairedRow:
    """One or two object fields rendered side by side.

    Attributes:
        left: First object field.
        right: Second object field, or None when the second slot is empty.
    """
    left: ComplexField
    right: Optional[ComplexField] = None


@dataclass(frozen=True)
class ArrayTable:
    """An array field rendered as a full-width table.

    Attributes:
        title: Subject field name of the array.
        columns: Union of flattened item keys in first-seen order.
        rows: One flattened record per item; missing columns are absent.
    """
    title: str
    columns: Tuple[str, ...]
    rows: Tuple[FlattenedRecord, ...]


LayoutBlock = Union[PairedRow, ArrayTable]


@dataclass(frozen=True)
class LayoutPlan:
    """Complete layout of one trade document.

    Attributes:
        title: Display title derived from the credential type tags.
        verification: Root credential metadata.
        simple_fields: Scalar claims from the subject.
        blocks: Paired rows and tables in subject order.
    """
    title: str
    verification: Dict[str, Any]
    simple_fields: Dict[str, Any]
    blocks: Tuple[LayoutBlock, ...] = ()
