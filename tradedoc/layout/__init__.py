"""Trade document layout core.

Turns a verifiable-credential trade document into a renderer-agnostic
layout plan:

- classify(): verification metadata, scalar claims, ordered complex fields
- compose(): pairs object fields into rows, arrays become tables
- flatten_object() / build_array_table(): table columns and rows
- format_label() / format_value(): display strings for renderers

No UI toolkit is involved; renderers consume the LayoutPlan.
"""

from tradedoc.layout.classifier import classify, get_subject
from tradedoc.layout.composer import Holding, Idle, compose, finish, step
from tradedoc.layout.exceptions import DocumentShapeError, LayoutError
from tradedoc.layout.flatten import flatten_object, is_leaf_compound
from tradedoc.layout.labels import LabelFormatter, extract_document_title, format_label
from tradedoc.layout.models import (
    ArrayTable,
    Classification,
    ComplexField,
    CompoundShape,
    FieldKind,
    FlattenedRecord,
    LayoutBlock,
    LayoutPlan,
    PairedRow,
)
from tradedoc.layout.plan import block_to_dict, build_layout_plan, plan_to_dict
from tradedoc.layout.tables import build_array_table
from tradedoc.layout.values import detect_compound_shape, format_value

__all__ = [
    "ArrayTable",
    "Classification",
    "ComplexField",
    "CompoundShape",
    "DocumentShapeError",
    "FieldKind",
    "FlattenedRecord",
    "Holding",
    "Idle",
    "LabelFormatter",
    "LayoutBlock",
    "LayoutError",
    "LayoutPlan",
    "PairedRow",
    "block_to_dict",
    "build_array_table",
    "build_layout_plan",
    "classify",
    "compose",
    "detect_compound_shape",
    "extract_document_title",
    "finish",
    "flatten_object",
    "format_label",
    "format_value",
    "get_subject",
    "is_leaf_compound",
    "plan_to_dict",
    "step",
]
