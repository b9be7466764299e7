"""
Trade document layout API models.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Request Models
# =============================================================================

class LayoutRequest(BaseModel):
    """Request body for /layout and /ui/layout"""
    document: Dict[str, Any]


# =============================================================================
# Error Models
# =============================================================================

class ErrorDetail(BaseModel):
    """Error response body"""
    code: str
    message: str
    recoverable: bool


class ErrorCode:
    """Error code registry"""
    DOCUMENT_SHAPE_INVALID = "DOCUMENT_SHAPE_INVALID"


# =============================================================================
# Layout Plan Response
# =============================================================================

class ComplexFieldModel(BaseModel):
    """Object or array subject field"""
    key: str
    kind: Literal["object", "array"]
    value: Any


class PairedRowModel(BaseModel):
    """One or two object fields side by side; right is null when empty"""
    kind: Literal["paired_row"] = "paired_row"
    left: ComplexFieldModel
    right: Optional[ComplexFieldModel] = None


class ArrayTableModel(BaseModel):
    """Array field as a table of flattened rows"""
    kind: Literal["array_table"] = "array_table"
    title: str
    columns: List[str]
    rows: List[Dict[str, Any]]


class LayoutPlanResponse(BaseModel):
    """Response body for /layout"""
    title: str
    verification: Dict[str, Any] = Field(default_factory=dict)
    simple_fields: Dict[str, Any] = Field(default_factory=dict)
    blocks: List[Union[PairedRowModel, ArrayTableModel]] = Field(default_factory=list)
