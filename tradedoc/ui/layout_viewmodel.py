"""Trade document view-model adapter.

This module turns a LayoutPlan into display-ready dataclasses so that
renderers (HTML templates, PDF writers, terminal output) only deal with
labels and strings:

- Verification and claims become two side-by-side panels
- Each paired row becomes one or two titled object panels
- Each array table gets formatted headers and string cells
- Empty values are omitted from panels and blank in table cells
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from tradedoc.core.config import (
    CLAIMS_PANEL_TITLE,
    PANEL_TITLE_FIELD,
    VERIFICATION_PANEL_TITLE,
)
from tradedoc.layout.labels import format_label
from tradedoc.layout.models import ArrayTable, ComplexField, LayoutPlan, PairedRow
from tradedoc.layout.plan import build_layout_plan
from tradedoc.layout.values import format_value


# =============================================================================
# View-Model Dataclasses
# =============================================================================


@dataclass
class AttributeDisplay:
    """Normalized attribute for display.

    Attributes:
        label: Human-readable label (e.g., "Bill Of Lading Number").
        value: Display value (e.g., "18750 USD").
        raw_key: Original field key.
    """

    label: str
    value: str
    raw_key: str = ""


@dataclass
class PanelView:
    """Titled list of label/value rows."""

    title: str
    attributes: List[AttributeDisplay] = field(default_factory=list)


@dataclass
class PairedRowView:
    """Two panels side by side; right is None for an empty second slot."""

    left: PanelView
    right: Optional[PanelView] = None


@dataclass
class TableView:
    """Full-width table of formatted cells.

    Attributes:
        title: Formatted array field name.
        columns: Raw column keys.
        headers: Formatted column labels, aligned with columns.
        rows: Formatted cell strings, one list per item, aligned with columns.
    """

    title: str
    columns: List[str]
    headers: List[str]
    rows: List[List[str]]


BlockView = Union[PairedRowView, TableView]


@dataclass
class DocumentViewModel:
    """Normalized view model for trade document rendering.

    This is the main output of build_document_vm(). Renderers should use
    this rather than walking the raw credential.
    """

    title: str
    verification: PanelView
    claims: PanelView
    blocks: List[BlockView] = field(default_factory=list)


# =============================================================================
# Helper Functions
# =============================================================================


def _build_attributes(
    values: Mapping[str, Any],
    skip_key: Optional[str] = None,
) -> List[AttributeDisplay]:
    result = []
    for key, value in values.items():
        if key == skip_key:
            continue
        display_value = format_value(value)
        if not display_value:
            continue
        result.append(AttributeDisplay(label=format_label(key), value=display_value, raw_key=key))
    return result


def _panel_title(field_: ComplexField) -> str:
    """Use the object's own type tag (e.g. "Buyer") when it has one."""
    type_value = field_.value.get(PANEL_TITLE_FIELD)
    if isinstance(type_value, str) and type_value:
        return type_value
    return format_label(field_.key)


def build_object_panel(field_: ComplexField) -> PanelView:
    """Build a panel for an object field, excluding its type tag."""
    return PanelView(
        title=_panel_title(field_),
        attributes=_build_attributes(field_.value, skip_key=PANEL_TITLE_FIELD),
    )


def build_table_view(table: ArrayTable) -> TableView:
    """Format an array table's headers and cells."""
    return TableView(
        title=format_label(table.title),
        columns=list(table.columns),
        headers=[format_label(col) for col in table.columns],
        rows=[[format_value(row.get(col)) for col in table.columns] for row in table.rows],
    )


# =============================================================================
# Main Adapter Function
# =============================================================================


def build_document_vm(source: Union[LayoutPlan, Mapping[str, Any]]) -> DocumentViewModel:
    """Build view model from a layout plan or a raw document.

    Args:
        source: A LayoutPlan, or a parsed credential document to plan first.

    Returns:
        DocumentViewModel ready for rendering.

    Raises:
        DocumentShapeError: If a raw document cannot be laid out.
    """
    plan = source if isinstance(source, LayoutPlan) else build_layout_plan(source)

    blocks: List[BlockView] = []
    for block in plan.blocks:
        if isinstance(block, PairedRow):
            blocks.append(PairedRowView(
                left=build_object_panel(block.left),
                right=build_object_panel(block.right) if block.right is not None else None,
            ))
        else:
            blocks.append(build_table_view(block))

    return DocumentViewModel(
        title=plan.title,
        verification=PanelView(
            title=VERIFICATION_PANEL_TITLE,
            attributes=_build_attributes(plan.verification),
        ),
        claims=PanelView(
            title=CLAIMS_PANEL_TITLE,
            attributes=_build_attributes(plan.simple_fields),
        ),
        blocks=blocks,
    )
