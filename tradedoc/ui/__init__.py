"""Trade document UI utilities.

This module provides the view-model adapter that turns a layout plan
into display strings, so renderers never format raw credential values
themselves.
"""

from tradedoc.ui.layout_viewmodel import (
    AttributeDisplay,
    DocumentViewModel,
    PairedRowView,
    PanelView,
    TableView,
    build_document_vm,
    build_object_panel,
    build_table_view,
)

__all__ = [
    "AttributeDisplay",
    "DocumentViewModel",
    "PairedRowView",
    "PanelView",
    "TableView",
    "build_document_vm",
    "build_object_panel",
    "build_table_view",
]
