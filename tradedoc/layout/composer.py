"""Layout composition.

Sequences classified object/array fields into layout blocks with a
two-state machine:

    Idle            --object-->  Holding(field)
    Holding(prev)   --object-->  Idle            emit PairedRow(prev, field)
    Idle            --array--->  Idle            emit ArrayTable
    Holding(prev)   --array--->  Idle            emit PairedRow(prev, None), ArrayTable
    Holding(prev)   --end----->                  emit PairedRow(prev, None)

Objects pair left to right in encounter order, an array never takes a
paired-row slot, and a pending object is always emitted.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from tradedoc.core.config import MAX_FLATTEN_DEPTH
from tradedoc.layout.models import ComplexField, FieldKind, LayoutBlock, PairedRow
from tradedoc.layout.tables import build_array_table


@dataclass(frozen=True)
class Idle:
    """No object waiting for a pairing partner."""


@dataclass(frozen=True)
class Holding:
    """An object field waiting for a pairing partner."""
    field: ComplexField


ComposerState = Union[Idle, Holding]

IDLE = Idle()


def _table_blocks(field: ComplexField, max_depth: int) -> List[LayoutBlock]:
    table = build_array_table(field.key, field.value, max_depth=max_depth)
    return [table] if table is not None else []


def step(
    state: ComposerState,
    field: ComplexField,
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> Tuple[ComposerState, List[LayoutBlock]]:
    """Advance the composer by one field.

    An empty array produces no table but still ends any pending pairing.

    Returns:
        Tuple of (next state, blocks emitted by this transition).
    """
    if field.kind is FieldKind.OBJECT:
        if isinstance(state, Holding):
            return IDLE, [PairedRow(left=state.field, right=field)]
        return Holding(field), []

    blocks: List[LayoutBlock] = []
    if isinstance(state, Holding):
        blocks.append(PairedRow(left=state.field, right=None))
    blocks.extend(_table_blocks(field, max_depth))
    return IDLE, blocks


def finish(state: ComposerState) -> List[LayoutBlock]:
    """Emit whatever is pending at the end of input."""
    if isinstance(state, Holding):
        return [PairedRow(left=state.field, right=None)]
    return []


def compose(
    complex_fields: Iterable[ComplexField],
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> Tuple[LayoutBlock, ...]:
    """Sequence complex fields into paired rows and tables.

    Args:
        complex_fields: Object and array fields in document order.
        max_depth: Flattening depth bound for table rows.

    Returns:
        Layout blocks in document order.
    """
    state: ComposerState = IDLE
    blocks: List[LayoutBlock] = []
    for field in complex_fields:
        state, emitted = step(state, field, max_depth=max_depth)
        blocks.extend(emitted)
    blocks.extend(finish(state))
    return tuple(blocks)
