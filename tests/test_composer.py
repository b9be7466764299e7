"""Tests for the paired-row / table composition state machine."""

import pytest

from tradedoc.layout.composer import Holding, Idle, compose, finish, step
from tradedoc.layout.models import ArrayTable, ComplexField, FieldKind, PairedRow


def _obj(key: str) -> ComplexField:
    return ComplexField(key=key, kind=FieldKind.OBJECT, value={"name": key})


def _arr(key: str, items=None) -> ComplexField:
    return ComplexField(
        key=key,
        kind=FieldKind.ARRAY,
        value=[{"sku": f"{key}-1"}] if items is None else items,
    )


def _shape(blocks):
    """Compact description of a block sequence."""
    result = []
    for block in blocks:
        if isinstance(block, PairedRow):
            right = block.right.key if block.right is not None else None
            result.append(("row", block.left.key, right))
        else:
            result.append(("table", block.title))
    return result


class TestTransitions:
    """Tests for individual state transitions."""

    def test_object_while_idle_holds(self):
        """An object while idle is held and emits nothing."""
        field = _obj("buyer")
        state, blocks = step(Idle(), field)

        assert state == Holding(field)
        assert blocks == []

    def test_object_while_holding_pairs(self):
        """A second object pairs with the held one."""
        buyer, seller = _obj("buyer"), _obj("seller")
        state, blocks = step(Holding(buyer), seller)

        assert isinstance(state, Idle)
        assert blocks == [PairedRow(left=buyer, right=seller)]

    def test_array_while_idle_emits_table(self):
        """An array while idle emits its table directly."""
        state, blocks = step(Idle(), _arr("items"))

        assert isinstance(state, Idle)
        assert _shape(blocks) == [("table", "items")]

    def test_array_while_holding_flushes_first(self):
        """An array after a lone object emits a half row, then the table."""
        buyer = _obj("buyer")
        state, blocks = step(Holding(buyer), _arr("items"))

        assert isinstance(state, Idle)
        assert blocks[0] == PairedRow(left=buyer, right=None)
        assert isinstance(blocks[1], ArrayTable)
        assert len(blocks) == 2

    def test_finish_while_holding(self):
        """A held object at end of input is emitted alone."""
        buyer = _obj("buyer")
        assert finish(Holding(buyer)) == [PairedRow(left=buyer, right=None)]

    def test_finish_while_idle(self):
        """Nothing is emitted at end of input while idle."""
        assert finish(Idle()) == []


class TestCompose:
    """Tests for full sequences."""

    def test_empty(self):
        """No fields, no blocks."""
        assert compose([]) == ()

    def test_buyer_seller_items(self):
        """Two objects pair, the array follows as a table."""
        blocks = compose([_obj("buyer"), _obj("seller"), _arr("itemsShipped")])
        assert _shape(blocks) == [("row", "buyer", "seller"), ("table", "itemsShipped")]

    @pytest.mark.parametrize("n", [2, 4, 6, 10])
    def test_even_objects_pair_fully(self, n):
        """n objects (n even) give n/2 paired rows and no tables."""
        blocks = compose([_obj(f"o{i}") for i in range(n)])

        assert len(blocks) == n // 2
        assert all(isinstance(b, PairedRow) and b.right is not None for b in blocks)

    def test_odd_trailing_object(self):
        """A trailing unpaired object still renders."""
        blocks = compose([_obj("a"), _obj("b"), _obj("c")])
        assert _shape(blocks) == [("row", "a", "b"), ("row", "c", None)]

    def test_array_interrupts_pairing(self):
        """Objects never pair across an array."""
        blocks = compose([_obj("a"), _arr("items"), _obj("b"), _obj("c")])
        assert _shape(blocks) == [
            ("row", "a", None),
            ("table", "items"),
            ("row", "b", "c"),
        ]

    def test_consecutive_arrays(self):
        """Each array becomes its own table."""
        blocks = compose([_arr("x"), _arr("y")])
        assert _shape(blocks) == [("table", "x"), ("table", "y")]

    def test_empty_array_emits_no_table_but_breaks_pairing(self):
        """An empty array still flushes the held object."""
        blocks = compose([_obj("a"), _arr("items", []), _obj("b")])
        assert _shape(blocks) == [("row", "a", None), ("row", "b", None)]

    def test_pairing_follows_encounter_order(self):
        """Objects pair left to right in the order given."""
        blocks = compose([_obj("seller"), _obj("buyer")])
        assert _shape(blocks) == [("row", "seller", "buyer")]

    def test_every_object_emitted_once(self):
        """No object is dropped or duplicated."""
        fields = [_obj("a"), _arr("t1"), _obj("b"), _obj("c"), _obj("d"), _arr("t2"), _obj("e")]
        blocks = compose(fields)

        seen = []
        for block in blocks:
            if isinstance(block, PairedRow):
                seen.append(block.left.key)
                if block.right is not None:
                    seen.append(block.right.key)
        assert seen == ["a", "b", "c", "d", "e"]
        assert [b.title for b in blocks if isinstance(b, ArrayTable)] == ["t1", "t2"]

    def test_accepts_generator(self):
        """Any iterable of fields is accepted."""
        blocks = compose(f for f in [_obj("a"), _obj("b")])
        assert _shape(blocks) == [("row", "a", "b")]
