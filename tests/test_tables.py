"""Tests for array table construction."""

from tradedoc.layout.models import ArrayTable
from tradedoc.layout.tables import build_array_table


class TestBuildArrayTable:
    """Tests for column schema and row construction."""

    def test_empty_array_has_no_table(self):
        """An empty array yields None, not a table with zero rows."""
        assert build_array_table("itemsShipped", []) is None

    def test_no_record_items_has_no_table(self):
        """Arrays of scalars have nothing to tabulate."""
        assert build_array_table("tags", ["a", "b", 3]) is None

    def test_columns_union_in_first_seen_order(self):
        """Columns are the union of keys, ordered by first appearance."""
        table = build_array_table("items", [
            {"sku": "A", "qty": 1},
            {"sku": "B", "lot": "L1"},
            {"zeta": True, "qty": 2},
        ])

        assert table.columns == ("sku", "qty", "lot", "zeta")

    def test_columns_not_sorted(self):
        """Column order follows the data, not the alphabet."""
        table = build_array_table("items", [{"z": 1, "a": 2}])
        assert table.columns == ("z", "a")

    def test_rows_keep_missing_cells_absent(self):
        """Rows only contain the keys their item produced."""
        table = build_array_table("items", [{"sku": "A"}, {"qty": 2}])

        assert table.rows == ({"sku": "A"}, {"qty": 2})

    def test_non_record_items_skipped(self):
        """Scalar items between records are skipped."""
        table = build_array_table("items", [{"sku": "A"}, "stray", None, {"sku": "B"}])
        assert [row["sku"] for row in table.rows] == ["A", "B"]

    def test_sample_invoice_items(self, commercial_invoice):
        """Line items flatten into a shared schema."""
        items = commercial_invoice["credentialSubject"]["itemsShipped"]

        table = build_array_table("itemsShipped", items)

        assert isinstance(table, ArrayTable)
        assert table.title == "itemsShipped"
        assert table.columns == (
            "id", "name", "description", "sku", "itemCount", "netWeight",
            "grossWeight", "productPrice", "commodity", "price",
        )
        assert len(table.rows) == 4
        assert table.rows[3]["sku"] == "SURF-WS-004"
        assert table.rows[3]["productPrice"] == "180 USD"

    def test_depth_bound_passed_through(self):
        """max_depth reaches the flattener."""
        table = build_array_table(
            "items",
            [{"product": {"id": "p", "name": "n", "description": "d"}}],
            max_depth=0,
        )
        assert table.columns == ("product",)
