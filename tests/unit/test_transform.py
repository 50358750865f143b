from __future__ import annotations

import pytest

from cart_parser.aggregator import calc_total
from cart_parser.domain.models import LineItem
from cart_parser.infrastructure.id_source import SequentialIdSource
from cart_parser.transform import transform_line


def _item(price: float, quantity: float, name: str = "Test") -> LineItem:
    return LineItem(id=name, name=name, price=price, quantity=quantity)


class TestTransformLine:
    def test_builds_line_item(self):
        item = transform_line("Mollis consequat,9.00,2", lambda: "abc")

        assert item == LineItem(id="abc", name="Mollis consequat", price=9.0, quantity=2.0)

    def test_trims_cells(self):
        item = transform_line("  Tvoluptatem , 10.32 , 1 ", lambda: "x")

        assert item.name == "Tvoluptatem"
        assert item.price == 10.32
        assert item.quantity == 1.0

    def test_requests_new_id_per_line(self):
        ids = SequentialIdSource()

        first = transform_line("A,1,1", ids)
        second = transform_line("B,2,2", ids)

        assert first.id == "item-1"
        assert second.id == "item-2"


class TestCalcTotal:
    def test_empty_sequence_is_zero(self):
        assert calc_total([]) == 0

    def test_sums_subtotals(self):
        items = [_item(9.0, 2), _item(10.32, 1), _item(28.72, 10)]

        assert calc_total(items) == pytest.approx(315.52)

    def test_matches_item_subtotals(self):
        items = [_item(18.9, 1), _item(66.02, 3), _item(0.1, 7)]

        assert calc_total(items) == sum(item.price * item.quantity for item in items)

    def test_accepts_generators(self):
        assert calc_total(_item(2.5, 2) for _ in range(4)) == pytest.approx(20.0)
