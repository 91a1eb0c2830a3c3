import math
from decimal import Decimal

import pytest

from inventory_service.app.enum.inventory_enum import StockStatus
from inventory_service.app.helpers.metrics import (
    MetricInputs,
    PurchaseEntry,
    calculate_inventory_metrics,
    derive_purchase_prices,
    finite_or_none,
    is_unbounded,
    stock_status,
)


def test_basic_metrics():
    metrics = calculate_inventory_metrics(MetricInputs(
        stock_quantity=10,
        selling_price=5,
        average_purchase_price=4,
    ))
    assert metrics.estimated_stock_value == 40
    assert metrics.profit_per_unit == 1
    assert metrics.profit_margin == pytest.approx(20)
    assert metrics.markup == pytest.approx(25)


def test_margin_is_zero_without_selling_price():
    metrics = calculate_inventory_metrics(MetricInputs(
        stock_quantity=3, selling_price=0, average_purchase_price=2))
    assert metrics.profit_margin == 0
    assert metrics.profit_per_unit == -2


def test_markup_unbounded_when_average_cost_is_zero():
    metrics = calculate_inventory_metrics(MetricInputs(
        stock_quantity=3, selling_price=5, average_purchase_price=None))
    assert math.isinf(metrics.markup)
    assert is_unbounded(metrics.markup)
    assert finite_or_none(metrics.markup) is None
    assert metrics.estimated_stock_value == 0


def test_markup_zero_when_no_prices():
    metrics = calculate_inventory_metrics(MetricInputs(stock_quantity=1))
    assert metrics.markup == 0
    assert not is_unbounded(metrics.markup)


def test_price_trends():
    metrics = calculate_inventory_metrics(MetricInputs(
        stock_quantity=1,
        selling_price=10,
        average_purchase_price=4,
        last_purchase_price=5,
        second_last_purchase_price=3,
    ))
    assert metrics.last_vs_avg_diff_percent == pytest.approx(25)
    assert metrics.last_vs_second_last_diff_value == 2


def test_price_trends_missing_inputs():
    metrics = calculate_inventory_metrics(MetricInputs(
        stock_quantity=1, selling_price=10, last_purchase_price=5))
    assert metrics.last_vs_avg_diff_percent is None
    assert metrics.last_vs_second_last_diff_value is None


@pytest.mark.parametrize("quantity, reorder_point, expected", [
    (5, 5, StockStatus.low_stock),
    (0, 5, StockStatus.out_of_stock),
    (6, 5, StockStatus.in_stock),
    (0, None, StockStatus.out_of_stock),
    (1, None, StockStatus.in_stock),
])
def test_stock_status(quantity, reorder_point, expected):
    assert stock_status(quantity, reorder_point) == expected


def test_derive_purchase_prices_weighted_average():
    history = [
        PurchaseEntry(quantity=Decimal("5"), unit_price=Decimal("3.00")),
        PurchaseEntry(quantity=Decimal("20"), unit_price=Decimal("2.50")),
    ]
    prices = derive_purchase_prices(history)
    assert prices.average_purchase_price == Decimal("2.60")
    assert prices.last_purchase_price == Decimal("3.00")
    assert prices.second_last_purchase_price == Decimal("2.50")


def test_derive_purchase_prices_empty_history():
    prices = derive_purchase_prices([])
    assert prices.average_purchase_price is None
    assert prices.last_purchase_price is None
    assert prices.second_last_purchase_price is None
