"""Derived item metrics. Pure functions over item fields and purchase history."""
import math
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Union
from pydantic import BaseModel

from ..enum.inventory_enum import StockStatus

Number = Union[int, float, Decimal]


class MetricInputs(BaseModel):
    stock_quantity: float = 0
    selling_price: Optional[float] = None
    average_purchase_price: Optional[float] = None
    last_purchase_price: Optional[float] = None
    second_last_purchase_price: Optional[float] = None


class CalculatedMetrics(BaseModel):
    estimated_stock_value: float
    profit_per_unit: float
    profit_margin: float
    # math.inf when the average cost is 0 and the selling price is positive
    markup: float
    last_vs_avg_diff_percent: Optional[float] = None
    last_vs_second_last_diff_value: Optional[float] = None


class PurchaseEntry(BaseModel):
    quantity: Decimal
    unit_price: Decimal
    created_at: Optional[datetime] = None
    transaction_id: Optional[str] = None


class PurchasePrices(BaseModel):
    average_purchase_price: Optional[Decimal] = None
    last_purchase_price: Optional[Decimal] = None
    second_last_purchase_price: Optional[Decimal] = None


def _as_float(value: Optional[Number]) -> Optional[float]:
    return None if value is None else float(value)


def calculate_inventory_metrics(inputs: MetricInputs) -> CalculatedMetrics:
    sell_price = inputs.selling_price or 0.0
    avg_cost = inputs.average_purchase_price or 0.0
    last_cost = inputs.last_purchase_price

    estimated_stock_value = inputs.stock_quantity * avg_cost
    profit_per_unit = sell_price - avg_cost
    profit_margin = (profit_per_unit / sell_price) * 100 if sell_price > 0 else 0.0

    if avg_cost > 0:
        markup = (profit_per_unit / avg_cost) * 100
    elif sell_price > 0:
        markup = math.inf
    else:
        markup = 0.0

    last_vs_avg_diff_percent = None
    if avg_cost != 0 and last_cost is not None:
        last_vs_avg_diff_percent = ((last_cost - avg_cost) / avg_cost) * 100

    last_vs_second_last_diff_value = None
    if last_cost is not None and inputs.second_last_purchase_price is not None:
        last_vs_second_last_diff_value = last_cost - inputs.second_last_purchase_price

    return CalculatedMetrics(
        estimated_stock_value=estimated_stock_value,
        profit_per_unit=profit_per_unit,
        profit_margin=profit_margin,
        markup=markup,
        last_vs_avg_diff_percent=last_vs_avg_diff_percent,
        last_vs_second_last_diff_value=last_vs_second_last_diff_value,
    )


def stock_status(stock_quantity: Number, reorder_point: Optional[Number]) -> StockStatus:
    if stock_quantity <= 0:
        return StockStatus.out_of_stock
    if reorder_point is not None and stock_quantity <= reorder_point:
        return StockStatus.low_stock
    return StockStatus.in_stock


def derive_purchase_prices(history: Sequence[PurchaseEntry]) -> PurchasePrices:
    """Quantity-weighted average plus the two newest prices.

    ``history`` must be ordered newest first.
    """
    if not history:
        return PurchasePrices()

    total_quantity = sum((entry.quantity for entry in history), Decimal("0"))
    average = None
    if total_quantity > 0:
        total_cost = sum((entry.quantity * entry.unit_price for entry in history), Decimal("0"))
        average = (total_cost / total_quantity).quantize(Decimal("0.01"))

    return PurchasePrices(
        average_purchase_price=average,
        last_purchase_price=history[0].unit_price,
        second_last_purchase_price=history[1].unit_price if len(history) > 1 else None,
    )


def metric_inputs_for(item, prices: PurchasePrices) -> MetricInputs:
    return MetricInputs(
        stock_quantity=float(item.stock_quantity or 0),
        selling_price=_as_float(item.selling_price),
        average_purchase_price=_as_float(item.average_purchase_price),
        last_purchase_price=_as_float(item.last_purchase_price),
        second_last_purchase_price=_as_float(prices.second_last_purchase_price),
    )


def is_unbounded(value: float) -> bool:
    return math.isinf(value)


def finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) or math.isnan(value) else value
