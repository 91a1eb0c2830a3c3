"""Unit/total price reconciliation for stock adjustments.

A field the caller provided is never overwritten. The other one is derived
from the quantity when it can be.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union
from pydantic import BaseModel

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    # str() keeps 2.5 as 2.5 instead of its binary float expansion
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class PriceField(BaseModel):
    value: Optional[Decimal] = None
    user_provided: bool = False

    @classmethod
    def from_input(cls, value: Optional[Number]) -> "PriceField":
        return cls(value=to_decimal(value), user_provided=value is not None)


class PricingInput(BaseModel):
    quantity: Optional[Decimal] = None
    unit_price: PriceField = PriceField()
    total_price: PriceField = PriceField()


class ResolvedPricing(BaseModel):
    unit_price: Optional[Decimal] = None
    total_price: Optional[Decimal] = None


def reconcile_pricing(pricing: PricingInput) -> ResolvedPricing:
    unit = pricing.unit_price.value
    total = pricing.total_price.value
    quantity = pricing.quantity

    if quantity is None or quantity <= 0:
        return ResolvedPricing(unit_price=unit, total_price=total)

    if unit is not None and not pricing.total_price.user_provided:
        total = round_money(quantity * unit)
    elif total is not None and not pricing.unit_price.user_provided:
        unit = round_money(total / quantity)

    return ResolvedPricing(unit_price=unit, total_price=total)
