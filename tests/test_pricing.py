from decimal import Decimal

from inventory_service.app.helpers.pricing import (
    PriceField,
    PricingInput,
    reconcile_pricing,
    round_money,
)


def pricing(quantity, unit=None, total=None):
    return PricingInput(
        quantity=Decimal(str(quantity)) if quantity is not None else None,
        unit_price=PriceField.from_input(unit),
        total_price=PriceField.from_input(total),
    )


def test_total_derived_from_unit_price():
    resolved = reconcile_pricing(pricing(10, unit=2.50))
    assert resolved.unit_price == Decimal("2.5")
    assert resolved.total_price == Decimal("25.00")


def test_unit_derived_from_total_price():
    resolved = reconcile_pricing(pricing(10, total=30))
    assert resolved.unit_price == Decimal("3.00")
    assert resolved.total_price == Decimal("30")


def test_user_provided_values_are_never_overwritten():
    resolved = reconcile_pricing(pricing(10, unit=2, total=25))
    assert resolved.unit_price == Decimal("2")
    assert resolved.total_price == Decimal("25")


def test_derived_values_are_rounded_to_cents():
    resolved = reconcile_pricing(pricing(3, total=10))
    assert resolved.unit_price == Decimal("3.33")

    resolved = reconcile_pricing(pricing(3, unit=0.335))
    assert resolved.total_price == Decimal("1.01")


def test_missing_or_zero_quantity_passes_values_through():
    assert reconcile_pricing(pricing(None, unit=2)).total_price is None
    assert reconcile_pricing(pricing(0, total=5)).unit_price is None


def test_no_prices_gives_no_prices():
    resolved = reconcile_pricing(pricing(4))
    assert resolved.unit_price is None
    assert resolved.total_price is None


def test_round_money_half_up():
    assert round_money(Decimal("2.005")) == Decimal("2.01")
    assert round_money(Decimal("2.004")) == Decimal("2.00")
