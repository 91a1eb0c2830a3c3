from enum import Enum


class AdjustmentDirection(str, Enum):
    increase = "increase"
    decrease = "decrease"


# Persisted strings: add new members, never rename existing ones
class TransactionType(str, Enum):
    purchase = "purchase"
    return_ = "return"
    inventory_correction_add = "inventory-correction-add"
    other_addition = "other-addition"
    sale = "sale"
    damaged = "damaged"
    loss = "loss"
    expired = "expired"
    inventory_correction_remove = "inventory-correction-remove"
    other_removal = "other-removal"


class StockStatus(str, Enum):
    out_of_stock = "out_of_stock"
    low_stock = "low_stock"
    in_stock = "in_stock"


class AuditAction(str, Enum):
    create_item = "CREATE_ITEM"
    update_item = "UPDATE_ITEM"
    delete_item = "DELETE_ITEM"
    adjust_stock = "ADJUST_STOCK"


INCREASE_TYPES = frozenset({
    TransactionType.purchase,
    TransactionType.return_,
    TransactionType.inventory_correction_add,
    TransactionType.other_addition,
})

DECREASE_TYPES = frozenset({
    TransactionType.sale,
    TransactionType.damaged,
    TransactionType.loss,
    TransactionType.expired,
    TransactionType.inventory_correction_remove,
    TransactionType.other_removal,
})

PRICED_TYPES = frozenset({
    TransactionType.purchase,
    TransactionType.return_,
    TransactionType.sale,
    TransactionType.damaged,
    TransactionType.loss,
    TransactionType.expired,
})

# Adjustments without a commercial counterpart must say why they happened
REASON_REQUIRED_TYPES = frozenset({
    TransactionType.inventory_correction_add,
    TransactionType.other_addition,
    TransactionType.damaged,
    TransactionType.loss,
    TransactionType.expired,
    TransactionType.inventory_correction_remove,
    TransactionType.other_removal,
})

# Types whose unit price is recorded in the selling_price column
SELLING_PRICE_TYPES = frozenset({TransactionType.sale})


def requires_price(transaction_type: TransactionType) -> bool:
    return transaction_type in PRICED_TYPES


def requires_reason(transaction_type: TransactionType) -> bool:
    return transaction_type in REASON_REQUIRED_TYPES


def valid_types_for(direction: AdjustmentDirection) -> frozenset:
    if direction == AdjustmentDirection.increase:
        return INCREASE_TYPES
    return DECREASE_TYPES


SUPPORTED_CURRENCIES = (
    {"code": "USD", "name": "US Dollar", "symbol": "$"},
    {"code": "EUR", "name": "Euro", "symbol": "€"},
    {"code": "GBP", "name": "British Pound", "symbol": "£"},
    {"code": "RON", "name": "Romanian Leu", "symbol": "RON"},
)
