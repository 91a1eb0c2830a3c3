from pydantic import BaseModel, Field, model_validator
from uuid import UUID
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.inventory_enum import (
    SELLING_PRICE_TYPES,
    AdjustmentDirection,
    TransactionType,
    requires_price,
    requires_reason,
    valid_types_for,
)
from .inventory_items_schemas import InventoryItemOut


# ---------------- Stock Adjustment ----------------
class StockAdjustmentRequest(EmptyStringModel):
    direction: AdjustmentDirection = Field(alias="type")
    transaction_type: TransactionType
    # Ledger quantities are stored with three decimal places
    quantity: Decimal = Field(gt=0, decimal_places=3)
    purchase_price: Optional[float] = Field(default=None, ge=0)
    selling_price: Optional[float] = Field(default=None, ge=0)
    total_price: Optional[float] = Field(default=None, ge=0)
    reference_number: Optional[str] = Field(default=None, max_length=50)
    reason: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None
    date: Optional[datetime] = None

    @model_validator(mode="after")
    def check_type_rules(self):
        if self.transaction_type not in valid_types_for(self.direction):
            raise ValueError(
                f"Transaction type '{self.transaction_type.value}' is not valid for a stock {self.direction.value}")

        if requires_price(self.transaction_type):
            if self.unit_price is None and self.total_price is None:
                unit_field = ("sellingPrice" if self.transaction_type in SELLING_PRICE_TYPES
                              else "purchasePrice")
                raise ValueError(
                    f"Either {unit_field} or totalPrice is required for '{self.transaction_type.value}'")

        if requires_reason(self.transaction_type) and not self.reason:
            raise ValueError(
                f"Reason is required for '{self.transaction_type.value}' adjustments")
        return self

    @property
    def unit_price(self) -> Optional[float]:
        """The unit price sent in the column this transaction type records it in."""
        if self.transaction_type in SELLING_PRICE_TYPES:
            return self.selling_price
        return self.purchase_price


class StockAdjustmentResponse(BaseModel):
    message: str
    new_quantity: float = Field(serialization_alias="newQuantity")
    item: Optional[InventoryItemOut] = None


# ---------------- Transaction History ----------------
class TransactionHistoryRequest(BaseModel):
    transaction_type: Optional[TransactionType] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    skip: Optional[int] = 0
    limit: Optional[int] = 100


class StockTransactionOut(BaseModel):
    id: UUID
    item_id: UUID
    transaction_type: str
    quantity_change: float
    purchase_price: Optional[float] = None
    selling_price: Optional[float] = None
    total_price: Optional[float] = None
    reference_number: Optional[str] = None
    reason: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    user_id: Optional[UUID] = None
    user_name: Optional[str] = None

    model_config = {"from_attributes": True}


# ---------------- Metrics ----------------
class PurchaseHistoryEntryOut(BaseModel):
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None
    quantity: float
    purchase_price: float


class ItemMetricsOut(BaseModel):
    item_id: UUID
    stock_status: str
    estimated_stock_value: float
    profit_per_unit: float
    profit_margin: float
    # null together with markup_unbounded=true when the average cost is zero
    markup: Optional[float] = None
    markup_unbounded: bool = False
    last_vs_avg_diff_percent: Optional[float] = None
    last_vs_second_last_diff_value: Optional[float] = None
    average_purchase_price: Optional[float] = None
    last_purchase_price: Optional[float] = None
    second_last_purchase_price: Optional[float] = None
    purchase_history: List[PurchaseHistoryEntryOut] = []
