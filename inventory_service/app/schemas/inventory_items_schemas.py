from pydantic import BaseModel, ConfigDict, Field, model_validator
from uuid import UUID
from typing import List, Optional
from datetime import datetime

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.inventory_enum import StockStatus


# ---------------- Create / Update ----------------
class InventoryItemEditable(EmptyStringModel):
    item_name: str = Field(min_length=1, max_length=100)
    category_id: Optional[UUID] = None
    selling_price: float = Field(default=0, ge=0)
    reorder_point: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=500)


class InventoryItemCreate(InventoryItemEditable):
    unit: str = Field(min_length=1, max_length=32)
    initial_stock: float = Field(default=0, ge=0)
    initial_purchase_price: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def require_price_for_initial_stock(self):
        if self.initial_stock > 0 and self.initial_purchase_price is None:
            raise ValueError(
                "Initial purchase price is required when initial stock is greater than 0")
        return self


class InventoryItemUpdate(InventoryItemEditable):
    # Unit and stock quantity are not editable after creation
    model_config = ConfigDict(extra="forbid")

    selling_price: float = Field(ge=0)


class ReorderPointUpdate(EmptyStringModel):
    reorder_point: Optional[float] = Field(ge=0)


class BulkDeleteRequest(BaseModel):
    ids: List[UUID] = Field(min_length=1)


# ---------------- Request ----------------
class InventoryItemRequest(CommonQueryParams):
    category_id: Optional[UUID] = None
    status: Optional[StockStatus] = None


# ---------------- Output ----------------
class InventoryItemOut(BaseModel):
    id: UUID
    item_name: str
    category_id: Optional[UUID] = None
    category_name: str = "Uncategorized"
    unit: str
    description: Optional[str] = None
    stock_quantity: float
    initial_stock: float
    reorder_point: Optional[float] = None
    selling_price: float
    initial_purchase_price: Optional[float] = None
    last_purchase_price: Optional[float] = None
    average_purchase_price: Optional[float] = None
    stock_status: StockStatus
    user_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class InventoryItemListResponse(BaseModel):
    items: List[InventoryItemOut]
    total: int


class InventoryItemMessageResponse(BaseModel):
    message: str
    item: InventoryItemOut


class ReorderPointOut(BaseModel):
    id: UUID
    reorder_point: Optional[float] = None
    stock_status: StockStatus
