# app/router/stock_transactions_router.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import UserToken
from ..crud import inventory_items_crud, stock_ledger_crud as crud
from ..schemas.stock_transactions_schemas import (
    StockAdjustmentRequest,
    StockAdjustmentResponse,
    StockTransactionOut,
    TransactionHistoryRequest,
)

router = APIRouter(prefix="/api/inventory/items",
                   tags=["stock_transactions"], dependencies=[Depends(validate_current_token)])


@router.post("/{item_id}/stock", response_model=StockAdjustmentResponse)
def adjust_item_stock(
    item_id: UUID,
    request: StockAdjustmentRequest,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    new_quantity = crud.adjust_stock(db, item_id, request, current_user.user_id)
    item = inventory_items_crud.get_inventory_item_by_id(db, item_id)
    return StockAdjustmentResponse(
        message="Stock adjusted successfully",
        new_quantity=new_quantity,
        item=inventory_items_crud.serialize_item(item) if item else None,
    )


@router.get("/{item_id}/transactions", response_model=List[StockTransactionOut])
def read_item_transactions(
    item_id: UUID,
    params: TransactionHistoryRequest = Depends(),
    db: Session = Depends(get_db),
):
    return crud.get_item_transactions(db, item_id, params)
