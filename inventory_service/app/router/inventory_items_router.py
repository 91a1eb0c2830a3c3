# app/router/inventory_items_router.py
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.core.schemas import BulkOperationResult, UserToken
from shared.helpers.json_response_helper import success_response
from ..crud import inventory_items_crud as crud
from ..schemas.inventory_items_schemas import (
    BulkDeleteRequest,
    InventoryItemCreate,
    InventoryItemListResponse,
    InventoryItemMessageResponse,
    InventoryItemOut,
    InventoryItemRequest,
    InventoryItemUpdate,
    ReorderPointOut,
    ReorderPointUpdate,
)
from ..schemas.stock_transactions_schemas import ItemMetricsOut

router = APIRouter(prefix="/api/inventory/items",
                   tags=["inventory_items"], dependencies=[Depends(validate_current_token)])


@router.get("", response_model=InventoryItemListResponse)
def read_items(
    params: InventoryItemRequest = Depends(),
    db: Session = Depends(get_db),
):
    return crud.get_inventory_items(db, params)


@router.post("", response_model=InventoryItemMessageResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    item: InventoryItemCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    created = crud.create_inventory_item(db, item, current_user.user_id)
    return InventoryItemMessageResponse(message="Item created successfully", item=created)


@router.post("/bulk-delete", response_model=BulkOperationResult)
def bulk_delete_items(
    request: BulkDeleteRequest,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.bulk_delete_items(db, request.ids, current_user.user_id)


@router.get("/{item_id}", response_model=InventoryItemOut)
def read_item(
    item_id: UUID,
    db: Session = Depends(get_db),
):
    return crud.serialize_item(crud.get_inventory_item_or_404(db, item_id))


@router.put("/{item_id}", response_model=InventoryItemOut)
def update_item(
    item_id: UUID,
    item: InventoryItemUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.update_inventory_item(db, item_id, item, current_user.user_id)


@router.patch("/{item_id}", response_model=ReorderPointOut)
def update_item_reorder_point(
    item_id: UUID,
    data: ReorderPointUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.update_reorder_point(db, item_id, data, current_user.user_id)


# ---------------- Delete Inventory Item (Soft Delete) ----------------

@router.delete("/{item_id}")
def delete_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    crud.delete_inventory_item_soft(db, item_id, current_user.user_id)
    return success_response(data={"id": str(item_id)},
                            message="Inventory item deleted successfully")


@router.get("/{item_id}/metrics", response_model=ItemMetricsOut)
def read_item_metrics(
    item_id: UUID,
    db: Session = Depends(get_db),
):
    return crud.get_item_metrics(db, item_id)
