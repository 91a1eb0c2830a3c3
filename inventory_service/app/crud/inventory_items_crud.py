# app/crud/inventory_items_crud.py
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from shared.core.exceptions import AppException, ConflictError, NotFoundError, StorageError
from shared.core.schemas import BulkItemResult, BulkOperationResult
from ..enum.inventory_enum import AuditAction, StockStatus
from ..helpers.metrics import (
    calculate_inventory_metrics,
    derive_purchase_prices,
    finite_or_none,
    is_unbounded,
    metric_inputs_for,
    stock_status,
)
from ..helpers.pricing import to_decimal
from ..models.categories import Category
from ..models.inventory_items import InventoryItem
from ..schemas.inventory_items_schemas import (
    InventoryItemCreate,
    InventoryItemListResponse,
    InventoryItemOut,
    InventoryItemRequest,
    InventoryItemUpdate,
    ReorderPointOut,
    ReorderPointUpdate,
)
from ..schemas.stock_transactions_schemas import ItemMetricsOut, PurchaseHistoryEntryOut
from .audit_logs_crud import record_audit
from .stock_ledger_crud import PURCHASE_HISTORY_LIMIT, get_purchase_history

logger = logging.getLogger(__name__)


def serialize_item(item: InventoryItem) -> InventoryItemOut:
    return InventoryItemOut(
        id=item.id,
        item_name=item.item_name,
        category_id=item.category_id,
        category_name=item.category.name if item.category else "Uncategorized",
        unit=item.unit,
        description=item.description,
        stock_quantity=item.stock_quantity,
        initial_stock=item.initial_stock,
        reorder_point=item.reorder_point,
        selling_price=item.selling_price,
        initial_purchase_price=item.initial_purchase_price,
        last_purchase_price=item.last_purchase_price,
        average_purchase_price=item.average_purchase_price,
        stock_status=stock_status(item.stock_quantity, item.reorder_point),
        user_id=item.user_id,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


# ----------------- Build Filters for Items -----------------

def status_filter(status: StockStatus):
    if status == StockStatus.out_of_stock:
        return InventoryItem.stock_quantity <= 0
    low = and_(
        InventoryItem.stock_quantity > 0,
        InventoryItem.reorder_point.isnot(None),
        InventoryItem.stock_quantity <= InventoryItem.reorder_point,
    )
    if status == StockStatus.low_stock:
        return low
    return and_(InventoryItem.stock_quantity > 0, ~low)


def build_item_filters(params: InventoryItemRequest):
    # Always filter out deleted items
    filters = [InventoryItem.is_deleted == False]

    if params.category_id:
        filters.append(InventoryItem.category_id == params.category_id)

    if params.status:
        filters.append(status_filter(params.status))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                InventoryItem.item_name.ilike(search_term),
                InventoryItem.description.ilike(search_term),
            )
        )

    return filters


# ----------------- Get Items -----------------

def get_inventory_items(db: Session, params: InventoryItemRequest) -> InventoryItemListResponse:
    base_query = db.query(InventoryItem).filter(*build_item_filters(params))

    total = base_query.with_entities(func.count(InventoryItem.id)).scalar()

    items = (
        base_query
        .options(joinedload(InventoryItem.category))
        .order_by(InventoryItem.item_name.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return InventoryItemListResponse(items=[serialize_item(i) for i in items], total=total)


def get_inventory_item_by_id(db: Session, item_id: UUID) -> Optional[InventoryItem]:
    return db.query(InventoryItem).filter(
        InventoryItem.id == item_id,
        InventoryItem.is_deleted == False
    ).first()


def get_inventory_item_or_404(db: Session, item_id: UUID) -> InventoryItem:
    db_item = get_inventory_item_by_id(db, item_id)
    if not db_item:
        raise NotFoundError("Inventory item not found")
    return db_item


def _ensure_unique_name(db: Session, item_name: str, exclude_id: Optional[UUID] = None):
    query = db.query(InventoryItem.id).filter(
        InventoryItem.is_deleted == False,
        func.lower(InventoryItem.item_name) == func.lower(item_name)  # Case-insensitive
    )
    if exclude_id:
        query = query.filter(InventoryItem.id != exclude_id)
    if query.first():
        raise ConflictError(f"Item with name '{item_name}' already exists")


def _ensure_category_exists(db: Session, category_id: Optional[UUID]):
    if category_id and not db.query(Category.id).filter(Category.id == category_id).first():
        raise NotFoundError("Category not found")


def _commit(db: Session, action: str):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Constraint violation while trying to %s: %s", action, e.orig)
        raise ConflictError("Database constraint violation")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error while trying to %s: %s", action, e)
        raise StorageError(f"Failed to {action}")


# ----------------- Create -----------------

def create_inventory_item(db: Session, item: InventoryItemCreate, user_id: Optional[UUID]) -> InventoryItemOut:
    _ensure_unique_name(db, item.item_name)
    _ensure_category_exists(db, item.category_id)

    initial_stock = to_decimal(item.initial_stock)
    initial_price = to_decimal(item.initial_purchase_price)
    # Seed purchase prices only when stock arrives with the item
    seeded_price = initial_price if initial_stock > 0 else None

    db_item = InventoryItem(
        item_name=item.item_name,
        category_id=item.category_id,
        unit=item.unit,
        description=item.description,
        stock_quantity=initial_stock,
        initial_stock=initial_stock,
        reorder_point=to_decimal(item.reorder_point),
        selling_price=to_decimal(item.selling_price),
        initial_purchase_price=initial_price,
        last_purchase_price=seeded_price,
        average_purchase_price=seeded_price,
        user_id=user_id,
    )
    db.add(db_item)
    db.flush()

    record_audit(db, user_id, AuditAction.create_item, db_item.id,
                 item.model_dump(mode="json"))
    _commit(db, "create inventory item")
    db.refresh(db_item)

    logger.info("Created inventory item %s (%s)", db_item.id, db_item.item_name)
    return serialize_item(db_item)


# ----------------- Update -----------------

def update_inventory_item(db: Session, item_id: UUID, item: InventoryItemUpdate, user_id: Optional[UUID]) -> InventoryItemOut:
    db_item = get_inventory_item_or_404(db, item_id)

    update_data = item.model_dump(exclude_unset=True)
    if "item_name" in update_data:
        _ensure_unique_name(db, update_data["item_name"], exclude_id=item_id)
    if "category_id" in update_data:
        _ensure_category_exists(db, update_data["category_id"])

    for field, value in update_data.items():
        if field in ("selling_price", "reorder_point"):
            value = to_decimal(value)
        setattr(db_item, field, value)
    db_item.updated_at = datetime.now(timezone.utc)

    record_audit(db, user_id, AuditAction.update_item, item_id,
                 item.model_dump(mode="json", exclude_unset=True))
    _commit(db, "update inventory item")
    db.refresh(db_item)
    return serialize_item(db_item)


def update_reorder_point(db: Session, item_id: UUID, data: ReorderPointUpdate, user_id: Optional[UUID]) -> ReorderPointOut:
    db_item = get_inventory_item_or_404(db, item_id)
    db_item.reorder_point = to_decimal(data.reorder_point)
    db_item.updated_at = datetime.now(timezone.utc)

    record_audit(db, user_id, AuditAction.update_item, item_id,
                 {"reorder_point": data.reorder_point})
    _commit(db, "update item reorder point")
    db.refresh(db_item)
    return ReorderPointOut(
        id=db_item.id,
        reorder_point=db_item.reorder_point,
        stock_status=stock_status(db_item.stock_quantity, db_item.reorder_point),
    )


# ----------------- Soft Delete Inventory Item -----------------

def delete_inventory_item_soft(db: Session, item_id: UUID, user_id: Optional[UUID]) -> bool:
    """
    Soft delete an inventory item. Its ledger rows are kept for audit.
    """
    db_item = get_inventory_item_or_404(db, item_id)

    db_item.is_deleted = True
    db_item.deleted_at = datetime.now(timezone.utc)

    record_audit(db, user_id, AuditAction.delete_item, item_id,
                 {"item_name": db_item.item_name})
    _commit(db, "delete inventory item")
    logger.info("Deleted inventory item %s", item_id)
    return True


def bulk_delete_items(db: Session, item_ids, user_id: Optional[UUID]) -> BulkOperationResult:
    """Delete each item independently; one failure does not undo the others."""
    results = []
    for item_id in item_ids:
        try:
            delete_inventory_item_soft(db, item_id, user_id)
            results.append(BulkItemResult(id=item_id, success=True))
        except AppException as e:
            results.append(BulkItemResult(id=item_id, success=False, error=e.message))

    succeeded = sum(1 for r in results if r.success)
    return BulkOperationResult(
        results=results,
        succeeded=succeeded,
        failed=len(results) - succeeded,
    )


# ----------------- Metrics -----------------

def get_item_metrics(db: Session, item_id: UUID) -> ItemMetricsOut:
    db_item = get_inventory_item_or_404(db, item_id)

    history = get_purchase_history(db, db_item, limit=PURCHASE_HISTORY_LIMIT)
    prices = derive_purchase_prices(history)
    metrics = calculate_inventory_metrics(metric_inputs_for(db_item, prices))

    return ItemMetricsOut(
        item_id=db_item.id,
        stock_status=stock_status(db_item.stock_quantity, db_item.reorder_point).value,
        estimated_stock_value=metrics.estimated_stock_value,
        profit_per_unit=metrics.profit_per_unit,
        profit_margin=metrics.profit_margin,
        markup=finite_or_none(metrics.markup),
        markup_unbounded=is_unbounded(metrics.markup),
        last_vs_avg_diff_percent=metrics.last_vs_avg_diff_percent,
        last_vs_second_last_diff_value=metrics.last_vs_second_last_diff_value,
        average_purchase_price=db_item.average_purchase_price,
        last_purchase_price=db_item.last_purchase_price,
        second_last_purchase_price=prices.second_last_purchase_price,
        purchase_history=[
            PurchaseHistoryEntryOut(
                transaction_id=entry.transaction_id,
                created_at=entry.created_at,
                quantity=entry.quantity,
                purchase_price=entry.unit_price,
            )
            for entry in history
        ],
    )
