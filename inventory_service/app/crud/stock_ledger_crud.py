# app/crud/stock_ledger_crud.py
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, update, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import InsufficientStockError, NotFoundError, StorageError
from shared.models.users import Users
from ..enum.inventory_enum import (
    AdjustmentDirection,
    AuditAction,
    SELLING_PRICE_TYPES,
    TransactionType,
    requires_price,
)
from ..helpers.metrics import PurchaseEntry, derive_purchase_prices
from ..helpers.pricing import (
    PriceField,
    PricingInput,
    ResolvedPricing,
    reconcile_pricing,
    to_decimal,
)
from ..models.inventory_items import InventoryItem
from ..models.stock_transactions import StockTransaction
from ..schemas.stock_transactions_schemas import (
    StockAdjustmentRequest,
    StockTransactionOut,
    TransactionHistoryRequest,
)
from .audit_logs_crud import record_audit

logger = logging.getLogger(__name__)

PURCHASE_HISTORY_LIMIT = 10


# ----------------- Pricing -----------------

def resolve_adjustment_pricing(request: StockAdjustmentRequest) -> ResolvedPricing:
    """Apply the unit/total reconciliation rule to the prices a caller sent."""
    if not requires_price(request.transaction_type):
        return ResolvedPricing()

    return reconcile_pricing(PricingInput(
        quantity=to_decimal(request.quantity),
        unit_price=PriceField.from_input(request.unit_price),
        total_price=PriceField.from_input(request.total_price),
    ))


# ----------------- Ledger Writer -----------------

def _get_live_item(db: Session, item_id: UUID) -> Optional[InventoryItem]:
    return db.query(InventoryItem).filter(
        InventoryItem.id == item_id,
        InventoryItem.is_deleted == False
    ).first()


def _apply_quantity_change(db: Session, item_id: UUID, direction: AdjustmentDirection, quantity: Decimal) -> Decimal:
    change = quantity if direction == AdjustmentDirection.increase else -quantity

    stmt = update(InventoryItem).where(
        InventoryItem.id == item_id,
        InventoryItem.is_deleted == False
    )
    if direction == AdjustmentDirection.decrease:
        # Guards against a concurrent decrease that passed the same stale check
        stmt = stmt.where(InventoryItem.stock_quantity >= quantity)

    result = db.execute(
        stmt.values(
            stock_quantity=InventoryItem.stock_quantity + change,
            updated_at=func.now(),
        ).execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        current = db.execute(
            select(InventoryItem.stock_quantity).where(
                InventoryItem.id == item_id,
                InventoryItem.is_deleted == False)
        ).scalar_one_or_none()
        if current is None:
            raise NotFoundError("Item not found")
        raise InsufficientStockError(
            "Insufficient stock",
            details={"available": float(current), "requested": float(quantity)},
        )

    return db.execute(
        select(InventoryItem.stock_quantity).where(InventoryItem.id == item_id)
    ).scalar_one()


def _append_transaction(
    db: Session,
    item_id: UUID,
    direction: AdjustmentDirection,
    transaction_type: TransactionType,
    quantity: Decimal,
    pricing: ResolvedPricing,
    reference_number: Optional[str],
    reason: Optional[str],
    notes: Optional[str],
    created_at: Optional[datetime],
    user_id: Optional[UUID],
) -> StockTransaction:
    if transaction_type in SELLING_PRICE_TYPES:
        purchase_price, selling_price = None, pricing.unit_price
    else:
        purchase_price, selling_price = pricing.unit_price, None

    entry = StockTransaction(
        item_id=item_id,
        transaction_type=transaction_type.value,
        quantity_change=quantity if direction == AdjustmentDirection.increase else -quantity,
        purchase_price=purchase_price,
        selling_price=selling_price,
        total_price=pricing.total_price,
        reference_number=reference_number,
        reason=reason,
        notes=notes,
        created_at=created_at or datetime.now(timezone.utc),
        user_id=user_id,
    )
    db.add(entry)
    db.flush()
    return entry


def adjust_stock(
    db: Session,
    item_id: UUID,
    request: StockAdjustmentRequest,
    user_id: Optional[UUID] = None,
) -> Decimal:
    """Change an item's quantity and append the matching ledger row in one transaction.

    Returns the new stock quantity. Nothing is written when the item is
    missing or a decrease exceeds the current stock.
    """
    quantity = to_decimal(request.quantity)
    pricing = resolve_adjustment_pricing(request)

    item = _get_live_item(db, item_id)
    if not item:
        raise NotFoundError("Item not found")

    if request.direction == AdjustmentDirection.decrease and quantity > item.stock_quantity:
        raise InsufficientStockError(
            "Insufficient stock",
            details={"available": float(item.stock_quantity), "requested": float(quantity)},
        )

    try:
        new_quantity = _apply_quantity_change(db, item_id, request.direction, quantity)
        entry = _append_transaction(
            db,
            item_id=item_id,
            direction=request.direction,
            transaction_type=request.transaction_type,
            quantity=quantity,
            pricing=pricing,
            reference_number=request.reference_number,
            reason=request.reason,
            notes=request.notes,
            created_at=request.date,
            user_id=user_id,
        )
        if request.transaction_type == TransactionType.purchase:
            refresh_purchase_prices(db, item)

        record_audit(db, user_id, AuditAction.adjust_stock, item_id, {
            "transaction_id": str(entry.id),
            "transaction_type": request.transaction_type.value,
            "quantity_change": float(entry.quantity_change),
            "new_quantity": float(new_quantity),
        })
        db.commit()
    except (NotFoundError, InsufficientStockError):
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Stock adjustment failed for item %s: %s", item_id, e)
        raise StorageError("Failed to adjust stock")

    logger.info("Stock adjusted for item %s: %s %s -> %s",
                item_id, request.transaction_type.value, quantity, new_quantity)
    return new_quantity


# ----------------- Purchase Prices -----------------

def get_purchase_history(db: Session, item: InventoryItem, limit: Optional[int] = None) -> List[PurchaseEntry]:
    """Priced purchase rows and the initial stock seed, newest first."""
    query = db.query(StockTransaction).filter(
        StockTransaction.item_id == item.id,
        StockTransaction.transaction_type == TransactionType.purchase.value,
        StockTransaction.purchase_price.isnot(None)
    ).order_by(StockTransaction.created_at.desc())
    if limit:
        query = query.limit(limit)

    history = [
        PurchaseEntry(
            quantity=row.quantity_change,
            unit_price=row.purchase_price,
            created_at=row.created_at,
            transaction_id=str(row.id),
        )
        for row in query.all()
    ]

    if item.initial_stock and item.initial_stock > 0 and item.initial_purchase_price is not None:
        seed = PurchaseEntry(
            quantity=item.initial_stock,
            unit_price=item.initial_purchase_price,
            created_at=item.created_at,
        )
        # Purchases backdated before the item was created rank behind the seed
        position = next(
            (i for i, entry in enumerate(history) if _is_older(entry.created_at, seed.created_at)),
            len(history),
        )
        history.insert(position, seed)

    return history[:limit] if limit else history


def _as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _is_older(value: Optional[datetime], than: Optional[datetime]) -> bool:
    if value is None or than is None:
        return False
    return _as_utc_naive(value) < _as_utc_naive(than)


def refresh_purchase_prices(db: Session, item: InventoryItem) -> InventoryItem:
    """Recompute average and last purchase price from the full purchase history."""
    prices = derive_purchase_prices(get_purchase_history(db, item))
    item.average_purchase_price = prices.average_purchase_price
    item.last_purchase_price = prices.last_purchase_price
    return item


# ----------------- Transaction History -----------------

def get_item_transactions(db: Session, item_id: UUID, params: TransactionHistoryRequest) -> List[StockTransactionOut]:
    if not _get_live_item(db, item_id):
        raise NotFoundError("Item not found")

    query = (
        db.query(StockTransaction, Users.full_name)
        .outerjoin(Users, Users.id == StockTransaction.user_id)
        .filter(StockTransaction.item_id == item_id)
    )
    if params.transaction_type:
        query = query.filter(
            StockTransaction.transaction_type == params.transaction_type.value)
    if params.date_from:
        query = query.filter(StockTransaction.created_at >= params.date_from)
    if params.date_to:
        query = query.filter(StockTransaction.created_at <= params.date_to)

    rows = (
        query.order_by(StockTransaction.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    results = []
    for transaction, full_name in rows:
        out = StockTransactionOut.model_validate(transaction)
        if transaction.user_id is not None:
            out.user_name = full_name or "Unknown User"
        results.append(out)
    return results
