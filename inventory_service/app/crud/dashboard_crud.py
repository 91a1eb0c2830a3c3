# app/crud/dashboard_crud.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..enum.inventory_enum import StockStatus
from ..models.inventory_items import InventoryItem
from ..schemas.dashboard_schemas import DashboardSummary
from .inventory_items_crud import status_filter
from .settings_crud import get_currency_code


def get_dashboard_summary(db: Session) -> DashboardSummary:
    live = InventoryItem.is_deleted == False

    def count(*filters) -> int:
        return db.query(func.count(InventoryItem.id)).filter(live, *filters).scalar() or 0

    total_value = db.query(
        func.sum(InventoryItem.stock_quantity *
                 func.coalesce(InventoryItem.average_purchase_price, 0))
    ).filter(live).scalar()

    return DashboardSummary(
        total_items=count(),
        low_stock_items=count(status_filter(StockStatus.low_stock)),
        out_of_stock_items=count(status_filter(StockStatus.out_of_stock)),
        total_stock_value=round(float(total_value or 0), 2),
        currency_code=get_currency_code(db),
    )
