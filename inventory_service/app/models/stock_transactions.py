# app/models/stock_transactions.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from shared.core.database import Base


class StockTransaction(Base):
    """Append-only ledger entry. Rows are never updated or deleted."""

    __tablename__ = "stock_transactions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    item_id = Column(
        Uuid,
        ForeignKey("inventory_items.id"),
        nullable=False,
        index=True
    )
    transaction_type = Column(String(40), nullable=False)
    quantity_change = Column(Numeric(14, 3), nullable=False)

    purchase_price = Column(Numeric(12, 2))
    selling_price = Column(Numeric(12, 2))
    total_price = Column(Numeric(12, 2))

    reference_number = Column(String(50))
    reason = Column(String(255))
    notes = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    # NULL means the row was written by the system
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"))

    item = relationship("InventoryItem", back_populates="transactions")
