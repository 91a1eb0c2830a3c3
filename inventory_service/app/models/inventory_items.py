# app/models/inventory_items.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class InventoryItem(Base):
    __tablename__ = "inventory_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    item_name = Column(String(100), nullable=False, index=True)
    category_id = Column(
        Uuid,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True
    )
    unit = Column(String(32), nullable=False)
    description = Column(Text)

    stock_quantity = Column(Numeric(14, 3), nullable=False, default=0)
    initial_stock = Column(Numeric(14, 3), nullable=False, default=0)
    reorder_point = Column(Numeric(14, 3))

    selling_price = Column(Numeric(12, 2), nullable=False, default=0)
    initial_purchase_price = Column(Numeric(12, 2))
    # Maintained from the purchase history on every purchase write
    last_purchase_price = Column(Numeric(12, 2))
    average_purchase_price = Column(Numeric(12, 2))

    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"))

    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    category = relationship("Category", back_populates="items")
    transactions = relationship(
        "StockTransaction",
        back_populates="item",
        order_by="StockTransaction.created_at.desc()",
    )
