# app/models/categories.py
import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    items = relationship("InventoryItem", back_populates="category",
                         passive_deletes=True)
