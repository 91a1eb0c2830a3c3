# app/models/settings.py
from sqlalchemy import Column, DateTime, Integer, String, Text, func
from shared.core.database import Base

# Singleton rows always live at this id
SETTINGS_ROW_ID = 1


class StoreSettings(Base):
    __tablename__ = "store_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    store_name = Column(String(200), nullable=False)
    store_address = Column(Text)
    store_phone = Column(String(50))
    store_email = Column(String(200))
    logo_url = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())


class CurrencySettings(Base):
    __tablename__ = "currency_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    currency_code = Column(String(3), nullable=False, default="USD")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
