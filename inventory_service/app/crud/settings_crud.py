# app/crud/settings_crud.py
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import StorageError, ValidationError
from ..enum.inventory_enum import SUPPORTED_CURRENCIES
from ..models.settings import SETTINGS_ROW_ID, CurrencySettings, StoreSettings
from ..schemas.settings_schemas import CurrencySettingsUpdate, StoreSettingsUpdate

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_CODE = "USD"


def _upsert(db: Session, model, values: dict, action: str):
    row = db.get(model, SETTINGS_ROW_ID)
    if row is None:
        row = model(id=SETTINGS_ROW_ID, **values)
        db.add(row)
    else:
        for field, value in values.items():
            setattr(row, field, value)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error while trying to %s: %s", action, e)
        raise StorageError(f"Failed to {action}")

    db.refresh(row)
    return row


# ---------------- Store ----------------

def get_store_settings(db: Session) -> Optional[StoreSettings]:
    return db.get(StoreSettings, SETTINGS_ROW_ID)


def upsert_store_settings(db: Session, data: StoreSettingsUpdate) -> StoreSettings:
    values = data.model_dump()
    if values.get("store_email") is not None:
        values["store_email"] = str(values["store_email"])
    return _upsert(db, StoreSettings, values, "save store settings")


# ---------------- Currency ----------------

def get_currency_settings(db: Session) -> Optional[CurrencySettings]:
    return db.get(CurrencySettings, SETTINGS_ROW_ID)


def get_currency_code(db: Session) -> str:
    row = get_currency_settings(db)
    return row.currency_code if row else DEFAULT_CURRENCY_CODE


def upsert_currency_settings(db: Session, data: CurrencySettingsUpdate) -> CurrencySettings:
    supported = [currency["code"] for currency in SUPPORTED_CURRENCIES]
    if data.currency_code not in supported:
        raise ValidationError(
            f"Unsupported currency code '{data.currency_code}'",
            details={"currencyCode": [f"Must be one of: {', '.join(supported)}"]},
        )
    return _upsert(db, CurrencySettings, data.model_dump(), "save currency settings")
