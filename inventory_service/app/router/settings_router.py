# routers/settings_router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..crud import settings_crud as crud
from ..enum.inventory_enum import SUPPORTED_CURRENCIES
from ..schemas.settings_schemas import (
    CurrencyOption,
    CurrencySettingsOut,
    CurrencySettingsUpdate,
    StoreSettingsOut,
    StoreSettingsUpdate,
)

router = APIRouter(prefix="/api/settings",
                   tags=["settings"], dependencies=[Depends(validate_current_token)])


# Both GET endpoints answer {} until the singleton row is first saved
@router.get("/store")
def read_store_settings(db: Session = Depends(get_db)):
    row = crud.get_store_settings(db)
    return StoreSettingsOut.model_validate(row).model_dump(mode="json") if row else {}


@router.post("/store", response_model=StoreSettingsOut)
def save_store_settings(data: StoreSettingsUpdate, db: Session = Depends(get_db)):
    return crud.upsert_store_settings(db, data)


@router.get("/currency")
def read_currency_settings(db: Session = Depends(get_db)):
    row = crud.get_currency_settings(db)
    return CurrencySettingsOut.model_validate(row).model_dump(mode="json") if row else {}


@router.post("/currency", response_model=CurrencySettingsOut)
def save_currency_settings(data: CurrencySettingsUpdate, db: Session = Depends(get_db)):
    return crud.upsert_currency_settings(db, data)


@router.get("/currencies", response_model=List[CurrencyOption])
def read_supported_currencies():
    return list(SUPPORTED_CURRENCIES)
