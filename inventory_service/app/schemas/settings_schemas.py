from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# ---------------- Store ----------------
class StoreSettingsUpdate(EmptyStringModel):
    store_name: str = Field(min_length=1, max_length=200)
    store_address: Optional[str] = None
    store_phone: Optional[str] = Field(default=None, max_length=50)
    store_email: Optional[EmailStr] = None
    logo_url: Optional[str] = None


class StoreSettingsOut(BaseModel):
    id: int
    store_name: str
    store_address: Optional[str] = None
    store_phone: Optional[str] = None
    store_email: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# ---------------- Currency ----------------
class CurrencySettingsUpdate(EmptyStringModel):
    currency_code: str = Field(min_length=3, max_length=3)

    @field_validator("currency_code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        if not value.isalpha():
            raise ValueError("Currency code must be three letters")
        return value.upper()


class CurrencySettingsOut(BaseModel):
    id: int
    currency_code: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CurrencyOption(BaseModel):
    code: str
    name: str
    symbol: str
