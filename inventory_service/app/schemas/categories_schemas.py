from pydantic import BaseModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class CategoryCreate(EmptyStringModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryUpdate(EmptyStringModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
