from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: UUID
    name: Optional[str] = None
    email: Optional[str] = None
    exp: Optional[int] = None


class CommonQueryParams(BaseModel):
    search: Optional[str] = None
    skip: Optional[int] = 0
    limit: Optional[int] = 100


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str


class BulkItemResult(BaseModel):
    id: UUID
    success: bool
    error: Optional[str] = None


class BulkOperationResult(BaseModel):
    results: List[BulkItemResult]
    succeeded: int
    failed: int

