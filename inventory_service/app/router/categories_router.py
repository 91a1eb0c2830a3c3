# app/router/categories_router.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from shared.helpers.json_response_helper import success_response
from ..crud import categories_crud as crud
from ..schemas.categories_schemas import CategoryCreate, CategoryOut, CategoryUpdate

router = APIRouter(prefix="/api",
                   tags=["categories"], dependencies=[Depends(validate_current_token)])


@router.get("/categories", response_model=List[CategoryOut])
def read_categories(db: Session = Depends(get_db)):
    return crud.get_categories(db)


@router.post("/categories", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    return crud.create_category(db, category)


@router.put("/settings/categories/{category_id}", response_model=CategoryOut)
def update_category(category_id: UUID, category: CategoryUpdate, db: Session = Depends(get_db)):
    return crud.update_category(db, category_id, category)


@router.delete("/settings/categories/{category_id}")
def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    crud.delete_category(db, category_id)
    return success_response(data={"id": str(category_id)},
                            message="Category deleted successfully")
