# app/crud/categories_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, NotFoundError, StorageError
from ..models.categories import Category
from ..models.inventory_items import InventoryItem
from ..schemas.categories_schemas import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category_by_id(db: Session, category_id: UUID) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def _ensure_unique_name(db: Session, name: str, exclude_id: Optional[UUID] = None):
    query = db.query(Category.id).filter(
        func.lower(Category.name) == func.lower(name)  # Case-insensitive
    )
    if exclude_id:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        raise ConflictError(f"Category with name '{name}' already exists")


def _commit(db: Session, action: str):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Duplicate category found due to a database constraint violation")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error while trying to %s: %s", action, e)
        raise StorageError(f"Failed to {action}")


def create_category(db: Session, category: CategoryCreate) -> Category:
    _ensure_unique_name(db, category.name)

    db_category = Category(**category.model_dump())
    db.add(db_category)
    _commit(db, "create category")
    db.refresh(db_category)
    return db_category


def update_category(db: Session, category_id: UUID, category: CategoryUpdate) -> Category:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        raise NotFoundError("Category not found")

    update_data = category.model_dump(exclude_unset=True)
    if update_data.get("name"):
        _ensure_unique_name(db, update_data["name"], exclude_id=category_id)
    elif "name" in update_data:
        update_data.pop("name")

    for field, value in update_data.items():
        setattr(db_category, field, value)

    _commit(db, "update category")
    db.refresh(db_category)
    return db_category


def delete_category(db: Session, category_id: UUID) -> bool:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        raise NotFoundError("Category not found")

    # Items keep existing without a category ("Uncategorized")
    db.execute(
        update(InventoryItem)
        .where(InventoryItem.category_id == category_id)
        .values(category_id=None)
        .execution_options(synchronize_session=False)
    )
    db.delete(db_category)
    _commit(db, "delete category")
    return True
