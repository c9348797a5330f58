from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardcamp.db.models.category import Category as CategoryModel
from boardcamp.errors import DuplicateResourceError
from boardcamp.repositories.ordering import apply_ordering, apply_window

ORDER_COLUMNS = {
    "id": CategoryModel.id,
    "name": CategoryModel.name,
}


def get_category_by_id(db: Session, category_id: int) -> CategoryModel | None:
    """Get a category by ID."""
    return db.query(CategoryModel).filter(CategoryModel.id == category_id).first()


def get_category_by_name(db: Session, name: str) -> CategoryModel | None:
    """Get a category by its exact name. Used to check for duplicates."""
    return db.query(CategoryModel).filter(CategoryModel.name == name).first()


def list_categories(
    db: Session,
    offset: int | None = None,
    limit: int | None = None,
    order: str | None = None,
    desc: bool = False,
) -> list[CategoryModel]:
    """List categories with optional pagination and allow-listed ordering."""
    query = db.query(CategoryModel)
    query = apply_ordering(query, ORDER_COLUMNS, order, desc, default=CategoryModel.id)
    return apply_window(query, offset, limit).all()


def create_category(db: Session, name: str) -> CategoryModel:
    """
    Create a new category in the database. Pure data access - no business logic.

    A concurrent insert of the same name surfaces as DuplicateResourceError.
    """
    db_category = CategoryModel(name=name)
    db.add(db_category)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateResourceError(f"A category named {name!r} already exists")
    db.refresh(db_category)
    return db_category
