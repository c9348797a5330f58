from sqlalchemy.orm import Session

import boardcamp.repositories.category as category_repo
from boardcamp.db.models.category import Category as CategoryModel
from boardcamp.errors import DuplicateResourceError


def create_category(db: Session, name: str) -> CategoryModel:
    """
    Create a category with domain validation.

    Raises:
        DuplicateResourceError: If a category with this name already exists
    """
    if category_repo.get_category_by_name(db, name):
        raise DuplicateResourceError(f"A category named {name!r} already exists")
    return category_repo.create_category(db, name=name)
