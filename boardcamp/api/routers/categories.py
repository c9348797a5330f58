from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from boardcamp.api.deps import get_db, get_settings
from boardcamp.api.responses import empty_list_response
from boardcamp.core.config import Settings
import boardcamp.repositories.category as category_repo
from boardcamp.services.category import create_category
from boardcamp.schemas.base import MAX_INT
from boardcamp.schemas.category import Category, CategoryCreate

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[Category])
def get_all_categories(
    offset: int | None = Query(None, ge=0, le=MAX_INT),
    limit: int | None = Query(None, ge=1, le=MAX_INT),
    order: str | None = Query(None, description="Sort key: id or name"),
    desc: bool = Query(False, description="Sort descending"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    List categories.
    """
    categories = category_repo.list_categories(
        db, offset=offset, limit=limit, order=order, desc=desc
    )
    empty = empty_list_response(categories, settings)
    if empty is not None:
        return empty
    return [Category.model_validate(category) for category in categories]


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_new_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new category. Category names are unique.
    """
    category = create_category(db, name=category_data.name)
    return Category.model_validate(category)
