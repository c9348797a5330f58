from decimal import Decimal

from sqlalchemy.orm import Session

import boardcamp.repositories.category as category_repo
import boardcamp.repositories.game as game_repo
from boardcamp.db.models.game import Game as GameModel
from boardcamp.errors import DuplicateResourceError, InvalidReferenceError


def create_game(
    db: Session,
    name: str,
    image: str,
    stock_total: int,
    category_id: int,
    price_per_day: Decimal,
) -> GameModel:
    """
    Create a game with business logic validation.

    - Validates the category exists
    - Enforces uniqueness of the game name

    Raises:
        InvalidReferenceError: If category_id does not reference a category
        DuplicateResourceError: If a game with this name already exists
    """
    if not category_repo.get_category_by_id(db, category_id):
        raise InvalidReferenceError(f"Category with id {category_id} not found")

    if game_repo.get_game_by_name(db, name):
        raise DuplicateResourceError(f"A game named {name!r} already exists")

    return game_repo.create_game(
        db,
        name=name,
        image=image,
        stock_total=stock_total,
        category_id=category_id,
        price_per_day=price_per_day,
    )
