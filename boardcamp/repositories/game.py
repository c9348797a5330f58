from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from boardcamp.db.models.game import Game as GameModel
from boardcamp.errors import DuplicateResourceError
from boardcamp.repositories.ordering import apply_ordering, apply_window

ORDER_COLUMNS = {
    "id": GameModel.id,
    "name": GameModel.name,
    "stockTotal": GameModel.stock_total,
    "categoryId": GameModel.category_id,
    "pricePerDay": GameModel.price_per_day,
}


def get_game_by_id(
    db: Session, game_id: int, for_update: bool = False
) -> GameModel | None:
    """
    Get a game by ID.

    With for_update=True the row is locked (SELECT ... FOR UPDATE) until the
    caller's transaction ends. Dialects without row locks (SQLite) ignore it.
    """
    query = db.query(GameModel).filter(GameModel.id == game_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def get_game_by_name(db: Session, name: str) -> GameModel | None:
    """Get a game by its exact name. Used to check for duplicates."""
    return db.query(GameModel).filter(GameModel.name == name).first()


def list_games(
    db: Session,
    name: str | None = None,
    offset: int | None = None,
    limit: int | None = None,
    order: str | None = None,
    desc: bool = False,
) -> list[GameModel]:
    """
    List games with their category loaded.

    Args:
        name: Optional case-insensitive prefix filter on the game name
        offset, limit: Optional pagination window
        order, desc: Allow-listed sort key and direction
    """
    query = db.query(GameModel).options(joinedload(GameModel.category))

    if name:
        query = query.filter(GameModel.name.ilike(f"{_escape_like(name)}%", escape="\\"))

    query = apply_ordering(query, ORDER_COLUMNS, order, desc, default=GameModel.id)
    return apply_window(query, offset, limit).all()


def create_game(
    db: Session,
    name: str,
    image: str,
    stock_total: int,
    category_id: int,
    price_per_day: Decimal,
) -> GameModel:
    """Create a new game in the database. Pure data access - no business logic."""
    db_game = GameModel(
        name=name,
        image=image,
        stock_total=stock_total,
        category_id=category_id,
        price_per_day=price_per_day,
    )
    db.add(db_game)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateResourceError(f"A game named {name!r} already exists")
    db.refresh(db_game)
    return db_game


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
