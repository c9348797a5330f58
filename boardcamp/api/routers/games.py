from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from boardcamp.api.deps import get_db, get_settings
from boardcamp.api.responses import empty_list_response
from boardcamp.core.config import Settings
import boardcamp.repositories.game as game_repo
from boardcamp.services.game import create_game
from boardcamp.schemas.base import MAX_INT
from boardcamp.schemas.game import Game, GameCreate

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[Game])
def get_all_games(
    name: str | None = Query(None, description="Case-insensitive name prefix"),
    offset: int | None = Query(None, ge=0, le=MAX_INT),
    limit: int | None = Query(None, ge=1, le=MAX_INT),
    order: str | None = Query(
        None, description="Sort key: id, name, stockTotal, categoryId or pricePerDay"
    ),
    desc: bool = Query(False, description="Sort descending"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    List games with their category name, optionally filtered by name prefix.
    """
    games = game_repo.list_games(
        db, name=name, offset=offset, limit=limit, order=order, desc=desc
    )
    empty = empty_list_response(games, settings)
    if empty is not None:
        return empty
    return [Game.model_validate(game) for game in games]


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
def create_new_game(
    game_data: GameCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new game. The category must exist and the name must be unused.
    """
    game = create_game(
        db,
        name=game_data.name,
        image=game_data.image,
        stock_total=game_data.stock_total,
        category_id=game_data.category_id,
        price_per_day=game_data.price_per_day,
    )
    return Game.model_validate(game)
