from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from boardcamp.api.deps import get_db, get_settings
from boardcamp.api.responses import empty_list_response
from boardcamp.core.config import Settings
import boardcamp.repositories.rental as rental_repo
from boardcamp.services.rental import create_rental, delete_rental, return_rental
from boardcamp.schemas.base import MAX_INT
from boardcamp.schemas.rental import Rental, RentalCreate, RentalListItem

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("", response_model=list[RentalListItem])
def get_all_rentals(
    customer_id: int | None = Query(None, alias="customerId", le=MAX_INT),
    game_id: int | None = Query(None, alias="gameId", le=MAX_INT),
    offset: int | None = Query(None, ge=0, le=MAX_INT),
    limit: int | None = Query(None, ge=1, le=MAX_INT),
    order: str | None = Query(
        None, description="Sort key: id, customerId, gameId, name or daysRented"
    ),
    desc: bool = Query(False, description="Sort descending"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    List rentals with nested customer and game (including category).

    Unknown `order` keys are ignored and the list is ordered by id.
    """
    rows = rental_repo.list_rentals(
        db,
        customer_id=customer_id,
        game_id=game_id,
        offset=offset,
        limit=limit,
        order=order,
        desc=desc,
    )
    empty = empty_list_response(rows, settings)
    if empty is not None:
        return empty
    return [RentalListItem.from_row(row) for row in rows]


@router.post("", response_model=Rental, status_code=status.HTTP_201_CREATED)
def create_new_rental(
    rental_data: RentalCreate,
    db: Session = Depends(get_db),
):
    """
    Rent a game to a customer.

    Fails with 400 if the customer or game doesn't exist, days_rented is out of range,
    or every copy of the game is already rented out.
    """
    rental = create_rental(
        db,
        customer_id=rental_data.customer_id,
        game_id=rental_data.game_id,
        days_rented=rental_data.days_rented,
    )
    return Rental.model_validate(rental)


@router.post("/{rental_id}/return", response_model=Rental)
def return_rental_by_id(
    rental_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
):
    """
    Return a rented game, charging a delay fee if it is late.
    """
    rental = return_rental(db, rental_id)
    return Rental.model_validate(rental)


@router.delete("/{rental_id}", status_code=status.HTTP_200_OK)
def delete_rental_by_id(
    rental_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
):
    """
    Delete an open rental. Returned rentals cannot be deleted.
    """
    delete_rental(db, rental_id)
    return Response(status_code=status.HTTP_200_OK)
