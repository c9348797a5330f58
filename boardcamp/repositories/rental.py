"""Data access for rentals.

Unlike the other repositories, nothing here commits: the rental service
wraps each lifecycle operation in one transaction and commits or rolls back
as a unit.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import delete, func, update
from sqlalchemy.orm import Session

from boardcamp.db.models.category import Category as CategoryModel
from boardcamp.db.models.customer import Customer as CustomerModel
from boardcamp.db.models.game import Game as GameModel
from boardcamp.db.models.rental import Rental as RentalModel
from boardcamp.domain.rental_pricing import RentalPricingPolicy
from boardcamp.repositories.ordering import apply_ordering, apply_window

# Sort keys accepted from clients, mapped to the columns they select.
ORDER_COLUMNS = {
    "id": RentalModel.id,
    "customerId": RentalModel.customer_id,
    "gameId": RentalModel.game_id,
    "name": GameModel.name,
    "daysRented": RentalModel.days_rented,
}

_is_open = RentalPricingPolicy.sqlalchemy_open_predicate(return_col=RentalModel.return_date)


def get_rental_by_id(db: Session, rental_id: int) -> RentalModel | None:
    """Get a rental by ID."""
    return db.query(RentalModel).filter(RentalModel.id == rental_id).first()


def count_open_rentals_for_game(db: Session, game_id: int) -> int:
    """Count rentals of a game that have not been returned yet."""
    return (
        db.query(func.count(RentalModel.id))
        .filter(RentalModel.game_id == game_id, _is_open)
        .scalar()
    )


def insert_rental(
    db: Session,
    customer_id: int,
    game_id: int,
    rent_date: datetime,
    days_rented: int,
    original_price: Decimal,
) -> RentalModel:
    """Insert an open rental and flush it so it gets an ID. Does not commit."""
    db_rental = RentalModel(
        customer_id=customer_id,
        game_id=game_id,
        rent_date=rent_date,
        days_rented=days_rented,
        original_price=original_price,
        return_date=None,
        delay_fee=None,
    )
    db.add(db_rental)
    db.flush()
    return db_rental


def mark_rental_returned(
    db: Session,
    rental_id: int,
    return_date: datetime,
    delay_fee: Decimal | None,
) -> bool:
    """
    Close an open rental. Does not commit.

    The UPDATE is guarded by "return_date IS NULL", so of two concurrent
    returns only one can match the row.

    Returns:
        True if the rental was open and is now returned, False otherwise
    """
    result = db.execute(
        update(RentalModel)
        .where(RentalModel.id == rental_id, _is_open)
        .values(return_date=return_date, delay_fee=delay_fee)
    )
    return result.rowcount == 1


def delete_open_rental(db: Session, rental_id: int) -> bool:
    """
    Delete a rental only if it is still open. Does not commit.

    Returns:
        True if a row was deleted, False if it was missing or already returned
    """
    result = db.execute(
        delete(RentalModel).where(RentalModel.id == rental_id, _is_open)
    )
    return result.rowcount == 1


def list_rentals(
    db: Session,
    customer_id: int | None = None,
    game_id: int | None = None,
    offset: int | None = None,
    limit: int | None = None,
    order: str | None = None,
    desc: bool = False,
) -> list:
    """
    List rentals joined with customer, game and category names.

    Each row is (Rental, customer_name, game_name, category_id, category_name).

    Args:
        customer_id: Optional filter by customer ID
        game_id: Optional filter by game ID
        offset, limit: Optional pagination window
        order, desc: Sort key from ORDER_COLUMNS and direction. Unknown keys
            are ignored and the default order (id) is used.
    """
    query = (
        db.query(
            RentalModel,
            CustomerModel.name.label("customer_name"),
            GameModel.name.label("game_name"),
            GameModel.category_id.label("category_id"),
            CategoryModel.name.label("category_name"),
        )
        .join(CustomerModel, RentalModel.customer_id == CustomerModel.id)
        .join(GameModel, RentalModel.game_id == GameModel.id)
        .join(CategoryModel, GameModel.category_id == CategoryModel.id)
    )

    if customer_id is not None:
        query = query.filter(RentalModel.customer_id == customer_id)

    if game_id is not None:
        query = query.filter(RentalModel.game_id == game_id)

    query = apply_ordering(query, ORDER_COLUMNS, order, desc, default=RentalModel.id)
    return apply_window(query, offset, limit).all()
