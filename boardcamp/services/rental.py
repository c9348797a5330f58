import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

import boardcamp.repositories.customer as customer_repo
import boardcamp.repositories.game as game_repo
import boardcamp.repositories.rental as rental_repo
from boardcamp.db.models.rental import Rental as RentalModel
from boardcamp.domain.rental_pricing import (
    MAX_DAYS_RENTED,
    MAX_RENTAL_AMOUNT,
    RentalPricingPolicy,
)
from boardcamp.errors import (
    CapacityExceededError,
    DomainError,
    DomainValidationError,
    InvalidReferenceError,
    InvalidStateError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_rental(
    db: Session,
    customer_id: int,
    game_id: int,
    days_rented: int,
    now: datetime | None = None,
) -> RentalModel:
    """
    Open a new rental.

    Checks run in this order, inside one transaction that holds a lock on
    the game row until the insert is committed:
    - customer exists
    - game exists
    - 1 <= days_rented <= MAX_DAYS_RENTED
    - open rentals of the game < stock_total

    The price is snapshotted: original_price = days_rented * current price_per_day,
    and must not exceed MAX_RENTAL_AMOUNT.

    Raises:
        InvalidReferenceError: If the customer or game doesn't exist
        DomainValidationError: If days_rented is out of range or the price is too large
        CapacityExceededError: If every copy of the game is rented out
    """
    now = now or _now()
    try:
        if not customer_repo.get_customer_by_id(db, customer_id):
            raise InvalidReferenceError(f"Customer with id {customer_id} not found")

        game = game_repo.get_game_by_id(db, game_id, for_update=True)
        if not game:
            raise InvalidReferenceError(f"Game with id {game_id} not found")

        if days_rented < 1 or days_rented > MAX_DAYS_RENTED:
            raise DomainValidationError(
                f"days_rented must be between 1 and {MAX_DAYS_RENTED}"
            )

        open_rentals = rental_repo.count_open_rentals_for_game(db, game_id)
        if open_rentals >= game.stock_total:
            raise CapacityExceededError(
                f"Game {game_id} has no copies available ({game.stock_total} rented out)"
            )

        policy = RentalPricingPolicy(as_of=now)
        original_price = policy.original_price(
            days_rented=days_rented, price_per_day=game.price_per_day
        )
        if not policy.amount_fits(original_price):
            raise DomainValidationError(
                f"Rental price {original_price} exceeds the maximum of {MAX_RENTAL_AMOUNT}"
            )

        rental = rental_repo.insert_rental(
            db,
            customer_id=customer_id,
            game_id=game_id,
            rent_date=now,
            days_rented=days_rented,
            original_price=original_price,
        )
        db.commit()
    except DomainError as e:
        db.rollback()
        logger.info("Rental creation rejected: %s", e)
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(rental)
    logger.info(
        "Rental %s created: customer=%s game=%s days=%s price=%s",
        rental.id,
        customer_id,
        game_id,
        days_rented,
        rental.original_price,
    )
    return rental


def return_rental(
    db: Session,
    rental_id: int,
    now: datetime | None = None,
) -> RentalModel:
    """
    Close an open rental and charge any late fee.

    The fee is (elapsed days - days_rented) * the game's current price_per_day,
    or None when the rental comes back on time.

    Raises:
        NotFoundError: If the rental doesn't exist
        InvalidStateError: If the rental was already returned
        DomainValidationError: If the delay fee is too large to store
    """
    now = now or _now()
    try:
        rental = rental_repo.get_rental_by_id(db, rental_id)
        if not rental:
            raise NotFoundError("Rental not found")

        if not rental.is_open:
            raise InvalidStateError(f"Rental {rental_id} was already returned")

        game = game_repo.get_game_by_id(db, rental.game_id)
        policy = RentalPricingPolicy(as_of=now)
        delay_fee = policy.delay_fee(
            rent_date=rental.rent_date,
            days_rented=rental.days_rented,
            price_per_day=game.price_per_day,
        )
        if not policy.amount_fits(delay_fee):
            raise DomainValidationError(
                f"Delay fee {delay_fee} exceeds the maximum of {MAX_RENTAL_AMOUNT}"
            )

        # Lost a race against another return of the same rental
        if not rental_repo.mark_rental_returned(
            db, rental_id, return_date=now, delay_fee=delay_fee
        ):
            raise InvalidStateError(f"Rental {rental_id} was already returned")

        db.commit()
    except DomainError as e:
        db.rollback()
        logger.info("Rental return rejected: %s", e)
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(rental)
    logger.info("Rental %s returned, delay fee=%s", rental_id, rental.delay_fee)
    return rental


def delete_rental(db: Session, rental_id: int) -> None:
    """
    Cancel an open rental by deleting it.

    Returned rentals are settled and cannot be deleted.

    Raises:
        NotFoundError: If the rental doesn't exist
        InvalidStateError: If the rental was already returned
    """
    try:
        rental = rental_repo.get_rental_by_id(db, rental_id)
        if not rental:
            raise NotFoundError("Rental not found")

        if not rental.is_open:
            raise InvalidStateError(
                f"Rental {rental_id} was already returned and cannot be deleted"
            )

        if not rental_repo.delete_open_rental(db, rental_id):
            raise InvalidStateError(
                f"Rental {rental_id} was already returned and cannot be deleted"
            )

        db.commit()
    except DomainError as e:
        db.rollback()
        logger.info("Rental deletion rejected: %s", e)
        raise
    except Exception:
        db.rollback()
        raise

    logger.info("Rental %s deleted", rental_id)
