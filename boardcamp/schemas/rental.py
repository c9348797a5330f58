from datetime import datetime

from pydantic import StrictInt

from boardcamp.schemas.base import CamelModel, ResourceId


class Rental(CamelModel):
    id: int
    customer_id: int
    game_id: int
    rent_date: datetime
    days_rented: int
    original_price: float
    return_date: datetime | None = None
    delay_fee: float | None = None


class RentalCreate(CamelModel):
    customer_id: ResourceId
    game_id: ResourceId
    # The 1..MAX_DAYS_RENTED range is a business rule checked by the rental
    # service, after the customer and game references are resolved.
    days_rented: StrictInt


class RentalCustomer(CamelModel):
    id: int
    name: str


class RentalGame(CamelModel):
    id: int
    name: str
    category_id: int
    category_name: str


class RentalListItem(Rental):
    customer: RentalCustomer
    game: RentalGame

    @classmethod
    def from_row(cls, row) -> "RentalListItem":
        """Reshape a joined row into nested customer and game objects."""
        rental, customer_name, game_name, category_id, category_name = row
        return cls(
            id=rental.id,
            customer_id=rental.customer_id,
            game_id=rental.game_id,
            rent_date=rental.rent_date,
            days_rented=rental.days_rented,
            original_price=rental.original_price,
            return_date=rental.return_date,
            delay_fee=rental.delay_fee,
            customer=RentalCustomer(id=rental.customer_id, name=customer_name),
            game=RentalGame(
                id=rental.game_id,
                name=game_name,
                category_id=category_id,
                category_name=category_name,
            ),
        )
