from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

# Longest rental that can be booked in one go
MAX_DAYS_RENTED = 365

# Largest amount a rental money column (Numeric(18, 2)) holds
MAX_RENTAL_AMOUNT = Decimal("9999999999999999.99")


@dataclass(frozen=True, slots=True)
class RentalPricingPolicy:
    """Defines how a rental is priced and what a late return costs "as of" a moment.

    Semantics (intentionally centralized):
    - original price = days_rented * price_per_day, fixed when the rental is created
    - elapsed days = calendar-day difference between rent date and as_of (truncated)
    - a late fee only exists when elapsed days > days_rented; otherwise it is None,
      never Decimal("0")

    The late fee is charged at the price passed in by the caller, which is the
    game's current price, not the price snapshotted into original_price.
    """

    as_of: datetime

    def original_price(self, *, days_rented: int, price_per_day: Decimal) -> Decimal:
        return Decimal(days_rented) * Decimal(price_per_day)

    def elapsed_days(self, *, rent_date: datetime) -> int:
        # Compare calendar dates so a rental taken late yesterday counts one day
        return (_utc_date(self.as_of) - _utc_date(rent_date)).days

    def delay_fee(
        self, *, rent_date: datetime, days_rented: int, price_per_day: Decimal
    ) -> Decimal | None:
        overdue_days = self.elapsed_days(rent_date=rent_date) - days_rented
        if overdue_days <= 0:
            return None
        return Decimal(overdue_days) * Decimal(price_per_day)

    @staticmethod
    def amount_fits(amount: Decimal | None) -> bool:
        return amount is None or amount <= MAX_RENTAL_AMOUNT

    @staticmethod
    def sqlalchemy_open_predicate(*, return_col):
        """Build a SQLAlchemy predicate for "rental is still open".

        Kept here so repositories share one definition of an open rental.
        """
        return return_col.is_(None)


def _utc_date(value: datetime):
    # Naive values are stored UTC (SQLite drops the offset)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()
