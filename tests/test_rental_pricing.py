from datetime import datetime, timezone
from decimal import Decimal

from boardcamp.domain.rental_pricing import (
    MAX_DAYS_RENTED,
    MAX_RENTAL_AMOUNT,
    RentalPricingPolicy,
)


def test_original_price_is_days_times_price():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert policy.original_price(days_rented=3, price_per_day=Decimal("10")) == Decimal("30")
    assert policy.original_price(days_rented=2, price_per_day=Decimal("7.50")) == Decimal("15.00")


def test_elapsed_days_counts_calendar_days():
    """Late evening to early next morning is one calendar day."""
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 2, 1, 0, tzinfo=timezone.utc))
    rent_date = datetime(2025, 1, 1, 23, 0, tzinfo=timezone.utc)
    assert policy.elapsed_days(rent_date=rent_date) == 1


def test_elapsed_days_truncates_partial_days():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 6, 8, 0, tzinfo=timezone.utc))
    rent_date = datetime(2025, 1, 1, 20, 0, tzinfo=timezone.utc)
    assert policy.elapsed_days(rent_date=rent_date) == 5


def test_elapsed_days_accepts_naive_stored_dates():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 4, 12, 0, tzinfo=timezone.utc))
    assert policy.elapsed_days(rent_date=datetime(2025, 1, 1, 12, 0)) == 3


def test_delay_fee_when_late():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 6, tzinfo=timezone.utc))
    fee = policy.delay_fee(
        rent_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
        days_rented=3,
        price_per_day=Decimal("10"),
    )
    assert fee == Decimal("20")


def test_delay_fee_is_none_when_on_time():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 4, tzinfo=timezone.utc))
    fee = policy.delay_fee(
        rent_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
        days_rented=3,
        price_per_day=Decimal("10"),
    )
    assert fee is None


def test_delay_fee_is_none_for_same_day_return():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 1, 18, 0, tzinfo=timezone.utc))
    fee = policy.delay_fee(
        rent_date=datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
        days_rented=1,
        price_per_day=Decimal("10"),
    )
    assert fee is None


def test_amount_fits_up_to_column_maximum():
    assert RentalPricingPolicy.amount_fits(None)
    assert RentalPricingPolicy.amount_fits(MAX_RENTAL_AMOUNT)
    assert not RentalPricingPolicy.amount_fits(MAX_RENTAL_AMOUNT + Decimal("0.01"))


def test_longest_rental_at_highest_price_fits():
    policy = RentalPricingPolicy(as_of=datetime(2025, 1, 1, tzinfo=timezone.utc))
    price = policy.original_price(
        days_rented=MAX_DAYS_RENTED, price_per_day=Decimal("99999999.99")
    )
    assert policy.amount_fits(price)
