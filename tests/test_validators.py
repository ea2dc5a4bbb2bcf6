from datetime import timedelta
from decimal import Decimal

from helpers import InMemoryDiscountRepository, make_booking, make_condition, make_coupon
from travel_discount.app.services.discounts import validate_condition, validate_coupon


# ── conditions ───────────────────────────────────────────────────────────────

def test_condition_valid(repository):
    booking = make_booking(adult_price=Decimal("1015100"), adult_count=1)
    result = validate_condition(repository, 3, booking)
    assert result.is_valid
    assert result.error_messages == []


def test_condition_not_found(repository):
    result = validate_condition(repository, 999, make_booking(adult_count=1))
    assert not result.is_valid
    assert result.error_messages == ["Discount condition not found."]


def test_condition_disabled():
    repo = InMemoryDiscountRepository([make_condition(id=1, discount_value=Decimal("1000"), is_enabled=False)])
    result = validate_condition(repo, 1, make_booking(adult_price=Decimal("100000"), adult_count=1))
    assert result.error_messages == ["Discount condition is disabled."]


def test_condition_soft_deleted_is_not_found():
    repo = InMemoryDiscountRepository([make_condition(id=1, discount_value=Decimal("1000"), is_deleted=True)])
    result = validate_condition(repo, 1, make_booking(adult_count=1))
    assert result.error_messages == ["Discount condition not found."]


def test_period_condition_lead_time(repository):
    booking = make_booking(days_out=15, adult_price=Decimal("2842800"), adult_count=1)
    result = validate_condition(repository, 22, booking)
    assert not result.is_valid
    assert "20 days" in result.error_messages[0]

    assert validate_condition(repository, 22, make_booking(days_out=20, adult_count=1)).is_valid


def test_lead_time_ignored_for_immediate_discount():
    condition = make_condition(id=1, discount_value=Decimal("1000"), days_before_departure=20)
    repo = InMemoryDiscountRepository([condition])
    booking = make_booking(days_out=1, adult_price=Decimal("100000"), adult_count=1)
    assert validate_condition(repo, 1, booking).is_valid


def test_lead_time_truncates_partial_days_toward_zero(now):
    condition = make_condition(
        id=1, discount_kind="period", discount_value=Decimal("1000"), days_before_departure=0,
    )
    repo = InMemoryDiscountRepository([condition])
    # departure half a day before the booking: still 0 whole days, not -1
    booking = make_booking(
        adult_price=Decimal("100000"), adult_count=1,
        booking_date=now, departure_date=now - timedelta(hours=12),
    )
    assert validate_condition(repo, 1, booking).is_valid

    condition.days_before_departure = 20
    booking = make_booking(
        adult_price=Decimal("100000"), adult_count=1,
        booking_date=now, departure_date=now + timedelta(days=19, hours=23),
    )
    assert not validate_condition(repo, 1, booking).is_valid


def test_condition_minimum_amount_uses_target_subtotal():
    condition = make_condition(
        id=1, discount_value=Decimal("1000"), applicable_target="land",
        minimum_amount=Decimal("500000"),
    )
    repo = InMemoryDiscountRepository([condition])
    booking = make_booking(
        adult_price=Decimal("2000000"), adult_count=1,
        land_price=Decimal("400000"), land_count=1,
    )
    result = validate_condition(repo, 1, booking)
    assert not result.is_valid
    assert "500,000" in result.error_messages[0]


def test_condition_target_without_passengers():
    condition = make_condition(id=1, discount_value=Decimal("1000"), applicable_target="child_n")
    repo = InMemoryDiscountRepository([condition])
    result = validate_condition(repo, 1, make_booking(adult_price=Decimal("100000"), adult_count=1))
    assert result.error_messages == ["Booking is not applicable to the discount target."]


def test_condition_checks_short_circuit_in_order():
    # disabled wins over lead time and target checks
    condition = make_condition(
        id=1, discount_kind="period", discount_value=Decimal("1000"),
        days_before_departure=60, applicable_target="infant", is_enabled=False,
    )
    repo = InMemoryDiscountRepository([condition])
    result = validate_condition(repo, 1, make_booking(days_out=1, adult_count=1))
    assert result.error_messages == ["Discount condition is disabled."]


# ── coupons ──────────────────────────────────────────────────────────────────

def test_coupon_airline(repository, now):
    booking = make_booking(adult_price=Decimal("1039000"), adult_count=1, airline="Korean Air")
    assert validate_coupon(repository, "CMP-SOMU-RJMQ-TGKY", booking, now).is_valid

    booking = make_booking(adult_price=Decimal("1039000"), adult_count=1, airline="Asiana")
    result = validate_coupon(repository, "CMP-SOMU-RJMQ-TGKY", booking, now)
    assert not result.is_valid
    assert "applicable airline" in result.error_messages[0]


def test_coupon_not_found(repository, now):
    result = validate_coupon(repository, "NOPE", make_booking(adult_count=1), now)
    assert result.error_messages == ["Coupon not found."]


def test_coupon_issue_status(now):
    repo = InMemoryDiscountRepository(coupons=[make_coupon(now, coupon_code="W", issue_status="waiting")])
    result = validate_coupon(repo, "W", make_booking(adult_count=1), now)
    assert result.error_messages == ["Coupon is not usable."]


def test_coupon_issue_window_is_inclusive(now):
    coupon = make_coupon(now, coupon_code="C", issue_start_date=now, issue_end_date=now + timedelta(days=1))
    repo = InMemoryDiscountRepository(coupons=[coupon])
    booking = make_booking(adult_count=1)

    assert validate_coupon(repo, "C", booking, now).is_valid
    assert validate_coupon(repo, "C", booking, now + timedelta(days=1)).is_valid
    result = validate_coupon(repo, "C", booking, now - timedelta(seconds=1))
    assert result.error_messages == ["Coupon is not within its usage period."]
    assert not validate_coupon(repo, "C", booking, now + timedelta(days=1, seconds=1)).is_valid


def test_coupon_excluded_city(repository, now):
    booking = make_booking(
        adult_price=Decimal("709000"), adult_count=1,
        destination_country="Japan", destination_city="Okinawa",
    )
    result = validate_coupon(repository, "CMP-VJCK-895K-N7I2", booking, now)
    assert not result.is_valid
    assert "excluded city" in result.error_messages[0]


def test_coupon_country_allow_and_deny_lists(now):
    coupon = make_coupon(
        now, coupon_code="C", has_country_condition=True,
        applicable_countries="Japan,Vietnam", excluded_countries="Vietnam",
    )
    repo = InMemoryDiscountRepository(coupons=[coupon])

    assert validate_coupon(repo, "C", make_booking(destination_country="Japan"), now).is_valid

    result = validate_coupon(repo, "C", make_booking(destination_country="France"), now)
    assert "not an applicable country" in result.error_messages[0]

    result = validate_coupon(repo, "C", make_booking(destination_country="Vietnam"), now)
    assert "excluded country" in result.error_messages[0]

    result = validate_coupon(repo, "C", make_booking(destination_country=None), now)
    assert "not an applicable country" in result.error_messages[0]


def test_coupon_restriction_lists_match_by_substring(now):
    coupon = make_coupon(
        now, coupon_code="C", has_city_condition=True, applicable_cities="Osaka,Kyoto",
    )
    repo = InMemoryDiscountRepository(coupons=[coupon])
    assert validate_coupon(repo, "C", make_booking(destination_city="Kyoto"), now).is_valid
    assert validate_coupon(repo, "C", make_booking(destination_city="Osa"), now).is_valid


def test_coupon_restriction_ignored_when_flag_unset(now):
    coupon = make_coupon(now, coupon_code="C", has_city_condition=False, excluded_cities="Okinawa")
    repo = InMemoryDiscountRepository(coupons=[coupon])
    assert validate_coupon(repo, "C", make_booking(destination_city="Okinawa"), now).is_valid


def test_coupon_minimum_uses_original_amount(repository, now):
    booking = make_booking(
        adult_price=Decimal("100000"), adult_count=1,
        destination_country="Japan", destination_city="Tokyo",
    )
    result = validate_coupon(repository, "CMP-VJCK-895K-N7I2", booking, now)
    assert not result.is_valid
    assert "Minimum applicable amount (200,000)" in result.error_messages[0]


def test_coupon_fixed_minimum(now):
    coupon = make_coupon(
        now, coupon_code="F", is_fixed_discount=True, discount_amount=Decimal("5000"),
        minimum_amount_for_fixed=Decimal("300000"),
    )
    repo = InMemoryDiscountRepository(coupons=[coupon])
    booking = make_booking(adult_price=Decimal("299999"), adult_count=1)
    assert not validate_coupon(repo, "F", booking, now).is_valid

    booking = make_booking(adult_price=Decimal("300000"), adult_count=1)
    assert validate_coupon(repo, "F", booking, now).is_valid
