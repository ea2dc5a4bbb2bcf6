# travel_discount/app/services/discounts/validators.py
"""
Eligibility checks for discount conditions and coupons.

Each validator runs its checks in a fixed order and stops at the first
failure, returning a single explanatory message.

Restriction lists on coupons (countries, cities, airlines) are raw
comma-delimited strings matched by substring: "Japan" matches
"Japan,Korea" and also "Japanese Alps".
"""

from datetime import datetime, timedelta
from typing import Optional

from ...schemas.discounts import BookingInfo, DiscountValidationResult
from .categories import base_amount, is_target_applicable, target_amount
from .config import get_discount_config
from .formulas import format_money
from .repository import DiscountRepository


def _invalid(message: str) -> DiscountValidationResult:
    return DiscountValidationResult(is_valid=False, error_messages=[message])


def _listed(value: Optional[str], raw_list: Optional[str]) -> bool:
    """Substring containment; a missing value is never listed."""
    if not value or not raw_list:
        return False
    return value in raw_list


def _whole_days(span: timedelta) -> int:
    """Whole days in a span, truncated toward zero (-12h -> 0, not -1)."""
    return int(span / timedelta(days=1))


def validate_condition(
    repository: DiscountRepository,
    condition_id: int,
    booking: BookingInfo,
) -> DiscountValidationResult:
    """
    Check whether a discount condition applies to a booking.

    Order:
        1. exists
        2. enabled
        3. period discount: lead time >= days_before_departure
        4. target subtotal >= minimum_amount
        5. booking has passengers in the target category
    """
    condition = repository.fetch_condition_by_id(condition_id)
    if condition is None:
        return _invalid("Discount condition not found.")

    if not condition.is_enabled:
        return _invalid("Discount condition is disabled.")

    if condition.discount_kind == "period" and condition.days_before_departure is not None:
        lead_days = _whole_days(booking.departure_date - booking.booking_date)
        if lead_days < condition.days_before_departure:
            return _invalid(
                f"Booking must be made at least {condition.days_before_departure} "
                f"days before departure."
            )

    if condition.minimum_amount is not None:
        applicable_amount = target_amount(condition.applicable_target, booking)
        if applicable_amount < condition.minimum_amount:
            return _invalid(
                f"Minimum applicable amount ({format_money(condition.minimum_amount)}) is not met."
            )

    if not is_target_applicable(condition.applicable_target, booking):
        return _invalid("Booking is not applicable to the discount target.")

    return DiscountValidationResult()


def validate_coupon(
    repository: DiscountRepository,
    coupon_code: str,
    booking: BookingInfo,
    now: Optional[datetime] = None,
) -> DiscountValidationResult:
    """
    Check whether a coupon can be used for a booking at `now`.

    Order:
        1. exists
        2. issue_status is the active status
        3. issue_start_date <= now <= issue_end_date
        4. country allow-list / deny-list
        5. city allow-list / deny-list
        6. airline allow-list
        7. minimum amount, measured on the full original booking amount
    """
    now = now or datetime.now()
    config = get_discount_config()

    coupon = repository.fetch_coupon_by_code(coupon_code)
    if coupon is None:
        return _invalid("Coupon not found.")

    if coupon.issue_status != config.active_issue_status:
        return _invalid("Coupon is not usable.")

    if now < coupon.issue_start_date or now > coupon.issue_end_date:
        return _invalid("Coupon is not within its usage period.")

    if coupon.has_country_condition:
        country = booking.destination_country
        if coupon.applicable_countries and not _listed(country, coupon.applicable_countries):
            return _invalid("Destination is not an applicable country for this coupon.")
        if coupon.excluded_countries and _listed(country, coupon.excluded_countries):
            return _invalid("Destination is an excluded country for this coupon.")

    if coupon.has_city_condition:
        city = booking.destination_city
        if coupon.applicable_cities and not _listed(city, coupon.applicable_cities):
            return _invalid("Destination is not an applicable city for this coupon.")
        if coupon.excluded_cities and _listed(city, coupon.excluded_cities):
            return _invalid("Destination is an excluded city for this coupon.")

    if coupon.has_airline_condition and coupon.airline_conditions:
        if not _listed(booking.airline, coupon.airline_conditions):
            return _invalid("Airline is not an applicable airline for this coupon.")

    # Eligibility uses the original amount even though the coupon itself is
    # later computed on the post-condition amount.
    total_amount = base_amount(booking)
    if coupon.is_percentage_discount and coupon.minimum_amount_for_rate is not None:
        if total_amount < coupon.minimum_amount_for_rate:
            return _invalid(
                f"Minimum applicable amount ({format_money(coupon.minimum_amount_for_rate)}) is not met."
            )

    if coupon.is_fixed_discount and coupon.minimum_amount_for_fixed is not None:
        if total_amount < coupon.minimum_amount_for_fixed:
            return _invalid(
                f"Minimum applicable amount ({format_money(coupon.minimum_amount_for_fixed)}) is not met."
            )

    return DiscountValidationResult()
