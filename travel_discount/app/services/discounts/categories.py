# travel_discount/app/services/discounts/categories.py
"""
Booking amounts per passenger/segment category.

base_amount    = Σ unit_price × count over the five categories
target_amount  = subtotal of one category, or base_amount for "all"

Unknown target labels resolve to ALL (full base amount, always applicable).
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from ...schemas.discounts import BookingInfo

ZERO = Decimal(0)


class TargetCategory(str, Enum):
    ALL = "all"
    ADULT = "adult"
    CHILD_N = "child_n"
    CHILD_E = "child_e"
    INFANT = "infant"
    LAND = "land"

    @classmethod
    def parse(cls, label: Optional[str]) -> "TargetCategory":
        try:
            return cls(label)
        except ValueError:
            return cls.ALL


# category -> (price field, count field) on BookingInfo
CATEGORY_FIELDS: dict[TargetCategory, tuple[str, str]] = {
    TargetCategory.ADULT: ("adult_price", "adult_count"),
    TargetCategory.CHILD_N: ("child_n_price", "child_n_count"),
    TargetCategory.CHILD_E: ("child_e_price", "child_e_count"),
    TargetCategory.INFANT: ("infant_price", "infant_count"),
    TargetCategory.LAND: ("land_price", "land_count"),
}


def category_count(category: TargetCategory, booking: BookingInfo) -> int:
    """Passenger count for a category; 0 for ALL."""
    fields = CATEGORY_FIELDS.get(category)
    if fields is None:
        return 0
    return getattr(booking, fields[1])


def category_subtotal(category: TargetCategory, booking: BookingInfo) -> Decimal:
    """unit_price × count for a single category (missing price = 0)."""
    price_field, count_field = CATEGORY_FIELDS[category]
    price = getattr(booking, price_field)
    if price is None:
        price = ZERO
    return price * getattr(booking, count_field)


def base_amount(booking: BookingInfo) -> Decimal:
    return sum(
        (category_subtotal(category, booking) for category in CATEGORY_FIELDS),
        ZERO,
    )


def target_amount(target: Optional[Union[TargetCategory, str]], booking: BookingInfo) -> Decimal:
    category = TargetCategory.parse(target)
    if category is TargetCategory.ALL:
        return base_amount(booking)
    return category_subtotal(category, booking)


def is_target_applicable(target: Optional[Union[TargetCategory, str]], booking: BookingInfo) -> bool:
    category = TargetCategory.parse(target)
    if category is TargetCategory.ALL:
        return True
    return category_count(category, booking) > 0
