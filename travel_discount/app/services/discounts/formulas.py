# travel_discount/app/services/discounts/formulas.py
"""
Discount amount formulas for already-validated rules.

Condition:
  fixed       → discount_value (× category count for adult/child_n/child_e/land)
  percentage  → ceil(target_subtotal × discount_value)
  then min(cap), min(target_subtotal), max(0)

Coupon (computed against the amount still payable):
  percentage  → current × rate, min(cap)
  fixed       → discount_amount
  then min(current), max(0)
"""

from decimal import ROUND_CEILING, Decimal

from ...models.generated import (
    DiscountConditions as DBDiscountCondition,
    DiscountCoupons as DBDiscountCoupon,
)
from ...schemas.discounts import BookingInfo
from .categories import ZERO, TargetCategory, category_count, target_amount

# Fixed amounts multiply by passenger count; infant and ALL are never multiplied.
PER_PASSENGER_CATEGORIES = frozenset({
    TargetCategory.ADULT,
    TargetCategory.CHILD_N,
    TargetCategory.CHILD_E,
    TargetCategory.LAND,
})


def condition_discount(condition: DBDiscountCondition, booking: BookingInfo) -> Decimal:
    """Monetary discount for a condition, bounded by its target subtotal."""
    category = TargetCategory.parse(condition.applicable_target)
    subtotal = target_amount(category, booking)
    value = Decimal(condition.discount_value)

    if condition.amount_kind == "fixed":
        amount = value
        count = category_count(category, booking)
        if category in PER_PASSENGER_CATEGORIES and count > 0:
            amount *= count
    elif condition.amount_kind == "percentage":
        amount = (subtotal * value).to_integral_value(rounding=ROUND_CEILING)
    else:
        amount = ZERO

    if condition.maximum_discount_amount is not None:
        amount = min(amount, Decimal(condition.maximum_discount_amount))

    amount = min(amount, subtotal)
    return max(ZERO, amount)


def coupon_discount(coupon: DBDiscountCoupon, current_amount: Decimal) -> Decimal:
    """Monetary discount for a coupon, bounded by the amount still payable."""
    amount = ZERO

    if coupon.is_percentage_discount and coupon.discount_rate is not None:
        amount = current_amount * Decimal(coupon.discount_rate)
        if coupon.maximum_discount_for_rate is not None:
            amount = min(amount, Decimal(coupon.maximum_discount_for_rate))
    elif coupon.is_fixed_discount and coupon.discount_amount is not None:
        amount = Decimal(coupon.discount_amount)

    amount = min(amount, current_amount)
    return max(ZERO, amount)


# ──────────────────────────────────────────────────────────────────────────────
# Calculation traces
# ──────────────────────────────────────────────────────────────────────────────

def format_money(value: Decimal) -> str:
    return f"{Decimal(value):,.0f}"


def format_rate(rate: Decimal) -> str:
    """0.035 -> "3.5", 0.05 -> "5"."""
    percent = (Decimal(rate) * 100).normalize()
    return format(percent, "f")


def condition_detail(condition: DBDiscountCondition, amount: Decimal) -> str:
    target = condition.applicable_target
    if condition.amount_kind == "fixed":
        return f"{target} {format_money(condition.discount_value)} off = {format_money(amount)}"
    return f"{target} {format_rate(condition.discount_value)}% off (rounded up) = {format_money(amount)}"


def coupon_detail(coupon: DBDiscountCoupon, amount: Decimal) -> str:
    if coupon.is_percentage_discount and coupon.discount_rate is not None:
        cap = coupon.maximum_discount_for_rate
        cap_text = f"max {format_money(cap)}" if cap is not None else "no cap"
        return f"{format_rate(coupon.discount_rate)}% off ({cap_text}) = {format_money(amount)}"
    if coupon.is_fixed_discount and coupon.discount_amount is not None:
        return f"{format_money(coupon.discount_amount)} off = {format_money(amount)}"
    return f"discount applied = {format_money(amount)}"
