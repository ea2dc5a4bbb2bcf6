# travel_discount/app/services/discounts/calculator.py
"""
Discount calculation pipeline.

1. original = base_amount(booking)
2. candidate conditions: explicit ids, or every applicable enabled condition
3. candidate coupons:    explicit codes, or every applicable active coupon
4. conditions (ascending id): re-validate, compute on the booking, accumulate
5. coupons (ascending id):    re-validate, compute on original − total so far
6. final = max(0, original − total)

Steps 4–5 are a sequential fold over _Totals; each coupon depends on the
running total left by everything applied before it.

An ineligible rule becomes a warning and the calculation continues.
Any unexpected exception aborts the calculation: is_success = False and
only original_amount is reported.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from functools import reduce
from typing import Optional

from ...models.generated import (
    DiscountConditions as DBDiscountCondition,
    DiscountCoupons as DBDiscountCoupon,
)
from ...schemas.discounts import (
    AppliedDiscount,
    BookingInfo,
    DiscountCalculationResult,
    RuleKind,
)
from .categories import ZERO, base_amount
from .config import get_discount_config
from .formulas import condition_detail, condition_discount, coupon_detail, coupon_discount
from .repository import DiscountRepository
from .validators import validate_condition, validate_coupon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Totals:
    """Running state of the application fold."""
    discount: Decimal = ZERO
    applied: tuple[AppliedDiscount, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def reject(self, messages: list[str]) -> "_Totals":
        return _Totals(self.discount, self.applied, self.warnings + tuple(messages))

    def accept(self, applied: AppliedDiscount) -> "_Totals":
        return _Totals(self.discount + applied.amount, self.applied + (applied,), self.warnings)


# ──────────────────────────────────────────────────────────────────────────────
# Applicable-set queries
# ──────────────────────────────────────────────────────────────────────────────

def list_applicable_conditions(
    repository: DiscountRepository,
    booking: BookingInfo,
) -> list[DBDiscountCondition]:
    """Enabled conditions that pass validation for this booking, by id."""
    return [
        condition
        for condition in repository.fetch_all_enabled_conditions()
        if validate_condition(repository, condition.id, booking).is_valid
    ]


def list_applicable_coupons(
    repository: DiscountRepository,
    booking: BookingInfo,
    now: Optional[datetime] = None,
) -> list[DBDiscountCoupon]:
    """Active coupons that pass validation for this booking, by id."""
    now = now or datetime.now()
    return [
        coupon
        for coupon in repository.fetch_all_active_coupons(now)
        if validate_coupon(repository, coupon.coupon_code, booking, now).is_valid
    ]


def _conditions_by_ids(repository: DiscountRepository, ids: list[int]) -> list[DBDiscountCondition]:
    conditions = []
    for condition_id in ids:
        condition = repository.fetch_condition_by_id(condition_id)
        if condition is not None:
            conditions.append(condition)
    return conditions


def _coupons_by_codes(repository: DiscountRepository, codes: list[str]) -> list[DBDiscountCoupon]:
    coupons = []
    for code in codes:
        coupon = repository.fetch_coupon_by_code(code)
        if coupon is not None:
            coupons.append(coupon)
    return coupons


# ──────────────────────────────────────────────────────────────────────────────
# Pipeline
# ──────────────────────────────────────────────────────────────────────────────

def calculate_discount(
    repository: DiscountRepository,
    booking: BookingInfo,
    condition_ids: Optional[list[int]] = None,
    coupon_codes: Optional[list[str]] = None,
    now: Optional[datetime] = None,
) -> DiscountCalculationResult:
    """
    Apply conditions, then coupons, to a booking.

    Args:
        repository: data access for condition/coupon records
        booking: booking to price
        condition_ids: explicit conditions; None = every applicable condition
        coupon_codes: explicit coupons; None = every applicable coupon
        now: evaluation time for coupon issue windows (default: now)

    Returns:
        DiscountCalculationResult; warning_messages lists rejected rules.
    """
    now = now or datetime.now()
    config = get_discount_config()
    original = base_amount(booking)

    try:
        logger.info(f"Discount calculation started: product={booking.product_code}")

        if condition_ids is not None:
            conditions = _conditions_by_ids(repository, condition_ids)
        else:
            conditions = list_applicable_conditions(repository, booking)

        if coupon_codes is not None:
            coupons = _coupons_by_codes(repository, coupon_codes)
        else:
            coupons = list_applicable_coupons(repository, booking, now)

        def apply_condition(totals: _Totals, condition: DBDiscountCondition) -> _Totals:
            validation = validate_condition(repository, condition.id, booking)
            if not validation.is_valid:
                logger.debug(f"Condition {condition.id} rejected: {validation.error_messages}")
                return totals.reject(validation.error_messages)

            amount = condition_discount(condition, booking)
            if amount <= 0:
                return totals
            return totals.accept(AppliedDiscount(
                kind=RuleKind.CONDITION,
                code=str(condition.condition_number),
                name=condition.description,
                amount=amount,
                detail=condition_detail(condition, amount),
                priority=config.condition_priority,
            ))

        def apply_coupon(totals: _Totals, coupon: DBDiscountCoupon) -> _Totals:
            validation = validate_coupon(repository, coupon.coupon_code, booking, now)
            if not validation.is_valid:
                logger.debug(f"Coupon {coupon.coupon_code} rejected: {validation.error_messages}")
                return totals.reject(validation.error_messages)

            current_amount = original - totals.discount
            amount = coupon_discount(coupon, current_amount)
            if amount <= 0:
                return totals
            return totals.accept(AppliedDiscount(
                kind=RuleKind.COUPON,
                code=coupon.coupon_code,
                name=coupon.coupon_name,
                amount=amount,
                detail=coupon_detail(coupon, amount),
                priority=config.coupon_priority,
            ))

        totals = reduce(apply_condition, sorted(conditions, key=lambda c: c.id), _Totals())
        totals = reduce(apply_coupon, sorted(coupons, key=lambda c: c.id), totals)

        final = max(ZERO, original - totals.discount)

        logger.info(
            f"Discount calculation finished: original={original:,.0f}, "
            f"discount={totals.discount:,.0f}, final={final:,.0f}"
        )

        return DiscountCalculationResult(
            original_amount=original,
            total_discount_amount=totals.discount,
            final_amount=final,
            applied_discounts=list(totals.applied),
            is_success=True,
            warning_messages=list(totals.warnings),
        )

    except Exception:
        logger.exception("Discount calculation failed")
        return DiscountCalculationResult(
            original_amount=original,
            is_success=False,
            error_message=config.generic_error_message,
        )
