# travel_discount/app/routers/discounts.py
"""
Discount calculation API.

POST /discounts/calculate  → price a booking
POST /discounts/conditions/applicable  → conditions valid for a booking
POST /discounts/coupons/applicable  → coupons valid for a booking
POST /discounts/conditions/{condition_id}/validate
POST /discounts/coupons/{coupon_code}/validate

calculate never fails with 5xx: unexpected errors are reported in the
result (is_success = false).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.discount_conditions import DiscountConditionRead
from ..schemas.discount_coupons import DiscountCouponRead
from ..schemas.discounts import (
    BookingInfo,
    DiscountCalculationRequest,
    DiscountCalculationResult,
    DiscountValidationResult,
)
from ..services.discounts import (
    SqlDiscountRepository,
    calculate_discount,
    list_applicable_conditions,
    list_applicable_coupons,
    validate_condition,
    validate_coupon,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/discounts", tags=["discounts"])


def _server_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


@router.post("/calculate", response_model=DiscountCalculationResult)
def calculate(
    data: DiscountCalculationRequest,
    db: Session = Depends(get_db),
):
    return calculate_discount(
        SqlDiscountRepository(db),
        data.booking_info,
        condition_ids=data.discount_condition_ids,
        coupon_codes=data.coupon_codes,
    )


@router.post("/conditions/applicable", response_model=list[DiscountConditionRead])
def applicable_conditions(
    booking: BookingInfo,
    db: Session = Depends(get_db),
):
    try:
        return list_applicable_conditions(SqlDiscountRepository(db), booking)
    except Exception:
        logger.exception("Failed to list applicable discount conditions")
        raise _server_error("Failed to list discount conditions")


@router.post("/coupons/applicable", response_model=list[DiscountCouponRead])
def applicable_coupons(
    booking: BookingInfo,
    db: Session = Depends(get_db),
):
    try:
        return list_applicable_coupons(SqlDiscountRepository(db), booking)
    except Exception:
        logger.exception("Failed to list applicable coupons")
        raise _server_error("Failed to list coupons")


@router.post(
    "/conditions/{condition_id}/validate",
    response_model=DiscountValidationResult,
)
def validate_condition_endpoint(
    condition_id: int,
    booking: BookingInfo,
    db: Session = Depends(get_db),
):
    try:
        return validate_condition(SqlDiscountRepository(db), condition_id, booking)
    except Exception:
        logger.exception(f"Failed to validate discount condition {condition_id}")
        raise _server_error("Failed to validate discount condition")


@router.post(
    "/coupons/{coupon_code}/validate",
    response_model=DiscountValidationResult,
)
def validate_coupon_endpoint(
    coupon_code: str,
    booking: BookingInfo,
    db: Session = Depends(get_db),
):
    try:
        return validate_coupon(SqlDiscountRepository(db), coupon_code, booking)
    except Exception:
        logger.exception(f"Failed to validate coupon {coupon_code}")
        raise _server_error("Failed to validate coupon")
