# travel_discount/app/schemas/discounts.py

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BookingInfo(BaseModel):
    product_code: Optional[str] = None

    adult_price: Decimal = Decimal(0)
    child_n_price: Optional[Decimal] = None  # child, no bed
    child_e_price: Optional[Decimal] = None  # child, extra bed
    infant_price: Optional[Decimal] = None
    land_price: Optional[Decimal] = None

    adult_count: int = Field(0, ge=0)
    child_n_count: int = Field(0, ge=0)
    child_e_count: int = Field(0, ge=0)
    infant_count: int = Field(0, ge=0)
    land_count: int = Field(0, ge=0)

    departure_date: datetime
    booking_date: datetime
    destination_country: Optional[str] = None
    destination_city: Optional[str] = None
    airline: Optional[str] = None
    user_id: Optional[str] = None

    model_config = {"from_attributes": True, "frozen": True}


class RuleKind(str, Enum):
    CONDITION = "condition"
    COUPON = "coupon"


class AppliedDiscount(BaseModel):
    kind: RuleKind
    code: str
    name: Optional[str] = None
    amount: Decimal
    detail: str
    priority: int

    model_config = {"from_attributes": True}


class DiscountCalculationResult(BaseModel):
    original_amount: Decimal = Decimal(0)
    total_discount_amount: Decimal = Decimal(0)
    final_amount: Decimal = Decimal(0)
    applied_discounts: list[AppliedDiscount] = Field(default_factory=list)
    is_success: bool = True
    error_message: Optional[str] = None
    warning_messages: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class DiscountValidationResult(BaseModel):
    is_valid: bool = True
    error_messages: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class DiscountCalculationRequest(BaseModel):
    booking_info: BookingInfo
    discount_condition_ids: Optional[list[int]] = None
    coupon_codes: Optional[list[str]] = None

    model_config = {"from_attributes": True}
