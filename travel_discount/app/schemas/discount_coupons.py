# travel_discount/app/schemas/discount_coupons.py

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

IssueStatus = Literal["issuing", "ended", "waiting"]


class DiscountCouponCreate(BaseModel):
    coupon_code: str
    coupon_name: Optional[str] = None
    description: Optional[str] = None
    issue_status: IssueStatus = "waiting"
    issue_start_date: datetime
    issue_end_date: datetime

    is_percentage_discount: bool = False
    discount_rate: Optional[Decimal] = Field(None, ge=0, le=1)
    minimum_amount_for_rate: Optional[Decimal] = None
    maximum_discount_for_rate: Optional[Decimal] = None
    is_fixed_discount: bool = False
    discount_amount: Optional[Decimal] = None
    minimum_amount_for_fixed: Optional[Decimal] = None

    has_country_condition: bool = False
    applicable_countries: Optional[str] = None
    excluded_countries: Optional[str] = None
    has_city_condition: bool = False
    applicable_cities: Optional[str] = None
    excluded_cities: Optional[str] = None
    has_airline_condition: bool = False
    airline_conditions: Optional[str] = None

    model_config = {"from_attributes": True}


class DiscountCouponUpdate(BaseModel):
    coupon_name: Optional[str] = None
    description: Optional[str] = None
    issue_status: Optional[IssueStatus] = None
    issue_start_date: Optional[datetime] = None
    issue_end_date: Optional[datetime] = None

    is_percentage_discount: Optional[bool] = None
    discount_rate: Optional[Decimal] = Field(None, ge=0, le=1)
    minimum_amount_for_rate: Optional[Decimal] = None
    maximum_discount_for_rate: Optional[Decimal] = None
    is_fixed_discount: Optional[bool] = None
    discount_amount: Optional[Decimal] = None
    minimum_amount_for_fixed: Optional[Decimal] = None

    has_country_condition: Optional[bool] = None
    applicable_countries: Optional[str] = None
    excluded_countries: Optional[str] = None
    has_city_condition: Optional[bool] = None
    applicable_cities: Optional[str] = None
    excluded_cities: Optional[str] = None
    has_airline_condition: Optional[bool] = None
    airline_conditions: Optional[str] = None

    model_config = {"from_attributes": True}


class DiscountCouponRead(BaseModel):
    id: int
    coupon_code: str
    coupon_name: Optional[str] = None
    description: Optional[str] = None
    issue_status: str
    issue_start_date: datetime
    issue_end_date: datetime

    is_percentage_discount: bool
    discount_rate: Optional[Decimal] = None
    minimum_amount_for_rate: Optional[Decimal] = None
    maximum_discount_for_rate: Optional[Decimal] = None
    is_fixed_discount: bool
    discount_amount: Optional[Decimal] = None
    minimum_amount_for_fixed: Optional[Decimal] = None

    has_country_condition: bool
    applicable_countries: Optional[str] = None
    excluded_countries: Optional[str] = None
    has_city_condition: bool
    applicable_cities: Optional[str] = None
    excluded_cities: Optional[str] = None
    has_airline_condition: bool
    airline_conditions: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
