# travel_discount/app/schemas/discount_conditions.py

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

DiscountKind = Literal["immediate", "period"]
AmountKind = Literal["fixed", "percentage"]


def check_percentage_value(amount_kind: Optional[str], discount_value: Optional[Decimal]) -> None:
    """Percentage values are fractions: 0.03 = 3%."""
    if amount_kind == "percentage" and discount_value is not None and discount_value > 1:
        raise ValueError("percentage discount_value must be between 0 and 1")


class DiscountConditionCreate(BaseModel):
    condition_number: int
    description: Optional[str] = None
    discount_kind: DiscountKind = "immediate"
    amount_kind: AmountKind = "fixed"
    discount_value: Decimal = Field(ge=0)
    minimum_amount: Optional[Decimal] = None
    maximum_discount_amount: Optional[Decimal] = None
    applicable_target: str = "all"
    days_before_departure: Optional[int] = Field(None, ge=0)
    is_enabled: bool = True

    model_config = {"from_attributes": True}

    @model_validator(mode="after")
    def validate_percentage(self):
        check_percentage_value(self.amount_kind, self.discount_value)
        return self


class DiscountConditionUpdate(BaseModel):
    condition_number: Optional[int] = None
    description: Optional[str] = None
    discount_kind: Optional[DiscountKind] = None
    amount_kind: Optional[AmountKind] = None
    discount_value: Optional[Decimal] = Field(None, ge=0)
    minimum_amount: Optional[Decimal] = None
    maximum_discount_amount: Optional[Decimal] = None
    applicable_target: Optional[str] = None
    days_before_departure: Optional[int] = Field(None, ge=0)
    is_enabled: Optional[bool] = None

    model_config = {"from_attributes": True}


class DiscountConditionRead(BaseModel):
    id: int
    condition_number: int
    description: Optional[str] = None
    discount_kind: str
    amount_kind: str
    discount_value: Decimal
    minimum_amount: Optional[Decimal] = None
    maximum_discount_amount: Optional[Decimal] = None
    applicable_target: str
    days_before_departure: Optional[int] = None
    is_enabled: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
