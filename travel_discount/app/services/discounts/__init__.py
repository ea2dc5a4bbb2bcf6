# travel_discount/app/services/discounts/__init__.py
"""
Discount calculation module.

Evaluators: eligibility of conditions and coupons for a booking
Pipeline:   ordered application (conditions, then coupons) with warnings
"""

from .config import DiscountConfig, get_discount_config
from .categories import TargetCategory, base_amount, target_amount, is_target_applicable
from .formulas import condition_discount, coupon_discount
from .repository import DiscountRepository, SqlDiscountRepository
from .validators import validate_condition, validate_coupon
from .calculator import calculate_discount, list_applicable_conditions, list_applicable_coupons

__all__ = [
    "DiscountConfig",
    "get_discount_config",
    "TargetCategory",
    "base_amount",
    "target_amount",
    "is_target_applicable",
    "condition_discount",
    "coupon_discount",
    "DiscountRepository",
    "SqlDiscountRepository",
    "validate_condition",
    "validate_coupon",
    "calculate_discount",
    "list_applicable_conditions",
    "list_applicable_coupons",
]
