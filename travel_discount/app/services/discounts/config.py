# travel_discount/app/services/discounts/config.py
"""
Discount engine configuration.
"""

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class DiscountConfig:
    """
    Constants shared by the evaluators and the calculation pipeline.

    Attributes:
        active_issue_status: coupon issue_status that makes a coupon usable
        generic_error_message: opaque message returned on unexpected failure
        condition_priority: AppliedDiscount.priority for conditions
        coupon_priority: AppliedDiscount.priority for coupons
    """
    active_issue_status: str = "issuing"
    generic_error_message: str = "An error occurred while calculating the discount."
    condition_priority: int = 1
    coupon_priority: int = 2

    def __post_init__(self):
        if self.condition_priority >= self.coupon_priority:
            raise ValueError(
                "condition_priority must be lower than coupon_priority, "
                f"got {self.condition_priority} >= {self.coupon_priority}"
            )


@lru_cache
def get_discount_config() -> DiscountConfig:
    """Get discount engine configuration (singleton)."""
    return DiscountConfig()
