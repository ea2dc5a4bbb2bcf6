# travel_discount/app/services/discounts/repository.py
"""
Read-only data access used by the discount engine.

The engine depends on the DiscountRepository protocol; SqlDiscountRepository
is the SQLAlchemy implementation bound to a request-scoped Session.
Soft-deleted rows (is_deleted = 1) are invisible to every read.
"""

from datetime import datetime
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from ...models.generated import (
    DiscountConditions as DBDiscountCondition,
    DiscountCoupons as DBDiscountCoupon,
)
from .config import get_discount_config


class DiscountRepository(Protocol):
    def fetch_condition_by_id(self, condition_id: int) -> Optional[DBDiscountCondition]: ...

    def fetch_all_enabled_conditions(self) -> list[DBDiscountCondition]: ...

    def fetch_coupon_by_code(self, coupon_code: str) -> Optional[DBDiscountCoupon]: ...

    def fetch_all_active_coupons(self, now: Optional[datetime] = None) -> list[DBDiscountCoupon]: ...


class SqlDiscountRepository:
    def __init__(self, db: Session):
        self.db = db

    def fetch_condition_by_id(self, condition_id: int) -> Optional[DBDiscountCondition]:
        return (
            self.db.query(DBDiscountCondition)
            .filter(DBDiscountCondition.id == condition_id)
            .filter(DBDiscountCondition.is_deleted.is_(False))
            .first()
        )

    def fetch_all_enabled_conditions(self) -> list[DBDiscountCondition]:
        return (
            self.db.query(DBDiscountCondition)
            .filter(DBDiscountCondition.is_deleted.is_(False))
            .filter(DBDiscountCondition.is_enabled.is_(True))
            .order_by(DBDiscountCondition.id)
            .all()
        )

    def fetch_coupon_by_code(self, coupon_code: str) -> Optional[DBDiscountCoupon]:
        return (
            self.db.query(DBDiscountCoupon)
            .filter(DBDiscountCoupon.coupon_code == coupon_code)
            .filter(DBDiscountCoupon.is_deleted.is_(False))
            .first()
        )

    def fetch_all_active_coupons(self, now: Optional[datetime] = None) -> list[DBDiscountCoupon]:
        """Issuing, non-deleted coupons whose issue window contains `now`."""
        now = now or datetime.now()
        status = get_discount_config().active_issue_status
        return (
            self.db.query(DBDiscountCoupon)
            .filter(DBDiscountCoupon.is_deleted.is_(False))
            .filter(DBDiscountCoupon.issue_status == status)
            .filter(DBDiscountCoupon.issue_start_date <= now)
            .filter(DBDiscountCoupon.issue_end_date >= now)
            .order_by(DBDiscountCoupon.id)
            .all()
        )
