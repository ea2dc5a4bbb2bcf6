from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from travel_discount.app.models.generated import DiscountConditions, DiscountCoupons
from travel_discount.app.schemas.discounts import BookingInfo

NOW = datetime(2026, 10, 19, 12, 0)


def make_booking(days_out: int = 30, now: Optional[datetime] = None, **fields) -> BookingInfo:
    now = now or NOW
    fields.setdefault("departure_date", now + timedelta(days=days_out))
    fields.setdefault("booking_date", now)
    return BookingInfo(**fields)


def make_condition(**fields) -> DiscountConditions:
    fields.setdefault("condition_number", fields.get("id", 1))
    fields.setdefault("discount_kind", "immediate")
    fields.setdefault("amount_kind", "fixed")
    fields.setdefault("applicable_target", "all")
    fields.setdefault("is_enabled", True)
    fields.setdefault("is_deleted", False)
    return DiscountConditions(**fields)


def make_coupon(now: datetime, **fields) -> DiscountCoupons:
    fields.setdefault("coupon_name", fields.get("coupon_code"))
    fields.setdefault("issue_status", "issuing")
    fields.setdefault("issue_start_date", now - timedelta(days=30))
    fields.setdefault("issue_end_date", now + timedelta(days=30))
    for flag in (
        "is_percentage_discount", "is_fixed_discount", "has_country_condition",
        "has_city_condition", "has_airline_condition", "is_deleted",
    ):
        fields.setdefault(flag, False)
    return DiscountCoupons(**fields)


def seed_scenario_rules(db, now: datetime):
    """Rules used by the end-to-end pricing scenarios."""
    db.add_all([
        make_condition(
            id=3, description="Fixed - adult 50,000 off",
            discount_value=Decimal("50000"), applicable_target="adult",
        ),
        make_condition(
            id=22, description="Early booking - 30,000 off from 20 days out",
            discount_kind="period", discount_value=Decimal("30000"),
            days_before_departure=20,
        ),
        make_condition(
            id=26, description="Percentage - 3% off", amount_kind="percentage",
            discount_value=Decimal("0.03"), minimum_amount=Decimal("0"),
            maximum_discount_amount=Decimal("100000"),
        ),
        make_coupon(
            now, id=1, coupon_code="CMP-SOMU-RJMQ-TGKY", coupon_name="Korean Air coupon",
            is_fixed_discount=True, discount_amount=Decimal("5000"),
            has_airline_condition=True, airline_conditions="Korean Air",
        ),
        make_coupon(
            now, id=2, coupon_code="CMP-VJCK-895K-N7I2", coupon_name="Japan travel coupon",
            is_percentage_discount=True, discount_rate=Decimal("0.05"),
            minimum_amount_for_rate=Decimal("200000"),
            maximum_discount_for_rate=Decimal("20000"),
            has_country_condition=True, applicable_countries="Japan",
            has_city_condition=True, excluded_cities="Okinawa",
        ),
    ])
    db.commit()


class InMemoryDiscountRepository:
    """Dict-backed DiscountRepository for tests that do not need a database."""

    def __init__(self, conditions=(), coupons=(), active_status: str = "issuing"):
        self.conditions = {c.id: c for c in conditions}
        self.coupons = {c.coupon_code: c for c in coupons}
        self.active_status = active_status

    def fetch_condition_by_id(self, condition_id):
        condition = self.conditions.get(condition_id)
        if condition is None or condition.is_deleted:
            return None
        return condition

    def fetch_all_enabled_conditions(self):
        return sorted(
            (c for c in self.conditions.values() if c.is_enabled and not c.is_deleted),
            key=lambda c: c.id,
        )

    def fetch_coupon_by_code(self, coupon_code):
        coupon = self.coupons.get(coupon_code)
        if coupon is None or coupon.is_deleted:
            return None
        return coupon

    def fetch_all_active_coupons(self, now=None):
        now = now or datetime.now()
        return sorted(
            (
                c for c in self.coupons.values()
                if not c.is_deleted
                and c.issue_status == self.active_status
                and c.issue_start_date <= now <= c.issue_end_date
            ),
            key=lambda c: c.id,
        )
