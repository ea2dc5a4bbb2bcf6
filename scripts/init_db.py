"""
Create the discount tables and optionally seed sample rules.

    python scripts/init_db.py           # tables only
    python scripts/init_db.py --seed    # tables + sample conditions/coupons
"""

import sys
from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

from travel_discount.app.config import settings
from travel_discount.app.database import SessionLocal, engine
from travel_discount.app.models.generated import (
    Base,
    DiscountConditions,
    DiscountCoupons,
)


# ======================================================
# SAMPLE RULES
# ======================================================

def sample_conditions() -> list[DiscountConditions]:
    return [
        DiscountConditions(
            id=3, condition_number=3, description="Fixed - adult 50,000 off",
            discount_kind="immediate", amount_kind="fixed",
            discount_value=Decimal("50000"), applicable_target="adult",
            is_enabled=True,
        ),
        DiscountConditions(
            id=22, condition_number=22, description="Early booking - 30,000 off from 20 days out",
            discount_kind="period", amount_kind="fixed",
            discount_value=Decimal("30000"), applicable_target="all",
            days_before_departure=20, is_enabled=True,
        ),
        DiscountConditions(
            id=26, condition_number=26, description="Percentage - 3% off",
            discount_kind="immediate", amount_kind="percentage",
            discount_value=Decimal("0.03"), applicable_target="all",
            minimum_amount=Decimal("0"), maximum_discount_amount=Decimal("100000"),
            is_enabled=True,
        ),
    ]


def sample_coupons(now: datetime) -> list[DiscountCoupons]:
    return [
        DiscountCoupons(
            id=1, coupon_code="CMP-SOMU-RJMQ-TGKY", coupon_name="Korean Air coupon",
            description="Airline - Korean Air 5,000 off", issue_status="issuing",
            issue_start_date=now - timedelta(days=30), issue_end_date=now + timedelta(days=30),
            is_fixed_discount=True, discount_amount=Decimal("5000"),
            has_airline_condition=True, airline_conditions="Korean Air",
        ),
        DiscountCoupons(
            id=2, coupon_code="CMP-VJCK-895K-N7I2", coupon_name="Japan travel coupon",
            description="Japan 5% off (Okinawa excluded)", issue_status="issuing",
            issue_start_date=now - timedelta(days=30), issue_end_date=now + timedelta(days=30),
            is_percentage_discount=True, discount_rate=Decimal("0.05"),
            minimum_amount_for_rate=Decimal("200000"), maximum_discount_for_rate=Decimal("20000"),
            has_country_condition=True, applicable_countries="Japan",
            has_city_condition=True, excluded_cities="Okinawa",
        ),
    ]


# ======================================================
# MAIN
# ======================================================

def main(seed: bool = False):
    url = settings.resolved_database_url
    print(f"Using DB: {url}")

    if url.startswith("sqlite:///"):
        Path(url.replace("sqlite:///", "")).parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(engine)
    print("✔ Tables created")

    if not seed:
        return

    db = SessionLocal()
    try:
        if db.query(DiscountConditions).count() or db.query(DiscountCoupons).count():
            print("Sample rules skipped: tables are not empty")
            return
        db.add_all(sample_conditions())
        db.add_all(sample_coupons(datetime.now()))
        db.commit()
        print("✔ Sample rules seeded")
    finally:
        db.close()


if __name__ == "__main__":
    main(seed="--seed" in sys.argv[1:])
