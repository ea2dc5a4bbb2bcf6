from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, Numeric, Text, text

from sqlalchemy.orm import declarative_base

Base = declarative_base()
metadata = Base.metadata

# Fixed-point money and rates; rates are fractions (0.03125 = 3.125%).
Money = Numeric(18, 4, asdecimal=True)
Rate = Numeric(18, 6, asdecimal=True)


class DiscountConditions(Base):
    __tablename__ = 'discount_conditions'

    condition_number = Column(Integer, nullable=False)
    discount_kind = Column(Enum('immediate', 'period', native_enum=False), nullable=False, server_default=text("'immediate'"))
    amount_kind = Column(Enum('fixed', 'percentage', native_enum=False), nullable=False, server_default=text("'fixed'"))
    discount_value = Column(Rate, nullable=False, server_default=text('0'))
    applicable_target = Column(Text, nullable=False, server_default=text("'all'"))
    is_enabled = Column(Boolean, nullable=False, server_default=text('1'))
    is_deleted = Column(Boolean, nullable=False, server_default=text('0'))
    created_at = Column(DateTime, nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    id = Column(Integer, primary_key=True)
    description = Column(Text)
    minimum_amount = Column(Money)
    maximum_discount_amount = Column(Money)
    days_before_departure = Column(Integer)  # period discounts only
    updated_at = Column(DateTime)


class DiscountCoupons(Base):
    __tablename__ = 'discount_coupons'

    coupon_code = Column(Text, nullable=False, unique=True)
    issue_status = Column(Enum('issuing', 'ended', 'waiting', native_enum=False), nullable=False, server_default=text("'waiting'"))
    issue_start_date = Column(DateTime, nullable=False)
    issue_end_date = Column(DateTime, nullable=False)
    is_percentage_discount = Column(Boolean, nullable=False, server_default=text('0'))
    is_fixed_discount = Column(Boolean, nullable=False, server_default=text('0'))
    has_country_condition = Column(Boolean, nullable=False, server_default=text('0'))
    has_city_condition = Column(Boolean, nullable=False, server_default=text('0'))
    has_airline_condition = Column(Boolean, nullable=False, server_default=text('0'))
    is_deleted = Column(Boolean, nullable=False, server_default=text('0'))
    created_at = Column(DateTime, nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    id = Column(Integer, primary_key=True)
    coupon_name = Column(Text)
    description = Column(Text)
    discount_rate = Column(Rate)
    minimum_amount_for_rate = Column(Money)
    maximum_discount_for_rate = Column(Money)
    discount_amount = Column(Money)
    minimum_amount_for_fixed = Column(Money)
    # comma-delimited lists, matched by substring
    applicable_countries = Column(Text)
    excluded_countries = Column(Text)
    applicable_cities = Column(Text)
    excluded_cities = Column(Text)
    airline_conditions = Column(Text)
    updated_at = Column(DateTime)
