# travel_discount/app/routers/discount_coupons.py
# GET / lists active coupons only; DELETE is soft (is_deleted = 1)

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import DiscountCoupons as DBDiscountCoupons
from ..schemas.discount_coupons import (
    DiscountCouponCreate,
    DiscountCouponRead,
    DiscountCouponUpdate,
)
from ..services.discounts import SqlDiscountRepository

router = APIRouter(prefix="/discount_coupons", tags=["discount_coupons"])


def _get_or_404(db: Session, id: int) -> DBDiscountCoupons:
    obj = db.get(DBDiscountCoupons, id)
    if not obj or obj.is_deleted:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.get("/", response_model=list[DiscountCouponRead])
def list_discount_coupons(db: Session = Depends(get_db)):
    return SqlDiscountRepository(db).fetch_all_active_coupons()


@router.get("/code/{coupon_code}", response_model=DiscountCouponRead)
def get_discount_coupon_by_code(coupon_code: str, db: Session = Depends(get_db)):
    obj = SqlDiscountRepository(db).fetch_coupon_by_code(coupon_code)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.get("/{id}", response_model=DiscountCouponRead)
def get_discount_coupon(id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, id)


def _code_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Coupon code already exists",
    )


@router.post(
    "/", response_model=DiscountCouponRead, status_code=status.HTTP_201_CREATED
)
def create_discount_coupon(
    data: DiscountCouponCreate,
    db: Session = Depends(get_db),
):
    # soft-deleted coupons keep their code reserved
    existing = (
        db.query(DBDiscountCoupons.id)
        .filter(DBDiscountCoupons.coupon_code == data.coupon_code)
        .first()
    )
    if existing:
        raise _code_conflict()

    obj = DBDiscountCoupons(**data.model_dump())
    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise _code_conflict()
    db.refresh(obj)
    return obj


@router.patch("/{id}", response_model=DiscountCouponRead)
def update_discount_coupon(
    id: int,
    data: DiscountCouponUpdate,
    db: Session = Depends(get_db),
):
    obj = _get_or_404(db, id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(obj, field, value)

    obj.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_discount_coupon(id: int, db: Session = Depends(get_db)):
    obj = _get_or_404(db, id)
    obj.is_deleted = True
    obj.updated_at = datetime.utcnow()
    db.commit()
