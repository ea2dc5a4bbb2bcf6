# travel_discount/app/routers/discount_conditions.py
# GET / lists enabled conditions only; DELETE is soft (is_deleted = 1)

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import DiscountConditions as DBDiscountConditions
from ..schemas.discount_conditions import (
    DiscountConditionCreate,
    DiscountConditionRead,
    DiscountConditionUpdate,
    check_percentage_value,
)
from ..services.discounts import SqlDiscountRepository

router = APIRouter(prefix="/discount_conditions", tags=["discount_conditions"])


def _get_or_404(db: Session, id: int) -> DBDiscountConditions:
    obj = SqlDiscountRepository(db).fetch_condition_by_id(id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.get("/", response_model=list[DiscountConditionRead])
def list_discount_conditions(db: Session = Depends(get_db)):
    return SqlDiscountRepository(db).fetch_all_enabled_conditions()


@router.get("/{id}", response_model=DiscountConditionRead)
def get_discount_condition(id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, id)


@router.post(
    "/", response_model=DiscountConditionRead, status_code=status.HTTP_201_CREATED
)
def create_discount_condition(
    data: DiscountConditionCreate,
    db: Session = Depends(get_db),
):
    obj = DBDiscountConditions(**data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@router.patch("/{id}", response_model=DiscountConditionRead)
def update_discount_condition(
    id: int,
    data: DiscountConditionUpdate,
    db: Session = Depends(get_db),
):
    obj = _get_or_404(db, id)
    changes = data.model_dump(exclude_unset=True)

    try:
        check_percentage_value(
            changes.get("amount_kind", obj.amount_kind),
            changes.get("discount_value", obj.discount_value),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )

    for field, value in changes.items():
        setattr(obj, field, value)

    obj.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(obj)
    return obj


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_discount_condition(id: int, db: Session = Depends(get_db)):
    obj = _get_or_404(db, id)
    obj.is_deleted = True
    obj.updated_at = datetime.utcnow()
    db.commit()
