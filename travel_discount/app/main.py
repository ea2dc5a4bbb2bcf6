# travel_discount/app/main.py

import logging

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db
from .routers import discount_conditions, discount_coupons, discounts

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Travel Discount API")

app.include_router(discounts.router)
app.include_router(discount_conditions.router)
app.include_router(discount_coupons.router)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    return {"database": db.execute(text("SELECT 1")).scalar() == 1}
