from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from uritmix.domain.entities.abonnement import AbonnementValidity, Discount


class SaleAbonnementRequest(BaseModel):
    person_id: int = Field(..., ge=1)
    abonnement_id: int = Field(..., ge=1)
    discount: Discount = Discount.D0


class LessonResponse(BaseModel):
    id: int
    name: str
    description: str | None
    trainer_id: int
    duration_minutes: int
    base_price: float


class SoldAbonnementResponse(BaseModel):
    id: int
    person_id: int
    active: bool
    date_sale: datetime
    date_expiration: datetime
    price_sold: float
    visit_counter: int
    name: str
    validity: AbonnementValidity
    number_of_visits: int
    base_price: float
    discount: Discount
    lessons: list[LessonResponse]
