from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from uritmix.domain.entities.abonnement import AbonnementValidity, Discount, Lesson


@dataclass(frozen=True)
class SaleAbonnementInput:
    person_id: int
    abonnement_id: int
    discount: Discount


@dataclass(frozen=True)
class LessonOutput:
    id: int
    name: str
    description: str | None
    trainer_id: int
    duration_minutes: int
    base_price: float


@dataclass(frozen=True)
class SoldAbonnementOutput:
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
    lessons: list[LessonOutput]


def build_lesson_output(lesson: Lesson) -> LessonOutput:
    return LessonOutput(
        id=lesson.id,
        name=lesson.name,
        description=lesson.description,
        trainer_id=lesson.trainer_id,
        duration_minutes=lesson.duration_minutes,
        base_price=lesson.base_price,
    )
