from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum


class Discount(IntEnum):
    D0 = 0
    D5 = 5
    D10 = 10
    D15 = 15
    D20 = 20
    D25 = 25
    D30 = 30
    D40 = 40
    D50 = 50
    D60 = 60
    D70 = 70
    D80 = 80
    D90 = 90


class AbonnementValidity(str, Enum):
    ONE_DAY = "one_day"
    ONE_MONTH = "one_month"
    THREE_MONTHS = "three_months"
    HALF_YEAR = "half_year"
    YEAR = "year"


@dataclass(frozen=True)
class Lesson:
    id: int
    name: str
    description: str | None
    trainer_id: int
    duration_minutes: int
    base_price: float


@dataclass(frozen=True)
class Abonnement:
    id: int
    name: str
    base_price: float
    max_discount: Discount
    validity: AbonnementValidity
    max_number_of_visits: int
    lessons: tuple[Lesson, ...]


@dataclass(frozen=True)
class SoldAbonnement:
    id: int | None
    person_id: int
    active: bool
    date_sale: datetime
    date_expiration: datetime
    price_sold: float
    discount: Discount
    visit_counter: int
    # Snapshot of the abonnement at the moment of sale.
    name: str
    validity: AbonnementValidity
    max_number_of_visits: int
    base_price: float
    lessons: tuple[Lesson, ...]
