from __future__ import annotations

import json
from typing import Any, Mapping

from uritmix.domain.entities.abonnement import (
    Abonnement,
    AbonnementValidity,
    Discount,
    Lesson,
    SoldAbonnement,
)
from uritmix.domain.entities.person import AuthAccount, AuthRole, AuthStatus, Person, RefreshToken


def _as_float(value: Any) -> float:
    return float(value)


def map_row_to_lesson(row: Mapping[str, Any]) -> Lesson:
    return Lesson(
        id=int(row["id"]),
        name=row["name"],
        description=row.get("description"),
        trainer_id=int(row["trainer_id"]),
        duration_minutes=int(row["duration_minutes"]),
        base_price=_as_float(row["base_price"]),
    )


def map_lesson_to_snapshot(lesson: Lesson) -> dict[str, Any]:
    return {
        "id": lesson.id,
        "name": lesson.name,
        "description": lesson.description,
        "trainer_id": lesson.trainer_id,
        "duration_minutes": lesson.duration_minutes,
        "base_price": lesson.base_price,
    }


def map_row_to_abonnement(row: Mapping[str, Any], lessons: list[Lesson]) -> Abonnement:
    return Abonnement(
        id=int(row["id"]),
        name=row["name"],
        base_price=_as_float(row["base_price"]),
        max_discount=Discount(int(row["max_discount"])),
        validity=AbonnementValidity(row["validity"]),
        max_number_of_visits=int(row["number_of_visits"]),
        lessons=tuple(lessons),
    )


def _snapshot_lessons(value: Any) -> tuple[Lesson, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(map_row_to_lesson(item) for item in value)


def map_row_to_sold_abonnement(row: Mapping[str, Any]) -> SoldAbonnement:
    return SoldAbonnement(
        id=int(row["id"]),
        person_id=int(row["person_id"]),
        active=bool(row["active"]),
        date_sale=row["date_sale"],
        date_expiration=row["date_expiration"],
        price_sold=_as_float(row["price_sold"]),
        discount=Discount(int(row["discount"])),
        visit_counter=int(row["visit_counter"]),
        name=row["name"],
        validity=AbonnementValidity(row["validity"]),
        max_number_of_visits=int(row["number_of_visits"]),
        base_price=_as_float(row["base_price"]),
        lessons=_snapshot_lessons(row.get("lessons")),
    )


def map_row_to_person(row: Mapping[str, Any]) -> Person:
    auth = None
    if row.get("email") is not None:
        auth = AuthAccount(
            email=row["email"],
            role=AuthRole(row["role"]),
            status=AuthStatus(row["status"]),
            password_hash=row.get("password_hash"),
        )
    return Person(
        id=int(row["person_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        auth=auth,
    )


def map_row_to_refresh_token(row: Mapping[str, Any]) -> RefreshToken:
    person = None
    if row.get("first_name") is not None:
        person = map_row_to_person(row)
    return RefreshToken(
        id=int(row["id"]),
        person_id=int(row["person_id"]),
        is_revoked=bool(row["is_revoked"]),
        person=person,
    )
