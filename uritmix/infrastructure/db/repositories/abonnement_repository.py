from __future__ import annotations

import json
import logging

from sqlalchemy import text

from uritmix.application.ports.abonnement_port import AbonnementPort, SoldAbonnementPort
from uritmix.domain.entities.abonnement import Abonnement, SoldAbonnement
from uritmix.infrastructure.db.mappers.studio_mapper import (
    map_lesson_to_snapshot,
    map_row_to_abonnement,
    map_row_to_lesson,
    map_row_to_sold_abonnement,
)


logger = logging.getLogger(__name__)


class SqlAbonnementRepository(AbonnementPort):
    def __init__(self, engine):
        self._engine = engine

    async def get(self, *, abonnement_id: int) -> Abonnement | None:
        sql = """
            SELECT id, name, base_price, max_discount, validity, number_of_visits
            FROM public.abonnement
            WHERE id = :abonnement_id
            LIMIT 1
        """
        lessons_sql = """
            SELECT l.id, l.name, l.description, l.trainer_id, l.duration_minutes, l.base_price
            FROM public.abonnement_lesson al
            JOIN public.lesson l ON l.id = al.lesson_id
            WHERE al.abonnement_id = :abonnement_id
            ORDER BY l.id
        """
        async with self._engine.connect() as conn:
            row = (await conn.execute(text(sql), {"abonnement_id": abonnement_id})).mappings().first()
            if row is None:
                return None
            lesson_rows = (await conn.execute(text(lessons_sql), {"abonnement_id": abonnement_id})).mappings().all()
        return map_row_to_abonnement(row, [map_row_to_lesson(item) for item in lesson_rows])


class SqlSoldAbonnementRepository(SoldAbonnementPort):
    def __init__(self, engine):
        self._engine = engine

    async def create(self, *, record: SoldAbonnement) -> SoldAbonnement:
        sql = """
            INSERT INTO public.sold_abonnement (
                person_id, active, date_sale, date_expiration, price_sold, discount, visit_counter,
                name, validity, number_of_visits, base_price, lessons
            ) VALUES (
                :person_id, :active, :date_sale, :date_expiration, :price_sold, :discount, :visit_counter,
                :name, :validity, :number_of_visits, :base_price, CAST(:lessons AS jsonb)
            )
            RETURNING id, person_id, active, date_sale, date_expiration, price_sold, discount, visit_counter,
                      name, validity, number_of_visits, base_price, lessons
        """
        params = {
            "person_id": record.person_id,
            "active": record.active,
            "date_sale": record.date_sale,
            "date_expiration": record.date_expiration,
            "price_sold": record.price_sold,
            "discount": record.discount.value,
            "visit_counter": record.visit_counter,
            "name": record.name,
            "validity": record.validity.value,
            "number_of_visits": record.max_number_of_visits,
            "base_price": record.base_price,
            "lessons": json.dumps([map_lesson_to_snapshot(lesson) for lesson in record.lessons]),
        }
        async with self._engine.begin() as conn:
            row = (await conn.execute(text(sql), params)).mappings().one()
        logger.debug("sold_abonnement_repo: created id=%s person_id=%s", row["id"], row["person_id"])
        return map_row_to_sold_abonnement(row)
