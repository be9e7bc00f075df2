from __future__ import annotations

import json
from datetime import datetime, timezone
import unittest

from uritmix.domain.entities.abonnement import AbonnementValidity, Discount, Lesson
from uritmix.domain.entities.person import AuthRole, AuthStatus
from uritmix.infrastructure.db.mappers.studio_mapper import (
    map_lesson_to_snapshot,
    map_row_to_abonnement,
    map_row_to_refresh_token,
    map_row_to_sold_abonnement,
)


LESSON = Lesson(
    id=1,
    name="Yoga",
    description=None,
    trainer_id=3,
    duration_minutes=60,
    base_price=150.0,
)


class StudioMapperTests(unittest.TestCase):
    def test_maps_abonnement_with_enums(self):
        row = {
            "id": 7,
            "name": "Yoga monthly",
            "base_price": 1000,
            "max_discount": 20,
            "validity": "one_month",
            "number_of_visits": 12,
        }

        mapped = map_row_to_abonnement(row, [LESSON])

        self.assertIs(mapped.max_discount, Discount.D20)
        self.assertIs(mapped.validity, AbonnementValidity.ONE_MONTH)
        self.assertEqual(mapped.base_price, 1000.0)
        self.assertEqual(mapped.lessons, (LESSON,))

    def test_maps_sold_abonnement_snapshot_from_json_text(self):
        row = {
            "id": 11,
            "person_id": 42,
            "active": True,
            "date_sale": datetime(2024, 1, 15, tzinfo=timezone.utc),
            "date_expiration": datetime(2024, 2, 15, tzinfo=timezone.utc),
            "price_sold": 900.0,
            "discount": 10,
            "visit_counter": 0,
            "name": "Yoga monthly",
            "validity": "one_month",
            "number_of_visits": 12,
            "base_price": 1000.0,
            "lessons": json.dumps([map_lesson_to_snapshot(LESSON)]),
        }

        mapped = map_row_to_sold_abonnement(row)

        self.assertEqual(mapped.id, 11)
        self.assertIs(mapped.discount, Discount.D10)
        self.assertEqual(mapped.max_number_of_visits, 12)
        self.assertEqual(mapped.lessons, (LESSON,))

    def test_maps_refresh_token_with_person_and_auth(self):
        row = {
            "id": 5,
            "person_id": 42,
            "is_revoked": False,
            "first_name": "Anna",
            "last_name": "Petrova",
            "email": "anna@example.com",
            "role": "admin",
            "status": "blocked",
            "password_hash": None,
        }

        mapped = map_row_to_refresh_token(row)

        self.assertEqual(mapped.person.id, 42)
        self.assertIs(mapped.person.auth.role, AuthRole.ADMIN)
        self.assertIs(mapped.person.auth.status, AuthStatus.BLOCKED)

    def test_maps_refresh_token_without_auth(self):
        row = {
            "id": 5,
            "person_id": 42,
            "is_revoked": True,
            "first_name": "Anna",
            "last_name": "Petrova",
            "email": None,
            "role": None,
            "status": None,
            "password_hash": None,
        }

        mapped = map_row_to_refresh_token(row)

        self.assertTrue(mapped.is_revoked)
        self.assertIsNone(mapped.person.auth)


if __name__ == "__main__":
    unittest.main()
