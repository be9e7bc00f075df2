from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from uritmix.application.dto.abonnement import SaleAbonnementInput
from uritmix.application.use_cases.sale_abonnement import SaleAbonnementUseCase
from uritmix.domain.entities.abonnement import (
    Abonnement,
    AbonnementValidity,
    Discount,
    Lesson,
    SoldAbonnement,
)
from uritmix.domain.entities.person import AuthAccount, AuthRole, AuthStatus, Person
from uritmix.domain.errors import ErrorCode, ErrorKind
from uritmix.domain.exceptions import InvalidTierError
from uritmix.domain.result import Failure, Success


SALE_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class FakeAbonnementPort:
    def __init__(self, *abonnements: Abonnement):
        self.abonnements = {item.id: item for item in abonnements}

    async def get(self, *, abonnement_id: int) -> Abonnement | None:
        return self.abonnements.get(abonnement_id)


class FakePersonPort:
    def __init__(self, *persons: Person):
        self.persons = {item.id: item for item in persons}
        self.calls = 0

    async def get(self, *, person_id: int) -> Person | None:
        self.calls += 1
        return self.persons.get(person_id)

    async def get_by_email(self, *, email: str) -> Person | None:
        raise NotImplementedError


class FakeSoldAbonnementPort:
    def __init__(self):
        self.records: list[SoldAbonnement] = []

    async def create(self, *, record: SoldAbonnement) -> SoldAbonnement:
        created = replace(record, id=len(self.records) + 1)
        self.records.append(created)
        return created


def _abonnement(**overrides) -> Abonnement:
    values = {
        "id": 7,
        "name": "Yoga monthly",
        "base_price": 1000.0,
        "max_discount": Discount.D20,
        "validity": AbonnementValidity.ONE_MONTH,
        "max_number_of_visits": 12,
        "lessons": (
            Lesson(
                id=1,
                name="Yoga",
                description="Morning flow",
                trainer_id=3,
                duration_minutes=60,
                base_price=150.0,
            ),
        ),
    }
    values.update(overrides)
    return Abonnement(**values)


def _person() -> Person:
    return Person(
        id=42,
        first_name="Anna",
        last_name="Petrova",
        auth=AuthAccount(
            email="anna@example.com",
            role=AuthRole.EMPLOYEE,
            status=AuthStatus.ACTIVE,
            password_hash=None,
        ),
    )


def _use_case(abonnement_port, person_port, sold_port) -> SaleAbonnementUseCase:
    return SaleAbonnementUseCase(
        abonnement_port=abonnement_port,
        person_port=person_port,
        sold_abonnement_port=sold_port,
        clock=lambda: SALE_TIME,
    )


@pytest.mark.asyncio
async def test_sale_computes_price_expiration_and_snapshot():
    sold_port = FakeSoldAbonnementPort()
    use_case = _use_case(FakeAbonnementPort(_abonnement()), FakePersonPort(_person()), sold_port)

    result = await use_case.execute(
        SaleAbonnementInput(person_id=42, abonnement_id=7, discount=Discount.D10)
    )

    assert isinstance(result, Success)
    output = result.value
    assert output.id == 1
    assert output.person_id == 42
    assert output.price_sold == pytest.approx(900.0)
    assert output.date_sale == SALE_TIME
    assert output.date_expiration == datetime(2024, 2, 15, 12, 0, tzinfo=timezone.utc)
    assert output.active is True
    assert output.visit_counter == 0
    assert output.discount is Discount.D10
    assert output.name == "Yoga monthly"
    assert output.number_of_visits == 12
    assert output.base_price == 1000.0
    assert [lesson.name for lesson in output.lessons] == ["Yoga"]
    assert len(sold_port.records) == 1


@pytest.mark.asyncio
async def test_sale_rejects_discount_above_maximum_without_persisting():
    sold_port = FakeSoldAbonnementPort()
    use_case = _use_case(FakeAbonnementPort(_abonnement()), FakePersonPort(_person()), sold_port)

    result = await use_case.execute(
        SaleAbonnementInput(person_id=42, abonnement_id=7, discount=Discount.D30)
    )

    assert isinstance(result, Failure)
    assert result.error.code is ErrorCode.DISCOUNT_EXCEEDS_MAXIMUM
    assert result.error.kind is ErrorKind.POLICY_VIOLATION
    assert sold_port.records == []


@pytest.mark.asyncio
async def test_sale_never_succeeds_when_discount_ranks_above_maximum():
    for max_discount in Discount:
        for discount in Discount:
            sold_port = FakeSoldAbonnementPort()
            use_case = _use_case(
                FakeAbonnementPort(_abonnement(max_discount=max_discount)),
                FakePersonPort(_person()),
                sold_port,
            )

            result = await use_case.execute(
                SaleAbonnementInput(person_id=42, abonnement_id=7, discount=discount)
            )

            if discount.value > max_discount.value:
                assert isinstance(result, Failure)
                assert sold_port.records == []
            else:
                assert isinstance(result, Success)


@pytest.mark.asyncio
async def test_sale_reports_missing_abonnement_before_checking_person():
    person_port = FakePersonPort(_person())
    use_case = _use_case(FakeAbonnementPort(), person_port, FakeSoldAbonnementPort())

    result = await use_case.execute(
        SaleAbonnementInput(person_id=42, abonnement_id=99, discount=Discount.D0)
    )

    assert isinstance(result, Failure)
    assert result.error.code is ErrorCode.ABONNEMENT_NOT_FOUND
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert person_port.calls == 0


@pytest.mark.asyncio
async def test_sale_checks_discount_before_person_lookup():
    person_port = FakePersonPort()
    use_case = _use_case(FakeAbonnementPort(_abonnement()), person_port, FakeSoldAbonnementPort())

    result = await use_case.execute(
        SaleAbonnementInput(person_id=404, abonnement_id=7, discount=Discount.D90)
    )

    assert isinstance(result, Failure)
    assert result.error.code is ErrorCode.DISCOUNT_EXCEEDS_MAXIMUM
    assert person_port.calls == 0


@pytest.mark.asyncio
async def test_sale_reports_missing_person():
    sold_port = FakeSoldAbonnementPort()
    use_case = _use_case(FakeAbonnementPort(_abonnement()), FakePersonPort(), sold_port)

    result = await use_case.execute(
        SaleAbonnementInput(person_id=404, abonnement_id=7, discount=Discount.D5)
    )

    assert isinstance(result, Failure)
    assert result.error.code is ErrorCode.PERSON_NOT_FOUND
    assert sold_port.records == []


@pytest.mark.asyncio
async def test_snapshot_survives_later_abonnement_changes():
    abonnement_port = FakeAbonnementPort(_abonnement())
    sold_port = FakeSoldAbonnementPort()
    use_case = _use_case(abonnement_port, FakePersonPort(_person()), sold_port)

    await use_case.execute(SaleAbonnementInput(person_id=42, abonnement_id=7, discount=Discount.D0))
    abonnement_port.abonnements[7] = _abonnement(
        name="Yoga monthly (new)",
        base_price=1500.0,
        validity=AbonnementValidity.YEAR,
        max_number_of_visits=30,
        lessons=(),
    )

    record = sold_port.records[0]
    assert record.name == "Yoga monthly"
    assert record.base_price == 1000.0
    assert record.validity is AbonnementValidity.ONE_MONTH
    assert record.max_number_of_visits == 12
    assert [lesson.id for lesson in record.lessons] == [1]
    assert record.discount is Discount.D0


@pytest.mark.asyncio
async def test_sale_with_discount_outside_closed_set_is_a_contract_error():
    sold_port = FakeSoldAbonnementPort()
    use_case = _use_case(FakeAbonnementPort(_abonnement()), FakePersonPort(_person()), sold_port)

    with pytest.raises(InvalidTierError):
        await use_case.execute(SaleAbonnementInput(person_id=42, abonnement_id=7, discount=33))

    assert sold_port.records == []
