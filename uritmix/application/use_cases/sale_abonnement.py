from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from uritmix.application.dto.abonnement import (
    SaleAbonnementInput,
    SoldAbonnementOutput,
    build_lesson_output,
)
from uritmix.application.ports.abonnement_port import AbonnementPort, SoldAbonnementPort
from uritmix.application.ports.person_port import PersonPort
from uritmix.domain.entities.abonnement import SoldAbonnement
from uritmix.domain.errors import AppError, ErrorCode, app_error
from uritmix.domain.result import Failure, Result, Success
from uritmix.domain.services.discount import apply_discount, parse_discount
from uritmix.domain.services.validity import expiration_from


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_sold_abonnement_output(record: SoldAbonnement) -> SoldAbonnementOutput:
    return SoldAbonnementOutput(
        id=record.id,
        person_id=record.person_id,
        active=record.active,
        date_sale=record.date_sale,
        date_expiration=record.date_expiration,
        price_sold=record.price_sold,
        visit_counter=record.visit_counter,
        name=record.name,
        validity=record.validity,
        number_of_visits=record.max_number_of_visits,
        base_price=record.base_price,
        discount=record.discount,
        lessons=[build_lesson_output(lesson) for lesson in record.lessons],
    )


class SaleAbonnementUseCase:
    def __init__(
        self,
        *,
        abonnement_port: AbonnementPort,
        person_port: PersonPort,
        sold_abonnement_port: SoldAbonnementPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._abonnement_port = abonnement_port
        self._person_port = person_port
        self._sold_abonnement_port = sold_abonnement_port
        self._clock = clock

    async def execute(self, command: SaleAbonnementInput) -> Result[SoldAbonnementOutput, AppError]:
        discount = parse_discount(command.discount)
        abonnement = await self._abonnement_port.get(abonnement_id=command.abonnement_id)
        if abonnement is None:
            logger.warning("sale_abonnement: abonnement not found abonnement_id=%s", command.abonnement_id)
            return Failure(app_error(ErrorCode.ABONNEMENT_NOT_FOUND))

        if discount.value > abonnement.max_discount.value:
            logger.warning(
                "sale_abonnement: discount=%s exceeds max_discount=%s abonnement_id=%s",
                discount.value,
                abonnement.max_discount.value,
                abonnement.id,
            )
            return Failure(app_error(ErrorCode.DISCOUNT_EXCEEDS_MAXIMUM))

        person = await self._person_port.get(person_id=command.person_id)
        if person is None:
            logger.warning("sale_abonnement: person not found person_id=%s", command.person_id)
            return Failure(app_error(ErrorCode.PERSON_NOT_FOUND))

        date_sale = self._clock()
        record = SoldAbonnement(
            id=None,
            person_id=person.id,
            active=True,
            date_sale=date_sale,
            date_expiration=expiration_from(abonnement.validity, date_sale),
            price_sold=apply_discount(abonnement.base_price, discount),
            discount=discount,
            visit_counter=0,
            name=abonnement.name,
            validity=abonnement.validity,
            max_number_of_visits=abonnement.max_number_of_visits,
            base_price=abonnement.base_price,
            lessons=tuple(abonnement.lessons),
        )
        created = await self._sold_abonnement_port.create(record=record)
        logger.info(
            "sale_abonnement: sold id=%s person_id=%s abonnement_id=%s price_sold=%s",
            created.id,
            created.person_id,
            abonnement.id,
            created.price_sold,
        )
        return Success(build_sold_abonnement_output(created))
