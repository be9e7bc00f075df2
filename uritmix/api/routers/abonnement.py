from __future__ import annotations

from fastapi import APIRouter, Depends

from uritmix.api.deps import get_sale_abonnement_use_case, require_role
from uritmix.api.errors import to_http_exception
from uritmix.api.schemas.abonnement import SaleAbonnementRequest, SoldAbonnementResponse
from uritmix.application.dto.abonnement import SaleAbonnementInput
from uritmix.application.dto.auth import AccessTokenPayload
from uritmix.application.use_cases.sale_abonnement import SaleAbonnementUseCase
from uritmix.domain.entities.person import AuthRole
from uritmix.domain.result import Failure


router = APIRouter()


@router.post("/v1/abonnements/sale", response_model=SoldAbonnementResponse)
async def sale_abonnement(
    req: SaleAbonnementRequest,
    _principal: AccessTokenPayload = Depends(require_role(AuthRole.ADMIN, AuthRole.MANAGER)),
    use_case: SaleAbonnementUseCase = Depends(get_sale_abonnement_use_case),
):
    result = await use_case.execute(
        SaleAbonnementInput(
            person_id=req.person_id,
            abonnement_id=req.abonnement_id,
            discount=req.discount,
        )
    )
    if isinstance(result, Failure):
        raise to_http_exception(result.error)

    output = result.value
    return SoldAbonnementResponse(
        id=output.id,
        person_id=output.person_id,
        active=output.active,
        date_sale=output.date_sale,
        date_expiration=output.date_expiration,
        price_sold=output.price_sold,
        visit_counter=output.visit_counter,
        name=output.name,
        validity=output.validity,
        number_of_visits=output.number_of_visits,
        base_price=output.base_price,
        discount=output.discount,
        lessons=[
            {
                "id": lesson.id,
                "name": lesson.name,
                "description": lesson.description,
                "trainer_id": lesson.trainer_id,
                "duration_minutes": lesson.duration_minutes,
                "base_price": lesson.base_price,
            }
            for lesson in output.lessons
        ],
    )
