from __future__ import annotations

from datetime import datetime

from dateutil.relativedelta import relativedelta

from uritmix.domain.entities.abonnement import AbonnementValidity
from uritmix.domain.exceptions import InvalidTierError


# relativedelta clamps to the last day of the target month (Jan 31 + 1 month -> Feb 28/29).
VALIDITY_PERIODS: dict[AbonnementValidity, relativedelta] = {
    AbonnementValidity.ONE_DAY: relativedelta(days=1),
    AbonnementValidity.ONE_MONTH: relativedelta(months=1),
    AbonnementValidity.THREE_MONTHS: relativedelta(months=3),
    AbonnementValidity.HALF_YEAR: relativedelta(months=6),
    AbonnementValidity.YEAR: relativedelta(years=1),
}


def expiration_from(validity: AbonnementValidity, date_sale: datetime) -> datetime:
    period = VALIDITY_PERIODS.get(validity) if isinstance(validity, AbonnementValidity) else None
    if period is None:
        raise InvalidTierError(f"Unsupported validity: {validity!r}")
    return date_sale + period
