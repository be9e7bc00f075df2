from __future__ import annotations

from uritmix.domain.entities.abonnement import Discount
from uritmix.domain.exceptions import InvalidTierError


DISCOUNT_MULTIPLIERS: dict[Discount, float] = {
    Discount.D0: 0.0,
    Discount.D5: 0.05,
    Discount.D10: 0.10,
    Discount.D15: 0.15,
    Discount.D20: 0.20,
    Discount.D25: 0.25,
    Discount.D30: 0.30,
    Discount.D40: 0.40,
    Discount.D50: 0.50,
    Discount.D60: 0.60,
    Discount.D70: 0.70,
    Discount.D80: 0.80,
    Discount.D90: 0.90,
}


def parse_discount(value: int) -> Discount:
    try:
        return Discount(value)
    except ValueError as exc:
        raise InvalidTierError(f"Unsupported discount: {value!r}") from exc


def discount_multiplier(discount: Discount) -> float:
    if not isinstance(discount, Discount):
        raise InvalidTierError(f"Unsupported discount: {discount!r}")
    return DISCOUNT_MULTIPLIERS[discount]


def apply_discount(base_price: float, discount: Discount) -> float:
    return base_price * (1.0 - discount_multiplier(discount))
