from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    POLICY_VIOLATION = "policy_violation"
    TOKEN_INVALID = "token_invalid"
    TOKEN_REVOKED = "token_revoked"
    ACCOUNT_BLOCKED = "account_blocked"
    ACCOUNT_NOT_ACTIVATED = "account_not_activated"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_INPUT = "invalid_input"


class ErrorCode(str, Enum):
    ABONNEMENT_NOT_FOUND = "abonnement_not_found"
    PERSON_NOT_FOUND = "person_not_found"
    DISCOUNT_EXCEEDS_MAXIMUM = "discount_exceeds_maximum"
    REFRESH_TOKEN_INVALID = "refresh_token_invalid"
    REFRESH_TOKEN_REVOKED = "refresh_token_revoked"
    ACCOUNT_BLOCKED = "account_blocked"
    ACCOUNT_NOT_ACTIVATED = "account_not_activated"
    INVALID_CREDENTIALS = "invalid_credentials"


ERROR_KINDS: dict[ErrorCode, ErrorKind] = {
    ErrorCode.ABONNEMENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.PERSON_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.DISCOUNT_EXCEEDS_MAXIMUM: ErrorKind.POLICY_VIOLATION,
    ErrorCode.REFRESH_TOKEN_INVALID: ErrorKind.TOKEN_INVALID,
    ErrorCode.REFRESH_TOKEN_REVOKED: ErrorKind.TOKEN_REVOKED,
    ErrorCode.ACCOUNT_BLOCKED: ErrorKind.ACCOUNT_BLOCKED,
    ErrorCode.ACCOUNT_NOT_ACTIVATED: ErrorKind.ACCOUNT_NOT_ACTIVATED,
    ErrorCode.INVALID_CREDENTIALS: ErrorKind.INVALID_CREDENTIALS,
}

DEFAULT_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ABONNEMENT_NOT_FOUND: "Abonnement not found.",
    ErrorCode.PERSON_NOT_FOUND: "Person not found.",
    ErrorCode.DISCOUNT_EXCEEDS_MAXIMUM: "Discount greater than max discount.",
    ErrorCode.REFRESH_TOKEN_INVALID: "Refresh token not valid.",
    ErrorCode.REFRESH_TOKEN_REVOKED: "Refresh token has been revoked.",
    ErrorCode.ACCOUNT_BLOCKED: "User is blocked.",
    ErrorCode.ACCOUNT_NOT_ACTIVATED: "User is not activated.",
    ErrorCode.INVALID_CREDENTIALS: "Invalid credentials.",
}


@dataclass(frozen=True)
class AppError:
    """Erro de negocio devolvido ao chamador.

    ``code`` e a chave de localizacao; ``message`` e o texto padrao em ingles.
    """

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return ERROR_KINDS[self.code]


def app_error(code: ErrorCode) -> AppError:
    return AppError(code=code, message=DEFAULT_MESSAGES[code])
