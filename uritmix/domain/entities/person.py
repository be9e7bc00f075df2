from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AuthRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class AuthStatus(str, Enum):
    NOT_ACTIVATED = "not_activated"
    ACTIVE = "active"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class AuthAccount:
    email: str
    role: AuthRole
    status: AuthStatus
    password_hash: str | None


@dataclass(frozen=True)
class Person:
    id: int
    first_name: str
    last_name: str
    auth: AuthAccount | None


@dataclass(frozen=True)
class RefreshToken:
    id: int | None
    person_id: int
    is_revoked: bool
    person: Person | None = None
