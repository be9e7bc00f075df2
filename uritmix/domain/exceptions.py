from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class InvalidTierError(DomainError, ValueError):
    """Tier fora do conjunto fechado de descontos ou validades."""
