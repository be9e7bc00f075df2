from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    SmallInteger,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from uritmix.infrastructure.db.engine import Base


class PersonModel(Base):
    __tablename__ = "person"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)


class AuthModel(Base):
    __tablename__ = "auth"
    __table_args__ = ({"schema": "public"},)

    person_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.person.id"), primary_key=True)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'not_activated'"))
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)


class RefreshTokenModel(Base):
    __tablename__ = "refresh_token"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.person.id"), nullable=False, index=True)
    is_revoked: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class LessonModel(Base):
    __tablename__ = "lesson"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    trainer_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.person.id"), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    base_price: Mapped[float] = mapped_column(Float, nullable=False)


class AbonnementModel(Base):
    __tablename__ = "abonnement"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    base_price: Mapped[float] = mapped_column(Float, nullable=False)
    max_discount: Mapped[int] = mapped_column(SmallInteger, nullable=False, server_default=text("0"))
    validity: Mapped[str] = mapped_column(Text, nullable=False)
    number_of_visits: Mapped[int] = mapped_column(Integer, nullable=False)


class AbonnementLessonModel(Base):
    __tablename__ = "abonnement_lesson"
    __table_args__ = ({"schema": "public"},)

    abonnement_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.abonnement.id"), primary_key=True)
    lesson_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.lesson.id"), primary_key=True)


class SoldAbonnementModel(Base):
    __tablename__ = "sold_abonnement"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("public.person.id"), nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    date_sale: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    date_expiration: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    price_sold: Mapped[float] = mapped_column(Float, nullable=False)
    discount: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    visit_counter: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    # Snapshot of the abonnement at the moment of sale.
    name: Mapped[str] = mapped_column(Text, nullable=False)
    validity: Mapped[str] = mapped_column(Text, nullable=False)
    number_of_visits: Mapped[int] = mapped_column(Integer, nullable=False)
    base_price: Mapped[float] = mapped_column(Float, nullable=False)
    lessons: Mapped[list] = mapped_column(JSONB, nullable=False, server_default=text("'[]'::jsonb"))
