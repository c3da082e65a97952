"""Preference entity: a category label customers can subscribe to."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from promocode_api.db.session import Base
from promocode_api.models.base import UUIDPrimaryKeyMixin


class Preference(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "preferences"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
