"""Employee entity."""
from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from promocode_api.db.session import Base
from promocode_api.models.base import UUIDPrimaryKeyMixin


class Employee(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)

    role_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("roles.id"), nullable=True)
    applied_promocodes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # No back-collection on Role
    role: Mapped["Role | None"] = relationship("Role")
