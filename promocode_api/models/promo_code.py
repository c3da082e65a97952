"""Promo code issued by an employee to a customer for one preference."""
from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from promocode_api.db.session import Base
from promocode_api.models.base import UUIDPrimaryKeyMixin


class PromoCode(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "promo_codes"

    code: Mapped[str] = mapped_column(String(100), nullable=False)
    service_info: Mapped[str] = mapped_column(Text, nullable=False, default="")
    begin_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    partner_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Nullable until the code is given to a customer
    customer_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("customers.id"),
        nullable=True,
        index=True,
    )
    employee_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("employees.id"),
        nullable=True,
    )
    preference_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("preferences.id"),
        nullable=False,
    )

    customer: Mapped["Customer | None"] = relationship("Customer", back_populates="promo_codes")
    employee: Mapped["Employee | None"] = relationship("Employee")
    preference: Mapped["Preference"] = relationship("Preference")
