"""Customer entity: contact data, preference links and owned promo codes."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from promocode_api.db.session import Base
from promocode_api.models.base import UUIDPrimaryKeyMixin


class Customer(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "customers"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)

    # Dependents are removed by the service layer, not by cascade
    preferences: Mapped[list["CustomerPreference"]] = relationship(
        "CustomerPreference",
        back_populates="customer",
    )
    promo_codes: Mapped[list["PromoCode"]] = relationship(
        "PromoCode",
        back_populates="customer",
    )
