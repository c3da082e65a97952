"""Join record linking one customer to one preference."""
from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from promocode_api.db.session import Base
from promocode_api.models.base import UUIDPrimaryKeyMixin


class CustomerPreference(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "customer_preferences"

    # Ids are what queries filter on; the references are convenience only
    customer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
    )
    preference_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("preferences.id"),
        nullable=False,
        index=True,
    )

    customer: Mapped["Customer"] = relationship("Customer", back_populates="preferences")
    preference: Mapped["Preference"] = relationship("Preference")
