"""Base mixins and helpers shared by the entity models."""
from __future__ import annotations

import uuid
from typing import Protocol

from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped, mapped_column


def gen_uuid() -> uuid.UUID:
    return uuid.uuid4()


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=gen_uuid,
    )


class _Named(Protocol):
    first_name: str
    last_name: str


def full_name(person: _Named) -> str:
    """Display name derived from first and last name; never stored."""
    return f"{person.first_name} {person.last_name}"
