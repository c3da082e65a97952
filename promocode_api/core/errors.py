"""Domain error codes for the promo code API."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class ErrorCode(Enum):
    """Domain error codes."""

    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    PROMO_CODE_NOT_FOUND = "PROMO_CODE_NOT_FOUND"
    PREFERENCE_NOT_FOUND = "PREFERENCE_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class CustomerNotFoundError(DomainError):
    """Raised when a customer is not found."""

    def __init__(self, customer_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            message="Customer not found",
        )
        self.customer_id = customer_id


class PromoCodeNotFoundError(DomainError):
    """Raised when a promo code is not found."""

    def __init__(self, promo_code_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.PROMO_CODE_NOT_FOUND,
            message="Promo code not found",
        )
        self.promo_code_id = promo_code_id


class PreferenceNotFoundError(DomainError):
    """Raised when a referenced preference (by id or by name) does not exist."""

    def __init__(self, reference: UUID | str) -> None:
        super().__init__(
            code=ErrorCode.PREFERENCE_NOT_FOUND,
            message=f"Preference not found: {reference}",
        )
        self.reference = reference
