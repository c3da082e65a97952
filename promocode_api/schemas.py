"""Request and response bodies; JSON field names are camelCase."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from promocode_api.models import Customer, Employee, Preference, PromoCode, Role, full_name


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PreferenceResponse(ApiModel):
    id: UUID
    name: str

    @classmethod
    def from_entity(cls, preference: Preference) -> "PreferenceResponse":
        return cls(id=preference.id, name=preference.name)


class PromoCodeShortResponse(ApiModel):
    id: UUID
    code: str
    service_info: str
    begin_date: str
    end_date: str
    partner_name: str

    @classmethod
    def from_entity(cls, promo_code: PromoCode) -> "PromoCodeShortResponse":
        return cls(
            id=promo_code.id,
            code=promo_code.code,
            service_info=promo_code.service_info,
            # ISO 8601 rather than locale-dependent text
            begin_date=promo_code.begin_date.isoformat(),
            end_date=promo_code.end_date.isoformat(),
            partner_name=promo_code.partner_name,
        )


class CustomerShortResponse(ApiModel):
    id: UUID
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerShortResponse":
        return cls(
            id=customer.id,
            email=customer.email,
            first_name=customer.first_name,
            last_name=customer.last_name,
        )


class CustomerResponse(ApiModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    preferences: list[PreferenceResponse]
    promo_codes: list[PromoCodeShortResponse]


class CreateOrEditCustomerRequest(ApiModel):
    first_name: str
    last_name: str
    email: str
    preference_ids: list[UUID] = []


class RoleResponse(ApiModel):
    id: UUID
    name: str
    description: str | None = None

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(id=role.id, name=role.name, description=role.description)


class EmployeeShortResponse(ApiModel):
    id: UUID
    full_name: str
    email: str

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeShortResponse":
        return cls(id=employee.id, full_name=full_name(employee), email=employee.email)


class EmployeeResponse(ApiModel):
    id: UUID
    full_name: str
    email: str
    role: RoleResponse | None
    applied_promocodes_count: int

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            full_name=full_name(employee),
            email=employee.email,
            role=RoleResponse.from_entity(employee.role) if employee.role else None,
            applied_promocodes_count=employee.applied_promocodes_count,
        )


class GivePromoCodeRequest(ApiModel):
    """Issue one promo code to every customer holding the named preference."""

    service_info: str = ""
    partner_name: str
    promo_code: str
    preference: str
