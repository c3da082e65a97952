"""
Hard-coded seed data for the in-memory store.
build_seed() returns new objects on every call so stores never share state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from promocode_api.models import (
    Customer,
    CustomerPreference,
    Employee,
    Preference,
    PromoCode,
    Role,
)

ADMIN_ROLE_ID = UUID("53729686-a368-4eeb-8bfa-cc69b6050d02")
PARTNER_MANAGER_ROLE_ID = UUID("b0ae7aac-5493-45cd-ad16-87426a5e7665")

OWNER_EMPLOYEE_ID = UUID("451533d5-d8d5-4a11-9c7b-eb9f14e1a32f")
PARTNER_MANAGER_EMPLOYEE_ID = UUID("f766e2bf-340a-46ea-bff3-f1700b435895")

THEATRE_PREFERENCE_ID = UUID("ef7f299f-92d7-459f-896e-078ed53ef99c")
FAMILY_PREFERENCE_ID = UUID("c4bda62e-fc74-4256-a956-4760b3858cbd")
CHILDREN_PREFERENCE_ID = UUID("76324c47-68d2-472d-abb8-33cfa8cc0c84")

CUSTOMER_ID = UUID("a6c8c6b1-4349-45b0-ab31-244740aaf0f0")

PROMO_CODE_IDS = (
    UUID("1e4f3c0a-5b8d-4c1e-9a6b-2d7f8e9a0b1c"),
    UUID("7a2b9c4d-3e5f-4a6b-8c7d-9e0f1a2b3c4d"),
)

_CUSTOMER_PREFERENCE_IDS = (
    UUID("0b6f1d2e-8c3a-4f5b-9d7e-1a2b3c4d5e6f"),
    UUID("5c9e2a7b-1d4f-4e8a-b6c3-7f8e9d0a1b2c"),
)


@dataclass
class SeedData:
    roles: list[Role] = field(default_factory=list)
    employees: list[Employee] = field(default_factory=list)
    preferences: list[Preference] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    customer_preferences: list[CustomerPreference] = field(default_factory=list)
    promo_codes: list[PromoCode] = field(default_factory=list)


def build_seed() -> SeedData:
    admin = Role(id=ADMIN_ROLE_ID, name="Admin", description="Administrator")
    partner_manager = Role(
        id=PARTNER_MANAGER_ROLE_ID,
        name="PartnerManager",
        description="Partner manager",
    )

    owner = Employee(
        id=OWNER_EMPLOYEE_ID,
        email="owner@somemail.ru",
        first_name="Ivan",
        last_name="Sergeev",
        role_id=admin.id,
        role=admin,
        applied_promocodes_count=5,
    )
    manager = Employee(
        id=PARTNER_MANAGER_EMPLOYEE_ID,
        email="andreev@somemail.ru",
        first_name="Petr",
        last_name="Andreev",
        role_id=partner_manager.id,
        role=partner_manager,
        applied_promocodes_count=10,
    )

    theatre = Preference(id=THEATRE_PREFERENCE_ID, name="Theatre")
    family = Preference(id=FAMILY_PREFERENCE_ID, name="Family")
    children = Preference(id=CHILDREN_PREFERENCE_ID, name="Children")

    customer = Customer(
        id=CUSTOMER_ID,
        email="ivan_sergeev@mail.ru",
        first_name="Ivan",
        last_name="Petrov",
    )
    links = [
        CustomerPreference(
            id=link_id,
            customer_id=customer.id,
            customer=customer,
            preference_id=preference.id,
            preference=preference,
        )
        for link_id, preference in zip(_CUSTOMER_PREFERENCE_IDS, (family, theatre))
    ]

    promo_codes = [
        PromoCode(
            id=PROMO_CODE_IDS[0],
            code="ALLFOR100",
            service_info="",
            begin_date=datetime(2020, 7, 9, tzinfo=timezone.utc),
            end_date=datetime(2020, 8, 9, tzinfo=timezone.utc),
            partner_name="SuperToys",
            customer_id=customer.id,
            customer=customer,
            employee_id=manager.id,
            employee=manager,
            preference_id=family.id,
            preference=family,
        ),
        PromoCode(
            id=PROMO_CODE_IDS[1],
            code="PROMO 200",
            service_info="",
            begin_date=datetime(2020, 8, 9, tzinfo=timezone.utc),
            end_date=datetime(2020, 9, 9, tzinfo=timezone.utc),
            partner_name="A Cat For Everyone",
            customer_id=customer.id,
            customer=customer,
            employee_id=owner.id,
            employee=owner,
            preference_id=family.id,
            preference=family,
        ),
    ]

    return SeedData(
        roles=[admin, partner_manager],
        employees=[owner, manager],
        preferences=[theatre, family, children],
        customers=[customer],
        customer_preferences=links,
        promo_codes=promo_codes,
    )
