"""
In-memory data store: one repository per entity type.
A store is owned by the application instance and reaches handlers via get_store().
"""
from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from promocode_api.db.fixtures import SeedData, build_seed
from promocode_api.models import (
    Customer,
    CustomerPreference,
    Employee,
    Preference,
    PromoCode,
    Role,
)
from promocode_api.repositories import InMemoryRepository, Repository


@dataclass
class DataStore:
    roles: Repository[Role] = field(default_factory=InMemoryRepository)
    employees: Repository[Employee] = field(default_factory=InMemoryRepository)
    preferences: Repository[Preference] = field(default_factory=InMemoryRepository)
    customers: Repository[Customer] = field(default_factory=InMemoryRepository)
    customer_preferences: Repository[CustomerPreference] = field(default_factory=InMemoryRepository)
    promo_codes: Repository[PromoCode] = field(default_factory=InMemoryRepository)

    @classmethod
    def from_seed(cls, seed: SeedData) -> "DataStore":
        return cls(
            roles=InMemoryRepository(seed.roles),
            employees=InMemoryRepository(seed.employees),
            preferences=InMemoryRepository(seed.preferences),
            customers=InMemoryRepository(seed.customers),
            customer_preferences=InMemoryRepository(seed.customer_preferences),
            promo_codes=InMemoryRepository(seed.promo_codes),
        )

    @classmethod
    def seeded(cls) -> "DataStore":
        """Fresh store filled from the fixture set."""
        return cls.from_seed(build_seed())

    def counts(self) -> dict[str, int]:
        return {
            "roles": len(self.roles.get_all()),
            "employees": len(self.employees.get_all()),
            "preferences": len(self.preferences.get_all()),
            "customers": len(self.customers.get_all()),
            "customer_preferences": len(self.customer_preferences.get_all()),
            "promo_codes": len(self.promo_codes.get_all()),
        }


def get_store(request: Request) -> DataStore:
    """FastAPI dependency: the store owned by the running application."""
    return request.app.state.store
