"""SQLAlchemy entity models only; no business logic."""
from promocode_api.models.base import UUIDPrimaryKeyMixin, full_name
from promocode_api.models.customer import Customer
from promocode_api.models.customer_preference import CustomerPreference
from promocode_api.models.employee import Employee
from promocode_api.models.preference import Preference
from promocode_api.models.promo_code import PromoCode
from promocode_api.models.role import Role

__all__ = [
    "Customer",
    "CustomerPreference",
    "Employee",
    "Preference",
    "PromoCode",
    "Role",
    "UUIDPrimaryKeyMixin",
    "full_name",
]
