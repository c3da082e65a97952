"""Unit tests for the services, store and fixtures without HTTP."""
import uuid

import pytest

from main import create_app
from promocode_api.core.config import Settings
from promocode_api.core.errors import (
    CustomerNotFoundError,
    ErrorCode,
    PreferenceNotFoundError,
    PromoCodeNotFoundError,
)
from promocode_api.db.fixtures import CUSTOMER_ID, FAMILY_PREFERENCE_ID, build_seed
from promocode_api.db.store import DataStore
from promocode_api.models import Customer, full_name
from promocode_api.services import CustomerService, PromoCodeService


class TestCustomerService:
    def test_get_customer_not_found_raises_error(self, store):
        with pytest.raises(CustomerNotFoundError) as exc:
            CustomerService(store).get_customer(uuid.uuid4())
        assert exc.value.code is ErrorCode.CUSTOMER_NOT_FOUND

    def test_create_links_both_sides(self, store):
        customer = CustomerService(store).create_customer(
            "Anna", "Ivanova", "anna@mail.ru", [FAMILY_PREFERENCE_ID]
        )
        assert [link.preference.name for link in customer.preferences] == ["Family"]
        assert customer.preferences[0].customer is customer
        assert store.customers.get_by_id(customer.id) is customer

    def test_create_unknown_preference_raises_error(self, store):
        missing = uuid.uuid4()
        with pytest.raises(PreferenceNotFoundError) as exc:
            CustomerService(store).create_customer("A", "B", "c@d.e", [missing])
        assert exc.value.reference == missing

    def test_update_checks_preferences_before_customer(self, store):
        """An unknown preference is reported even when the customer is unknown too."""
        with pytest.raises(PreferenceNotFoundError):
            CustomerService(store).update_customer(uuid.uuid4(), "A", "B", "c@d.e", [uuid.uuid4()])

    def test_delete_customer(self, store):
        CustomerService(store).delete_customer(CUSTOMER_ID)
        assert store.customers.get_all() == []
        assert store.promo_codes.get_all() == []
        assert store.customer_preferences.get_all() == []


class TestPromoCodeService:
    def test_get_missing_raises_error(self, store):
        with pytest.raises(PromoCodeNotFoundError):
            PromoCodeService(store).get_promo_code(uuid.uuid4())

    def test_issued_code_is_owned_by_customer(self, store):
        issued = PromoCodeService(store, validity_days=7).give_to_customers_with_preference(
            "FAM7", "Zoo", "", "Family"
        )
        assert len(issued) == 1
        customer = store.customers.get_by_id(CUSTOMER_ID)
        assert issued[0] in customer.promo_codes
        assert issued[0].customer_id == CUSTOMER_ID
        assert (issued[0].end_date - issued[0].begin_date).days == 7


class TestStoreAndFixtures:
    def test_seeds_are_independent(self):
        first, second = DataStore.seeded(), DataStore.seeded()
        first.customers.delete(first.customers.get_all()[0])
        assert len(second.customers.get_all()) == 1

    def test_seed_customer_owns_seed_records(self):
        seed = build_seed()
        customer = seed.customers[0]
        assert customer.preferences == seed.customer_preferences
        assert customer.promo_codes == seed.promo_codes

    def test_counts(self, store):
        assert store.counts() == {
            "roles": 2,
            "employees": 2,
            "preferences": 3,
            "customers": 1,
            "customer_preferences": 2,
            "promo_codes": 2,
        }

    def test_unseeded_app_is_empty(self):
        app = create_app(settings=Settings(seed_fixtures=False))
        assert app.state.store.customers.get_all() == []

    def test_full_name_is_derived(self):
        customer = Customer(id=uuid.uuid4(), first_name="Ivan", last_name="Petrov", email="x")
        assert full_name(customer) == "Ivan Petrov"
        customer.last_name = "Sidorov"
        assert full_name(customer) == "Ivan Sidorov"


def test_cors_origins_list():
    assert Settings(cors_origins="*").cors_origins_list() == ["*"]
    assert Settings(cors_origins="https://a.com, https://b.com").cors_origins_list() == [
        "https://a.com",
        "https://b.com",
    ]


class TestUpdateFailures:
    def test_failed_update_after_resolution_keeps_links_and_fields(self, store, monkeypatch):
        """A failure once preferences resolve leaves stored links and contact data as they were."""
        service = CustomerService(store)
        links_before = store.customer_preferences.get_all()

        def broken_link(customer, preferences):
            raise RuntimeError("link construction failed")

        monkeypatch.setattr(CustomerService, "_link", staticmethod(broken_link))
        with pytest.raises(RuntimeError):
            service.update_customer(CUSTOMER_ID, "New", "Name", "new@mail.ru", [FAMILY_PREFERENCE_ID])

        assert store.customer_preferences.get_all() == links_before
        customer = store.customers.get_by_id(CUSTOMER_ID)
        assert customer.first_name == "Ivan"
        assert customer.email == "ivan_sergeev@mail.ru"
        assert {p.name for p in service.get_customer(CUSTOMER_ID).preferences} == {"Family", "Theatre"}

    def test_update_sets_links_on_customer(self, store):
        customer = CustomerService(store).update_customer(
            CUSTOMER_ID, "Ivan", "Petrov", "ivan@mail.ru", [FAMILY_PREFERENCE_ID]
        )
        assert len(customer.preferences) == 1
        assert customer.preferences[0].customer is customer
        assert store.customer_preferences.get_all() == list(customer.preferences)


class TestPromoCodeCollection:
    def test_two_give_outs_accumulate_on_customer(self, store):
        service = PromoCodeService(store)
        first = service.give_to_customers_with_preference("FAM1", "Zoo", "", "Family")
        second = service.give_to_customers_with_preference("FAM2", "Zoo", "", "Family")

        customer = store.customers.get_by_id(CUSTOMER_ID)
        assert len(customer.promo_codes) == 4
        assert first[0] in customer.promo_codes
        assert second[0] in customer.promo_codes
        assert [p.code for p in service.list_promo_codes()][-2:] == ["FAM1", "FAM2"]

    def test_seed_collections_are_lists(self):
        customer = build_seed().customers[0]
        assert len(customer.promo_codes) == 2
        assert len(customer.preferences) == 2
