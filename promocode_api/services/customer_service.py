"""
Customer service: orchestrates the customer, preference, link and promo code
repositories. Raises domain errors; knows nothing about HTTP.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterable

from promocode_api.core.errors import CustomerNotFoundError, PreferenceNotFoundError
from promocode_api.core.logger import get_logger
from promocode_api.db.store import DataStore
from promocode_api.models import Customer, CustomerPreference, Preference, PromoCode

logger = get_logger(__name__)


@dataclass
class CustomerDetails:
    customer: Customer
    preferences: list[Preference]
    promo_codes: list[PromoCode]


class CustomerService:
    def __init__(self, store: DataStore) -> None:
        self._store = store

    def list_customers(self) -> list[Customer]:
        return self._store.customers.get_all()

    def get_customer(self, customer_id: uuid.UUID) -> CustomerDetails:
        """Customer with the preferences it links to and the promo codes it owns.

        Raises:
            CustomerNotFoundError: If no customer has this id.
        """
        customer = self._store.customers.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        links = self._store.customer_preferences.get_where(lambda x: x.customer_id == customer.id)
        preference_ids = {link.preference_id for link in links}
        preferences = self._store.preferences.get_where(lambda x: x.id in preference_ids)
        promo_codes = self._store.promo_codes.get_where(lambda x: x.customer_id == customer.id)
        return CustomerDetails(customer=customer, preferences=preferences, promo_codes=promo_codes)

    def create_customer(
        self,
        first_name: str,
        last_name: str,
        email: str,
        preference_ids: Iterable[uuid.UUID],
    ) -> Customer:
        """
        Raises:
            PreferenceNotFoundError: If any preference id is unknown; nothing is stored.
        """
        preferences = self._resolve_preferences(preference_ids)
        customer = Customer(
            id=uuid.uuid4(),
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        links = self._link(customer, preferences)
        customer.preferences = links
        self._store.customers.add(customer)
        for link in links:
            self._store.customer_preferences.add(link)
        logger.info("Created customer %s with %d preference(s)", customer.id, len(links))
        return customer

    def update_customer(
        self,
        customer_id: uuid.UUID,
        first_name: str,
        last_name: str,
        email: str,
        preference_ids: Iterable[uuid.UUID],
    ) -> Customer:
        """
        Replace contact data and preference links of an existing customer.
        Preferences are resolved before anything is touched.

        Raises:
            PreferenceNotFoundError: If any preference id is unknown.
            CustomerNotFoundError: If no customer has this id.
        """
        preferences = self._resolve_preferences(preference_ids)
        customer = self._store.customers.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        # Everything that can fail happens before stored links are touched
        links = self._link(customer, preferences)

        old_links = self._store.customer_preferences.get_where(lambda x: x.customer_id == customer_id)
        self._store.customer_preferences.remove_range(old_links)
        for link in links:
            self._store.customer_preferences.add(link)

        customer.first_name = first_name
        customer.last_name = last_name
        customer.email = email
        customer.preferences = links
        self._store.customers.update(customer)
        logger.info("Updated customer %s", customer_id)
        return customer

    def delete_customer(self, customer_id: uuid.UUID) -> None:
        """
        Delete the customer, then its promo codes, then its preference links.
        The three steps are not atomic.

        Raises:
            CustomerNotFoundError: If no customer has this id.
        """
        customer = self._store.customers.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        self._store.customers.delete(customer)

        promo_codes = self._store.promo_codes.get_where(lambda x: x.customer_id == customer_id)
        for promo_code in promo_codes:
            self._store.promo_codes.delete(promo_code)

        links = self._store.customer_preferences.get_where(lambda x: x.customer_id == customer_id)
        for link in links:
            self._store.customer_preferences.delete(link)

        logger.info(
            "Deleted customer %s with %d promo code(s) and %d preference link(s)",
            customer_id,
            len(promo_codes),
            len(links),
        )

    def _resolve_preferences(self, preference_ids: Iterable[uuid.UUID]) -> list[Preference]:
        preferences = []
        for preference_id in preference_ids:
            preference = self._store.preferences.get_by_id(preference_id)
            if preference is None:
                logger.warning("Rejected unknown preference id %s", preference_id)
                raise PreferenceNotFoundError(preference_id)
            preferences.append(preference)
        return preferences

    @staticmethod
    def _link(customer: Customer, preferences: list[Preference]) -> list[CustomerPreference]:
        # The customer reference is filled in by assigning customer.preferences
        return [
            CustomerPreference(
                id=uuid.uuid4(),
                customer_id=customer.id,
                preference_id=p.id,
                preference=p,
            )
            for p in preferences
        ]
