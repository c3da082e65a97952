"""Promo code lookup and give-out to customers by preference."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from promocode_api.core.errors import PreferenceNotFoundError, PromoCodeNotFoundError
from promocode_api.core.logger import get_logger
from promocode_api.db.store import DataStore
from promocode_api.models import PromoCode

logger = get_logger(__name__)


class PromoCodeService:
    def __init__(self, store: DataStore, validity_days: int = 30) -> None:
        self._store = store
        self._validity = timedelta(days=validity_days)

    def list_promo_codes(self) -> list[PromoCode]:
        return self._store.promo_codes.get_all()

    def get_promo_code(self, promo_code_id: uuid.UUID) -> PromoCode:
        """
        Raises:
            PromoCodeNotFoundError: If no promo code has this id.
        """
        promo_code = self._store.promo_codes.get_by_id(promo_code_id)
        if promo_code is None:
            raise PromoCodeNotFoundError(promo_code_id)
        return promo_code

    def give_to_customers_with_preference(
        self,
        code: str,
        partner_name: str,
        service_info: str,
        preference_name: str,
    ) -> list[PromoCode]:
        """
        Issue ``code`` to every customer linked to the preference named
        ``preference_name``. Returns the created promo codes (possibly none).

        Raises:
            PreferenceNotFoundError: If no preference has this name.
        """
        preference = self._store.preferences.get_first_where(lambda x: x.name == preference_name)
        if preference is None:
            logger.warning("Rejected give-out for unknown preference %r", preference_name)
            raise PreferenceNotFoundError(preference_name)

        links = self._store.customer_preferences.get_where(lambda x: x.preference_id == preference.id)
        customers = self._store.customers.get_range_by_ids(link.customer_id for link in links)

        begin = datetime.now(timezone.utc)
        issued = []
        for customer in customers:
            promo_code = PromoCode(
                id=uuid.uuid4(),
                code=code,
                service_info=service_info,
                begin_date=begin,
                end_date=begin + self._validity,
                partner_name=partner_name,
                customer_id=customer.id,
                customer=customer,
                preference_id=preference.id,
                preference=preference,
            )
            self._store.promo_codes.add(promo_code)
            issued.append(promo_code)

        logger.info(
            "Issued promo code %r to %d customer(s) with preference %r",
            code,
            len(issued),
            preference_name,
        )
        return issued
