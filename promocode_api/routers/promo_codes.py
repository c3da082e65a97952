"""Thin API layer: promo code lookup and give-out by preference."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request

from promocode_api.core.errors import PreferenceNotFoundError, PromoCodeNotFoundError
from promocode_api.db.store import DataStore, get_store
from promocode_api.schemas import GivePromoCodeRequest, PromoCodeShortResponse
from promocode_api.services import PromoCodeService

router = APIRouter(prefix="/promocodes", tags=["promocodes"])


def get_promo_code_service(
    request: Request,
    store: DataStore = Depends(get_store),
) -> PromoCodeService:
    settings = request.app.state.settings
    return PromoCodeService(store, validity_days=settings.promo_code_validity_days)


@router.get("", response_model=list[PromoCodeShortResponse])
def list_promo_codes(service: PromoCodeService = Depends(get_promo_code_service)):
    return [PromoCodeShortResponse.from_entity(p) for p in service.list_promo_codes()]


@router.get("/{promo_code_id}", response_model=PromoCodeShortResponse)
def get_promo_code(
    promo_code_id: UUID,
    service: PromoCodeService = Depends(get_promo_code_service),
):
    try:
        promo_code = service.get_promo_code(promo_code_id)
    except PromoCodeNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return PromoCodeShortResponse.from_entity(promo_code)


@router.post("", response_model=list[PromoCodeShortResponse])
def give_promo_codes(
    body: GivePromoCodeRequest,
    service: PromoCodeService = Depends(get_promo_code_service),
):
    """
    Give a promo code to every customer holding the named preference.
    """
    try:
        issued = service.give_to_customers_with_preference(
            body.promo_code,
            body.partner_name,
            body.service_info,
            body.preference,
        )
    except PreferenceNotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return [PromoCodeShortResponse.from_entity(p) for p in issued]
