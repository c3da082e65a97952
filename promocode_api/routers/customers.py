"""Thin API layer: customer CRUD with preference links."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from promocode_api.core.errors import CustomerNotFoundError, PreferenceNotFoundError
from promocode_api.db.store import DataStore, get_store
from promocode_api.schemas import (
    CreateOrEditCustomerRequest,
    CustomerResponse,
    CustomerShortResponse,
    PreferenceResponse,
    PromoCodeShortResponse,
)
from promocode_api.services import CustomerDetails, CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(store: DataStore = Depends(get_store)) -> CustomerService:
    return CustomerService(store)


def _to_response(details: CustomerDetails) -> CustomerResponse:
    customer = details.customer
    return CustomerResponse(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        preferences=[PreferenceResponse.from_entity(p) for p in details.preferences],
        promo_codes=[PromoCodeShortResponse.from_entity(p) for p in details.promo_codes],
    )


@router.get("", response_model=list[CustomerShortResponse])
def list_customers(service: CustomerService = Depends(get_customer_service)):
    """Short data of all customers."""
    return [CustomerShortResponse.from_entity(c) for c in service.list_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    """Full customer data: preferences and promo codes."""
    try:
        details = service.get_customer(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return _to_response(details)


@router.post("", response_model=CustomerResponse)
def create_customer(
    body: CreateOrEditCustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer linked to the given preferences."""
    try:
        customer = service.create_customer(
            body.first_name,
            body.last_name,
            body.email,
            body.preference_ids,
        )
    except PreferenceNotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _to_response(service.get_customer(customer.id))


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_customer(
    customer_id: UUID,
    body: CreateOrEditCustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Replace customer data and preference links."""
    try:
        service.update_customer(
            customer_id,
            body.first_name,
            body.last_name,
            body.email,
            body.preference_ids,
        )
    except PreferenceNotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except CustomerNotFoundError as e:
        # Unknown ids are a 404 here rather than a server fault
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    """
    Delete customer, then its promo codes and preference links.
    """
    try:
        service.delete_customer(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
