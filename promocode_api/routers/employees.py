"""Thin API layer: employees and roles (read only)."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from promocode_api.db.store import DataStore, get_store
from promocode_api.schemas import EmployeeResponse, EmployeeShortResponse, RoleResponse

router = APIRouter(tags=["employees"])


@router.get("/employees", response_model=list[EmployeeShortResponse])
def list_employees(store: DataStore = Depends(get_store)):
    return [EmployeeShortResponse.from_entity(e) for e in store.employees.get_all()]


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: UUID, store: DataStore = Depends(get_store)):
    """Employee with role and applied promo code count."""
    employee = store.employees.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return EmployeeResponse.from_entity(employee)


@router.get("/roles", response_model=list[RoleResponse])
def list_roles(store: DataStore = Depends(get_store)):
    return [RoleResponse.from_entity(r) for r in store.roles.get_all()]
