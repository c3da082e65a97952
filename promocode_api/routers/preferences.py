"""Thin API layer: preference catalog."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from promocode_api.db.store import DataStore, get_store
from promocode_api.schemas import PreferenceResponse

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=list[PreferenceResponse])
def list_preferences(store: DataStore = Depends(get_store)):
    return [PreferenceResponse.from_entity(p) for p in store.preferences.get_all()]
