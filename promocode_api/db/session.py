"""
Declarative base shared by the entity models.
Models are only ever used as in-memory objects; no engine is created.
"""
from __future__ import annotations

from sqlalchemy.orm import declarative_base

Base = declarative_base()
