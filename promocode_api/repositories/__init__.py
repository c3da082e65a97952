from promocode_api.repositories.interfaces import Predicate, Repository
from promocode_api.repositories.memory_repo import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "Predicate",
    "Repository",
]
