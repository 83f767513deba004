# school_admin/datasources/base.py
"""Data source abstraction the services are written against."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from ..models.base import Record, Resource
from ..schemas.filters import SearchFilters
from ..schemas.pagination import PaginatedResponse, PaginationParams

# Computes the field changes for an action from the current record. May raise.
ActionFn = Callable[[Record], Dict[str, Any]]


class DataSource(ABC):
    """Backing store for every entity collection.

    Payload dicts passed in are keyed by attribute name (``first_name``).
    ``update`` merges, ``replace`` overwrites every field.
    """

    # True when the source runs filter, sort and paging itself
    handles_search: bool = False

    @abstractmethod
    async def all(self, resource: Resource) -> List[Record]:
        """Every record of the collection in storage order, inactive ones included."""

    async def search(
        self,
        resource: Resource,
        filters: SearchFilters,
        pagination: PaginationParams,
    ) -> PaginatedResponse:
        raise NotImplementedError(f"{type(self).__name__} does not push searches down")

    @abstractmethod
    async def get(self, resource: Resource, public_id: str) -> Optional[Record]:
        """Record by public id, or None."""

    @abstractmethod
    async def create(self, resource: Resource, payload: Dict[str, Any]) -> Record:
        ...

    @abstractmethod
    async def update(self, resource: Resource, public_id: str, changes: Dict[str, Any]) -> Record:
        ...

    @abstractmethod
    async def replace(self, resource: Resource, public_id: str, payload: Dict[str, Any]) -> Record:
        ...

    @abstractmethod
    async def delete(self, resource: Resource, public_id: str) -> None:
        ...

    @abstractmethod
    async def apply_action(
        self,
        resource: Resource,
        public_id: str,
        action: str,
        compute: ActionFn,
        body: Optional[Dict[str, Any]] = None,
    ) -> Record:
        """Run a named narrow mutation (``confirm``, ``student-count``...)."""

    async def close(self) -> None:
        return None
