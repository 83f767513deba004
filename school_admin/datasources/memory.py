# school_admin/datasources/memory.py
"""In-process store acting as the entire dataset.

Mutations are visible to the next read right away. The store assumes one
writer at a time: there is no isolation or version check between
concurrent mutations.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import NotFoundError, ValidationError
from ..models.base import Record, Resource
from .base import ActionFn, DataSource

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore(DataSource):
    handles_search = False

    def __init__(self, latency: float = 0.0):
        self.latency = latency
        self._collections: Dict[str, Dict[str, Record]] = {}
        self._counters: Dict[str, int] = {}

    async def _pause(self):
        # Simulated network latency
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    def _collection(self, resource: Resource) -> Dict[str, Record]:
        return self._collections.setdefault(resource.name, {})

    def _require(self, resource: Resource, public_id: str) -> Record:
        record = self._collection(resource).get(public_id)
        if record is None:
            raise NotFoundError(resource.label, public_id)
        return record

    def _validate(self, resource: Resource, data: Dict[str, Any]) -> Record:
        try:
            return resource.model.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {resource.label.lower()}: {e}") from e

    def _insert(self, resource: Resource, payload: Dict[str, Any]) -> Record:
        number = self._counters.get(resource.name, 0) + 1
        data = dict(payload)
        data["id"] = number
        data["public_id"] = f"{resource.id_prefix}-{number:03d}"
        if resource.has_lifecycle:
            data.setdefault("is_active", True)
        if resource.timestamped:
            now = _now()
            data["created_at"] = now
            data["updated_at"] = now

        record = self._validate(resource, data)
        self._counters[resource.name] = number
        self._collection(resource)[record.public_id] = record
        return record

    def seed(self, resource: Resource, rows: Iterable[Dict[str, Any]]) -> List[Record]:
        """Load rows synchronously, assigning ids the same way ``create`` does."""
        return [self._insert(resource, row).model_copy(deep=True) for row in rows]

    def clear(self):
        self._collections.clear()
        self._counters.clear()

    def _store(self, resource: Resource, current: Record, data: Dict[str, Any]) -> Record:
        data["id"] = current.id
        data["public_id"] = current.public_id
        record = self._validate(resource, data)
        if record == current:
            return current.model_copy(deep=True)
        if resource.timestamped:
            record = record.model_copy(update={"created_at": current.created_at, "updated_at": _now()})
        self._collection(resource)[current.public_id] = record
        return record.model_copy(deep=True)

    def _merge(self, resource: Resource, public_id: str, changes: Dict[str, Any]) -> Record:
        current = self._require(resource, public_id)
        data = current.model_dump()
        data.update(changes)
        return self._store(resource, current, data)

    async def all(self, resource: Resource) -> List[Record]:
        await self._pause()
        return [record.model_copy(deep=True) for record in self._collection(resource).values()]

    async def get(self, resource: Resource, public_id: str) -> Optional[Record]:
        await self._pause()
        record = self._collection(resource).get(public_id)
        return record.model_copy(deep=True) if record is not None else None

    async def create(self, resource: Resource, payload: Dict[str, Any]) -> Record:
        await self._pause()
        record = self._insert(resource, payload)
        logger.info(f"Created {resource.label.lower()} {record.public_id}")
        return record.model_copy(deep=True)

    async def update(self, resource: Resource, public_id: str, changes: Dict[str, Any]) -> Record:
        await self._pause()
        return self._merge(resource, public_id, changes)

    async def replace(self, resource: Resource, public_id: str, payload: Dict[str, Any]) -> Record:
        await self._pause()
        current = self._require(resource, public_id)
        data = dict(payload)
        if resource.has_lifecycle:
            data.setdefault("is_active", True)
        if resource.timestamped:
            data["created_at"] = current.created_at
            data["updated_at"] = current.updated_at
        return self._store(resource, current, data)

    async def delete(self, resource: Resource, public_id: str) -> None:
        await self._pause()
        current = self._require(resource, public_id)
        if resource.soft_delete:
            self._merge(resource, public_id, {"is_active": False})
            logger.info(f"Deactivated {resource.label.lower()} {public_id}")
        else:
            del self._collection(resource)[current.public_id]
            logger.info(f"Deleted {resource.label.lower()} {public_id}")

    async def apply_action(
        self,
        resource: Resource,
        public_id: str,
        action: str,
        compute: ActionFn,
        body: Optional[Dict[str, Any]] = None,
    ) -> Record:
        await self._pause()
        current = self._require(resource, public_id)
        changes = compute(current.model_copy(deep=True))
        return self._merge(resource, public_id, changes)
