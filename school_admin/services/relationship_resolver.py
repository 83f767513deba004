# school_admin/services/relationship_resolver.py
"""Turns lists of public ids into the records they point to.

Used wherever a record holds references, e.g. a student's tutors. Ids
are resolved in the order given, each at most once, reusing a caller
supplied cache. Ids that do not resolve are left out of the result and
reported through ``resolve_with_misses``.
"""
import asyncio
import logging
from typing import Generic, Iterable, List, MutableMapping, NamedTuple, Optional, TypeVar

from .base_service import BaseService
from ..models.base import Record
from ..models.student import RelationshipRef

T = TypeVar('T', bound=Record)

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    records: List[Record]
    missing: List[str]


class RelationshipResolver(Generic[T]):
    def __init__(self, service: BaseService[T]):
        self.service = service

    async def resolve_with_misses(
        self,
        ids: Iterable[str],
        cache: Optional[MutableMapping[str, T]] = None,
    ) -> Resolution:
        cache = cache if cache is not None else {}
        ordered = list(dict.fromkeys(ids))

        to_fetch = [public_id for public_id in ordered if public_id not in cache]
        fetched = await asyncio.gather(*(self.service.get_by_id(public_id) for public_id in to_fetch))

        for public_id, record in zip(to_fetch, fetched):
            if record is not None:
                cache[public_id] = record

        records: List[T] = []
        missing: List[str] = []
        for public_id in ordered:
            record = cache.get(public_id)
            if record is None:
                missing.append(public_id)
            else:
                records.append(record)

        if missing:
            logger.warning(f"Unresolved {self.service.resource.name} references: {', '.join(missing)}")
        return Resolution(records=records, missing=missing)

    async def resolve(
        self,
        ids: Iterable[str],
        cache: Optional[MutableMapping[str, T]] = None,
    ) -> List[T]:
        resolution = await self.resolve_with_misses(ids, cache)
        return resolution.records

    async def resolve_refs(
        self,
        refs: Iterable[RelationshipRef],
        cache: Optional[MutableMapping[str, T]] = None,
    ) -> List[T]:
        return await self.resolve((ref.public_id for ref in refs), cache)
