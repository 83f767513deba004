# school_admin/services/base_service.py
"""Base service with the shared search pipeline and CRUD operations."""
import logging
from typing import Any, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..core.config import settings
from ..core.exceptions import ValidationError
from ..datasources.base import DataSource
from ..models.base import Record, Resource
from ..schemas.filters import LifecycleFilters, SearchFilters
from ..schemas.pagination import PaginatedResponse, PaginationParams
from ..utils.filtering import Rule, apply_filters
from ..utils.pagination import Paginator
from ..utils.sorting import resolve_attribute, sort_records

T = TypeVar('T', bound=Record)

Payload = Union[Mapping[str, Any], BaseModel]

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """One search algorithm for every entity, configured per subclass.

    Subclasses set ``resource``, ``filter_model``, ``rules`` (filter key ->
    rule) and ``sortable`` (attribute names accepted as ``sort_by``).
    """
    resource: Resource
    filter_model: Type[SearchFilters] = SearchFilters
    rules: Mapping[str, Rule] = {}
    sortable: Tuple[str, ...] = ()

    def __init__(self, source: DataSource):
        self.source = source

    @property
    def model(self) -> Type[T]:
        return self.resource.model

    # -- input coercion --------------------------------------------------

    def _coerce_filters(self, filters: Any) -> SearchFilters:
        if filters is None:
            return self.filter_model()
        if isinstance(filters, self.filter_model):
            return filters
        if isinstance(filters, BaseModel):
            filters = filters.model_dump(exclude_unset=True)
        try:
            return self.filter_model.model_validate(filters)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {self.resource.label.lower()} filters: {e}") from e

    def _coerce_pagination(self, pagination: Any) -> PaginationParams:
        if pagination is None:
            return PaginationParams(size=settings.default_page_size)
        if isinstance(pagination, PaginationParams):
            return pagination
        try:
            return PaginationParams.model_validate(pagination)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid pagination: {e}") from e

    def _sort_attribute(self, sort_by: Optional[str]) -> Optional[str]:
        if not sort_by:
            return None
        attr = resolve_attribute(self.model, sort_by)
        if self.sortable and attr not in self.sortable:
            raise ValidationError(f"Cannot sort {self.resource.name} by {sort_by}", field="sortBy")
        return attr

    def _normalize(self, payload: Payload, target: Optional[str] = None) -> Dict[str, Any]:
        """Key a payload by attribute name, rejecting unknown or protected fields."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        fields = self.model.model_fields
        data: Dict[str, Any] = {}
        for key, value in payload.items():
            attr = resolve_attribute(self.model, key)
            if attr == "id":
                raise ValidationError("The internal id cannot be set", field=key)
            if attr not in fields:
                raise ValidationError(f"Unknown {self.resource.label.lower()} field: {key}", field=key)
            data[attr] = value

        public_id = data.pop("public_id", None)
        if public_id is not None and public_id != target:
            if target is None:
                raise ValidationError("publicId is assigned on creation", field="publicId")
            raise ValidationError("publicId cannot be changed", field="publicId")
        return data

    def _validated(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Check a full payload against the model before it reaches the data source."""
        try:
            record = self.model.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {self.resource.label.lower()}: {e}") from e
        return record.model_dump(exclude={"id", "public_id"}, exclude_unset=True)

    def effective_filters(self, filters: SearchFilters) -> SearchFilters:
        """Hide inactive records unless the caller asked about them explicitly."""
        if isinstance(filters, LifecycleFilters) and filters.is_active is None and not filters.include_inactive:
            return filters.model_copy(update={"is_active": True})
        return filters

    # -- search ----------------------------------------------------------

    def run_pipeline(self, candidates, filters: SearchFilters, pagination: PaginationParams) -> PaginatedResponse[T]:
        """Filter, stable-sort and page ``candidates``."""
        matched = apply_filters(candidates, self.effective_filters(filters), self.rules)
        sort_attr = self._sort_attribute(pagination.sort_by)
        if sort_attr:
            matched = sort_records(matched, sort_attr, pagination.sort_dir)
        return Paginator.paginate(matched, pagination)

    async def search(self, filters: Any = None, pagination: Any = None) -> PaginatedResponse[T]:
        filters = self._coerce_filters(filters)
        pagination = self._coerce_pagination(pagination)
        # Reject bad sort keys before any I/O
        self._sort_attribute(pagination.sort_by)

        if self.source.handles_search:
            return await self.source.search(self.resource, filters, pagination)

        candidates = await self.source.all(self.resource)
        return self.run_pipeline(candidates, filters, pagination)

    async def search_all(self, filters: Any = None, sort_by: Optional[str] = None, sort_dir: str = 'asc'):
        """Every matching record in one page."""
        page = await self.search(filters, PaginationParams(unpaginated=True, sort_by=sort_by, sort_dir=sort_dir))
        return list(page.content)

    async def count(self, filters: Any = None) -> int:
        page = await self.search(filters, PaginationParams(page=0, size=1))
        return page.total_elements

    # -- CRUD ------------------------------------------------------------

    async def get_by_id(self, public_id: str) -> Optional[T]:
        return await self.source.get(self.resource, public_id)

    async def create(self, payload: Payload) -> T:
        data = self._validated(self._normalize(payload))
        record = await self.source.create(self.resource, data)
        logger.debug(f"Created {self.resource.label.lower()} {record.public_id}")
        return record

    async def update(self, public_id: str, changes: Payload) -> T:
        """Partial update: fields not in ``changes`` keep their value."""
        data = self._normalize(changes, target=public_id)
        return await self.source.update(self.resource, public_id, data)

    async def replace(self, public_id: str, payload: Payload) -> T:
        """Full replace: omitted fields fall back to their defaults."""
        data = self._validated(self._normalize(payload, target=public_id))
        return await self.source.replace(self.resource, public_id, data)

    async def delete(self, public_id: str) -> None:
        await self.source.delete(self.resource, public_id)
