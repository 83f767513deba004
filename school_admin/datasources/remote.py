# school_admin/datasources/remote.py
"""REST backend adapter.

Searches are pushed down as ``GET /{collection}`` with filters and
pagination in the query string; the backend answers with the paginated
envelope. Mutations are one round trip each and the caller re-queries.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_jsonable_python

from ..core.exceptions import (
    InvalidStateTransition,
    NotFoundError,
    SchoolAdminException,
    TransportError,
    ValidationError,
)
from ..models.base import Record, Resource
from ..schemas.filters import LifecycleFilters, SearchFilters
from ..schemas.pagination import PaginatedResponse, PaginationParams
from .base import ActionFn, DataSource

logger = logging.getLogger(__name__)


class RemoteDataSource(DataSource):
    handles_search = True

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if client is None and not base_url:
            raise ValueError("RemoteDataSource needs a base_url or a client")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body)
        return str(body)

    def _error_for(self, resource: Resource, public_id: Optional[str], response: httpx.Response) -> SchoolAdminException:
        message = self._error_message(response)
        status = response.status_code
        if status == 404:
            return NotFoundError(resource.label, public_id)
        if status == 409:
            return InvalidStateTransition(current="unknown", action="transition", message=message)
        if status in (400, 422):
            return ValidationError(message)
        return TransportError(f"Backend answered {status}: {message}")

    async def _request(
        self,
        method: str,
        resource: Resource,
        path: str,
        public_id: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, path, params=params, json=json)
        except httpx.TimeoutException as e:
            logger.error(f"Backend request timeout: {method} {path}")
            raise TransportError(f"Backend timeout on {method} {path}") from e
        except httpx.HTTPError as e:
            logger.error(f"Backend request failed: {method} {path} - {e}")
            raise TransportError(f"Backend request failed on {method} {path}: {e}") from e

        if response.is_success:
            return response
        raise self._error_for(resource, public_id, response)

    @staticmethod
    def _to_wire(resource: Resource, payload: Dict[str, Any]) -> Dict[str, Any]:
        fields = resource.model.model_fields
        body = {}
        for name, value in payload.items():
            field = fields.get(name)
            key = field.alias if field is not None and field.alias else name
            body[key] = to_jsonable_python(value)
        return body

    @staticmethod
    def _parse(resource: Resource, data: Any) -> Record:
        try:
            return resource.model.model_validate(data)
        except PydanticValidationError as e:
            raise TransportError(f"Malformed {resource.label.lower()} from backend: {e}") from e

    async def all(self, resource: Resource) -> List[Record]:
        filters = LifecycleFilters(include_inactive=True) if resource.has_lifecycle else SearchFilters()
        page = await self.search(resource, filters, PaginationParams(unpaginated=True))
        return list(page.content)

    async def search(
        self,
        resource: Resource,
        filters: SearchFilters,
        pagination: PaginationParams,
    ) -> PaginatedResponse:
        params = {**filters.to_query(), **pagination.to_query()}
        response = await self._request("GET", resource, f"/{resource.name}", params=params)
        try:
            return PaginatedResponse[resource.model].model_validate(response.json())
        except (PydanticValidationError, ValueError) as e:
            raise TransportError(f"Malformed page of {resource.name} from backend: {e}") from e

    async def get(self, resource: Resource, public_id: str) -> Optional[Record]:
        try:
            response = await self._request("GET", resource, f"/{resource.name}/{public_id}", public_id)
        except NotFoundError:
            return None
        return self._parse(resource, response.json())

    async def create(self, resource: Resource, payload: Dict[str, Any]) -> Record:
        response = await self._request(
            "POST", resource, f"/{resource.name}", json=self._to_wire(resource, payload)
        )
        return self._parse(resource, response.json())

    async def update(self, resource: Resource, public_id: str, changes: Dict[str, Any]) -> Record:
        response = await self._request(
            "PATCH", resource, f"/{resource.name}/{public_id}", public_id,
            json=self._to_wire(resource, changes),
        )
        return self._parse(resource, response.json())

    async def replace(self, resource: Resource, public_id: str, payload: Dict[str, Any]) -> Record:
        response = await self._request(
            "PUT", resource, f"/{resource.name}/{public_id}", public_id,
            json=self._to_wire(resource, payload),
        )
        return self._parse(resource, response.json())

    async def delete(self, resource: Resource, public_id: str) -> None:
        await self._request("DELETE", resource, f"/{resource.name}/{public_id}", public_id)

    async def apply_action(
        self,
        resource: Resource,
        public_id: str,
        action: str,
        compute: ActionFn,
        body: Optional[Dict[str, Any]] = None,
    ) -> Record:
        # The backend owns the transition rules; compute only runs locally
        response = await self._request(
            "PATCH", resource, f"/{resource.name}/{public_id}/{action}", public_id, json=body
        )
        return self._parse(resource, response.json())
