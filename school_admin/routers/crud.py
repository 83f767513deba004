# school_admin/routers/crud.py
"""Shared search and CRUD endpoints mounted on every entity router."""
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import APIRouter, Body, Depends, Request, Response
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..core.deps import get_services
from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.pagination import PaginationParams
from ..services import BaseService, Services

M = TypeVar('M', bound=BaseModel)

ServiceGetter = Callable[[Services], BaseService]


def parse_query(model: Type[M], request: Request) -> M:
    """Build ``model`` from the query string (camelCase or snake_case keys)."""
    try:
        return model.model_validate(dict(request.query_params))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid query parameters: {e}") from e


def add_crud_routes(router: APIRouter, pick: ServiceGetter, read_only: bool = False):
    """Mount search, get, create, update, replace and delete on ``router``.

    Call this after any fixed-path routes (``/stats``...) so they are not
    shadowed by ``/{public_id}``.
    """

    @router.get("", response_model=dict)
    async def search_records(request: Request, services: Services = Depends(get_services)):
        """Filtered, sorted and paginated search"""
        service = pick(services)
        filters = parse_query(service.filter_model, request)
        pagination = parse_query(PaginationParams, request)
        if "size" not in request.query_params:
            pagination = pagination.model_copy(update={"size": request.app.state.settings.default_page_size})
        page = await service.search(filters, pagination)
        return page.to_wire()

    @router.get("/{public_id}", response_model=dict)
    async def get_record(public_id: str, services: Services = Depends(get_services)):
        service = pick(services)
        record = await service.get_by_id(public_id)
        if record is None:
            raise NotFoundError(service.resource.label, public_id)
        return record.to_wire()

    if read_only:
        return router

    @router.post("", response_model=dict, status_code=201)
    async def create_record(payload: Dict[str, Any] = Body(...), services: Services = Depends(get_services)):
        record = await pick(services).create(payload)
        return record.to_wire()

    @router.put("/{public_id}", response_model=dict)
    async def replace_record(
        public_id: str,
        payload: Dict[str, Any] = Body(...),
        services: Services = Depends(get_services)
    ):
        """Full replace; omitted fields are reset"""
        record = await pick(services).replace(public_id, payload)
        return record.to_wire()

    @router.patch("/{public_id}", response_model=dict)
    async def update_record(
        public_id: str,
        payload: Dict[str, Any] = Body(...),
        services: Services = Depends(get_services)
    ):
        """Partial update; omitted fields are kept"""
        record = await pick(services).update(public_id, payload)
        return record.to_wire()

    @router.delete("/{public_id}", status_code=204)
    async def delete_record(public_id: str, services: Services = Depends(get_services)):
        await pick(services).delete(public_id)
        return Response(status_code=204)

    return router
