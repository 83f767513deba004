from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar('T')


class PaginationParams(BaseModel):
    """Zero-based page request, plus optional sort and an unpaginated escape hatch."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    page: int = Field(0, ge=0, description="Page index (starts from 0)")
    size: int = Field(10, ge=1, description="Items per page")
    sort_by: Optional[str] = None
    sort_dir: Literal['asc', 'desc'] = 'asc'
    unpaginated: bool = False

    @classmethod
    def from_one_based(cls, page: int, size: int = 10, **kwargs) -> "PaginationParams":
        """Build params from a 1-based page number as shown by page controls."""
        return cls(page=max(page - 1, 0), size=size, **kwargs)

    def to_query(self) -> dict:
        params = {"page": self.page, "size": self.size}
        if self.sort_by:
            params["sortBy"] = self.sort_by
            params["sortDir"] = self.sort_dir
        if self.unpaginated:
            params["unpaginated"] = "true"
        return params


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated envelope: {content, totalElements, totalPages, number, size, first, last}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: List[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    first: bool
    last: bool

    @property
    def page_index(self) -> int:
        return self.number

    @property
    def page_size(self) -> int:
        return self.size

    @property
    def is_first(self) -> bool:
        return self.first

    @property
    def is_last(self) -> bool:
        return self.last

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
