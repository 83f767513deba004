# school_admin/models/base.py
"""Base record types shared by every entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Internal storage key, never serialized across the API boundary
    id: Optional[int] = Field(default=None, exclude=True)
    public_id: Optional[str] = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ActiveRecord(Record):
    """Record with the soft-delete lifecycle flag."""
    is_active: bool = True


class TimestampedRecord(ActiveRecord):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Resource:
    """Describes how one entity type is stored and addressed."""
    name: str
    label: str
    model: Type[Record]
    id_prefix: str
    soft_delete: bool = False

    @property
    def has_lifecycle(self) -> bool:
        return "is_active" in self.model.model_fields

    @property
    def timestamped(self) -> bool:
        return "updated_at" in self.model.model_fields
