# school_admin/utils/sorting.py
"""Key-based comparator used by the search pipeline."""
import enum
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar('T')


def resolve_attribute(model: Optional[type], key: str) -> str:
    """Map a wire name (``firstName``) to the attribute name (``first_name``)."""
    if model is None or not issubclass(model, BaseModel):
        return key
    if key in model.model_fields:
        return key
    for name, field in model.model_fields.items():
        if field.alias == key:
            return name
    return key


def _value(record: Any, key: str) -> Any:
    if isinstance(record, dict):
        value = record.get(key)
    else:
        value = getattr(record, key, None)
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, str):
        return value.lower()
    return value


def _sign(result: int, direction: str) -> int:
    return -result if direction == 'desc' else result


def compare(a: Any, b: Any, key: str, direction: str = 'asc') -> int:
    """Return -1, 0 or 1. Missing values sort after present ones in either direction."""
    left = _value(a, key)
    right = _value(b, key)

    if left is None and right is None:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1

    try:
        if left < right:
            return _sign(-1, direction)
        if left > right:
            return _sign(1, direction)
        return 0
    except TypeError:
        # Mixed types fall back to comparing type names, then text
        left_key = (type(left).__name__, str(left))
        right_key = (type(right).__name__, str(right))
        if left_key < right_key:
            return _sign(-1, direction)
        if left_key > right_key:
            return _sign(1, direction)
        return 0


def sort_records(records: Iterable[T], key: str, direction: str = 'asc') -> List[T]:
    """Stable sort: records with equal keys keep their relative order."""
    return sorted(records, key=cmp_to_key(lambda a, b: compare(a, b, key, direction)))
