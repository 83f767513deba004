# school_admin/utils/filtering.py
"""Filter predicate evaluation shared by every entity search.

A search is configured with a table that maps filter keys to rules::

    STUDENT_RULES = {
        "search_text": TextSearch(("first_name", "last_name", "email")),
        "grade": Equals("grade", case_sensitive=False),
        "is_active": Flag("is_active"),
    }

``matches`` AND-s every rule whose filter value is present. A missing or
None filter value means no constraint on that attribute.
"""
import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Tuple, TypeVar

T = TypeVar('T')


def _plain(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


def _lookup(source: Any, key: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


class Rule:
    """One filter constraint; returns True when the record satisfies ``value``."""

    def __call__(self, record: Any, value: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class TextSearch(Rule):
    """Case-insensitive substring match against any of ``fields``."""
    fields: Tuple[str, ...]

    def __call__(self, record, value):
        if not isinstance(value, str):
            return False
        if not value.strip():
            return True
        needle = value.lower()
        for field in self.fields:
            candidate = _plain(_lookup(record, field))
            if isinstance(candidate, str) and needle in candidate.lower():
                return True
        return False


@dataclass(frozen=True)
class Equals(Rule):
    attr: str
    case_sensitive: bool = True

    def __call__(self, record, value):
        actual = _plain(_lookup(record, self.attr))
        expected = _plain(value)
        if actual is None:
            return False
        if not self.case_sensitive:
            if not (isinstance(actual, str) and isinstance(expected, str)):
                return False
            return actual.lower() == expected.lower()
        return actual == expected


@dataclass(frozen=True)
class Contains(Rule):
    """Case-insensitive substring match on a single attribute."""
    attr: str

    def __call__(self, record, value):
        actual = _plain(_lookup(record, self.attr))
        expected = _plain(value)
        if not (isinstance(actual, str) and isinstance(expected, str)):
            return False
        return expected.lower() in actual.lower()


@dataclass(frozen=True)
class Flag(Rule):
    """Strict boolean partition."""
    attr: str

    def __call__(self, record, value):
        if not isinstance(value, bool):
            return False
        return _lookup(record, self.attr) is value


@dataclass(frozen=True)
class WhenTrue(Rule):
    """Applies ``predicate`` only when the filter value is True; False is no constraint."""
    predicate: Callable[[Any], bool]

    def __call__(self, record, value):
        if value is not True:
            return True
        return bool(self.predicate(record))


@dataclass(frozen=True)
class Predicate(Rule):
    """Arbitrary ``fn(record, value)`` check."""
    fn: Callable[[Any, Any], bool]

    def __call__(self, record, value):
        return bool(self.fn(record, value))


def matches(record: Any, filters: Any, rules: Mapping[str, Rule]) -> bool:
    """True when ``record`` satisfies every present filter in ``filters``."""
    for key, rule in rules.items():
        value = _lookup(filters, key)
        if value is None:
            continue
        try:
            if not rule(record, value):
                return False
        except (TypeError, ValueError, AttributeError):
            # Type-mismatched comparisons never match
            return False
    return True


def apply_filters(records: Iterable[T], filters: Any, rules: Mapping[str, Rule]) -> List[T]:
    return [record for record in records if matches(record, filters, rules)]
