"""
Pure functions for building request parameter sets.

Values supplied by callers are normalized to the strings the File Station
CGI endpoints expect. Absent values are dropped rather than sent empty.
"""

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple
from urllib.parse import urlencode

from ..exceptions import InvalidInputError

# Date-range fields where the API reads "0" as "no bound".
SENTINEL_DATE_FIELDS = frozenset({"date_expired", "date_available"})
SENTINEL_DATE = "0"

MASKED_FIELDS = frozenset({"_sid", "password"})

DATE_FORMAT = "%Y-%m-%d"


def normalize_value(name: str, value: Any) -> Optional[str]:
    """Convert a parameter value to its wire string, or None if absent."""
    if value is None:
        return SENTINEL_DATE if name in SENTINEL_DATE_FIELDS else None

    # bool before int, datetime before date: both are subclasses
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, datetime):
        if name in SENTINEL_DATE_FIELDS:
            return value.strftime(DATE_FORMAT)
        return str(int(value.timestamp()))
    if isinstance(value, date):
        if name not in SENTINEL_DATE_FIELDS:
            raise InvalidInputError(
                f"Parameter '{name}' needs a datetime, not a date",
                {"parameter": name},
            )
        return value.strftime(DATE_FORMAT)
    if isinstance(value, (list, tuple)):
        items = [normalize_value(name, item) for item in value]
        items = [item for item in items if item is not None]
        return ",".join(items) if items else None
    if isinstance(value, str):
        return value

    raise InvalidInputError(
        f"Unsupported value type for parameter '{name}': {type(value).__name__}",
        {"parameter": name},
    )


class ParameterSet(Mapping):
    """
    Ordered, unique-keyed set of request parameters.

    Every stored value is already a wire string; absent values never make
    it into the set. Instances are immutable, modifications return copies.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    @classmethod
    def merge(
        cls,
        required: Optional[Mapping] = None,
        optional: Optional[Mapping] = None,
    ) -> "ParameterSet":
        """
        Merge required and optional parameters.

        Required entries come first in caller order and are always kept,
        including falsy values such as ``0`` or ``False``. Optional entries
        follow and are dropped when absent.

        Raises:
            InvalidInputError: If a required value is None, a list value is
                empty in the required set, or a name appears twice
        """
        entries: Dict[str, str] = {}

        for name, value in (required or {}).items():
            wire = normalize_value(name, value)
            if wire is None:
                raise InvalidInputError(
                    f"Required parameter '{name}' has no value", {"parameter": name}
                )
            entries[name] = wire

        for name, value in (optional or {}).items():
            if name in entries:
                raise InvalidInputError(
                    f"Parameter '{name}' given as both required and optional",
                    {"parameter": name},
                )
            wire = normalize_value(name, value)
            if wire is not None:
                entries[name] = wire

        return cls(entries)

    def with_entry(self, name: str, value: Any) -> "ParameterSet":
        """Return a copy with ``name`` moved to the end and set to ``value``."""
        wire = normalize_value(name, value)
        if wire is None:
            raise InvalidInputError(
                f"Parameter '{name}' has no value", {"parameter": name}
            )
        entries = {k: v for k, v in self._entries.items() if k != name}
        entries[name] = wire
        return ParameterSet(entries)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def items_list(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._entries.items())

    def encode(self) -> str:
        """Serialize as a url-encoded query string."""
        return urlencode(list(self._entries.items()))

    def __getitem__(self, name: str) -> str:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterSet):
            return self.items_list() == other.items_list()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.items_list())

    def __repr__(self) -> str:
        shown = {
            k: ("***" if k in MASKED_FIELDS else v) for k, v in self._entries.items()
        }
        return f"ParameterSet({shown!r})"
