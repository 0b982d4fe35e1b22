"""
models.py - Client Record Model
================================
The validated, immutable client record used by the query layer.

Client objects are normally produced by factory.build_all(), which
guarantees that id, full_name and email are all present and non-blank.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

# A JSON-decoded value before any validation has been applied
JsonValue = Union[None, bool, int, float, str, list, dict]

# Fields that can be used for fuzzy text matching
MATCHABLE_FIELDS = ("full_name",)

_WHITESPACE_RUN = re.compile(r"\s+")


def reject_json_constant(name: str):
    """parse_constant hook: NaN, Infinity and -Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def _normalize(text: str) -> str:
    """Lower-case and collapse every whitespace run into a single space."""
    return _WHITESPACE_RUN.sub(" ", text.lower())


def _display(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Client:
    """One client entry."""

    id: Any
    full_name: Optional[str]
    email: Optional[str]

    def matches(self, field: str, search_term: Optional[str]) -> bool:
        """
        Check whether a matchable field contains the search term.

        Matching is case-insensitive, tolerant of repeated whitespace on
        either side, and uses plain substring containment (so "oe" matches
        "Doe").

        Raises:
            ValueError: If field is not listed in MATCHABLE_FIELDS
        """
        if field not in MATCHABLE_FIELDS:
            raise ValueError(f"Unknown field: {field}")

        if search_term is None or not search_term.strip():
            return False

        value = getattr(self, field)
        if value is None:
            return False

        return _normalize(search_term) in _normalize(str(value))

    def matches_name(self, search_term: Optional[str]) -> bool:
        return self.matches("full_name", search_term)

    def render(self) -> str:
        """Formatted three-line display of the client for the CLI."""
        return "\n".join([
            f"  Name: {_display(self.full_name)}",
            f"  Email: {_display(self.email)}",
            f"  ID: {_display(self.id)}",
        ])
