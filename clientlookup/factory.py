"""
factory.py - Client Record Factory
===================================
Turns the raw JSON value produced by the loader into a list of Client
objects, validating the data on the way.

Validation happens in two stages:

1. Top-level shape (first failure wins):
   - the data must be present (not null)
   - it must be a JSON array
   - the array must not be empty

2. Per-element checks (every element is checked, all problems are reported):
   - each element must be a JSON object
   - each object must have non-blank "id", "full_name" and "email" fields

Any failure aborts the whole load. A partial list is never returned.
"""

import logging
from typing import Any, Dict, List

from .errors import ValidationError
from .models import Client, JsonValue

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "full_name", "email")


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def json_type_name(value: Any) -> str:
    """Name a decoded JSON value by its JSON type rather than its Python type."""
    if value is None:
        return "null"
    # bool first, since bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_data(data: JsonValue) -> List[JsonValue]:
    """
    Check the top-level structure of the client data.

    Raises:
        ValidationError: If the data is absent, not an array, or empty
    """
    if data is None:
        raise ValidationError("Client data is absent")
    if not isinstance(data, list):
        raise ValidationError(f"Client data is not an array, got {json_type_name(data)}")
    if not data:
        raise ValidationError("Client data array is empty")
    return data


def missing_fields(record: Dict[str, Any]) -> List[str]:
    """Required fields that are absent, null or blank, in REQUIRED_FIELDS order."""
    return [field for field in REQUIRED_FIELDS if _is_blank(record.get(field))]


def element_problems(element: JsonValue, index: int) -> List[str]:
    if not isinstance(element, dict):
        return [f"Client at index {index} is not an object"]

    missing = missing_fields(element)
    if missing:
        return [f"Client at index {index} is missing required fields: {', '.join(missing)}"]

    return []


# =============================================================================
# FACTORY
# =============================================================================

def build_client(record: Dict[str, Any]) -> Client:
    """Build one Client from an already validated JSON object."""
    return Client(
        id=record["id"],
        full_name=str(record["full_name"]),
        email=str(record["email"]),
    )


def build_all(raw: JsonValue) -> List[Client]:
    """
    Validate raw JSON data and convert it into Client objects.

    Args:
        raw: The decoded JSON value returned by the loader

    Returns:
        One Client per array element, in input order

    Raises:
        ValidationError: If the top-level shape is wrong, or if any element
                         is not an object or lacks a required field. In the
                         second case every offending element is listed.
    """
    records = validate_data(raw)

    problems = []
    for index, element in enumerate(records):
        problems.extend(element_problems(element, index))

    if problems:
        logger.debug(f"{len(problems)} client record(s) failed validation")
        raise ValidationError("; ".join(problems), problems)

    return [build_client(record) for record in records]
