"""
Input validation.

Parses raw JSON text for both input channels and checks that each one is
an array of records with the expected field types.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from src.models.location import Location, LocationMetadata
from src.models.report import ValidatedInput

logger = logging.getLogger(__name__)

LOCATIONS = "locations"
METADATA = "metadata"

# Required fields per channel: name -> expected primitive ("string" or "number")
LOCATION_FIELDS = {
    "id": "string",
    "latitude": "number",
    "longitude": "number"
}

METADATA_FIELDS = {
    "id": "string",
    "type": "string",
    "rating": "number",
    "reviews": "number"
}

STRUCTURE_MESSAGES = {
    LOCATIONS: (
        "Invalid location data structure. Each item must have id (string), "
        "latitude (number), and longitude (number)"
    ),
    METADATA: (
        "Invalid metadata data structure. Each item must have id (string), "
        "type (string), rating (number), and reviews (number)"
    )
}


class ValidationFailure(ValueError):
    """
    Raised when one input channel cannot be turned into typed records.

    Attributes:
        field: Failing channel, "locations" or "metadata"
        kind: "syntax", "not_array" or "invalid_element"
        index: Position of the first offending element (invalid_element only)
    """

    def __init__(
        self,
        message: str,
        field: str,
        kind: str,
        index: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.kind = kind
        self.index = index


class SyntaxFailure(ValidationFailure):
    """Raw text is not well-formed JSON."""

    def __init__(self, message: str, field: str):
        super().__init__(message, field, "syntax")


class ShapeFailure(ValidationFailure):
    """Well-formed JSON that is not an array of valid records."""

    def __init__(self, message: str, field: str, index: Optional[int] = None):
        kind = "not_array" if index is None else "invalid_element"
        super().__init__(message, field, kind, index)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _matches_type(value: Any, expected: str) -> bool:
    if expected == "string":
        return isinstance(value, str)
    # bool is an int subclass but a distinct JSON type
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_json(text: str, field: str) -> Any:
    """
    Parse raw text as strict JSON.

    Args:
        text: Raw input text
        field: Channel name used in the failure message

    Returns:
        Decoded JSON value

    Raises:
        SyntaxFailure: If the text is not valid JSON (NaN/Infinity included)
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning(f"Failed to parse {field} JSON: {e}")
        raise SyntaxFailure(f"Invalid JSON format in {field} data", field) from e


def _require_array(data: Any, field: str) -> List[Any]:
    if not isinstance(data, list):
        logger.warning(f"{field} data is {type(data).__name__}, expected array")
        raise ShapeFailure(f"{field.capitalize()} data must be an array", field)
    return data


def _first_invalid_index(items: List[Any], fields: Dict[str, str]) -> Optional[int]:
    """Return the index of the first item missing or mistyping a required field."""
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            return index
        for name, expected in fields.items():
            if name not in item or not _matches_type(item[name], expected):
                return index
    return None


def _check_elements(items: List[Any], fields: Dict[str, str], field: str) -> None:
    index = _first_invalid_index(items, fields)
    if index is not None:
        logger.warning(f"Invalid {field} element at index {index}: {items[index]!r}")
        raise ShapeFailure(STRUCTURE_MESSAGES[field], field, index)


def _to_locations(items: List[Any]) -> List[Location]:
    _check_elements(items, LOCATION_FIELDS, LOCATIONS)
    return [Location.from_dict(item) for item in items]


def _to_metadata(items: List[Any]) -> List[LocationMetadata]:
    _check_elements(items, METADATA_FIELDS, METADATA)
    return [LocationMetadata.from_dict(item) for item in items]


def validate_locations(data: Any) -> List[Location]:
    """
    Check a decoded value is an array of location records.

    Raises:
        ShapeFailure: If data is not an array or an element is malformed
    """
    return _to_locations(_require_array(data, LOCATIONS))


def validate_metadata(data: Any) -> List[LocationMetadata]:
    """
    Check a decoded value is an array of metadata records.

    Raises:
        ShapeFailure: If data is not an array or an element is malformed
    """
    return _to_metadata(_require_array(data, METADATA))


def validate_inputs(locations_text: str, metadata_text: str) -> ValidatedInput:
    """
    Validate both raw inputs and return typed collections.

    Checks run syntax first, then array shape, then element shape, locations
    before metadata at each step. The first failure is raised.

    Args:
        locations_text: Raw JSON text for locations
        metadata_text: Raw JSON text for metadata

    Returns:
        ValidatedInput with locations and metadata in input order

    Raises:
        SyntaxFailure: If either text is not valid JSON
        ShapeFailure: If either value is not an array of valid records
    """
    raw_locations = parse_json(locations_text, LOCATIONS)
    raw_metadata = parse_json(metadata_text, METADATA)

    location_items = _require_array(raw_locations, LOCATIONS)
    metadata_items = _require_array(raw_metadata, METADATA)

    locations = _to_locations(location_items)
    metadata = _to_metadata(metadata_items)

    logger.info(
        f"Validated {len(locations)} locations and {len(metadata)} metadata records"
    )
    return ValidatedInput(locations=locations, metadata=metadata)

