"""
Location merge.

Joins validated locations with their metadata by id.
"""

import logging
from typing import Dict, List

from src.models.location import Location, LocationMetadata, MergedLocation

logger = logging.getLogger(__name__)


def index_metadata(metadata: List[LocationMetadata]) -> Dict[str, LocationMetadata]:
    """
    Build an id -> metadata lookup.

    When several records share an id, the earliest one in input order wins.
    """
    index: Dict[str, LocationMetadata] = {}
    for record in metadata:
        index.setdefault(record.id, record)
    return index


def merge_location_data(
    locations: List[Location],
    metadata: List[LocationMetadata]
) -> List[MergedLocation]:
    """
    Attach metadata to each location.

    Args:
        locations: Validated locations
        metadata: Validated metadata records

    Returns:
        One MergedLocation per location, in location input order.
        Locations without a matching metadata id are left incomplete.
    """
    index = index_metadata(metadata)
    merged = [
        MergedLocation(location=location, metadata=index.get(location.id))
        for location in locations
    ]

    duplicates = len(metadata) - len(index)
    if duplicates:
        logger.debug(f"Ignored {duplicates} metadata records with repeated ids")

    matched = sum(1 for record in merged if record.is_complete)
    logger.info(f"Merged {len(merged)} locations ({matched} with metadata)")
    return merged
