"""
Location data models.

Coordinate records, descriptive metadata, and the merged view that joins them.
"""

from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Location:
    """
    A geographic point.
    Identified by id, unique within its collection.
    """
    id: str
    latitude: Number
    longitude: Number

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        """Create Location from a validated JSON dict (extra keys ignored)."""
        return cls(
            id=data["id"],
            latitude=data["latitude"],
            longitude=data["longitude"]
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude
        }


@dataclass(frozen=True)
class LocationMetadata:
    """
    Descriptive attributes keyed to a Location by id.
    """
    id: str
    type: str  # Category label used for aggregation
    rating: Number
    reviews: Number  # Non-negative expected, not enforced

    @classmethod
    def from_dict(cls, data: dict) -> "LocationMetadata":
        """Create LocationMetadata from a validated JSON dict (extra keys ignored)."""
        return cls(
            id=data["id"],
            type=data["type"],
            rating=data["rating"],
            reviews=data["reviews"]
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "rating": self.rating,
            "reviews": self.reviews
        }


@dataclass(frozen=True)
class MergedLocation:
    """
    A Location plus the metadata found for its id, if any.

    A record is either complete (metadata attached) or incomplete
    (no metadata record shared its id). Consumers branch on
    `is_complete` instead of testing `metadata` for None.
    """
    location: Location
    metadata: Optional[LocationMetadata] = None

    def __post_init__(self):
        if self.metadata is not None and self.metadata.id != self.location.id:
            raise ValueError(
                f"Metadata id '{self.metadata.id}' does not match "
                f"location id '{self.location.id}'"
            )

    @property
    def id(self) -> str:
        return self.location.id

    @property
    def is_complete(self) -> bool:
        return self.metadata is not None

    def to_dict(self) -> dict:
        """Flatten to the location fields plus an optional `metadata` key."""
        data = self.location.to_dict()
        if self.is_complete:
            data["metadata"] = self.metadata.to_dict()
        return data


@dataclass(frozen=True)
class AnalysisResult:
    """
    Aggregate statistics for one category.
    Only emitted for categories with at least one record.
    """
    type: str
    count: int
    average_rating: float  # Rounded to settings.RATING_DECIMALS
    total_reviews: Number

    def __post_init__(self):
        if self.count <= 0:
            raise ValueError(f"Invalid count: {self.count}. Must be positive")

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "count": self.count,
            "averageRating": self.average_rating,
            "totalReviews": self.total_reviews
        }
