"""
Request and report models.

Explicit values passed into and returned from the analysis pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.models.location import (
    AnalysisResult,
    Location,
    LocationMetadata,
    MergedLocation,
)


@dataclass(frozen=True)
class AnalysisRequest:
    """Raw JSON text for both input channels."""
    locations_text: str
    metadata_text: str


@dataclass(frozen=True)
class ValidatedInput:
    """Typed collections that passed validation, in input order."""
    locations: List[Location]
    metadata: List[LocationMetadata]


@dataclass
class AnalysisReport:
    """
    Everything produced by one pipeline run.
    """
    merged: List[MergedLocation] = field(default_factory=list)
    analysis: List[AnalysisResult] = field(default_factory=list)
    most_reviewed: Optional[MergedLocation] = None
    incomplete: List[MergedLocation] = field(default_factory=list)

    @property
    def total_locations(self) -> int:
        return len(self.merged)

    @property
    def complete_locations(self) -> int:
        return self.total_locations - len(self.incomplete)

    @property
    def coverage(self) -> str:
        """Share of locations with metadata, e.g. '3/4 locations (75.0%)'."""
        if not self.merged:
            return "0/0 locations (0.0%)"
        percent = 100 * self.complete_locations / self.total_locations
        return f"{self.complete_locations}/{self.total_locations} locations ({percent:.1f}%)"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "analysis": [result.to_dict() for result in self.analysis],
            "most_reviewed": self.most_reviewed.to_dict() if self.most_reviewed else None,
            "incomplete": [record.to_dict() for record in self.incomplete],
            "summary": {
                "total_locations": self.total_locations,
                "with_metadata": self.complete_locations,
                "without_metadata": len(self.incomplete),
                "coverage": self.coverage
            }
        }
