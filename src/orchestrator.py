"""
Pipeline Orchestrator.

Runs validation, merge and analysis for one request and collects the results.
"""

import logging
from datetime import datetime

from src.models.report import AnalysisReport, AnalysisRequest
from src.pipeline.validation import validate_inputs
from src.pipeline.merge import merge_location_data
from src.pipeline.analysis import (
    analyze_locations,
    find_incomplete_data,
    find_location_with_most_reviews,
)

logger = logging.getLogger(__name__)


class AnalysisOrchestrator:
    """
    Orchestrates a single analysis run.

    Flow:
    1. Validation → 2. Merge → 3. Category Analysis
    → 4. Most Reviewed → 5. Incomplete Data

    Holds no state between runs; every call builds a fresh report.
    """

    def run(self, request: AnalysisRequest) -> AnalysisReport:
        """
        Run the full pipeline on raw input text.

        Args:
            request: Raw locations and metadata JSON text

        Returns:
            AnalysisReport with merged records and all derived views

        Raises:
            ValidationFailure: If either input fails validation
        """
        start_time = datetime.now()

        # STAGE 1: Validation
        validated = validate_inputs(request.locations_text, request.metadata_text)

        # STAGE 2: Merge
        merged = merge_location_data(validated.locations, validated.metadata)

        # STAGES 3-5: Analysis
        report = AnalysisReport(
            merged=merged,
            analysis=analyze_locations(merged),
            most_reviewed=find_location_with_most_reviews(merged),
            incomplete=find_incomplete_data(merged)
        )

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Analysis complete in {processing_time:.3f}s: "
            f"{len(report.analysis)} categories, coverage {report.coverage}"
        )
        if report.incomplete:
            logger.info(f"{len(report.incomplete)} locations have no metadata")

        return report
