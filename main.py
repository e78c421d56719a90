"""
LocationPulse - Location Analysis

CLI entry point for running the analysis pipeline.
"""

import argparse
import logging
import sys

from src.orchestrator import AnalysisOrchestrator
from src.models.report import AnalysisReport, AnalysisRequest
from src.pipeline.validation import ValidationFailure
from src.utils.storage import ReportStorage
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LocationPulse - Location and metadata analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the bundled sample data
  python main.py --locations data/sample_locations.json \\
                 --metadata data/sample_metadata.json

  # Also export the category table (CSV) and full report (JSON)
  python main.py --locations data/sample_locations.json \\
                 --metadata data/sample_metadata.json \\
                 --output-dir output
        """
    )

    # Required arguments
    parser.add_argument(
        "--locations",
        required=True,
        help="Path to locations JSON (array of {id, latitude, longitude})"
    )

    parser.add_argument(
        "--metadata",
        required=True,
        help="Path to metadata JSON (array of {id, type, rating, reviews})"
    )

    # Optional arguments
    parser.add_argument(
        "--output-dir",
        help=f"Export CSV and JSON reports here (e.g. {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--report-name",
        default=settings.DEFAULT_REPORT_NAME,
        help=f"Base file name for exported reports (default: {settings.DEFAULT_REPORT_NAME})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def print_report(report: AnalysisReport) -> None:
    """Render the report as plain text."""
    print("Analysis by Type")
    print("-" * 60)
    if report.analysis:
        print(f"{'Type':<20}{'Count':>8}{'Avg Rating':>14}{'Total Reviews':>16}")
        for result in report.analysis:
            print(
                f"{result.type:<20}{result.count:>8}"
                f"{result.average_rating:>14.1f}{result.total_reviews:>16}"
            )
    else:
        print("No locations with metadata")
    print()

    print("Most Reviewed Location")
    print("-" * 60)
    if report.most_reviewed:
        meta = report.most_reviewed.metadata
        print(f"ID: {report.most_reviewed.id}")
        print(f"Type: {meta.type}")
        print(f"Rating: {meta.rating}")
        print(f"Reviews: {meta.reviews}")
    else:
        print("None")
    print()

    print(f"Locations with Incomplete Data ({len(report.incomplete)})")
    print("-" * 60)
    for record in report.incomplete:
        location = record.location
        print(f"{location.id}: ({location.latitude}, {location.longitude})")
    print()

    print(f"Coverage: {report.coverage}")


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Print banner
    print("=" * 60)
    print("LocationPulse - Location Analysis")
    print("=" * 60)
    print(f"Locations: {args.locations}")
    print(f"Metadata: {args.metadata}")
    if args.output_dir:
        print(f"Output: {args.output_dir}")
    print("=" * 60)
    print()

    try:
        request = AnalysisRequest(
            locations_text=ReportStorage.load_text(args.locations),
            metadata_text=ReportStorage.load_text(args.metadata)
        )

        report = AnalysisOrchestrator().run(request)
        print_report(report)

        if args.output_dir:
            storage = ReportStorage(args.output_dir)
            table_path = storage.save_analysis_table(report.analysis, args.report_name)
            report_path = storage.save_report(report, args.report_name)
            print()
            print(f"Analysis table: {table_path}")
            print(f"Full report: {report_path}")

        logger.info("LocationPulse completed successfully")
        sys.exit(0)

    except ValidationFailure as e:
        logger.error(f"Invalid {e.field} input: {e.message}")
        print(f"\n❌ Invalid {e.field} input: {e.message}")
        sys.exit(2)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\n⚠️  Analysis interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
