"""
Storage utility.

File I/O helpers for raw input text and exported analysis reports.
"""

import json
import os
import logging
from typing import List

import pandas as pd

from src.models.location import AnalysisResult
from src.models.report import AnalysisReport
import config.settings as settings

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Manages file I/O around the analysis pipeline.

    Handles:
    - Raw input text (any path)
    - Category tables (output/<name>.csv)
    - Full reports (output/<name>.json)
    """

    def __init__(self, output_dir: str):
        """
        Initialize report storage.

        Args:
            output_dir: Directory for exported reports
        """
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

        logger.info(f"Initialized ReportStorage with output_dir={output_dir}")

    @staticmethod
    def load_text(path: str) -> str:
        """
        Read a raw input file.

        Args:
            path: File to read

        Returns:
            File contents as text
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
            logger.debug(f"Loaded {len(text)} characters from {path}")
            return text
        except OSError as e:
            logger.error(f"Failed to read input file {path}: {e}")
            raise

    def save_analysis_table(
        self,
        results: List[AnalysisResult],
        name: str = settings.DEFAULT_REPORT_NAME
    ) -> str:
        """
        Save category statistics as CSV, largest categories first.

        Args:
            results: Category results from the analyzer
            name: File name without extension

        Returns:
            Path to the written CSV
        """
        rows = [
            {
                "Type": result.type,
                "Count": result.count,
                "Average Rating": result.average_rating,
                "Total Reviews": result.total_reviews
            }
            for result in results
        ]

        df = pd.DataFrame(rows, columns=settings.ANALYSIS_TABLE_COLUMNS)
        if not df.empty:
            # Stable sort keeps first-seen order among equal counts
            df = df.sort_values("Count", ascending=False, kind="stable")

        output_path = os.path.join(self.output_dir, f"{name}.csv")
        try:
            df.to_csv(output_path, index=False)
            logger.info(f"Saved {len(df)} categories to {output_path}")
        except OSError as e:
            logger.error(f"Failed to save analysis table: {e}")
            raise

        return output_path

    def save_report(
        self,
        report: AnalysisReport,
        name: str = settings.DEFAULT_REPORT_NAME
    ) -> str:
        """
        Save the full report as JSON.

        Args:
            report: Pipeline output
            name: File name without extension

        Returns:
            Path to the written JSON
        """
        output_path = os.path.join(self.output_dir, f"{name}.json")
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(report.to_dict(), f, indent=2)
            logger.info(f"Saved report to {output_path}")
        except OSError as e:
            logger.error(f"Failed to save report: {e}")
            raise

        return output_path
