"""
Configuration settings for LocationPulse.

Centralized configuration for the analysis pipeline and CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Analysis
RATING_DECIMALS = 1  # Average rating precision (round half away from zero)

# Report export
ANALYSIS_TABLE_COLUMNS = ["Type", "Count", "Average Rating", "Total Reviews"]
DEFAULT_REPORT_NAME = "location_analysis"

# Logging
LOG_LEVEL = os.getenv("LOCATIONPULSE_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "locationpulse.log"
