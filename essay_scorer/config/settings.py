"""Settings and configuration for the essay scoring system."""

import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = Path(os.getenv("ESSAY_SCORER_DATA_DIR", PROJECT_ROOT / "data"))
OUTPUT_DIR = DATA_DIR / "output"
ESSAY_STORE_PATH = Path(os.getenv("ESSAY_STORE_PATH", DATA_DIR / "user_essays.json"))

# Batch analysis settings
BATCH_PARALLELISM = int(os.getenv("ESSAY_SCORER_PARALLELISM", "8"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # Set to DEBUG for rule-level detail
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AnalysisConfig:
    """Configuration for batch essay analysis"""
    # Parallelism
    parallelism: int = BATCH_PARALLELISM  # number of essays analyzed concurrently

    # Output options
    include_spelling_errors: bool = True
    show_progress: bool = True
