"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
MAX_TEXT_LOG_CHARS: int = int(os.getenv("MAX_TEXT_LOG_CHARS", "200"))

# --- Extraction ---
PARALLEL_EXTRACTORS: bool = os.getenv("PARALLEL_EXTRACTORS", "false").lower() == "true"
EXTRACTOR_MAX_WORKERS: int = int(os.getenv("EXTRACTOR_MAX_WORKERS", "4"))

# --- Boundary ---
VALIDATE_RESPONSES: bool = os.getenv("VALIDATE_RESPONSES", "true").lower() == "true"
