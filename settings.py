"""Centralized configuration for the visualizer.

Loads environment variables (and a local .env, if present), sets
defaults, and exposes constants used by the app factory.
"""

import os

from dotenv import load_dotenv

from bars import ARRAY_LENGTH, VALUE_MIN, VALUE_MAX  # noqa: F401  fixed array shape
from engine import DEFAULT_DELAY_MS

load_dotenv()

# Pacing: one interval per highlight pause / swap
SORT_DELAY_MS = int(os.getenv("SORT_DELAY_MS", str(DEFAULT_DELAY_MS)))

# Unset means a fresh random sequence every process
_seed = os.getenv("RANDOM_SEED")
RANDOM_SEED = int(_seed) if _seed else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"


def as_dict() -> dict:
    """Snapshot of the settings the app factory consumes."""
    return {
        "SORT_DELAY_MS": SORT_DELAY_MS,
        "ARRAY_LENGTH": ARRAY_LENGTH,
        "RANDOM_SEED": RANDOM_SEED,
    }
