"""Runtime settings read from the environment (and an optional ``.env`` file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

BACKEND_API_URL = os.getenv("BACKEND_API_URL", "http://127.0.0.1:5000").rstrip("/")
BACKEND_TIMEOUT_SECONDS = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "10"))

_DEFAULT_STORAGE_DIR = Path(__file__).resolve().parent.parent / "data"
STORAGE_DIR = Path(os.getenv("MODELHUB_STORAGE_DIR") or _DEFAULT_STORAGE_DIR)

HYPERPARAMETER_OVERRIDES = os.getenv("HYPERPARAMETER_OVERRIDES") or None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
