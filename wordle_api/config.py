# Configuration module for server-side constants and defaults.
# Values are read from environment variables once, at import time.

import os
from pathlib import Path

# Letters per word, for both dictionary entries and guesses.
WORD_LENGTH = 5

# Guesses allowed per round before the round is discarded.
MAX_GUESSES = 5

# Where uvicorn listens.
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# SQLite file holding the dictionary table.
DB_NAME = os.environ.get("DB_NAME", "dictionary.db")
DATABASE_URL = os.environ.get("DATABASE_URL") or f"sqlite:///{DB_NAME}"

# Optional newline-separated word list loaded into the dictionary on startup.
_seed = os.environ.get("SEED_WORDS_PATH")
SEED_WORDS_PATH = Path(_seed) if _seed else None

# Secret key for signing client tokens (identity only, not auth).
SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me-in-prod-please"

# Client tokens older than this many seconds are rejected.
CLIENT_TOKEN_MAX_AGE = int(os.environ.get("CLIENT_TOKEN_MAX_AGE", str(60 * 60 * 8)))

# CORS origins (comma separated).
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
