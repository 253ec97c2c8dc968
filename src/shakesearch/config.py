from __future__ import annotations
import os
from pathlib import Path

# project root: the directory holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where the source data lives
DATA_ROOT = Path(os.environ.get("SHAKESEARCH_DATA", str(PROJECT_ROOT)))
DEFAULT_CORPUS_PATH = os.environ.get("SHAKESEARCH_CORPUS", str(DATA_ROOT / "completeworks.txt"))
DEFAULT_QUOTES_PATH = os.environ.get("SHAKESEARCH_QUOTES", str(DATA_ROOT / "completeworkssorted.csv"))
TEXT_ENCODING: str = "utf-8"

# server
DEFAULT_HOST: str = os.environ.get("HOST", "127.0.0.1")
DEFAULT_PORT: int = 3001  # PORT from the environment is parsed by the server entry point

# substring index
GRAM: int = 3              # k-gram size for the positional index
CONTEXT_RADIUS: int = 125  # chars kept on each side of a match (window <= 2 * radius)

# quote rows: col 0 unused, then title, location, speaker, quote
QUOTE_MIN_FIELDS: int = 5

# Progress logging (set SHAKESEARCH_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SHAKESEARCH_VERBOSE") == "1"
