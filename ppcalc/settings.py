"""Environment-driven settings, read once at import time."""
from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def read_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


DEBUG = read_bool(os.environ.get("DEBUG", "false"))
LOG_WITH_COLORS = read_bool(os.environ.get("LOG_WITH_COLORS", "true"))

# decimals shown by tools/calc.py; results themselves are never rounded
PP_DISPLAY_PRECISION = int(os.environ.get("PP_DISPLAY_PRECISION", 3))
