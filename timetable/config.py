"""
Configuration constants and environment setup.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from timetable.layout import DEFAULT_COLUMN_WIDTH

# .env of the working directory (or a parent), not of the installed package
load_dotenv(find_dotenv(usecwd=True))

# Data file (TIMETABLE_DATA); None -> package default, see storage._default_store_path
_DATA_ENV = os.environ.get("TIMETABLE_DATA", "").strip()
DATA_PATH: Optional[Path] = Path(_DATA_ENV).expanduser() if _DATA_ENV else None

# Width of one venue column in layout units
VENUE_WIDTH = int(os.environ.get("TIMETABLE_VENUE_WIDTH", str(DEFAULT_COLUMN_WIDTH)))

LOG_LEVEL = os.environ.get("TIMETABLE_LOG_LEVEL", "WARNING").upper()
