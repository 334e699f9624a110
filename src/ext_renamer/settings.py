from __future__ import annotations

import os

LOG_LEVEL = os.getenv("EXT_RENAMER_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("EXT_RENAMER_LOG_FILE", "")
DEFAULT_DIR = os.getenv("EXT_RENAMER_DEFAULT_DIR", "")
