"""Polars - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()
FLOW_HOME = USER_HOME / ".flow"
POLARS_HOME = Path(os.environ.get("POLARS_HOME") or FLOW_HOME / "polars")

LOG_FILE = POLARS_HOME / "polars.log"

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_POLARS_DIR = POLARS_HOME / "polars"
DEFAULT_ARCHIVED_DIR = POLARS_HOME / "archived"
