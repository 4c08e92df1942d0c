from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "litcal-mcp"
APP_AUTHOR = "LitCal"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))

API_BASE_URL = "https://litcal.johnromanodorazio.com/api/dev"
API_TIMEOUT_SECONDS = 30.0
DEFAULT_LOCALE = "en"
CACHE_TTL_MINUTES = 60


def ensure_data_dir(path: Path = DATA_DIR) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
