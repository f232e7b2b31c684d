from pathlib import Path
import os
from dotenv import load_dotenv
from PySide6.QtGui import QIcon # type: ignore

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (optional file)
load_dotenv(BASE_DIR / ".env")


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).expanduser() if value else default


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


# File / folder paths
ASSETS_DIR          = _env_path("JETSTREAM_ASSETS_DIR", BASE_DIR / "catalog" / "assets")
ICONS_DIR           = BASE_DIR / "icons"
LOG_PATH            = _env_path("JETSTREAM_LOG_PATH", BASE_DIR / "jetstream_debug.log")
LOG_LEVEL           = os.getenv("JETSTREAM_LOG_LEVEL", "INFO").upper()

MOVIES_ASSET        = "movies.json"
CATEGORIES_ASSET    = "categories.json"
MOVIE_LISTS_ASSET   = "movie_lists.json"

# Playback / posters
SAMPLE_VIDEO_URL    = os.getenv(
    "JETSTREAM_SAMPLE_VIDEO",
    "https://storage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
)
FETCH_POSTERS       = _env_flag("JETSTREAM_FETCH_POSTERS", True)
POSTER_TIMEOUT_S    = 10

# UI constants
APP_TITLE      = "JetStream"
WINDOW_SIZE    = (1280, 720)
ACCENT_COLOR   = "#3b82f6"
ICON = lambda name: QIcon(str(ICONS_DIR / f"{name}.svg"))

# Top bar hides once the first row scrolls past these offsets (pixels)
FAVOURITES_TOP_BAR_THRESHOLD = 100
MOVIES_TOP_BAR_THRESHOLD     = 1

CARD_16_9_SIZE  = (268, 151)
CARD_2_3_SIZE   = (156, 234)
