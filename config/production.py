from config.config import *  # noqa: F401,F403
from config.config import BASE_DIR

DISPLAY_ERROR_DETAILS = False
TEMPLATE_CACHE_PATH = str(BASE_DIR / "cache")
