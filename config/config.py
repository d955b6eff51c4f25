import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def env(key: str, default: str = "") -> str:
    """Read an environment variable, falling back to ``default`` when unset."""
    return os.environ.get(key, default)


APP_ENV = env("APP_ENV", "local")
APP_NAME = env("APP_NAME", "App")
TIMEZONE = env("APP_TIMEZONE", "Asia/Jakarta")

DISPLAY_ERROR_DETAILS = APP_ENV != "production"
DEBUG = env("APP_DEBUG", "true") == "true"

TEMPLATE_PATH = str(BASE_DIR / "templates")
TEMPLATE_CACHE_PATH = "" if APP_ENV != "production" else str(BASE_DIR / "cache")

LOGGER = {
    "name": APP_NAME,
    # docker -> stdout, selain itu ke file
    "path": "stdout" if env("docker") not in ("", "0") else str(BASE_DIR / "logs" / "app.log"),
    "level": "DEBUG",
}

DB_CONFIG = {
    "connection": env("DB_CONNECTION"),
    "host": env("DB_HOST"),
    "port": env("DB_PORT"),
    "database": env("DB_DATABASE"),
    "username": env("DB_USERNAME"),
    "password": env("DB_PASSWORD"),
}

JWT = {
    "secret": env("SECRET"),
}

# Flask signs the session cookie with this key.
SECRET_KEY = env("SESSION_SECRET") or JWT["secret"]

SESSION_LIFETIME_MINUTES = int(env("SESSION_LIFETIME_MINUTES", "120"))
