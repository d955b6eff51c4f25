import os

def get_settings_module() -> str:
    # default APP_ENV "local", sama seperti .env contoh
    env = os.getenv("APP_ENV", "local").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    # local, development, staging, ... semua pakai development
    return "config.development"
