"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

LOGIN_PATH = "/login"
FORBIDDEN_PATH = "/forbidden"

DEFAULT_TIMEZONE = "Asia/Jakarta"
DEFAULT_TOKEN_EXPIRE_MINUTES = 60 * 24

JWT_ATTRIBUTE = "decoded_token_data"
JWT_ALGORITHM = "HS256"
