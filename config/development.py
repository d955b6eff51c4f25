from config.config import *  # noqa: F401,F403
from config.config import JWT, env

# Local runs still need a signing key for the session cookie.
SECRET_KEY = env("SESSION_SECRET") or JWT["secret"] or "dev-secret-key"
