from config.config import *  # noqa: F401,F403

TESTING = True
DEBUG = False

SECRET_KEY = "test-secret"
JWT = {
    "secret": "test-jwt-secret",
}

LOGGER = {
    "name": "waduk-test",
    "path": "stdout",
    "level": "DEBUG",
}

DB_CONFIG = {
    "connection": "mysql",
    "host": "localhost",
    "port": "3306",
    "database": "waduk_test",
    "username": "root",
    "password": "",
}

DISPLAY_ERROR_DETAILS = True
