from __future__ import annotations

import importlib
import os
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from jinja2 import FileSystemBytecodeCache

from config import get_settings_module

from .auth.jwt_guard import JwtAuthentication
from .common.datetime_utils import tanggal_format
from .container import Container, build_container
from .web.controller import register as register_pages
from .web.errors import register as register_errors


def _template_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    app = Flask(__name__, template_folder=getattr(settings, "TEMPLATE_PATH"))
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DISPLAY_ERROR_DETAILS"] = bool(getattr(settings, "DISPLAY_ERROR_DETAILS", False))
    app.config["TIMEZONE"] = getattr(settings, "TIMEZONE")
    app.config["JWT"] = dict(getattr(settings, "JWT"))
    app.config["SESSION_LIFETIME"] = timedelta(minutes=int(getattr(settings, "SESSION_LIFETIME_MINUTES")))
    app.permanent_session_lifetime = app.config["SESSION_LIFETIME"]

    cache_path = getattr(settings, "TEMPLATE_CACHE_PATH", "")
    if cache_path:
        os.makedirs(cache_path, exist_ok=True)
        app.jinja_env.bytecode_cache = FileSystemBytecodeCache(cache_path)

    app.jinja_env.filters["tanggal"] = lambda value, usetime=False: tanggal_format(
        value, usetime, tz=app.config["TIMEZONE"]
    )
    app.jinja_env.globals["env"] = _template_env

    if container is None:
        container = build_container(
            db_config=dict(getattr(settings, "DB_CONFIG")),
            logger_config=dict(getattr(settings, "LOGGER")),
        )
    app.extensions["waduk"] = container

    if app.config["DEBUG"]:
        container.logger.debug("settings=%s db=%s", settings_module, container.conn.dsn)

    JwtAuthentication(app.config["JWT"]["secret"], logger=container.logger).init_app(app)

    register_errors(app, container)
    register_pages(app, container)

    return app
