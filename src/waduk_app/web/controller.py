from __future__ import annotations

from flask import Flask, render_template

from ..common.datetime_utils import now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/test", endpoint="test")
    def test():
        return render_template("template.html", now=now_local(app.config.get("TIMEZONE")))

    # Target redirect dari guard. Proses login (POST) ada di route aplikasi.
    @app.route("/login", endpoint="login")
    def login():
        return render_template("login.html")

    @app.route("/forbidden", endpoint="forbidden")
    def forbidden():
        return render_template("forbidden.html"), 403
