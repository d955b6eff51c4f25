from __future__ import annotations

import json

from flask import Flask, Response
from werkzeug.exceptions import HTTPException, NotFound

from ..container import Container


def envelope(status: int, message: str, **extra) -> Response:
    payload = {"status": str(status), "message": message, "data": []}
    payload.update(extra)
    return Response(
        json.dumps(payload, indent=4, ensure_ascii=False),
        status=status,
        mimetype="application/json",
    )


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(NotFound)
    def not_found(_e):
        return envelope(404, "endpoint not found")

    @app.errorhandler(Exception)
    def unhandled(e):
        # abort(403), 405, ... tetap ditangani Flask
        if isinstance(e, HTTPException):
            return e

        container.logger.error("Unhandled exception: %s", e, exc_info=e)
        if app.config.get("DISPLAY_ERROR_DETAILS"):
            return envelope(500, "internal server error", error=f"{type(e).__name__}: {e}")
        return envelope(500, "internal server error")
