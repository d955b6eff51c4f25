"""
JWT authentication for the API.

Runs as a ``before_request`` hook. Requests under ``path`` (minus ``ignore``)
must carry an HS256 token signed with the app secret, either as
``Authorization: Bearer <token>`` or in the ``token`` cookie. Rejected
requests get a 401 with ``{"status": "error", "message": ...}``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterable, Optional, Sequence

from flask import Flask, Request, Response, g, request
from jose import JWTError, jwt

from ..core.constants import JWT_ALGORITHM, JWT_ATTRIBUTE
from ..core.exceptions import AuthenticationError, ConfigurationError

INSECURE_MESSAGE = "Insecure use of middleware over HTTP denied by configuration."


def _matches(uri: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return uri == prefix or uri.startswith(prefix + "/")


class JwtAuthentication:
    def __init__(
        self,
        secret: str,
        *,
        path: Sequence[str] = ("/api",),
        ignore: Sequence[str] = ("/api/token", "/api/tokentest"),
        algorithms: Sequence[str] = (JWT_ALGORITHM,),
        relaxed: Iterable[str] = ("localhost",),
        secure: bool = True,
        attribute: str = JWT_ATTRIBUTE,
        header: str = "Authorization",
        regexp: str = r"Bearer\s+(.*)$",
        cookie: str = "token",
        logger: Optional[logging.Logger] = None,
    ):
        if not secret:
            raise ConfigurationError("JWT secret is not configured (SECRET)")
        self._secret = secret
        self.path = list(path)
        self.ignore = list(ignore)
        self.algorithms = list(algorithms)
        self.relaxed = set(relaxed)
        self.secure = secure
        self.attribute = attribute
        self.header = header
        self._regexp = re.compile(regexp, re.IGNORECASE)
        self.cookie = cookie
        self._logger = logger or logging.getLogger(__name__)

    def init_app(self, app: Flask) -> None:
        app.before_request(self._before_request)

    def should_authenticate(self, req: Request) -> bool:
        if req.method == "OPTIONS":
            return False
        uri = req.path
        if any(_matches(uri, p) for p in self.ignore):
            return False
        return any(_matches(uri, p) for p in self.path)

    def fetch_token(self, req: Request) -> str:
        value = req.headers.get(self.header, "")
        found = self._regexp.search(value) if value else None
        if found and found.group(1).strip():
            return found.group(1).strip()

        token = req.cookies.get(self.cookie)
        if token:
            return token

        raise AuthenticationError("Token not found.")

    def decode_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=self.algorithms,
                options={"verify_aud": False, "verify_sub": False, "verify_jti": False},
            )
        except JWTError as e:
            raise AuthenticationError(str(e) or "Invalid token.") from e

    def _before_request(self) -> Optional[Response]:
        if not self.should_authenticate(request):
            return None

        host = (request.host or "").split(":")[0]
        if self.secure and request.scheme != "https" and host not in self.relaxed:
            raise RuntimeError(INSECURE_MESSAGE)

        try:
            claims = self.decode_token(self.fetch_token(request))
        except AuthenticationError as e:
            self._logger.warning("JWT rejected for %s: %s", request.path, e)
            return self.error_response(str(e))

        setattr(g, self.attribute, claims)
        return None

    @staticmethod
    def error_response(message: str, status: int = 401) -> Response:
        body = json.dumps({"status": "error", "message": message}, indent=4, ensure_ascii=False)
        return Response(body, status=status, mimetype="application/json")
