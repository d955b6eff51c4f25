from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from ..core.constants import DEFAULT_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM


def create_access_token(
    claims: Dict[str, Any],
    secret: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign ``claims`` as an HS256 token with ``iat`` and ``exp`` set.

    Used by the token endpoints under /api/token.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=DEFAULT_TOKEN_EXPIRE_MINUTES))
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, secret, algorithm=JWT_ALGORITHM)
