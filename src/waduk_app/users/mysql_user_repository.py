from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchone, read_cursor
from .model import User
from .repository import UserRepository


def _row_to_user(row: Dict[str, Any]) -> User:
    # kolom role bisa INT atau VARCHAR tergantung skema
    raw_role = str(row["role"]).strip()
    try:
        role = Role(raw_role)
    except ValueError:
        raise ValidationError(f"Unknown role {raw_role!r} for user {row['id']}")

    waduk_id = row.get("waduk_id")
    return User(
        id=int(row["id"]),
        username=row["username"],
        role=role,
        waduk_id=int(waduk_id) if waduk_id is not None else None,
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        # password sengaja tidak di-select
        with read_cursor(self._conn_factory) as cur:
            cur.execute(
                "SELECT id, username, role, waduk_id FROM users WHERE id=%s",
                (user_id,),
            )
            row = fetchone(cur)
        if not row:
            return None
        return _row_to_user(row)
