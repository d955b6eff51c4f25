from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from .connection import DatabaseConnection


@contextmanager
def read_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Open a connection for a read and yield a dictionary cursor.

    Both cursor and connection are closed on exit; nothing is committed.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None
