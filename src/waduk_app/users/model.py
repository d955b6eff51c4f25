from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """User yang sedang login, tanpa kolom password."""

    id: int
    username: str
    role: Role
    waduk_id: Optional[int]
