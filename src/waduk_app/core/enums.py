from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Peran user untuk otorisasi halaman."""

    ADMIN = "1"
    PETUGAS = "2"
