from __future__ import annotations

from datetime import datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE

BULAN = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def now_local(tz: Optional[str] = None) -> datetime:
    """Current time in the app timezone.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(ZoneInfo(tz or DEFAULT_TIMEZONE))


def _to_local(value: Union[int, float, datetime], tz: Optional[str]) -> datetime:
    zone = ZoneInfo(tz or DEFAULT_TIMEZONE)
    if isinstance(value, datetime):
        # naive datetime dianggap sudah waktu lokal
        return value.astimezone(zone) if value.tzinfo else value.replace(tzinfo=zone)
    return datetime.fromtimestamp(float(value), tz=zone)


def tanggal_format(value: Union[int, float, datetime], usetime: bool = False, tz: Optional[str] = None) -> str:
    """Format tanggal Indonesia, contoh: ``5 Agustus 2024`` atau ``5 Agustus 2024 07:30``."""
    dt = _to_local(value, tz)
    text = f"{dt.day} {BULAN[dt.month - 1]} {dt.year}"
    if usetime:
        text += f" {dt.strftime('%H:%M')}"
    return text
