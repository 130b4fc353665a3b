"""Timestamp queries and updates.

Getters return timezone-aware datetimes: local-time variants carry the local
UTC offset, ``*_utc`` variants carry ``timezone.utc``. Setters accept an aware
datetime, a naive datetime (local time for the plain variants, UTC for the
``*_utc`` variants) or an epoch number.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone

from corefile import fs
from corefile.exceptions import UnsupportedOperationError
from corefile.io.errors import os_errors
from corefile.types import StrPath, TimeValue

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def get_creation_time(path: StrPath) -> datetime:
    """Return when ``path`` was created, in local time."""
    return _to_datetime(fs.get_ctime(path), utc=False)


def get_creation_time_utc(path: StrPath) -> datetime:
    """Return when ``path`` was created, in UTC."""
    return _to_datetime(fs.get_ctime(path), utc=True)


def get_last_access_time(path: StrPath) -> datetime:
    """Return when ``path`` was last read, in local time."""
    return _to_datetime(fs.get_atime(path), utc=False)


def get_last_access_time_utc(path: StrPath) -> datetime:
    """Return when ``path`` was last read, in UTC."""
    return _to_datetime(fs.get_atime(path), utc=True)


def get_last_write_time(path: StrPath) -> datetime:
    """Return when ``path`` was last written, in local time."""
    return _to_datetime(fs.get_mtime(path), utc=False)


def get_last_write_time_utc(path: StrPath) -> datetime:
    """Return when ``path`` was last written, in UTC."""
    return _to_datetime(fs.get_mtime(path), utc=True)


def supports_set_creation_time() -> bool:
    """Whether creation times can be changed on this platform.

    The standard library has no primitive for rewriting a file's birth time
    on any platform.
    """
    return False


def set_creation_time(path: StrPath, value: TimeValue) -> None:
    """Always raises ``UnsupportedOperationError``; see ``supports_set_creation_time``."""
    _refuse_creation_time(path)


def set_creation_time_utc(path: StrPath, value: TimeValue) -> None:
    """Always raises ``UnsupportedOperationError``; see ``supports_set_creation_time``."""
    _refuse_creation_time(path)


def set_last_access_time(path: StrPath, value: TimeValue) -> None:
    """Set the access time of ``path``; naive datetimes are local time."""
    _set_times(path, atime_ns=_to_epoch_ns(value, utc=False))


def set_last_access_time_utc(path: StrPath, value: TimeValue) -> None:
    """Set the access time of ``path``; naive datetimes are UTC."""
    _set_times(path, atime_ns=_to_epoch_ns(value, utc=True))


def set_last_write_time(path: StrPath, value: TimeValue) -> None:
    """Set the modification time of ``path``; naive datetimes are local time."""
    _set_times(path, mtime_ns=_to_epoch_ns(value, utc=False))


def set_last_write_time_utc(path: StrPath, value: TimeValue) -> None:
    """Set the modification time of ``path``; naive datetimes are UTC."""
    _set_times(path, mtime_ns=_to_epoch_ns(value, utc=True))


def _to_datetime(epoch: float, *, utc: bool) -> datetime:
    moment = datetime.fromtimestamp(epoch, tz=timezone.utc)
    return moment if utc else moment.astimezone()


def _to_epoch_ns(value: TimeValue, *, utc: bool) -> int:
    """Convert a setter argument to integer nanoseconds since the epoch."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc) if utc else value.astimezone()
        return (value - _EPOCH) // timedelta(microseconds=1) * 1000
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a datetime or epoch number, got {type(value).__name__}")
    if isinstance(value, int):
        return value * 1_000_000_000
    return round(value * 1_000_000_000)


def _set_times(path: StrPath, *, atime_ns: int | None = None, mtime_ns: int | None = None) -> None:
    """Update one or both timestamps, keeping the other as it is."""
    with os_errors("set timestamps of", path):
        current = os.stat(path)
        times = (
            current.st_atime_ns if atime_ns is None else atime_ns,
            current.st_mtime_ns if mtime_ns is None else mtime_ns,
        )
        os.utime(path, ns=times)
    logger.debug("Set timestamps of %s to atime_ns=%d mtime_ns=%d", path, *times)


def _refuse_creation_time(path: StrPath) -> None:
    with os_errors("set creation time of", path):
        os.stat(path)
    raise UnsupportedOperationError(f"Setting the creation time of {path} is not supported on this platform")
