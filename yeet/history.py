#===============================================================================
#  Yeet | history.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Launch history ledger: an append-only text file of "<epoch>\t<app name>"
#  lines shared by every running launcher instance.
#
#  Rules
#  -----
#    - The ledger path is either absent or a regular file. Symlinks, FIFOs,
#      directories and devices are refused, before the open and again on
#      the open descriptor (O_NOFOLLOW | O_NONBLOCK, then fstat).
#    - Appends are a single write(2) on an O_APPEND descriptor.
#    - Compaction writes an exclusively-created temp file in the same
#      directory and renames it over the ledger. The rename is the only
#      whole-file change other processes can observe.
#    - No locks. Two concurrent compactions are fine (last rename wins).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import errno
import logging
import os
import stat
import time
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import HISTORY_BYTES_PER_LINE, HISTORY_FILE_MODE, MAX_HISTORY_LINES
from .paths import history_path

log = logging.getLogger(__name__)

_O_NOFOLLOW = getattr(os, "O_NOFOLLOW", 0)
_O_CLOEXEC = getattr(os, "O_CLOEXEC", 0)
_O_NONBLOCK = getattr(os, "O_NONBLOCK", 0)
_MAX_TIMESTAMP = 2 ** 64

HistoryEvent = Tuple[int, str]


def parse_line(raw: bytes) -> Optional[HistoryEvent]:
    """Parse one ledger line. Returns None for anything malformed."""
    try:
        line = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
    line = line.rstrip("\r\n")
    fields = line.split("\t")
    if len(fields) != 2:
        return None
    ts_str, name = fields
    if not (ts_str.isascii() and ts_str.isdigit()):
        return None
    ts = int(ts_str)
    if ts >= _MAX_TIMESTAMP:
        return None
    return ts, name


def format_line(timestamp: int, app_name: str) -> bytes:
    return f"{timestamp}\t{app_name}\n".encode("utf-8")


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _refuse(path: Path, what: str) -> PermissionError:
    return PermissionError(errno.EPERM, f"history path cannot be {what}", str(path))


def _check_mode(path: Path, mode: int) -> None:
    if stat.S_ISLNK(mode):
        raise _refuse(path, "a symlink")
    if not stat.S_ISREG(mode):
        raise _refuse(path, "anything but a regular file")


def ensure_regular_or_absent(path: Path) -> None:
    """Raise PermissionError unless path is missing or a plain regular file (symlinks not followed)."""
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return
    _check_mode(path, st.st_mode)


def open_regular(path: Path, flags: int, mode: int = HISTORY_FILE_MODE) -> int:
    """os.open that never follows a symlink, never blocks on a FIFO and only returns regular files."""
    fd = os.open(path, flags | _O_NOFOLLOW | _O_NONBLOCK | _O_CLOEXEC, mode)
    try:
        _check_mode(path, os.fstat(fd).st_mode)
    except OSError:
        os.close(fd)
        raise
    return fd


class HistoryLedger:
    """Launch history stored at `path`, compacted to roughly `max_lines` events."""

    def __init__(self, path: Optional[Path] = None, max_lines: int = MAX_HISTORY_LINES):
        if max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {max_lines}")
        self.path = Path(path) if path is not None else history_path()
        self.max_lines = max_lines

    def record(self, app_name: str, timestamp: Optional[int] = None) -> None:
        """Append one launch event.

        Raises OSError; PermissionError when the ledger path is a symlink or
        not a regular file.
        """
        if timestamp is None:
            timestamp = int(time.time())

        self.path.parent.mkdir(parents=True, exist_ok=True)
        ensure_regular_or_absent(self.path)

        line = format_line(timestamp, app_name)
        fd = open_regular(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT)
        try:
            written = os.write(fd, line)
        finally:
            os.close(fd)
        if written != len(line):
            log.debug("Short history write (%d of %d bytes); line may be torn", written, len(line))

        try:
            size = os.stat(self.path).st_size
        except OSError:
            return
        if size > self.max_lines * HISTORY_BYTES_PER_LINE:
            self.compact(self.max_lines)

    def iter_events(self) -> Iterator[HistoryEvent]:
        """Valid events in file order, read line by line. Raises OSError if the file cannot be opened."""
        fd = open_regular(self.path, os.O_RDONLY)
        with os.fdopen(fd, "rb") as f:
            for raw in f:
                event = parse_line(raw)
                if event is None:
                    if raw.strip():
                        log.debug("Skipping malformed history line: %r", raw[:200])
                    continue
                yield event

    def read_events(self) -> List[HistoryEvent]:
        """All valid events in file order. Raises OSError if the file cannot be read."""
        return list(self.iter_events())

    def load(self) -> Dict[str, int]:
        """Most recent launch timestamp per app name. A missing ledger is empty."""
        latest: Dict[str, int] = {}
        try:
            for ts, name in self.iter_events():
                if ts > latest.get(name, -1):
                    latest[name] = ts
        except FileNotFoundError:
            return {}
        except OSError as e:
            log.warning("Cannot read history %s: %s", self.path, e)
            return {}
        return latest

    def compact(self, max_lines: Optional[int] = None) -> bool:
        """Keep only the newest `max_lines` events. Returns True if the ledger was rewritten.

        Failures leave the ledger untouched and are only logged.
        """
        if max_lines is None:
            max_lines = self.max_lines
        if max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {max_lines}")
        try:
            return self._compact(max_lines)
        except OSError as e:
            log.debug("History compaction skipped: %s", e)
            return False

    def _compact(self, max_lines: int) -> bool:
        ensure_regular_or_absent(self.path)
        events = self.read_events()
        if len(events) <= max_lines:
            return False

        # sorted() is stable, so equal timestamps keep their file order
        newest = sorted(events, key=lambda e: e[0], reverse=True)[:max_lines]
        newest.sort(key=lambda e: e[0])
        payload = b"".join(format_line(ts, name) for ts, name in newest)

        temp_path = self.path.parent / f".history.{os.getpid()}.{time.time_ns()}.tmp"
        flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | _O_NOFOLLOW | _O_CLOEXEC
        fd = os.open(temp_path, flags, HISTORY_FILE_MODE)
        try:
            try:
                _write_all(fd, payload)
                os.fsync(fd)
            finally:
                os.close(fd)
            os.replace(temp_path, self.path)
        except OSError:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

        log.debug("History compacted: %d -> %d events", len(events), len(newest))
        return True
