"""Plain file access and directory listing."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import TracebackType
from typing import BinaryIO, Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileMode(IntEnum):
    """How a file is opened."""

    R = 1
    RW = 2


class EntryType(Enum):
    """Kind of a directory entry."""

    UNKNOWN = 0
    BLOCK = 1
    CHARACTER_DEVICE = 2
    DIRECTORY = 3
    FIFO = 4
    LINK = 5
    FILE = 6
    SOCKET = 7


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory."""

    name: str
    type: EntryType


class File:
    """An open binary file; writes go straight to the operating system."""

    def __init__(self, raw: BinaryIO, path: PathLike, mode: FileMode) -> None:
        self._raw = raw
        self.path = os.fspath(path)
        self.mode = mode

    @classmethod
    def open(cls, path: PathLike, mode: FileMode = FileMode.R) -> File:
        """Open ``path`` read only, or read-write creating it if missing.

        Raises OSError if the file cannot be opened.
        """
        mode = FileMode(mode)
        if mode is FileMode.R:
            raw = open(path, "rb", buffering=0)
        else:
            flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
            fd = os.open(path, flags, 0o644)
            try:
                raw = os.fdopen(fd, "r+b", buffering=0)
            except Exception:
                os.close(fd)
                raise
        return cls(raw, path, mode)

    @property
    def closed(self) -> bool:
        return self._raw.closed

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        self._raw.close()

    def size(self) -> int:
        """Return the size of the file in bytes."""
        if self._raw.closed:
            raise ValueError("I/O operation on closed file")
        return os.fstat(self._raw.fileno()).st_size

    def read(self, max_size: int) -> bytes:
        """Read up to ``max_size`` bytes from the current position."""
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        chunks = []
        remaining = max_size
        while remaining > 0:
            chunk = self._raw.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def write(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes written."""
        view = memoryview(bytes(data))
        written = 0
        while written < len(view):
            n = self._raw.write(view[written:])
            if not n:
                raise OSError(f"could not write to {self.path}")
            written += n
        return written

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the file position and return the new one."""
        return self._raw.seek(offset, whence)

    def truncate(self, size: int) -> None:
        """Cut or zero-extend the file to ``size`` bytes."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._raw.truncate(size)

    def __enter__(self) -> File:
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else self.mode.name
        return f"File({self.path!r}, {state})"


def delete_file(path: PathLike) -> bool:
    """Delete a file; return False if it did not exist."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True


def _entry_type(entry: os.DirEntry) -> EntryType:
    try:
        if entry.is_symlink():
            return EntryType.LINK
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return EntryType.UNKNOWN
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    if stat.S_ISBLK(mode):
        return EntryType.BLOCK
    if stat.S_ISCHR(mode):
        return EntryType.CHARACTER_DEVICE
    if stat.S_ISFIFO(mode):
        return EntryType.FIFO
    if stat.S_ISSOCK(mode):
        return EntryType.SOCKET
    return EntryType.UNKNOWN


def read_dir(path: PathLike) -> Iterator[DirEntry]:
    """Yield the entries of a directory; raise OSError if it cannot be read."""
    with os.scandir(path) as entries:
        for entry in entries:
            yield DirEntry(entry.name, _entry_type(entry))