"""A page cache over a file with clock replacement of its frames."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Optional

from zdpkit.files import File, FileMode, PathLike

PAGE_SIZE = 4096
MAX_PAGE_ID = 0xFFFF

_ACCESS = 1
_DIRTY = 2
_LOADED = 8


@dataclass
class PageData:
    """A loaded page; ``data`` is the live frame buffer of the page."""

    page_id: int
    data: bytearray


@dataclass
class _Frame:
    data: bytearray
    page: int = 0
    flags: int = 0

    @property
    def loaded(self) -> bool:
        return bool(self.flags & _LOADED)


def _check_page_id(page_id: int) -> int:
    if isinstance(page_id, bool) or not isinstance(page_id, int):
        raise TypeError(f"page id must be an integer, got {page_id!r}")
    if not 0 <= page_id <= MAX_PAGE_ID:
        raise ValueError(f"page id out of range: {page_id}")
    return page_id


class BufferPool:
    """Caches pages of ``PAGE_SIZE`` bytes of a file in ``n_frames`` frames."""

    def __init__(self, path: PathLike, n_frames: int = 8) -> None:
        if n_frames < 1:
            raise ValueError(f"a buffer pool needs at least one frame, got {n_frames}")
        self._file = File.open(path, FileMode.RW)
        self._frames = [_Frame(bytearray(PAGE_SIZE)) for _ in range(n_frames)]
        self._clock = 0
        self._n_pages = -(-self._file.size() // PAGE_SIZE)

    @property
    def n_frames(self) -> int:
        return len(self._frames)

    @property
    def n_pages(self) -> int:
        """Number of pages in the file, including allocated but unflushed ones."""
        return self._n_pages

    def _find(self, page_id: int) -> Optional[_Frame]:
        return next(
            (f for f in self._frames if f.loaded and f.page == page_id), None
        )

    def _write_back(self, frame: _Frame) -> None:
        self._file.seek(frame.page * PAGE_SIZE)
        self._file.write(bytes(frame.data))
        frame.flags &= ~_DIRTY

    def _evict(self) -> _Frame:
        free = next((f for f in self._frames if not f.loaded), None)
        if free is not None:
            return free
        while True:
            frame = self._frames[self._clock]
            self._clock = (self._clock + 1) % len(self._frames)
            if frame.flags & _ACCESS:
                frame.flags &= ~_ACCESS
                continue
            if frame.flags & _DIRTY:
                self._write_back(frame)
            frame.flags = 0
            return frame

    def load_page(self, page_id: int) -> PageData:
        """Return a page, reading it from the file if it is not cached.

        Raises IndexError if the page is not part of the file.
        """
        _check_page_id(page_id)
        frame = self._find(page_id)
        if frame is None:
            if page_id >= self._n_pages:
                raise IndexError(f"page {page_id} does not exist")
            frame = self._evict()
            self._file.seek(page_id * PAGE_SIZE)
            frame.data[:] = self._file.read(PAGE_SIZE).ljust(PAGE_SIZE, b"\0")
            frame.page = page_id
            frame.flags = _LOADED
        frame.flags |= _ACCESS
        return PageData(page_id, frame.data)

    def mark_page_dirty(self, page_id: int) -> None:
        """Mark a cached page to be written on flush; raise KeyError if not cached."""
        frame = self._find(_check_page_id(page_id))
        if frame is None:
            raise KeyError(page_id)
        frame.flags |= _DIRTY | _ACCESS

    def alloc_page(self) -> PageData:
        """Append a zero filled page to the file and return it."""
        page_id = self._n_pages
        if page_id > MAX_PAGE_ID:
            raise ValueError("no more page ids available")
        frame = self._evict()
        frame.data[:] = bytes(PAGE_SIZE)
        frame.page = page_id
        frame.flags = _LOADED | _ACCESS | _DIRTY
        self._n_pages += 1
        return PageData(page_id, frame.data)

    def truncate(self, n_pages: int) -> None:
        """Cut or zero-extend the file to ``n_pages`` pages; dropped pages are discarded."""
        if isinstance(n_pages, bool) or not isinstance(n_pages, int):
            raise TypeError(f"page count must be an integer, got {n_pages!r}")
        if not 0 <= n_pages <= MAX_PAGE_ID + 1:
            raise ValueError(f"page count out of range: {n_pages}")
        for frame in self._frames:
            if frame.loaded and frame.page >= n_pages:
                frame.flags = 0
        self._file.truncate(n_pages * PAGE_SIZE)
        self._n_pages = n_pages

    def flush(self) -> None:
        """Write all dirty cached pages to the file."""
        for frame in self._frames:
            if frame.loaded and frame.flags & _DIRTY:
                self._write_back(frame)

    def close(self) -> None:
        """Flush and close the file; closing twice is harmless."""
        if self._file.closed:
            return
        try:
            self.flush()
        finally:
            self._file.close()

    def __enter__(self) -> BufferPool:
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()