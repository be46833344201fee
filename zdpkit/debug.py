"""Debug trace output filtered by item flags."""

from __future__ import annotations

from enum import IntFlag
from typing import Callable, Optional, TextIO

_PREFIX = "DBG_"
_END = 0x01000000
_ALL = _END - 1

Callback = Callable[[int, str], None]


class DebugItem(IntFlag):
    """Debug output categories."""

    INFO = 0x00000001
    ERROR = 0x00000002
    PROT = 0x00000004
    VFS = 0x00000008
    WIRE = 0x00000010
    PROTBUF = 0x00000020
    ZDP = 0x00000040
    ZCL = 0x00000080
    APS = 0x00000100
    PROT_L2 = 0x00000200
    ZCLDB = 0x00000400
    INFO_L2 = 0x00000800
    HTTP = 0x00001000
    TLINK = 0x00002000
    ERROR_L2 = 0x00004000
    OTA = 0x00008000
    APS_L2 = 0x00010000
    MEASURE = 0x00020000
    ROUTING = 0x00040000
    ZGP = 0x00080000
    IAS = 0x00100000
    DDF = 0x00200000
    DEV = 0x00400000
    JS = 0x00800000


def _to_items(item: int) -> DebugItem:
    if isinstance(item, bool) or not isinstance(item, int):
        raise TypeError(f"debug item must be an integer, got {item!r}")
    value = int(item)
    if not 0 < value <= _ALL:
        raise ValueError(f"invalid debug item: 0x{value:X}")
    return DebugItem(value)


def item_from_string(name: str) -> DebugItem:
    """Return the item named ``name``, with or without the DBG_ prefix."""
    key = name.strip().upper()
    if key.startswith(_PREFIX):
        key = key[len(_PREFIX):]
    try:
        return DebugItem[key]
    except KeyError:
        raise ValueError(f"unknown debug item: {name!r}") from None


def string_from_item(item: int) -> str:
    """Return the DBG_ name of a single debug item."""
    value = int(_to_items(item))
    if value & (value - 1):
        raise ValueError(f"not a single debug item: 0x{value:X}")
    return _PREFIX + DebugItem(value).name


def hex_to_ascii(data: bytes) -> str:
    """Return ``data`` as a string of two hex digits per byte."""
    return bytes(data).hex()


class DebugTrace:
    """Writes debug text for enabled items to a stream and to callbacks."""

    def __init__(
        self, stream: Optional[TextIO] = None, items: int = 0
    ) -> None:
        self._stream = stream
        self._items = DebugItem(int(items) & _ALL)
        self._callbacks: list[Callback] = []

    @property
    def items(self) -> DebugItem:
        """The currently enabled items."""
        return self._items

    def enable(self, item: int) -> None:
        self._items = DebugItem(int(self._items) | int(_to_items(item)))

    def disable(self, item: int) -> None:
        self._items = DebugItem(int(self._items) & ~int(_to_items(item)) & _ALL)

    def is_enabled(self, item: int) -> bool:
        """Return True if any of the given items is enabled."""
        return bool(int(self._items) & int(_to_items(item)))

    def register_callback(self, callback: Callback) -> None:
        """Register a function called with (level, text) for each written text."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callbacks.append(callback)

    def write(self, level: int, text: str) -> bool:
        """Write ``text`` if ``level`` is enabled; return True if it was written."""
        if not self.is_enabled(level):
            return False
        for callback in self._callbacks:
            callback(int(level), text)
        if self._stream is not None:
            self._stream.write(text)
            self._stream.flush()
        return True

    def printf(self, level: int, fmt: str, *args: object) -> int:
        """Format with %-style ``fmt`` and write; return the length written, 0 if disabled."""
        if not self.is_enabled(level):
            return 0
        text = fmt % args
        self.write(level, text)
        return len(text)