"""Touchlink requests and interpan indication frames."""

from __future__ import annotations

import secrets
import struct
from dataclasses import dataclass, field
from enum import IntEnum

from zdpkit.aps import Address, ApsAddressMode

MIN_CHANNEL = 11
MAX_CHANNEL = 26
_MAX_ASDU = 0xFF


class TouchlinkStatus(IntEnum):
    """Status codes of the touchlink module."""

    SUCCESS = 0x00
    FAILED = 0x01
    BUSY = 0x02


@dataclass
class TouchlinkRequest:
    """An interpan request sent on a given channel."""

    dst_address: Address = field(default_factory=Address)
    dst_address_mode: ApsAddressMode = ApsAddressMode.NONE
    channel: int = MIN_CHANNEL
    pan_id: int = 0
    profile_id: int = 0
    cluster_id: int = 0
    asdu: bytearray = field(default_factory=bytearray)
    transaction_id: int = 0

    def __post_init__(self) -> None:
        if not MIN_CHANNEL <= self.channel <= MAX_CHANNEL:
            raise ValueError(
                f"channel must be {MIN_CHANNEL}-{MAX_CHANNEL}, got {self.channel}"
            )
        self.asdu = bytearray(self.asdu)


def generate_transaction_id() -> int:
    """Return a random non zero 32-bit interpan transaction id."""
    return secrets.randbelow(0xFFFFFFFF) + 1


@dataclass
class InterpanIndication:
    """A received interpan frame; all fields are little endian on the wire."""

    src_pan_id: int
    src_address: int
    dst_pan_id: int
    dst_address_mode: int
    dst_address: int
    profile_id: int
    cluster_id: int
    asdu: bytes = b""

    def _dst_format(self) -> str:
        return "<Q" if self.dst_address_mode == ApsAddressMode.EXT else "<H"

    @classmethod
    def from_bytes(cls, data: bytes) -> InterpanIndication:
        """Parse a raw indication; raise ValueError if it is truncated."""
        data = bytes(data)
        pos = 0

        def take(fmt: str) -> tuple:
            nonlocal pos
            try:
                values = struct.unpack_from(fmt, data, pos)
            except struct.error:
                raise ValueError("interpan indication is truncated") from None
            pos += struct.calcsize(fmt)
            return values

        src_pan_id, src_address, dst_pan_id, mode = take("<HQHB")
        dst_format = "<Q" if mode == ApsAddressMode.EXT else "<H"
        (dst_address,) = take(dst_format)
        profile_id, cluster_id, length = take("<HHB")
        if pos + length > len(data):
            raise ValueError("interpan indication is truncated")
        return cls(
            src_pan_id=src_pan_id,
            src_address=src_address,
            dst_pan_id=dst_pan_id,
            dst_address_mode=mode,
            dst_address=dst_address,
            profile_id=profile_id,
            cluster_id=cluster_id,
            asdu=data[pos:pos + length],
        )

    def to_bytes(self) -> bytes:
        """Encode the indication in its raw wire format."""
        if len(self.asdu) > _MAX_ASDU:
            raise ValueError(f"asdu longer than {_MAX_ASDU} bytes")
        try:
            return b"".join(
                (
                    struct.pack(
                        "<HQHB",
                        self.src_pan_id,
                        self.src_address,
                        self.dst_pan_id,
                        self.dst_address_mode,
                    ),
                    struct.pack(self._dst_format(), self.dst_address),
                    struct.pack("<HHB", self.profile_id, self.cluster_id, len(self.asdu)),
                    bytes(self.asdu),
                )
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from None