"""Application Support Layer primitives: addresses, data requests, confirms and indications."""

from __future__ import annotations

import copy
import itertools
import string
import threading
from dataclasses import MISSING, dataclass, field, fields
from enum import IntEnum, IntFlag
from typing import Iterable, Optional

from zdpkit.timeref import SteadyTimeRef
from zdpkit.types import (
    AddressMode,
    ApsStatus,
    CommonState,
    MacStatus,
    NwkStatus,
    is_broadcast,
)

APS_INVALID_NODE_ID = 0xFFFF
MAX_SOURCE_ROUTE_RELAYS = 9


class ApsAddressMode(IntEnum):
    """Address modes used for source and destination addresses."""

    NONE = 0x0
    GROUP = 0x1
    NWK = 0x2
    EXT = 0x3
    NWK_EXT = 0x4


class ApsTxOption(IntFlag):
    """Transmit options of a data request."""

    NONE = 0x00
    SECURITY_ENABLED = 0x01
    USE_NWK = 0x02
    ACKNOWLEDGED = 0x04
    FRAGMENTATION_PERMITTED = 0x08


def _check_range(value: int, bits: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{what} out of range: {value}")
    return int(value)


def _parse_hex(text: str, bits: int, what: str) -> int:
    digits = text.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    if not digits or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"invalid {what}: {text!r}")
    value = int(digits, 16)
    if value >= (1 << bits):
        raise ValueError(f"{what} out of range: {text!r}")
    return value


class Address:
    """A network, extended IEEE and group address; each part may be set or not."""

    __slots__ = ("_nwk", "_ext", "_group", "_modes")

    def __init__(
        self,
        *,
        nwk: Optional[int] = None,
        ext: Optional[int] = None,
        group: Optional[int] = None,
    ) -> None:
        self.clear()
        if nwk is not None:
            self.nwk = nwk
        if ext is not None:
            self.ext = ext
        if group is not None:
            self.group = group

    @property
    def nwk(self) -> int:
        """The 16-bit network address, 0 when unset."""
        return self._nwk

    @nwk.setter
    def nwk(self, value: int) -> None:
        self._nwk = _check_range(value, 16, "network address")
        self._modes |= AddressMode.NWK

    @property
    def ext(self) -> int:
        """The 64-bit extended IEEE address, 0 when unset."""
        return self._ext

    @ext.setter
    def ext(self, value: int) -> None:
        self._ext = _check_range(value, 64, "extended address")
        self._modes |= AddressMode.EXT

    @property
    def group(self) -> int:
        """The 16-bit group address, 0 when unset."""
        return self._group

    @group.setter
    def group(self, value: int) -> None:
        self._group = _check_range(value, 16, "group address")
        self._modes |= AddressMode.GROUP

    def is_nwk_unicast(self) -> bool:
        """Return True if a network address is set and it is not a broadcast address."""
        return self.has_nwk() and not is_broadcast(self._nwk)

    def is_nwk_broadcast(self) -> bool:
        """Return True if a network address is set and it is a broadcast address."""
        return self.has_nwk() and is_broadcast(self._nwk)

    def has_nwk(self) -> bool:
        return bool(self._modes & AddressMode.NWK)

    def has_ext(self) -> bool:
        return bool(self._modes & AddressMode.EXT)

    def has_group(self) -> bool:
        return bool(self._modes & AddressMode.GROUP)

    def clear(self) -> None:
        """Reset all address parts to 0 and mark them unset."""
        self._nwk = 0
        self._ext = 0
        self._group = 0
        self._modes = AddressMode.NONE

    def to_string_ext(self) -> str:
        return f"0x{self._ext:016x}"

    def to_string_nwk(self) -> str:
        return f"0x{self._nwk:04x}"

    def to_string_group(self) -> str:
        return f"0x{self._group:04x}"

    def from_string_ext(self, text: str) -> None:
        """Set the extended address from a hexadecimal string; raise ValueError if invalid."""
        self.ext = _parse_hex(text, 64, "extended address")

    def from_string_nwk(self, text: str) -> None:
        """Set the network address from a hexadecimal string; raise ValueError if invalid."""
        self.nwk = _parse_hex(text, 16, "network address")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return (self._nwk, self._ext, self._group) == (other._nwk, other._ext, other._group)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = []
        if self.has_nwk():
            parts.append(f"nwk={self.to_string_nwk()}")
        if self.has_ext():
            parts.append(f"ext={self.to_string_ext()}")
        if self.has_group():
            parts.append(f"group={self.to_string_group()}")
        return f"Address({', '.join(parts)})"


_id_lock = threading.Lock()
_id_cycle = itertools.cycle(range(1, 256))


def next_aps_request_id() -> int:
    """Allocate the next request id in the range 1-255."""
    with _id_lock:
        return next(_id_cycle)


def _reset_fields(obj: object, keep: Iterable[str] = ()) -> None:
    skip = set(keep)
    for f in fields(obj):  # type: ignore[arg-type]
        if f.name in skip:
            continue
        if f.default_factory is not MISSING:
            setattr(obj, f.name, f.default_factory())
        elif f.default is not MISSING:
            setattr(obj, f.name, f.default)


@dataclass(eq=False)
class ApsDataRequest:
    """APSDE-DATA.request primitive; every request gets a unique id on creation."""

    dst_address: Address = field(default_factory=Address)
    dst_address_mode: ApsAddressMode = ApsAddressMode.NONE
    src_endpoint: int = 0xFF
    dst_endpoint: int = 0xFF
    profile_id: int = 0
    cluster_id: int = 0
    response_cluster_id: int = 0
    asdu: bytearray = field(default_factory=bytearray)
    radius: int = 0
    tx_options: ApsTxOption = ApsTxOption.NONE
    version: int = 0
    node_id: int = APS_INVALID_NODE_ID
    send_after: SteadyTimeRef = field(default_factory=SteadyTimeRef)
    timeout: SteadyTimeRef = field(default_factory=SteadyTimeRef)
    state: CommonState = CommonState.IDLE
    send_delay: int = 0
    confirmed: bool = False
    source_route: tuple[int, ...] = ()
    source_route_uuid_hash: int = 0
    id: int = field(default_factory=next_aps_request_id)

    def __post_init__(self) -> None:
        self.asdu = bytearray(self.asdu)
        self.source_route = tuple(self.source_route)
        if len(self.source_route) > MAX_SOURCE_ROUTE_RELAYS:
            raise ValueError(
                f"source route has more than {MAX_SOURCE_ROUTE_RELAYS} relays"
            )

    def clear(self) -> None:
        """Reset all request parameters; the id is kept."""
        _reset_fields(self, keep=("id",))


@dataclass
class ApsDataConfirm:
    """APSDE-DATA.confirm primitive."""

    id: int = 0
    dst_address: Address = field(default_factory=Address)
    dst_address_mode: ApsAddressMode = ApsAddressMode.NONE
    dst_endpoint: int = 0xFF
    src_endpoint: int = 0xFF
    status: int = 0xFF
    tx_time: int = 0

    @classmethod
    def for_request(cls, request: ApsDataRequest, status: int) -> ApsDataConfirm:
        """Build a confirm reporting ``status`` for ``request``."""
        return cls(
            id=request.id,
            dst_address=copy.copy(request.dst_address),
            dst_address_mode=request.dst_address_mode,
            dst_endpoint=request.dst_endpoint,
            src_endpoint=request.src_endpoint,
            status=status,
        )


@dataclass
class ApsDataIndication:
    """APSDE-DATA.indication primitive."""

    dst_address_mode: ApsAddressMode = ApsAddressMode.NONE
    dst_address: Address = field(default_factory=Address)
    dst_endpoint: int = 0xFF
    src_address_mode: ApsAddressMode = ApsAddressMode.NONE
    src_address: Address = field(default_factory=Address)
    src_endpoint: int = 0xFF
    profile_id: int = 0
    cluster_id: int = 0
    asdu: bytearray = field(default_factory=bytearray)
    status: int = 0
    security_status: int = 0
    link_quality: int = 0
    rx_time: int = 0
    rssi: int = 0
    previous_hop: int = 0
    version: int = 0

    def __post_init__(self) -> None:
        self.asdu = bytearray(self.asdu)

    def reset(self) -> None:
        """Return the indication to its initial state for reuse."""
        _reset_fields(self)


_STATUS_ENUMS = ((ApsStatus, "APS"), (NwkStatus, "NWK"), (MacStatus, "MAC"))


def aps_status_to_string(status: int) -> str:
    """Return a readable name for an APS, NWK or MAC status code."""
    _check_range(status, 8, "status")
    for enum, prefix in _STATUS_ENUMS:
        try:
            return f"{prefix}_{enum(status).name}"
        except ValueError:
            continue
    return f"0x{status:02X}"