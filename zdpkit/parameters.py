"""Typed controller parameters and a store holding their values."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Union


class FirmwareUpdateState(Enum):
    """Values of the firmware update parameter."""

    IDLE = 0
    READY_TO_START = 1
    RUNNING = 2


class U8Parameter(Enum):
    """Parameters of 8-bit unsigned values."""

    CURRENT_CHANNEL = 0
    DEVICE_TYPE = 1
    SECURITY_MODE = 2
    PERMIT_JOIN = 3
    OTAU_ACTIVE = 4
    AUTO_POLLING_ACTIVE = 5
    NETWORK_UPDATE_ID = 6
    FIRMWARE_UPDATE_ACTIVE = 7
    DEVICE_CONNECTED = 8
    APS_ACK = 9
    PREDEFINED_PAN_ID = 10
    CUSTOM_MAC_ADDRESS = 11
    STATIC_NWK_ADDRESS = 12


class U16Parameter(Enum):
    """Parameters of 16-bit unsigned values."""

    PANID = 0
    NWK_ADDRESS = 1
    HTTP_PORT = 2


class U32Parameter(Enum):
    """Parameters of 32-bit unsigned values."""

    CHANNEL_MASK = 0
    FIRMWARE_VERSION = 1
    FRAME_COUNTER = 2


class U64Parameter(Enum):
    """Parameters of 64-bit unsigned values."""

    APS_USE_EXTENDED_PANID = 0
    EXTENDED_PANID = 1
    MAC_ADDRESS = 2
    TRUST_CENTER_ADDRESS = 3


class StringParameter(Enum):
    """Parameters holding text."""

    DEVICE_NAME = 0
    DEVICE_PATH = 1
    HTTP_ROOT = 2


class ArrayParameter(Enum):
    """Parameters holding raw bytes of a fixed size."""

    NETWORK_KEY = 0
    TRUST_CENTER_LINK_KEY = 1
    SECURITY_MATERIAL0 = 2


class VariantMapParameter(Enum):
    """Parameters holding a mapping of values."""

    HA_ENDPOINT = 0
    LINK_KEY = 1


Parameter = Union[
    U8Parameter,
    U16Parameter,
    U32Parameter,
    U64Parameter,
    StringParameter,
    ArrayParameter,
    VariantMapParameter,
]

_INT_BITS = {U8Parameter: 8, U16Parameter: 16, U32Parameter: 32, U64Parameter: 64}

_ARRAY_SIZES = {
    ArrayParameter.NETWORK_KEY: 16,
    ArrayParameter.TRUST_CENTER_LINK_KEY: 16,
    ArrayParameter.SECURITY_MATERIAL0: 32,
}


def _default(parameter: Parameter) -> Any:
    kind = type(parameter)
    if parameter is U8Parameter.FIRMWARE_UPDATE_ACTIVE:
        return FirmwareUpdateState.IDLE
    if kind in _INT_BITS:
        return 0
    if kind is StringParameter:
        return ""
    if kind is ArrayParameter:
        return bytes(_ARRAY_SIZES[parameter])  # type: ignore[index]
    return {}


def _validate(parameter: Parameter, value: Any) -> Any:
    kind = type(parameter)
    if parameter is U8Parameter.FIRMWARE_UPDATE_ACTIVE:
        if isinstance(value, FirmwareUpdateState):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{parameter.name} needs a FirmwareUpdateState, got {value!r}")
        return FirmwareUpdateState(value)
    if kind in _INT_BITS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{parameter.name} needs an integer, got {value!r}")
        if not 0 <= value < (1 << _INT_BITS[kind]):
            raise ValueError(f"{parameter.name} out of range: {value}")
        return int(value)
    if kind is StringParameter:
        if not isinstance(value, str):
            raise TypeError(f"{parameter.name} needs a string, got {value!r}")
        return value
    if kind is ArrayParameter:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"{parameter.name} needs bytes, got {value!r}")
        raw = bytes(value)
        size = _ARRAY_SIZES[parameter]  # type: ignore[index]
        if len(raw) != size:
            raise ValueError(f"{parameter.name} needs {size} bytes, got {len(raw)}")
        return raw
    if kind is VariantMapParameter:
        if not isinstance(value, dict):
            raise TypeError(f"{parameter.name} needs a dict, got {value!r}")
        return copy.deepcopy(value)
    raise TypeError(f"not a parameter: {parameter!r}")


class ParameterStore:
    """Holds controller parameter values; unset parameters read as their defaults."""

    def __init__(self) -> None:
        self._values: dict[Parameter, Any] = {}

    def set(self, parameter: Parameter, value: Any) -> bool:
        """Store a value; return True if it changed the parameter.

        Raises TypeError for a wrong parameter or value type and ValueError
        for a value out of range.
        """
        checked = _validate(parameter, value)
        if self.get(parameter) == checked:
            self._values[parameter] = checked
            return False
        self._values[parameter] = checked
        return True

    def get(self, parameter: Parameter) -> Any:
        """Return the value of a parameter, or its default if never set."""
        if type(parameter) not in (*_INT_BITS, StringParameter, ArrayParameter, VariantMapParameter):
            raise TypeError(f"not a parameter: {parameter!r}")
        if parameter in self._values:
            return copy.deepcopy(self._values[parameter])
        return _default(parameter)