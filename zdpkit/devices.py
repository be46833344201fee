"""Descriptions of devices available for serial communication."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class DeviceEntry:
    """A serial device; equality ignores connect failures and baud rate."""

    friendly_name: str = ""
    path: str = ""
    serial_number: str = ""
    failed_connects: int = 0
    id_vendor: int = 0
    id_product: int = 0
    baudrate: int = 0

    def __post_init__(self) -> None:
        for name in ("id_vendor", "id_product"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range: {value}")
        if self.failed_connects < 0:
            raise ValueError(f"failed_connects must not be negative: {self.failed_connects}")
        if self.baudrate < 0:
            raise ValueError(f"baudrate must not be negative: {self.baudrate}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeviceEntry):
            return NotImplemented
        return (
            self.path == other.path
            and self.friendly_name == other.friendly_name
            and self.id_vendor == other.id_vendor
            and self.id_product == other.id_product
            and self.serial_number == other.serial_number
        )

    __hash__ = None  # type: ignore[assignment]