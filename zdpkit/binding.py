"""Binding table entries of a node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from zdpkit.aps import Address, ApsAddressMode
from zdpkit.timeref import SteadyTimeRef, is_valid


@dataclass
class Binding:
    """One entry of a node's binding table."""

    src_address: int = 0
    src_endpoint: int = 0xFF
    cluster_id: int = 0xFFFF
    dst_address_mode: ApsAddressMode = ApsAddressMode.NONE
    dst_address: Address = field(default_factory=Address)
    dst_endpoint: int = 0xFF
    confirmed_time_ref: SteadyTimeRef = field(
        default_factory=SteadyTimeRef, compare=False
    )

    @classmethod
    def to_address(
        cls, src: int, dst: int, cluster_id: int, src_endpoint: int, dst_endpoint: int
    ) -> Binding:
        """Build a binding to an endpoint of a device given by its extended address."""
        return cls(
            src_address=src,
            src_endpoint=src_endpoint,
            cluster_id=cluster_id,
            dst_address_mode=ApsAddressMode.EXT,
            dst_address=Address(ext=dst),
            dst_endpoint=dst_endpoint,
        )

    @classmethod
    def to_group(
        cls, src: int, dst_group: int, cluster_id: int, src_endpoint: int
    ) -> Binding:
        """Build a binding to a group."""
        return cls(
            src_address=src,
            src_endpoint=src_endpoint,
            cluster_id=cluster_id,
            dst_address_mode=ApsAddressMode.GROUP,
            dst_address=Address(group=dst_group),
        )

    def is_valid(self) -> bool:
        """Return True if source and destination are completely specified."""
        if self.src_address == 0 or self.src_endpoint == 0xFF or self.cluster_id == 0xFFFF:
            return False
        if self.dst_address_mode == ApsAddressMode.GROUP:
            return self.dst_address.has_group()
        if self.dst_address_mode == ApsAddressMode.EXT:
            return self.dst_address.has_ext() and self.dst_endpoint != 0xFF
        return False


class BindingTable:
    """The ordered bindings of one node, without duplicates."""

    def __init__(self) -> None:
        self._table: list[Binding] = []
        self.response_index0_time_ref = SteadyTimeRef()

    def add(self, binding: Binding) -> bool:
        """Add a binding; return False if an equal one is already present."""
        if binding in self._table:
            return False
        self._table.append(binding)
        return True

    def remove(self, binding: Binding) -> bool:
        """Remove a binding; return False if it was not present."""
        try:
            self._table.remove(binding)
        except ValueError:
            return False
        return True

    def __contains__(self, binding: object) -> bool:
        return binding in self._table

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def clear_old_bindings(self) -> int:
        """Drop bindings not confirmed since the last table read started.

        Returns the number of removed bindings.
        """
        if not is_valid(self.response_index0_time_ref):
            return 0
        before = len(self._table)
        self._table = [
            b for b in self._table if self.response_index0_time_ref <= b.confirmed_time_ref
        ]
        return before - len(self._table)