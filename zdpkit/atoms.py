"""A table of unique strings, each stored once and referenced by a stable index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MAX_ATOM_SIZE = 384

AtomData = Union[str, bytes, bytearray, memoryview]


class AtomError(Exception):
    """Raised when an atom cannot be added or found."""


@dataclass(frozen=True)
class Atom:
    """An atom as stored in the table."""

    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    @property
    def text(self) -> str:
        """The atom decoded as UTF-8."""
        return self.data.decode("utf-8")


def _as_bytes(data: AtomData) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"atom data must be str or bytes, got {type(data).__name__}")


class AtomTable:
    """Holds at most ``max_atoms`` unique atoms for the lifetime of the table."""

    def __init__(self, max_atoms: int) -> None:
        if max_atoms < 1:
            raise ValueError(f"max_atoms must be positive, got {max_atoms}")
        self._max_atoms = max_atoms
        self._atoms: list[Atom] = []
        self._indexes: dict[bytes, int] = {}

    @property
    def max_atoms(self) -> int:
        return self._max_atoms

    def add(self, data: AtomData) -> int:
        """Add an atom unless already present and return its index."""
        raw = _as_bytes(data)
        if not raw:
            raise AtomError("an atom must not be empty")
        if len(raw) > MAX_ATOM_SIZE:
            raise AtomError(f"atom of {len(raw)} bytes exceeds {MAX_ATOM_SIZE}")
        index = self._indexes.get(raw)
        if index is not None:
            return index
        if len(self._atoms) >= self._max_atoms:
            raise AtomError(f"atom table is full ({self._max_atoms} atoms)")
        index = len(self._atoms)
        self._atoms.append(Atom(raw))
        self._indexes[raw] = index
        return index

    def index_of(self, data: AtomData) -> int:
        """Return the index of an existing atom; raise AtomError if absent."""
        raw = _as_bytes(data)
        try:
            return self._indexes[raw]
        except KeyError:
            raise AtomError(f"no atom {raw!r}") from None

    def get(self, index: int) -> Atom:
        """Return the atom at ``index``; raise AtomError if there is none."""
        if not 0 <= index < len(self._atoms):
            raise AtomError(f"no atom with index {index}")
        return self._atoms[index]

    def __len__(self) -> int:
        return len(self._atoms)