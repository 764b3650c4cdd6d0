"""
Encrypted ROM Device Layer
==========================
Memory devices the emulated Z80 reads its program from.

An encrypted Sega CPU decodes its ROM differently for instruction fetches
(M1 cycles) and for ordinary data reads.  ``EncryptedROM`` holds both
decoded planes and routes each read to the right one:

  read8(a, m1=True)   → opcodes[a]
  read8(a, m1=False)  → data[a]

The decode runs once, at device start.  Before that the device is in the
ENCRYPTED state and refuses reads; after it, DECODED, and both planes are
read-only for the rest of the session.
"""

from __future__ import annotations
import enum
from typing import Callable, Optional

from segacrp2 import DecodeStateError
from variants import Variant, lookup, check_image, decrypt_image


# ---------------------------------------------------------------------------
#  Device base class
# ---------------------------------------------------------------------------

class Device:
    """Abstract memory-mapped device."""

    def __init__(self, name: str, base: int, size: int):
        self.name = name
        self.base = base  # address of the first byte in the CPU's map
        self.size = size  # number of bytes in the window

    def read8(self, offset: int, m1: bool = False) -> int:
        """Read one byte at the given offset within this device."""
        return 0

    def write8(self, offset: int, value: int):
        """Write one byte at the given offset within this device."""
        pass

    def tick(self, cycles: int):
        """Advance the device clock by N CPU cycles. Override for timers etc."""
        pass


# ---------------------------------------------------------------------------
#  EncryptedROM
# ---------------------------------------------------------------------------

class RomState(enum.Enum):
    ENCRYPTED = 0
    DECODED   = 1


class EncryptedROM(Device):
    """Program ROM behind an encrypted Sega Z80."""

    def __init__(self, image, variant, base: int = 0x0000,
                 name: Optional[str] = None, fast: bool = True):
        self.variant: Variant = lookup(variant)
        check_image(image)
        super().__init__(name or self.variant.info.description, base,
                         len(image))
        self.fast = fast
        self.state = RomState.ENCRYPTED
        self._image = bytearray(image)
        self._opcodes: Optional[bytes] = None
        self._data: Optional[bytes] = None

        # Callbacks
        self.on_decoded: Optional[Callable[["EncryptedROM"], None]] = None  # called with self after start()

    @property
    def decoded(self) -> bool:
        return self.state is RomState.DECODED

    def start(self):
        """Decode both planes.  Allowed exactly once."""
        if self.state is RomState.DECODED:
            raise DecodeStateError(
                f"{self.name}: ROM already decoded; decoding again would "
                f"scramble it")
        opcodes = decrypt_image(self._image, self.variant, fast=self.fast)
        self._opcodes = bytes(opcodes)
        self._data = bytes(self._image)
        self._image = None
        self.state = RomState.DECODED
        if self.on_decoded:
            self.on_decoded(self)

    def _planes(self) -> tuple[bytes, bytes]:
        if self.state is not RomState.DECODED:
            raise DecodeStateError(f"{self.name}: read before decode")
        return self._opcodes, self._data

    @property
    def opcodes(self) -> bytes:
        return self._planes()[0]

    @property
    def data(self) -> bytes:
        return self._planes()[1]

    def read8(self, offset: int, m1: bool = False) -> int:
        opcodes, data = self._planes()
        offset %= self.size   # mirrored across the window
        return opcodes[offset] if m1 else data[offset]

    def fetch_opcode(self, offset: int) -> int:
        return self.read8(offset, m1=True)

    def write8(self, offset: int, value: int):
        pass   # ROM

    def __repr__(self):
        return (f"<EncryptedROM {self.variant.value} base={self.base:#06x} "
                f"size={self.size:#x} {self.state.name}>")
