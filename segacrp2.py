"""
Sega CPU Encryption (second generation) — Decode Engine
========================================================
Decrypts program images for the Sega/NEC encrypted Z80 parts (315-5136,
315-516x/517x, 317-000x).

The encryption only touches data bits D0, D2, D4 and D6.  For every
address it permutes those four bits and then XORs in a key byte, so there
are 4! * 2^4 = 384 possible encryptions of a single byte.  Which one is used
depends on address bits A0, A3, A6, A9, A12 and A14 (the *row*) and on the
M1 signal: an instruction fetch decodes differently from a data read at the
same address.  Decoding an image therefore produces two planes:

  opcodes: what the CPU sees during M1 (instruction fetch) cycles
  data:    what the CPU sees for every other read

``decode`` follows the hardware model: the data plane overwrites the image
in place and the opcode plane is returned as a new buffer.  ``decrypt`` is
the non-mutating form.  ``decode_fast`` does the same work with numpy table
lookups and must agree byte-for-byte with ``decode``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# ---------------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------------

PLANE_OPCODE = 0   # M1 cycle
PLANE_DATA   = 1   # everything else

NUM_ROWS      = 64
SCHEDULE_SIZE = NUM_ROWS * 2   # one key entry per (row, plane)
MAX_SHIFT     = 3              # furthest window start into a shared key stream

# Address bits that select the row, most significant first.
ROW_BITS = (14, 12, 9, 6, 3, 0)

# The four data lanes the permutation works on, in output order.
PERM_LANES = (6, 4, 2, 0)

# Lane permutations.  Entry i says output bit PERM_LANES[i] is taken from
# source bit SWAP_TABLE[n][i].  Index 0 is the identity.
SWAP_TABLE = (
    (6, 4, 2, 0), (4, 6, 2, 0), (2, 4, 6, 0), (0, 4, 2, 6),
    (6, 2, 4, 0), (6, 0, 2, 4), (6, 4, 0, 2), (2, 6, 4, 0),
    (4, 2, 6, 0), (4, 6, 0, 2), (6, 0, 4, 2), (0, 6, 4, 2),
    (4, 0, 6, 2), (0, 4, 6, 2), (6, 2, 0, 4), (2, 6, 0, 4),
    (0, 6, 2, 4), (2, 0, 6, 4), (0, 2, 6, 4), (4, 2, 0, 6),
    (2, 4, 0, 6), (4, 0, 2, 6), (2, 0, 4, 6), (0, 2, 4, 6),
)

# ---------------------------------------------------------------------------
#  Errors
# ---------------------------------------------------------------------------

class Crp2Error(Exception):
    """Base for all decryption configuration errors."""
    pass

class ScheduleError(Crp2Error, ValueError):
    """Malformed key schedule (bad table length, shift, XOR or swap index)."""
    pass

class UnknownVariantError(Crp2Error, KeyError):
    def __init__(self, name, message: str = ""):
        self.name = name
        super().__init__(message or f"Unknown encrypted CPU part: {name!r}")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]

class ImageSizeError(Crp2Error, ValueError):
    pass

class DecodeStateError(Crp2Error, RuntimeError):
    """Decode invoked twice, or a plane read before decoding."""
    pass

# ---------------------------------------------------------------------------
#  Bit helpers
# ---------------------------------------------------------------------------

def bitswap(value: int, *bits: int) -> int:
    """Gather the listed bits of *value*; the first becomes the MSB."""
    out = 0
    for b in bits:
        out = (out << 1) | ((value >> b) & 1)
    return out

def row_select(address: int) -> int:
    """Row index (0..63) for *address*, from bits 14, 12, 9, 6, 3 and 0."""
    return bitswap(address & 0xFFFF, *ROW_BITS)

def schedule_index(row: int, plane: int) -> int:
    return row * 2 + plane

# ---------------------------------------------------------------------------
#  Key schedule
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KeyEntry:
    """One (XOR byte, swap table index) pair."""
    xor: int
    perm: int

    def __post_init__(self):
        if not 0 <= self.xor <= 0xFF:
            raise ScheduleError(f"XOR byte out of range: {self.xor:#x}")
        if not 0 <= self.perm < len(SWAP_TABLE):
            raise ScheduleError(f"Swap index out of range: {self.perm}")

    @property
    def lanes(self) -> tuple:
        return SWAP_TABLE[self.perm]


class VariantSchedule:
    """The 128 key entries one encrypted CPU applies, indexed by row*2+plane.

    Built from a parallel XOR table and swap table.  Parts with their own
    key pass 128-entry tables; parts carved out of a shared key stream pass
    the whole stream plus the offset (*shift*) their window starts at.
    """

    def __init__(self, xor_table, swap_table, shift: int = 0,
                 name: str = ""):
        if len(xor_table) != len(swap_table):
            raise ScheduleError(
                f"XOR and swap tables differ in length "
                f"({len(xor_table)} vs {len(swap_table)})")
        if shift > MAX_SHIFT:
            raise ScheduleError(
                f"Shift {shift} is past the last key window ({MAX_SHIFT})")
        if shift < 0 or shift + SCHEDULE_SIZE > len(xor_table):
            raise ScheduleError(
                f"Shift {shift} leaves no {SCHEDULE_SIZE}-entry window in a "
                f"{len(xor_table)}-entry table")
        self.name = name
        self.shift = shift
        self.master_size = len(xor_table)
        self._entries = tuple(
            KeyEntry(xor_table[shift + i], swap_table[shift + i])
            for i in range(SCHEDULE_SIZE))
        self._lut = None

    @property
    def windowed(self) -> bool:
        """True when this schedule is a window into a longer key stream."""
        return self.master_size > SCHEDULE_SIZE

    def __len__(self) -> int:
        return SCHEDULE_SIZE

    def __getitem__(self, index: int) -> KeyEntry:
        return self._entries[index]

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other):
        if not isinstance(other, VariantSchedule):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        label = self.name or "anonymous"
        if self.windowed:
            return f"<VariantSchedule {label} shift={self.shift}>"
        return f"<VariantSchedule {label}>"

    def entry(self, row: int, plane: int) -> KeyEntry:
        return self._entries[schedule_index(row, plane)]

    @property
    def xor_table(self) -> bytes:
        return bytes(e.xor for e in self._entries)

    @property
    def swap_table(self) -> bytes:
        return bytes(e.perm for e in self._entries)

    def lookup_tables(self):
        """128 × 256 uint8 array: row k holds transform(v, self[k]) for all v.

        Built on first use and cached.
        """
        if self._lut is None:
            import numpy as np
            lut = np.empty((SCHEDULE_SIZE, 256), dtype=np.uint8)
            for k, e in enumerate(self._entries):
                lut[k] = [transform(v, e) for v in range(256)]
            lut.setflags(write=False)
            self._lut = lut
        return self._lut

# ---------------------------------------------------------------------------
#  Byte transform
# ---------------------------------------------------------------------------

def transform(src: int, entry: KeyEntry) -> int:
    """Decode one byte: permute the even lanes, then XOR.

    Odd bits pass straight through; output bits 6, 4, 2, 0 are read from
    the source bits named by the entry's swap table row.
    """
    t = SWAP_TABLE[entry.perm]
    return bitswap(src, 7, t[0], 5, t[1], 3, t[2], 1, t[3]) ^ entry.xor

def inverse_transform(value: int, entry: KeyEntry) -> int:
    """Undo ``transform``: XOR, then put each even lane back where it came from."""
    t = SWAP_TABLE[entry.perm]
    y = (value ^ entry.xor) & 0xFF
    src = y & 0xAA
    for lane, origin in zip(PERM_LANES, t):
        if (y >> lane) & 1:
            src |= 1 << origin
    return src

# ---------------------------------------------------------------------------
#  Decode engines
# ---------------------------------------------------------------------------

def decode(image, schedule: VariantSchedule,
           length: Optional[int] = None) -> bytearray:
    """Decode *image* in place to the data plane; return the opcode plane.

    Only addresses ``[0, length)`` are touched (default: the whole image).
    Not idempotent: running it twice over the same buffer yields garbage.
    """
    if length is None:
        length = len(image)
    opcodes = bytearray(length)
    entries = schedule._entries
    for a in range(length):
        src = image[a]
        row = row_select(a)
        opcodes[a] = transform(src, entries[row * 2 + PLANE_OPCODE])
        image[a] = transform(src, entries[row * 2 + PLANE_DATA])
    return opcodes


def row_indices(length: int):
    """numpy array of row_select(a) for every a in [0, length)."""
    import numpy as np
    addr = np.arange(length, dtype=np.uint32)
    rows = np.zeros(length, dtype=np.intp)
    for bit in ROW_BITS:
        rows = (rows << 1) | ((addr >> bit) & 1)
    return rows


def decode_fast(image, schedule: VariantSchedule,
                length: Optional[int] = None) -> bytearray:
    """Same contract as ``decode``, vectorised over all addresses."""
    import numpy as np

    if length is None:
        length = len(image)
    src = np.frombuffer(bytes(image[:length]), dtype=np.uint8)
    rows = row_indices(length)
    lut = schedule.lookup_tables()

    opcodes = lut[rows * 2 + PLANE_OPCODE, src]
    data = lut[rows * 2 + PLANE_DATA, src]

    image[:length] = data.tobytes()
    return bytearray(opcodes.tobytes())


def decrypt(image, schedule: VariantSchedule,
            fast: bool = True) -> tuple[bytes, bytes]:
    """Return ``(opcodes, data)`` without touching *image*."""
    work = bytearray(image)
    engine = decode_fast if fast else decode
    opcodes = engine(work, schedule)
    return bytes(opcodes), bytes(work)


def encrypt(plane: bytes, schedule: VariantSchedule,
            which: int = PLANE_DATA) -> bytearray:
    """Build an image whose *which* plane decodes back to *plane*.

    Only one plane can be chosen: the other plane of the result is whatever
    the key makes of the same source bytes.
    """
    entries = schedule._entries
    out = bytearray(len(plane))
    for a, v in enumerate(plane):
        out[a] = inverse_transform(v, entries[row_select(a) * 2 + which])
    return out
