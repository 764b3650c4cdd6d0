"""
variants.py — Encrypted CPU part registry
==========================================
Maps a CPU part number to the key schedule its encryption uses.  Consulted
once when a ROM image is loaded; the chosen schedule then drives
``segacrp2.decode``.

  Part #      Device          Games
  315-5136    NEC 315-5136    New Lucky 8 Lines (set 7, W-4, encrypted)
  315-5162    Sega 315-5162   4D Warriors, Rafflesia, Wonder Boy (set 4)
  315-5176    Sega 315-5176   Wonder Boy (system 2 hardware, set 2)
  315-5177    Sega 315-5177   Astro Flash, Wonder Boy (set 1),
                              Fantasy Zone sound CPU (as 317-5000)
  315-5178    Sega 315-5178   Wonder Boy (set 2)
  315-5179    Sega 315-5179   Robo-Wrestle 2001
  317-0004    Sega 317-0004   Calorie Kun           (master key, shift 0)
  317-0005    Sega 317-0005   Space Position        (master key, shift 1)
  317-0006    Sega 317-0006   Gardia (set 1)        (master key, shift 2)
  317-0007    Sega 317-0007   Gardia (set 2)        (master key, shift 3)
"""

from __future__ import annotations
import enum
from dataclasses import dataclass, field

import keytables
from segacrp2 import (
    VariantSchedule, UnknownVariantError, ImageSizeError,
    decode, decode_fast,
)

MAX_IMAGE_SIZE = 0x8000   # A15 is not decoded; the key covers 32 KiB


class Variant(enum.Enum):
    NEC_315_5136  = "315-5136"
    SEGA_315_5162 = "315-5162"
    SEGA_315_5176 = "315-5176"
    SEGA_315_5177 = "315-5177"
    SEGA_315_5178 = "315-5178"
    SEGA_315_5179 = "315-5179"
    SEGA_317_0004 = "317-0004"
    SEGA_317_0005 = "317-0005"
    SEGA_317_0006 = "317-0006"
    SEGA_317_0007 = "317-0007"

    @property
    def part(self) -> str:
        return self.value

    @property
    def info(self) -> "VariantInfo":
        return VARIANTS[self]


@dataclass(frozen=True)
class VariantInfo:
    variant: Variant
    device: str                      # short name, e.g. "sega_315_5177"
    description: str                 # e.g. "Sega 315-5177"
    games: tuple = ()
    aliases: tuple = ()
    xor_table: tuple = field(default=(), repr=False)
    swap_table: tuple = field(default=(), repr=False)
    shift: int = 0

    @property
    def family(self) -> str:
        return self.variant.value[:3]

    @property
    def windowed(self) -> bool:
        return len(self.xor_table) > 128


# Offsets into the shared 317 key stream
SHIFT_317 = {
    Variant.SEGA_317_0004: 0,
    Variant.SEGA_317_0005: 1,
    Variant.SEGA_317_0006: 2,
    Variant.SEGA_317_0007: 3,
}


def _inline(variant, device, description, xor_table, swap_table,
            games=(), aliases=()):
    return VariantInfo(variant, device, description, tuple(games),
                       tuple(aliases), xor_table, swap_table)


def _master(variant, games=()):
    part = variant.value
    return VariantInfo(variant, "sega_" + part.replace("-", "_"),
                       "Sega " + part, tuple(games), (),
                       keytables.XOR_317_MASTER, keytables.SWAP_317_MASTER,
                       SHIFT_317[variant])


VARIANTS: dict[Variant, VariantInfo] = {
    v.variant: v for v in (
        _inline(Variant.NEC_315_5136, "nec_315_5136", "NEC 315-5136",
                keytables.XOR_315_5136, keytables.SWAP_315_5136,
                games=("New Lucky 8 Lines (set 7, W-4, encrypted)",)),
        _inline(Variant.SEGA_315_5162, "sega_315_5162", "Sega 315-5162",
                keytables.XOR_315_5162, keytables.SWAP_315_5162,
                games=("4D Warriors", "Rafflesia", "Wonder Boy (set 4)")),
        _inline(Variant.SEGA_315_5176, "sega_315_5176", "Sega 315-5176",
                keytables.XOR_315_5176, keytables.SWAP_315_5176,
                games=("Wonder Boy (system 2 hardware, set 2)",)),
        _inline(Variant.SEGA_315_5177, "sega_315_5177", "Sega 315-5177",
                keytables.XOR_315_5177, keytables.SWAP_315_5177,
                games=("Astro Flash", "Wonder Boy (set 1)",
                       "Fantasy Zone (sound CPU)"),
                aliases=("317-5000",)),
        _inline(Variant.SEGA_315_5178, "sega_315_5178", "Sega 315-5178",
                keytables.XOR_315_5178, keytables.SWAP_315_5178,
                games=("Wonder Boy (set 2)",)),
        _inline(Variant.SEGA_315_5179, "sega_315_5179", "Sega 315-5179",
                keytables.XOR_315_5179, keytables.SWAP_315_5179,
                games=("Robo-Wrestle 2001",)),
        _master(Variant.SEGA_317_0004, games=("Calorie Kun",)),
        _master(Variant.SEGA_317_0005, games=("Space Position",)),
        _master(Variant.SEGA_317_0006, games=("Gardia (set 1)",)),
        _master(Variant.SEGA_317_0007, games=("Gardia (set 2)",)),
    )
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def _build_names() -> dict[str, Variant]:
    """Every accepted spelling → Variant."""
    names = {}
    for info in VARIANTS.values():
        v = info.variant
        for n in (v.value, v.name, info.device) + info.aliases:
            names[_normalize(n)] = v
    return names


_NAMES = _build_names()
_schedules: dict[Variant, VariantSchedule] = {}


# ---------------------------------------------------------------------------
#  Lookup
# ---------------------------------------------------------------------------

def lookup(name) -> Variant:
    """Resolve a Variant, part number, alias or device name.

    Raises UnknownVariantError for anything else; there is no default key.
    """
    if isinstance(name, Variant):
        return name
    if not isinstance(name, str):
        raise UnknownVariantError(name)
    try:
        return _NAMES[_normalize(name)]
    except KeyError:
        raise UnknownVariantError(name) from None


def schedule_for(variant) -> VariantSchedule:
    """Key schedule for *variant*, built once and cached."""
    v = lookup(variant)
    sched = _schedules.get(v)
    if sched is None:
        info = VARIANTS[v]
        sched = VariantSchedule(info.xor_table, info.swap_table,
                                shift=info.shift, name=v.value)
        _schedules[v] = sched
    return sched


def check_image(image, limit: int = MAX_IMAGE_SIZE):
    """Reject images the key cannot cover."""
    size = len(image)
    if size == 0:
        raise ImageSizeError("Empty ROM image")
    if size > limit:
        raise ImageSizeError(
            f"ROM image is {size:#x} bytes; encrypted region is at most "
            f"{limit:#x}")


def decrypt_image(image, variant, fast: bool = True) -> bytearray:
    """Validate, pick the schedule and decode *image* in place.

    Returns the opcode plane; *image* becomes the data plane.
    """
    check_image(image)
    sched = schedule_for(variant)
    engine = decode_fast if fast else decode
    return engine(image, sched)
