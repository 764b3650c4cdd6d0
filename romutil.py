#!/usr/bin/env python3
"""
romutil.py — Encrypted Sega Z80 ROM utility.

Decrypts program ROMs for the Sega/NEC encrypted CPUs and checks the
result against known checksums.

Usage:
    python romutil.py list
    python romutil.py info 315-5177
    python romutil.py decrypt 315-5177 wb1.bin [-o wb1.opcodes] [-d wb1.data]
    python romutil.py checksum 317-0006 gardia.bin
    python romutil.py verify manifest.json [--rom-dir DIR]
    python romutil.py row 0x4249

Manifest format (verify):
    {"roms": [
        {"file": "epr-7127.ic3", "variant": "315-5177",
         "opcodes_sha1": "...", "data_sha1": "...",
         "opcodes_crc32": "1a2b3c4d", "data_crc32": "..."}
    ]}
Every checksum key is optional; entries with none are only decrypted.
"""

from __future__ import annotations

import hashlib
import json
import os
import sys
import zlib
from collections import Counter
from dataclasses import dataclass

from segacrp2 import (
    Crp2Error, PLANE_OPCODE, PLANE_DATA, SWAP_TABLE, row_select,
)
from variants import (
    VARIANTS, lookup, schedule_for, decrypt_image,
)


# ── Checksums ──────────────────────────────────────────────────────────

CHECKSUM_KEYS = ("opcodes_crc32", "opcodes_sha1", "data_crc32", "data_sha1")

def crc32_hex(data: bytes) -> str:
    return f"{zlib.crc32(data) & 0xFFFFFFFF:08x}"


def sha1_hex(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


@dataclass
class PlaneDigests:
    opcodes_crc32: str
    opcodes_sha1: str
    data_crc32: str
    data_sha1: str

    @classmethod
    def of(cls, opcodes: bytes, data: bytes) -> "PlaneDigests":
        return cls(crc32_hex(opcodes), sha1_hex(opcodes),
                   crc32_hex(data), sha1_hex(data))

    def mismatches(self, expected: dict) -> list[str]:
        """Names of checksum fields in *expected* that differ from ours."""
        bad = []
        for key in CHECKSUM_KEYS:
            want = expected.get(key)
            if want is not None and want.lower() != getattr(self, key):
                bad.append(key)
        return bad


# ── Operations ─────────────────────────────────────────────────────────

def read_rom(path: str) -> bytearray:
    with open(path, "rb") as f:
        return bytearray(f.read())


def decrypt_file(path: str, variant, fast: bool = True) -> tuple[bytes, bytes]:
    """Decrypt the ROM at *path*; return ``(opcodes, data)``."""
    image = read_rom(path)
    opcodes = decrypt_image(image, variant, fast=fast)
    return bytes(opcodes), bytes(image)


def load_manifest(path: str) -> list[dict]:
    with open(path, "r") as f:
        doc = json.load(f)
    roms = doc.get("roms") if isinstance(doc, dict) else None
    if not isinstance(roms, list):
        raise ValueError(f"{path}: manifest needs a top-level 'roms' list")
    for i, entry in enumerate(roms):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: entry {i} is not an object")
        if "file" not in entry or "variant" not in entry:
            raise ValueError(f"{path}: entry {i} needs 'file' and 'variant'")
        for key in ("file", "variant") + CHECKSUM_KEYS:
            if key in entry and not isinstance(entry[key], str):
                raise ValueError(f"{path}: entry {i} '{key}' must be a string")
    return roms


def verify_manifest(path: str, rom_dir: str = None) -> list[tuple[str, str, list[str]]]:
    """Check every manifest entry.

    Returns ``(file, status, bad_fields)`` per entry, status being one of
    "ok", "fail", "missing" or "error".  An entry that cannot be decrypted
    at all (unknown part, oversized image) is reported as "error" with the
    reason in place of the field list; the remaining entries still run.
    """
    roms = load_manifest(path)
    if rom_dir is None:
        rom_dir = os.path.dirname(os.path.abspath(path))
    results = []
    for entry in roms:
        rom_path = os.path.join(rom_dir, entry["file"])
        if not os.path.exists(rom_path):
            results.append((entry["file"], "missing", []))
            continue
        try:
            opcodes, data = decrypt_file(rom_path, entry["variant"])
        except Crp2Error as e:
            results.append((entry["file"], "error", [str(e)]))
            continue
        bad = PlaneDigests.of(opcodes, data).mismatches(entry)
        results.append((entry["file"], "fail" if bad else "ok", bad))
    return results


def parse_address(text: str) -> int:
    """Accept decimal, 0x-prefixed, $-prefixed or h-suffixed hex."""
    t = text.strip().lower()
    if t.startswith("$"):
        return int(t[1:], 16)
    if t.endswith("h"):
        return int(t[:-1], 16)
    return int(t, 0)


# ── CLI ────────────────────────────────────────────────────────────────

def _cmd_list(args):
    print(f"{'Part':<10} {'Device':<15} {'Family':<6} {'Shift':>5}  Games")
    print("-" * 79)
    for info in VARIANTS.values():
        shift = str(info.shift) if info.windowed else "-"
        games = ", ".join(info.games)
        if info.aliases:
            games += f"  [also {', '.join(info.aliases)}]"
        print(f"{info.variant.value:<10} {info.device:<15} {info.family:<6} "
              f"{shift:>5}  {games}")


def _cmd_info(args):
    v = lookup(args.part)
    info = v.info
    sched = schedule_for(v)
    print(f"Part:        {v.value}")
    print(f"Device:      {info.device} ({info.description})")
    if info.aliases:
        print(f"Aliases:     {', '.join(info.aliases)}")
    print(f"Games:       {'; '.join(info.games)}")
    if info.windowed:
        print(f"Key:         317 master stream, shift {info.shift}")
    else:
        print("Key:         own 128-entry table")
    for plane, label in ((PLANE_OPCODE, "opcode"), (PLANE_DATA, "data")):
        use = Counter(sched.entry(r, plane).perm for r in range(64))
        perms = ", ".join(f"{p}{SWAP_TABLE[p]}x{n}"
                          for p, n in sorted(use.items()))
        print(f"{label.capitalize() + ' perms:':<13}{perms}")


def _cmd_decrypt(args):
    opcodes, data = decrypt_file(args.rom, args.part, fast=not args.reference)
    op_path = args.opcodes or args.rom + ".opcodes"
    data_path = args.data or args.rom + ".data"
    with open(op_path, "wb") as f:
        f.write(opcodes)
    with open(data_path, "wb") as f:
        f.write(data)
    if not args.quiet:
        print(f"Decrypted {args.rom} ({len(data)} bytes) with {lookup(args.part).value}")
        print(f"  opcodes → {op_path}")
        print(f"  data    → {data_path}")


def _cmd_checksum(args):
    opcodes, data = decrypt_file(args.rom, args.part)
    d = PlaneDigests.of(opcodes, data)
    print(f"opcodes  CRC({d.opcodes_crc32}) SHA1({d.opcodes_sha1})")
    print(f"data     CRC({d.data_crc32}) SHA1({d.data_sha1})")


def _cmd_verify(args) -> int:
    results = verify_manifest(args.manifest, rom_dir=args.rom_dir)
    failed = 0
    for name, status, bad in results:
        if status != "ok":
            failed += 1
        if args.quiet and status == "ok":
            continue
        detail = f"  ({', '.join(bad)})" if bad else ""
        print(f"{status.upper():<8} {name}{detail}")
    if not args.quiet:
        print(f"{len(results) - failed}/{len(results)} ROMs verified")
    return 1 if failed else 0


def _cmd_row(args):
    addr = parse_address(args.address)
    print(f"{addr:#06x} → row {row_select(addr)}")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="romutil",
        description="Sega encrypted Z80 ROM utility",
    )
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Only print errors and requested output")
    sub = parser.add_subparsers(dest="cmd")

    # list: all known parts
    sub.add_parser("list", help="List known encrypted CPU parts")

    # info: one part in detail
    p_info = sub.add_parser("info", help="Show key details for a part")
    p_info.add_argument("part", help="Part number, alias or device name")

    # decrypt: write both planes to disk
    p_dec = sub.add_parser("decrypt", help="Decrypt a ROM into opcode/data planes")
    p_dec.add_argument("part", help="Part number, alias or device name")
    p_dec.add_argument("rom", help="Encrypted ROM image")
    p_dec.add_argument("-o", "--opcodes", default=None,
                       help="Opcode plane output (default: ROM.opcodes)")
    p_dec.add_argument("-d", "--data", default=None,
                       help="Data plane output (default: ROM.data)")
    p_dec.add_argument("--reference", action="store_true",
                       help="Use the byte-at-a-time engine instead of numpy")

    # checksum: CRC32/SHA1 of both planes
    p_sum = sub.add_parser("checksum", help="Checksum both decrypted planes")
    p_sum.add_argument("part", help="Part number, alias or device name")
    p_sum.add_argument("rom", help="Encrypted ROM image")

    # verify: compare against a manifest
    p_ver = sub.add_parser("verify", help="Verify ROMs against a checksum manifest")
    p_ver.add_argument("manifest", help="JSON manifest path")
    p_ver.add_argument("--rom-dir", default=None,
                       help="Directory holding the ROMs (default: manifest's)")

    # row: which key row an address uses
    p_row = sub.add_parser("row", help="Show the key row for an address")
    p_row.add_argument("address", help="Address (decimal, 0x.., $.. or ..h)")

    return parser


COMMANDS = {
    "list": _cmd_list,
    "info": _cmd_info,
    "decrypt": _cmd_decrypt,
    "checksum": _cmd_checksum,
    "verify": _cmd_verify,
    "row": _cmd_row,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        return 0

    try:
        rc = COMMANDS[args.cmd](args)
    except (Crp2Error, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return rc or 0


if __name__ == "__main__":
    sys.exit(main())
