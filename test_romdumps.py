#!/usr/bin/env python3
"""
End-to-end regression against real ROM dumps.

Point CRP2_ROM_DIR at a directory holding the encrypted program ROMs and a
manifest.json listing, per file, the part number and the expected CRC32 /
SHA1 of the decrypted opcode and data planes (format in romutil.py).
CRP2_ROM_MANIFEST overrides the manifest location.

The ``romdump`` tests skip when no manifest is found.
"""
import os
import unittest
from unittest import mock

import pytest

from conftest import rom_dir, rom_manifest
from romutil import load_manifest, decrypt_file, PlaneDigests


@pytest.mark.romdump
class TestRealDumps(unittest.TestCase):

    def setUp(self):
        manifest = rom_manifest()
        self.entries = load_manifest(manifest)
        self.rom_dir = rom_dir() or os.path.dirname(os.path.abspath(manifest))

    def _check(self, fast: bool):
        checked = 0
        for entry in self.entries:
            path = os.path.join(self.rom_dir, entry["file"])
            if not os.path.exists(path):
                continue
            with self.subTest(rom=entry["file"], variant=entry["variant"]):
                opcodes, data = decrypt_file(path, entry["variant"], fast=fast)
                self.assertEqual(PlaneDigests.of(opcodes, data).mismatches(entry), [])
            checked += 1
        if not checked:
            self.skipTest("no ROMs from the manifest are present")

    def test_manifest_checksums(self):
        self._check(fast=True)

    def test_manifest_checksums_reference_engine(self):
        self._check(fast=False)


class TestRomLocation(unittest.TestCase):
    """The skip rule and the regression read the same locations."""

    def test_manifest_defaults_into_rom_dir(self):
        with mock.patch.dict(os.environ, {"CRP2_ROM_DIR": "/roms"}, clear=True):
            self.assertEqual(rom_dir(), "/roms")
            self.assertEqual(rom_manifest(), os.path.join("/roms", "manifest.json"))

    def test_manifest_override(self):
        env = {"CRP2_ROM_DIR": "/roms", "CRP2_ROM_MANIFEST": "/etc/m.json"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(rom_manifest(), "/etc/m.json")

    def test_unset(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(rom_dir())
            self.assertIsNone(rom_manifest())


if __name__ == "__main__":
    unittest.main()
