#!/usr/bin/env python3
"""
EncryptedROM device tests: M1/data routing, the one-way decode state,
mirroring and configuration errors.
"""
import unittest

from devices import Device, EncryptedROM, RomState
from segacrp2 import (
    DecodeStateError, ImageSizeError, UnknownVariantError, decrypt,
)
from variants import Variant, schedule_for


def make_rom(size: int = 0x800, part: str = "315-5136", **kw) -> EncryptedROM:
    return EncryptedROM(bytes(size), part, **kw)


class TestDeviceBase(unittest.TestCase):

    def test_defaults(self):
        d = Device("blank", 0x1000, 0x10)
        self.assertEqual(d.read8(0), 0)
        self.assertEqual(d.read8(0, m1=True), 0)
        d.write8(0, 0xFF)
        d.tick(100)
        self.assertEqual((d.name, d.base, d.size), ("blank", 0x1000, 0x10))


class TestEncryptedROM(unittest.TestCase):

    def test_initial_state(self):
        rom = make_rom()
        self.assertIs(rom.state, RomState.ENCRYPTED)
        self.assertFalse(rom.decoded)
        self.assertEqual(rom.name, "NEC 315-5136")
        self.assertEqual(rom.size, 0x800)
        self.assertIs(rom.variant, Variant.NEC_315_5136)

    def test_read_before_start(self):
        rom = make_rom()
        with self.assertRaises(DecodeStateError):
            rom.read8(0)
        with self.assertRaises(DecodeStateError):
            rom.fetch_opcode(0)
        with self.assertRaises(RuntimeError):
            rom.opcodes

    def test_m1_routing(self):
        rom = make_rom()
        rom.start()
        self.assertTrue(rom.decoded)
        self.assertEqual(rom.read8(0, m1=True), 0x00)
        self.assertEqual(rom.read8(0), 0x40)
        self.assertEqual(rom.fetch_opcode(1), 0x10)
        self.assertEqual(rom.read8(1, m1=False), 0x50)

    def test_planes_match_engine(self):
        image = bytes((i * 7 + 3) & 0xFF for i in range(0x8000))
        rom = EncryptedROM(image, Variant.SEGA_317_0005)
        rom.start()
        opcodes, data = decrypt(image, schedule_for(Variant.SEGA_317_0005))
        self.assertEqual(rom.opcodes, opcodes)
        self.assertEqual(rom.data, data)
        for a in (0, 1, 0x1234, 0x4249, 0x7FFF):
            self.assertEqual(rom.fetch_opcode(a), opcodes[a])
            self.assertEqual(rom.read8(a), data[a])

    def test_caller_buffer_untouched(self):
        image = bytearray(0x800)
        rom = EncryptedROM(image, "315-5136")
        rom.start()
        self.assertEqual(image, bytearray(0x800))

    def test_start_once(self):
        rom = make_rom()
        rom.start()
        with self.assertRaises(DecodeStateError):
            rom.start()
        # still readable and unchanged after the refused second decode
        self.assertEqual(rom.read8(0), 0x40)

    def test_mirroring(self):
        rom = make_rom(0x800)
        rom.start()
        self.assertEqual(rom.read8(0x800), rom.read8(0))
        self.assertEqual(rom.read8(0x801, m1=True), rom.read8(1, m1=True))

    def test_writes_ignored(self):
        rom = make_rom()
        rom.start()
        rom.write8(0, 0x12)
        self.assertEqual(rom.read8(0), 0x40)

    def test_on_decoded_callback(self):
        seen = []
        rom = make_rom()
        rom.on_decoded = seen.append
        rom.start()
        self.assertEqual(seen, [rom])

    def test_reference_engine(self):
        a = make_rom(0x1000, "315-5178", fast=True)
        b = make_rom(0x1000, "315-5178", fast=False)
        a.start()
        b.start()
        self.assertEqual(a.opcodes, b.opcodes)
        self.assertEqual(a.data, b.data)

    def test_bad_config(self):
        with self.assertRaises(UnknownVariantError):
            EncryptedROM(bytes(0x800), "315-0000")
        with self.assertRaises(ImageSizeError):
            EncryptedROM(b"", "315-5136")
        with self.assertRaises(ImageSizeError):
            EncryptedROM(bytes(0x10000), "315-5136")

    def test_repr(self):
        rom = make_rom(base=0x0000)
        self.assertIn("315-5136", repr(rom))
        self.assertIn("ENCRYPTED", repr(rom))
        rom.start()
        self.assertIn("DECODED", repr(rom))


if __name__ == "__main__":
    unittest.main()
