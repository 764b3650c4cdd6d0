"""
Pytest configuration for the Sega CPU decryption test suite.

    python -m pytest                      # everything that needs no ROMs
    CRP2_ROM_DIR=~/roms python -m pytest  # plus the real-dump regressions

Tests marked ``romdump`` decrypt real ROM dumps and compare checksums
against a manifest (see romutil.py for the format).  They are skipped
unless CRP2_ROM_DIR names a directory holding that manifest.
"""

import os
import pytest


def rom_dir():
    return os.environ.get("CRP2_ROM_DIR")


def rom_manifest():
    path = os.environ.get("CRP2_ROM_MANIFEST")
    if path:
        return path
    d = rom_dir()
    return os.path.join(d, "manifest.json") if d else None


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers",
        "romdump: tests requiring real ROM dumps in CRP2_ROM_DIR (skipped by default)")


def pytest_collection_modifyitems(config, items):
    manifest = rom_manifest()
    if manifest and os.path.exists(manifest):
        return
    skip = pytest.mark.skip(reason="set CRP2_ROM_DIR to a directory with manifest.json")
    for item in items:
        if "romdump" in item.keywords:
            item.add_marker(skip)
