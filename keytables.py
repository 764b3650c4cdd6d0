"""
keytables.py — Key schedules for the Sega encrypted Z80 CPUs
=============================================================
Hand-derived key material for the second-generation Sega CPU encryption
(the one that works on D0/D2/D4/D6 and depends on M1, A0, A3, A6, A9, A12
and A14).

Every schedule is a pair of parallel tables indexed by ``row * 2 + plane``
where plane 0 is the opcode (M1) plane and plane 1 the data plane:

  XOR_*:   byte XORed into the result after the lane permutation
  SWAP_*:  index into ``segacrp2.SWAP_TABLE`` (0..23)

The six 315-5xxx parts each have their own 128-entry tables.  The four
317-000x parts share one 131-entry master key stream; each part starts
reading it at a different offset (see ``variants.SHIFT_317``).  This
suggests the keys came from a PRNG, and the CPU part number picked how many
bytes of the stream to skip.

The irregular line breaks below follow the way the tables were derived
(runs of equal swap indexes, repeating XOR groups) and are kept as-is.
"""

# ---------------------------------------------------------------------------
#  315-5136  (NEC): New Lucky 8 Lines (set 7, W-4, encrypted)
# ---------------------------------------------------------------------------

XOR_315_5136 = (
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,

    0x50, 0x10, 0x44, 0x04, 0x54, 0x14, 0x41, 0x01, 0x51, 0x11, 0x45, 0x05, 0x55, 0x15, 0x40, 0x00,
    0x50, 0x10, 0x44, 0x04, 0x54, 0x14, 0x41, 0x01, 0x51, 0x11, 0x45, 0x05, 0x55, 0x15, 0x40, 0x00,
    0x50, 0x10, 0x44, 0x04, 0x54, 0x14, 0x41, 0x01, 0x51, 0x11, 0x45, 0x05, 0x55, 0x15, 0x40, 0x00,
    0x50, 0x10, 0x44, 0x04, 0x54, 0x14, 0x41, 0x01, 0x51, 0x11, 0x45, 0x05, 0x55, 0x15, 0x40, 0x00,
)

SWAP_315_5136 = (
    0x14, 0x14, 0x14, 0x14, 0x14, 0x14, 0x14, 0x14,
    0x14, 0x14, 0x14, 0x14, 0x14, 0x14, 0x14, 0x14,
    0x15, 0x15, 0x15, 0x15, 0x15, 0x15, 0x15, 0x15,
    0x15, 0x15, 0x15, 0x15, 0x15, 0x15, 0x15, 0x15,
    0x16, 0x16, 0x16, 0x16, 0x16, 0x16, 0x16, 0x16,
    0x16, 0x16, 0x16, 0x16, 0x16, 0x16, 0x16, 0x16,
    0x17, 0x17, 0x17, 0x17, 0x17, 0x17, 0x17, 0x17,
    0x17, 0x17, 0x17, 0x17, 0x17, 0x17, 0x17, 0x17,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x01,
    0x01, 0x01, 0x01, 0x01, 0x01, 0x01, 0x01, 0x01,
    0x01, 0x01, 0x01, 0x01, 0x01, 0x01, 0x02, 0x02,
    0x02, 0x02, 0x02, 0x02, 0x02, 0x02, 0x02, 0x02,
    0x02, 0x02, 0x02, 0x02, 0x02, 0x02, 0x03, 0x03,
    0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x03,
    0x03, 0x03, 0x03, 0x03, 0x03, 0x03, 0x04, 0x04,
)

# ---------------------------------------------------------------------------
#  315-5177: Astro Flash, Wonder Boy (set 1); also sold as 317-5000
# ---------------------------------------------------------------------------

XOR_315_5177 = (
    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14, 0x41, 0x45, 0x00, 0x50, 0x54, 0x11, 0x45, 0x40,
    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14, 0x41, 0x45, 0x00, 0x50, 0x54, 0x11, 0x45, 0x40,
    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14,

    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14, 0x41, 0x45, 0x00, 0x50, 0x54, 0x11, 0x45, 0x40,
    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14, 0x41, 0x45, 0x00, 0x50, 0x54, 0x11, 0x45, 0x40,
    0x04, 0x54, 0x51, 0x15, 0x40, 0x44, 0x01, 0x51, 0x55, 0x10, 0x44, 0x41,
    0x05, 0x55, 0x50, 0x14,
)

SWAP_315_5177 = (
    0, 0, 0, 0,
    1, 1, 1, 1, 1,
    2, 2, 2, 2, 2,
    3, 3, 3, 3,
    4, 4, 4, 4, 4,
    5, 5, 5, 5, 5,
    6, 6, 6, 6, 6,
    7, 7, 7, 7, 7,
    8, 8, 8, 8,
    9, 9, 9, 9, 9,
    10, 10, 10, 10, 10,
    11, 11, 11, 11, 11,
    12, 12, 12, 12, 12,
    13, 13,

    8, 8, 8, 8,
    9, 9, 9, 9, 9,
    10, 10, 10, 10, 10,
    11, 11, 11, 11,
    12, 12, 12, 12, 12,
    13, 13, 13, 13, 13,
    14, 14, 14, 14, 14,
    15, 15, 15, 15, 15,
    16, 16, 16, 16,
    17, 17, 17, 17, 17,
    18, 18, 18, 18, 18,
    19, 19, 19, 19, 19,
    20, 20, 20, 20, 20,
    21, 21,
)

# ---------------------------------------------------------------------------
#  315-5176: Wonder Boy (System 2 hardware, set 2)
# ---------------------------------------------------------------------------

XOR_315_5176 = (
    0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14,
    0x41, 0x05, 0x55, 0x10, 0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11,
    0x45, 0x00, 0x50, 0x14, 0x41, 0x05, 0x55, 0x10, 0x44, 0x01, 0x51, 0x15,
    0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14, 0x41, 0x05, 0x55, 0x10,
    0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14,
    0x41, 0x05, 0x55, 0x10,

    0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14,
    0x41, 0x05, 0x55, 0x10, 0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11,
    0x45, 0x00, 0x50, 0x14, 0x41, 0x05, 0x55, 0x10, 0x44, 0x01, 0x51, 0x15,
    0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14, 0x41, 0x05, 0x55, 0x10,
    0x44, 0x01, 0x51, 0x15, 0x40, 0x04, 0x54, 0x11, 0x45, 0x00, 0x50, 0x14,
    0x41, 0x05, 0x55, 0x10,
)

SWAP_315_5176 = (
    0x00, 0x00, 0x00, 0x00, 0x01, 0x01, 0x01, 0x01,
    0x01, 0x02, 0x02, 0x02, 0x02, 0x02, 0x02, 0x03,
    0x03, 0x03, 0x03, 0x03, 0x04, 0x04, 0x04, 0x04,
    0x04, 0x05, 0x05, 0x05, 0x05, 0x05, 0x05, 0x06,
    0x06, 0x06, 0x06, 0x06, 0x07, 0x07, 0x07, 0x07,
    0x07, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x09,
    0x09, 0x09, 0x09, 0x09, 0x0a, 0x0a, 0x0a, 0x0a,
    0x0a, 0x0b, 0x0b, 0x0b, 0x0b, 0x0b, 0x0b, 0x0c,

    0x08, 0x08, 0x08, 0x08, 0x09, 0x09, 0x09, 0x09,
    0x09, 0x0a, 0x0a, 0x0a, 0x0a, 0x0a, 0x0a, 0x0b,
    0x0b, 0x0b, 0x0b, 0x0b, 0x0c, 0x0c, 0x0c, 0x0c,
    0x0c, 0x0d, 0x0d, 0x0d, 0x0d, 0x0d, 0x0d, 0x0e,
    0x0e, 0x0e, 0x0e, 0x0e, 0x0f, 0x0f, 0x0f, 0x0f,
    0x0f, 0x10, 0x10, 0x10, 0x10, 0x10, 0x10, 0x11,
    0x11, 0x11, 0x11, 0x11, 0x12, 0x12, 0x12, 0x12,
    0x12, 0x13, 0x13, 0x13, 0x13, 0x13, 0x13, 0x14,
)

# ---------------------------------------------------------------------------
#  315-5162: 4D Warriors, Rafflesia, Wonder Boy (set 4)
# ---------------------------------------------------------------------------

XOR_315_5162 = (
          0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00, 0x40, 0x10, 0x50, 0x04, 0x44, 0x14, 0x54, 0x01, 0x41, 0x11, 0x51, 0x05, 0x45, 0x15, 0x55,
    0x00,
)

SWAP_315_5162 = (
        4,  4,  4,  4,  4,  4,  4,  4,  4,  4,  4,  4,  4,  4,  4,
     5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,  5,
     6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,  6,
     7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,  7,
     8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,  8,
     9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,  9,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10,
    11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11, 11,
    12,
)

# ---------------------------------------------------------------------------
#  315-5178: Wonder Boy (set 2)
# ---------------------------------------------------------------------------

XOR_315_5178 = (
    0x00, 0x55, 0x45, 0x05, 0x11, 0x41, 0x01, 0x14, 0x44, 0x50, 0x10,
    0x00, 0x55, 0x15, 0x05, 0x51, 0x41, 0x01, 0x14, 0x44, 0x04, 0x10,
    0x40, 0x55, 0x15, 0x05, 0x51, 0x11,
    0x01, 0x54, 0x44, 0x04, 0x10, 0x40, 0x00, 0x15, 0x45, 0x51, 0x11,
    0x01, 0x54, 0x14, 0x04, 0x50, 0x40, 0x00, 0x15, 0x45, 0x05, 0x11,
    0x41, 0x54, 0x14, 0x04, 0x50, 0x10,
    0x00, 0x55, 0x45, 0x05, 0x11, 0x41, 0x01, 0x14,

    0x00, 0x55, 0x45, 0x05, 0x11, 0x41, 0x01, 0x14, 0x44, 0x50, 0x10,
    0x00, 0x55, 0x15, 0x05, 0x51, 0x41, 0x01, 0x14, 0x44, 0x04, 0x10,
    0x40, 0x55, 0x15, 0x05, 0x51, 0x11,
    0x01, 0x54, 0x44, 0x04, 0x10, 0x40, 0x00, 0x15, 0x45, 0x51, 0x11,
    0x01, 0x54, 0x14, 0x04, 0x50, 0x40, 0x00, 0x15, 0x45, 0x05, 0x11,
    0x41, 0x54, 0x14, 0x04, 0x50, 0x10,
    0x00, 0x55, 0x45, 0x05, 0x11, 0x41, 0x01, 0x14,
)

SWAP_315_5178 = (
     2,
     3,  5,  7,  1,  3,  5,  7,  1,  3,  5,  7,
     0,  2,  4,  6,  0,  2,  4,  6,  0,  2,  4,
     5,  7,  1,  3,  5,  7,  1,  3,  5,  7,  1,  3,
     4,  6,  0,  2,  4,  6,  0,  2,  4,  6,
     8,
     1,  3,  5,  7,  1,  3,  5,  7,  1,  3,  5,
     6,  0,  2,  4,  6,  0,  2,

    10,
    11, 13, 15,  9, 11, 13, 15,  9, 11, 13, 15,
     8, 10, 12, 14,  8, 10, 12, 14,  8, 10, 12,
    13, 15,  9, 11, 13, 15,  9, 11, 13, 15,  9, 11,
    12, 14,  8, 10, 12, 14,  8, 10, 12, 14,
    16,
     9, 11, 13, 15,  9, 11, 13, 15,  9, 11, 13,
    14,  8, 10, 12, 14,  8, 10,
)

# ---------------------------------------------------------------------------
#  315-5179: Robo-Wrestle 2001
# ---------------------------------------------------------------------------

XOR_315_5179 = (
    0x00, 0x45, 0x41, 0x14, 0x10, 0x55, 0x51, 0x01, 0x04, 0x40, 0x45, 0x11, 0x14, 0x50,
    0x00, 0x05, 0x41, 0x44, 0x10, 0x15, 0x51, 0x54, 0x04,
    0x00, 0x45, 0x41, 0x14, 0x10, 0x55, 0x05, 0x01, 0x44, 0x40, 0x15, 0x11, 0x54, 0x50,
    0x00, 0x05, 0x41, 0x44, 0x10, 0x15, 0x51, 0x01, 0x04,
    0x40, 0x45, 0x11, 0x14, 0x50, 0x55, 0x05, 0x01, 0x44, 0x40, 0x15, 0x11, 0x54, 0x04,
    0x00, 0x45, 0x41, 0x14, 0x50,
    0x00, 0x05, 0x41, 0x44, 0x10, 0x15, 0x51, 0x54, 0x04,
    0x00, 0x45, 0x41, 0x14, 0x50, 0x55, 0x05, 0x01, 0x44, 0x40, 0x15, 0x11, 0x54, 0x50,
    0x00, 0x05, 0x41, 0x44, 0x10, 0x55, 0x51, 0x01, 0x04,
    0x40, 0x45, 0x11, 0x14, 0x50, 0x55, 0x05, 0x01, 0x44, 0x40, 0x15, 0x51, 0x54, 0x04,
    0x00, 0x45, 0x41, 0x14, 0x10, 0x55, 0x51, 0x01, 0x04,
    0x40, 0x45, 0x11, 0x54, 0x50, 0x00, 0x05, 0x41,
)

SWAP_315_5179 = (
    8,  9, 11, 13, 15,  0,  2,  4,  6,
    8,  9, 11, 13, 15,  1,  2,  4,  6,
    8,  9, 11, 13, 15,  1,  2,  4,  6,
    8,  9, 11, 13, 15,  1,  2,  4,  6,
    8, 10, 11, 13, 15,  1,  2,  4,  6,
    8, 10, 11, 13, 15,  1,  2,  4,  6,
    8, 10, 11, 13, 15,  1,  3,  4,  6,
    8,
    7,  1,  2,  4,  6,  0,  1,  3,  5,
    7,  1,  2,  4,  6,  0,  1,  3,  5,
    7,  1,  2,  4,  6,  0,  2,  3,  5,
    7,  1,  2,  4,  6,  0,  2,  3,  5,
    7,  1,  2,  4,  6,  0,  2,  3,  5,
    7,  1,  3,  4,  6,  0,  2,  3,  5,
    7,  1,  3,  4,  6,  0,  2,  4,  5,
    7,
)

# ---------------------------------------------------------------------------
#  317-000x master key stream: Calorie Kun, Space Position, Gardia
# ---------------------------------------------------------------------------
# 128 entries plus 3 spare, so the largest shift (3) still has a full window.

XOR_317_MASTER = (
    0x04, 0x54, 0x44, 0x14, 0x15, 0x15, 0x51, 0x41, 0x41, 0x14, 0x10, 0x50, 0x15, 0x55, 0x54, 0x05,
    0x04, 0x41, 0x51, 0x01, 0x05, 0x10, 0x55, 0x51, 0x05, 0x05, 0x54, 0x11, 0x45, 0x05, 0x04, 0x14,
    0x10, 0x55, 0x01, 0x41, 0x51, 0x05, 0x55, 0x04, 0x45, 0x41, 0x55, 0x14, 0x45, 0x10, 0x04, 0x45,
    0x55, 0x50, 0x40, 0x00, 0x11, 0x45, 0x15, 0x00, 0x01, 0x00, 0x40, 0x00, 0x01, 0x45, 0x11, 0x00,
    0x45, 0x00, 0x44, 0x54, 0x40, 0x04, 0x05, 0x15, 0x15, 0x10, 0x15, 0x04, 0x01, 0x05, 0x50, 0x11,
    0x00, 0x44, 0x44, 0x04, 0x04, 0x01, 0x50, 0x05, 0x51, 0x00, 0x45, 0x44, 0x50, 0x15, 0x54, 0x40,
    0x41, 0x45, 0x40, 0x10, 0x14, 0x15, 0x40, 0x51, 0x50, 0x50, 0x45, 0x00, 0x10, 0x15, 0x05, 0x51,
    0x50, 0x44, 0x01, 0x15, 0x40, 0x04, 0x01, 0x44, 0x50, 0x44, 0x50, 0x50, 0x50, 0x10, 0x44, 0x04,
    0x40, 0x04, 0x10,
)

SWAP_317_MASTER = (
     7,  7, 12,  1, 18, 11,  8, 23, 21, 17,  0, 23, 22,  0, 21, 15,
    13, 19, 21, 20, 20, 12, 13, 10, 20,  0, 14, 18,  6, 18,  3,  5,
     5, 20, 20, 13,  8,  0, 20, 18,  4, 14,  8,  5, 17,  6, 22, 10,
     0, 21,  0,  1,  6, 11, 17,  9, 17,  3,  9, 21,  0,  4, 16,  1,
    13, 17, 21,  5,  3,  7,  2, 16, 18, 13,  6, 19, 11, 23,  3, 20,
     3,  2, 18, 10, 18, 23, 19, 23,  3, 15,  0, 10,  5, 12,  0,  0,
    11, 22,  8, 14,  8,  6,  1, 15,  7, 11,  2, 17, 10, 15,  8, 21,
    10,  0,  2,  6,  1,  1,  3,  1, 12, 18, 16,  5,  0, 15, 17, 15,
    10, 20,  1,
)
