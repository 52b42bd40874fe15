#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import enum
from typing import Dict, Tuple

from bitarray import bitarray


BYTE_STYLE_A = "追求极致"
BYTE_STYLE_B = "务实敢为"
BYTE_STYLE_C = "开放谦逊"
BYTE_STYLE_D = "始终创业"
BYTE_STYLE_E = "多元兼容"


class Word(enum.Enum):
    A = BYTE_STYLE_A
    B = BYTE_STYLE_B
    C = BYTE_STYLE_C
    D = BYTE_STYLE_D
    E = BYTE_STYLE_E

    @property
    def text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# Tokenizer try order. No text form is a prefix of another, so the order
# does not change results.
TEXT_TO_WORD: Tuple[Tuple[str, Word], ...] = tuple((w.text, w) for w in Word)

# Encoder rules: (bit_length, bit_value, word), first match wins.
# A rule only applies when at least bit_length bits remain, so "00" -> A is
# reached only with exactly 2 bits left and the 1-bit rules only with 1 bit left.
BIT_RULES: Tuple[Tuple[int, int, Word], ...] = (
    (3, 0b000, Word.A),
    (3, 0b001, Word.B),
    (2, 0b00, Word.A),
    (2, 0b01, Word.C),
    (2, 0b10, Word.D),
    (2, 0b11, Word.E),
    (1, 0b0, Word.C),
    (1, 0b1, Word.D),
)


def _bits(pattern: str) -> bitarray:
    return bitarray(pattern, endian="big")


# Decoder: canonical bit code of every word.
WORD_TO_BITS: Dict[Word, bitarray] = {
    Word.A: _bits("000"),
    Word.B: _bits("001"),
    Word.C: _bits("01"),
    Word.D: _bits("10"),
    Word.E: _bits("11"),
}
