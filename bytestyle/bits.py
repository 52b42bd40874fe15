#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Bit-level helpers for the byte style codec.

Encode side: walk a byte buffer MSB first and match the ordered bit rules.
Decode side: accumulate word bit codes and pack whole bytes back out.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from bitarray import bitarray
from bitarray.util import ba2int

from bytestyle.words import BIT_RULES, WORD_TO_BITS, Word


def bits_from_bytes(data: bytes) -> bitarray:
    bits = bitarray(endian="big")
    bits.frombytes(bytes(data))
    return bits


def match_word(
    bits: bitarray,
    pos: int,
    rules: Sequence[Tuple[int, int, Word]] = BIT_RULES,
) -> Optional[Tuple[Word, int]]:
    """Return (word, consumed_bits) for the first rule matching at `pos`.

    Rules longer than the remaining bits are skipped, never padded.
    Returns None when no rule matches.
    """
    remaining = len(bits) - pos
    for length, value, word in rules:
        if length > remaining:
            continue
        if ba2int(bits[pos:pos + length]) == value:
            return word, length
    return None


class BitAccumulator:
    """Growable MSB-first bit buffer fed with word bit codes."""

    def __init__(self) -> None:
        self._bits = bitarray(endian="big")

    def __len__(self) -> int:
        return len(self._bits)

    def append_word(self, word: Word) -> None:
        self._bits.extend(WORD_TO_BITS[word])

    def extend(self, words: Iterable[Word]) -> None:
        for word in words:
            self.append_word(word)

    def to_bytes(self) -> bytes:
        # Trailing bits that do not fill a byte are encoder padding: drop them.
        whole = len(self._bits) - len(self._bits) % 8
        return self._bits[:whole].tobytes()
