#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from bytestyle.bits import BitAccumulator, bits_from_bytes, match_word
from bytestyle.words import (
    BIT_RULES,
    BYTE_STYLE_A,
    BYTE_STYLE_B,
    BYTE_STYLE_C,
    BYTE_STYLE_D,
    BYTE_STYLE_E,
    TEXT_TO_WORD,
    Word,
)

__all__ = [
    "BYTE_STYLE_A",
    "BYTE_STYLE_B",
    "BYTE_STYLE_C",
    "BYTE_STYLE_D",
    "BYTE_STYLE_E",
    "DEFAULT_ENCODING",
    "Word",
    "ByteStyleError",
    "ByteStyleParseError",
    "ByteStyleDecodeError",
    "ByteStyleEncodeError",
    "words_from_bytes",
    "words_from_text",
    "render_words",
    "words_to_bytes",
    "encode",
    "decode",
    "encode_to_byte_style",
    "decode_from_byte_style",
]

DEFAULT_ENCODING = "utf-8"
WORD_SEPARATOR = " "

# Same set as a "multispace" run: space, tab, CR, LF.
_WHITESPACE = " \t\r\n"
_REMAINDER_PREVIEW = 32


class ByteStyleError(ValueError):
    pass


class ByteStyleParseError(ByteStyleError):
    def __init__(self, message: str, remainder: str = "") -> None:
        super().__init__(f"parse failed: {message}")
        self.remainder = remainder


class ByteStyleDecodeError(ByteStyleError):
    def __init__(self, encoding: str) -> None:
        super().__init__(f"string decode as {encoding} failed")
        self.encoding = encoding


class ByteStyleEncodeError(ByteStyleError):
    pass


def _preview(s: str) -> str:
    if len(s) <= _REMAINDER_PREVIEW:
        return repr(s)
    return repr(s[:_REMAINDER_PREVIEW]) + "..."


def words_from_bytes(data: bytes, rules: Sequence[Tuple[int, int, Word]] = BIT_RULES) -> Tuple[Word, ...]:
    """Split `data` into words, MSB first, using the ordered bit rules.

    With the default rules every bit position matches, so the whole buffer is
    always consumed. A rule set that leaves bits unmatched raises
    ByteStyleParseError.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ByteStyleError("data must be bytes")
    bits = bits_from_bytes(bytes(data))
    out: List[Word] = []
    pos = 0
    while pos < len(bits):
        hit = match_word(bits, pos, rules)
        if hit is None:
            rest = bits[pos:].to01()
            raise ByteStyleParseError(f"unable to parse from bit {pos}: {rest}", remainder=rest)
        word, consumed = hit
        out.append(word)
        pos += consumed
    return tuple(out)


def words_from_text(text: str) -> Tuple[Word, ...]:
    if not isinstance(text, str):
        raise ByteStyleError("text must be str")
    out: List[Word] = []
    pos = 0
    n = len(text)
    while True:
        while pos < n and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= n:
            break
        for form, word in TEXT_TO_WORD:
            if text.startswith(form, pos):
                out.append(word)
                pos += len(form)
                break
        else:
            rest = text[pos:]
            raise ByteStyleParseError(
                f"unable to parse from byte style at offset {pos}: {_preview(rest)}",
                remainder=rest,
            )
    return tuple(out)


def render_words(words: Iterable[Word]) -> str:
    return WORD_SEPARATOR.join(w.text for w in words)


def words_to_bytes(words: Iterable[Word]) -> bytes:
    acc = BitAccumulator()
    acc.extend(words)
    return acc.to_bytes()


def encode(data: bytes) -> str:
    return render_words(words_from_bytes(data))


def decode(text: str) -> bytes:
    return words_to_bytes(words_from_text(text))


def encode_to_byte_style(text: str, encoding: str = DEFAULT_ENCODING) -> str:
    if not isinstance(text, str):
        raise ByteStyleEncodeError("text must be str")
    try:
        raw = text.encode(encoding)
    except LookupError as ex:
        raise ByteStyleEncodeError(f"unknown encoding: {encoding}") from ex
    except UnicodeEncodeError as ex:
        raise ByteStyleEncodeError(f"string encode as {encoding} failed") from ex
    return encode(raw)


def decode_from_byte_style(text: str, encoding: str = DEFAULT_ENCODING) -> str:
    raw = decode(text)
    try:
        return raw.decode(encoding, errors="strict")
    except (LookupError, UnicodeDecodeError) as ex:
        raise ByteStyleDecodeError(encoding) from ex
