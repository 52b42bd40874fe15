#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0
"""
byteStyle.py - Byte Style encoder / decoder (字节范编解码器：我们只说字节范!)

Encodes any text into the five byte style words and back.

Examples:
  byteStyle.py 已删除
  byteStyle.py -d 多元兼容 始终创业 开放谦逊 ...
"""

from __future__ import annotations

__version__ = "0.1.0"

import argparse
import sys
from typing import List, Optional, Sequence

from byte_style_codec import (
    DEFAULT_ENCODING,
    ByteStyleError,
    decode_from_byte_style,
    encode_to_byte_style,
    words_from_text,
)


def out(msg: str) -> None:
    sys.stdout.write(msg + "\n")
    sys.stdout.flush()


def err(msg: str) -> None:
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="byteStyle.py",
        description="Byte Style Encoder. 字节范编解码器：我们只说字节范!",
    )
    ap.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="switch to decoder mode (default: encoder mode). 切换为解码模式（默认为编码模式）.",
    )
    ap.add_argument(
        "--encoding",
        default=defaults["encoding"],
        help=f"text encoding of the content / result (default: {defaults['encoding']}). 文本编码（默认: {defaults['encoding']}）.",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="print word and byte counts to stderr. 在 stderr 输出统计信息.",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument(
        "content",
        nargs=argparse.REMAINDER,
        help="content to be encoded or decoded, joined with spaces. 需要编解码的内容.",
    )
    return ap


def run(content: str, decode: bool, encoding: str, verbose: bool = False) -> int:
    if decode:
        try:
            decoded = decode_from_byte_style(content, encoding=encoding)
        except ByteStyleError as ex:
            out(f"Decode failed: {ex}")
            return 1
        if verbose:
            words = len(words_from_text(content))
            err(f"[decode] words={words} bytes={len(decoded.encode(encoding))}")
        out(decoded)
        return 0

    try:
        encoded = encode_to_byte_style(content, encoding=encoding)
    except ByteStyleError as ex:
        out(f"Encode failed: {ex}")
        return 1
    if verbose:
        words = len(encoded.split()) if encoded else 0
        err(f"[encode] bytes={len(content.encode(encoding))} words={words}")
    out(encoded)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    DEFAULTS = {
        "encoding": DEFAULT_ENCODING,
    }

    ap = build_parser(DEFAULTS)
    args = ap.parse_args(argv)

    content: List[str] = list(args.content)
    if content and content[0] == "--":
        content = content[1:]
    if not content:
        ap.error("no content provided / 没有待编解码的内容！")

    return run(" ".join(content), decode=args.decode, encoding=args.encoding, verbose=args.verbose)


if __name__ == "__main__":
    raise SystemExit(main())
