#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import byteStyle
from byte_style_codec import BYTE_STYLE_A, BYTE_STYLE_E, encode_to_byte_style


def _run(argv):
    stdout = io.StringIO()
    stderr = io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        code = byteStyle.main(argv)
    return code, stdout.getvalue(), stderr.getvalue()


class ByteStyleCliTests(unittest.TestCase):
    def test_encode_default_mode(self) -> None:
        code, out, _err = _run(["已删除"])
        self.assertEqual(code, 0)
        self.assertEqual(out, encode_to_byte_style("已删除") + "\n")

    def test_encode_joins_content_with_spaces(self) -> None:
        code, out, _err = _run(["hello", "world"])
        self.assertEqual(code, 0)
        self.assertEqual(out.rstrip("\n"), encode_to_byte_style("hello world"))

    def test_trailing_hyphen_values_are_content(self) -> None:
        code, out, _err = _run(["a", "-d"])
        self.assertEqual(code, 0)
        self.assertEqual(out.rstrip("\n"), encode_to_byte_style("a -d"))

    def test_decode_mode_accepts_split_words(self) -> None:
        words = encode_to_byte_style("字节范").split(" ")
        code, out, _err = _run(["-d", *words])
        self.assertEqual(code, 0)
        self.assertEqual(out, "字节范\n")

    def test_decode_unknown_word_fails(self) -> None:
        code, out, _err = _run(["--decode", BYTE_STYLE_A, "nope"])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Decode failed: parse failed:"))

    def test_decode_invalid_utf8_fails(self) -> None:
        code, out, _err = _run(["-d", BYTE_STYLE_E, BYTE_STYLE_E, BYTE_STYLE_E, BYTE_STYLE_E])
        self.assertEqual(code, 1)
        self.assertEqual(out, "Decode failed: string decode as utf-8 failed\n")

    def test_encode_failure_message(self) -> None:
        code, out, _err = _run(["--encoding", "ascii", "已删除"])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Encode failed: "))

    def test_encoding_option_roundtrip(self) -> None:
        _code, encoded, _err = _run(["--encoding", "utf-16-le", "hi"])
        code, out, _err = _run(["-d", "--encoding", "utf-16-le", encoded.strip()])
        self.assertEqual(code, 0)
        self.assertEqual(out, "hi\n")

    def test_verbose_writes_stats_to_stderr(self) -> None:
        code, out, err = _run(["-v", "ab"])
        self.assertEqual(code, 0)
        self.assertEqual(out.rstrip("\n"), encode_to_byte_style("ab"))
        self.assertIn("[encode] bytes=2", err)

    def test_missing_content_exits_with_usage_error(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                byteStyle.main([])
        self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
