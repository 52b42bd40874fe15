#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
bytestyle package

Internal building blocks for byte_style_codec.py: the vocabulary table and the
bit-level helpers. The public API stays in byte_style_codec.py.
"""

from __future__ import annotations
