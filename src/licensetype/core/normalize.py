# normalize.py
# SPDX-License-Identifier: MIT
"""Canonical comparison form for license text."""

from __future__ import annotations

import re

__all__ = ["normalize_text"]

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_SPACE_RUN_RE = re.compile(r"\s{2,}")


def normalize_text(text: str) -> str:
    """Lowercase ``text`` and flatten its line breaks and whitespace runs.

    Line endings become a single space and any run of two or more whitespace
    characters becomes one space. Punctuation is left untouched because the
    classification phrases rely on it.
    """
    comp = text.lower()
    comp = _NEWLINE_RE.sub(" ", comp)
    return _SPACE_RUN_RE.sub(" ", comp)
