# locate.py
# SPDX-License-Identifier: MIT
"""Pick likely license files out of a directory listing by name."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .errors import NoLicenseFileFound

__all__ = [
    "compile_patterns",
    "match_license_files",
    "locate_license_files",
]

PatternLike = str | re.Pattern[str]


def compile_patterns(patterns: Iterable[PatternLike]) -> list[re.Pattern[str]]:
    """
    Compile license file name patterns into case-insensitive regexes.

    ``*`` stands for any run of characters; everything else is literal.
    Matches are anchored at the start of the name only, so ``unlicense``
    also accepts ``UNLICENSE.txt``. Already compiled patterns pass through.
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        body = ".*".join(re.escape(part) for part in pattern.split("*"))
        compiled.append(re.compile("^" + body, re.IGNORECASE))
    return compiled


def match_license_files(patterns: Iterable[PatternLike], filenames: Iterable[str]) -> list[str]:
    """
    Return the names matching at least one pattern.

    Input order is preserved and a name matching several patterns is listed
    once.
    """
    compiled = compile_patterns(patterns)
    return [name for name in filenames if any(p.match(name) for p in compiled)]


def locate_license_files(
    patterns: Iterable[PatternLike],
    filenames: Sequence[str],
    *,
    directory: str | None = None,
) -> list[str]:
    """
    Like :func:`match_license_files`, but an empty result is an error.

    Raises:
        NoLicenseFileFound: If no name matches.
    """
    matches = match_license_files(patterns, filenames)
    if not matches:
        raise NoLicenseFileFound(directory=directory)
    return matches
