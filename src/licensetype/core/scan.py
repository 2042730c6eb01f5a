# scan.py
# SPDX-License-Identifier: MIT
"""
Directory-level license discovery.

A scan lists a directory (non-recursively), keeps the names that look like
license files, then reads and classifies each candidate. Scans are best
effort: a candidate that cannot be read or classified is skipped so that,
for example, an unreadable ``LICENSE`` does not hide a valid
``LICENSE-MIT`` next to it.
"""

from __future__ import annotations

import os

from .config import ScanConfig
from .errors import MultipleLicensesFound, UnrecognizedLicense
from .licenses import License, new_license_from_file
from .locate import locate_license_files
from .log import get_logger

log = get_logger(__name__)

__all__ = [
    "list_directory",
    "scan_directory",
    "new_license_from_directory",
    "new_licenses_from_directory",
]


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return the entry names in ``path``, sorted; ``OSError`` propagates."""
    return sorted(os.listdir(path))


def scan_directory(path: str | os.PathLike[str], config: ScanConfig | None = None) -> list[License]:
    """
    Classify every candidate license file in a directory.

    Args:
        path (str | PathLike): Directory to scan.
        config (ScanConfig | None): Patterns and read options; defaults to
            :class:`ScanConfig`.

    Returns:
        list[License]: Classified licenses in directory listing order.

    Raises:
        OSError: If the directory cannot be listed.
        NoLicenseFileFound: If no file name matches the patterns.
        UnrecognizedLicense: If no candidate could be read and classified.
    """
    cfg = config or ScanConfig()
    directory = os.fspath(path)
    candidates = locate_license_files(cfg.patterns, list_directory(directory), directory=directory)

    licenses: list[License] = []
    for name in candidates:
        file_path = os.path.join(directory, name)
        try:
            licenses.append(new_license_from_file(file_path, cfg))
        except (OSError, UnicodeDecodeError, UnrecognizedLicense) as exc:
            log.debug("Skipping license candidate %s: %s", file_path, exc)

    if not licenses:
        raise UnrecognizedLicense(source_path=directory)

    log.info(
        "License scan (%s): %s",
        directory,
        ", ".join(f"{lic.license_id} ({os.path.basename(lic.source_path or '')})" for lic in licenses),
    )
    return licenses


def new_licenses_from_directory(path: str | os.PathLike[str], config: ScanConfig | None = None) -> list[License]:
    """Return every license classified in ``path``; see :func:`scan_directory`."""
    return scan_directory(path, config)


def new_license_from_directory(
    path: str | os.PathLike[str],
    config: ScanConfig | None = None,
    *,
    strict: bool | None = None,
) -> License:
    """
    Return the first license classified in ``path``.

    Args:
        path (str | PathLike): Directory to scan.
        config (ScanConfig | None): Patterns and read options.
        strict (bool | None): Raise instead of silently picking the first
            result when several licenses are found. None defers to
            ``config.strict``.

    Raises:
        MultipleLicensesFound: In strict mode, if more than one license was
            classified.
    """
    cfg = config or ScanConfig()
    licenses = scan_directory(path, cfg)
    if strict is None:
        strict = cfg.strict
    if strict and len(licenses) > 1:
        raise MultipleLicensesFound([lic.license_id for lic in licenses], directory=os.fspath(path))
    return licenses[0]
