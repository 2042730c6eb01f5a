# licenses.py
# SPDX-License-Identifier: MIT
"""
License entities and single-text/single-file construction.

A :class:`License` carries the raw text it was built from, the identifier
assigned by classification (if any) and, when read from disk, the path it
came from. Normalized text is only a comparison artifact and is never
stored on the entity.
"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from typing import Any

from .config import ScanConfig
from .errors import UnrecognizedLicense
from .log import get_logger
from .normalize import normalize_text
from .registry import is_known_license
from .rules import classify_text

log = get_logger(__name__)

__all__ = [
    "License",
    "new_license",
    "new_license_from_file",
    "read_license_text",
]


@dataclass(frozen=True, slots=True)
class License:
    """
    A software license, classified or not.

    Attributes:
        license_id (str | None): Identifier from the registry, or None when
            the text has not been (or could not be) classified.
        text (str): License text exactly as supplied or decoded from disk.
        source_path (str | None): File the text was read from; None when
            the text was supplied directly.
    """

    license_id: str | None = None
    text: str = ""
    source_path: str | None = None

    def is_recognized(self) -> bool:
        """Return True if :attr:`license_id` is a known identifier."""
        return is_known_license(self.license_id)

    def classify(self) -> str:
        """
        Classify :attr:`text` and record the identifier on this entity.

        Repeated calls give the same answer. On failure the entity is left
        as it was.

        Returns:
            str: The identifier that was assigned.

        Raises:
            UnrecognizedLicense: If the text matches no classification rule.
        """
        license_id = classify_text(self.text)
        object.__setattr__(self, "license_id", license_id)
        return license_id

    def text_sha256(self) -> str:
        """SHA-256 hex digest of the normalized text."""
        data = normalize_text(self.text).encode("utf-8", errors="ignore")
        return hashlib.sha256(data).hexdigest()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary (the license text is omitted)."""
        return {
            "license_id": self.license_id,
            "recognized": self.is_recognized(),
            "source_path": self.source_path,
            "text_sha256": self.text_sha256(),
        }


def new_license(license_id: str | None, text: str) -> License:
    """Build a License from an explicit identifier and text, without classifying."""
    return License(license_id=license_id, text=text)


def read_license_text(path: str | os.PathLike[str], config: ScanConfig | None = None) -> str:
    """
    Read and decode a license file.

    Args:
        path (str | PathLike): File to read.
        config (ScanConfig | None): Decoding and size options; defaults to
            :class:`ScanConfig`.

    Returns:
        str: Decoded file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    cfg = config or ScanConfig()
    with open(path, "rb") as fh:
        data = fh.read() if cfg.max_bytes is None else fh.read(cfg.max_bytes)
    return cfg.decode(data)


def new_license_from_file(path: str | os.PathLike[str], config: ScanConfig | None = None) -> License:
    """
    Read a license file and classify its content.

    Args:
        path (str | PathLike): License file on disk.
        config (ScanConfig | None): Decoding and size options.

    Returns:
        License: Classified entity with ``source_path`` set.

    Raises:
        OSError: If the file cannot be read.
        UnrecognizedLicense: If the content matches no rule.
    """
    source_path = os.fspath(path)
    lic = License(text=read_license_text(source_path, config), source_path=source_path)
    try:
        lic.classify()
    except UnrecognizedLicense:
        raise UnrecognizedLicense(source_path=source_path) from None
    log.debug("Classified %s as %s", source_path, lic.license_id)
    return lic
