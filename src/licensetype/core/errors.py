# errors.py
# SPDX-License-Identifier: MIT
"""Exceptions raised by license classification and discovery.

Filesystem failures are not wrapped: ``OSError`` from listing or reading
reaches the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "LicenseError",
    "UnrecognizedLicense",
    "NoLicenseFileFound",
    "MultipleLicensesFound",
]


class LicenseError(RuntimeError):
    """Base class for licensetype errors."""


class UnrecognizedLicense(LicenseError):
    """Raised when license text matches none of the classification rules."""

    def __init__(self, message: str = "could not guess license type", *, source_path: str | None = None):
        if source_path:
            message = f"{message}: {source_path}"
        super().__init__(message)
        self.source_path = source_path


class NoLicenseFileFound(LicenseError):
    """Raised when no file name looks like a license file."""

    def __init__(self, message: str = "unable to find any license file", *, directory: str | None = None):
        if directory:
            message = f"{message} in {directory}"
        super().__init__(message)
        self.directory = directory


class MultipleLicensesFound(LicenseError):
    """Raised by strict lookups when a directory yields more than one license."""

    def __init__(self, license_ids: list[str | None], *, directory: str | None = None):
        found = ", ".join(str(lid) for lid in license_ids)
        message = f"multiple license files found ({found})"
        if directory:
            message = f"{message} in {directory}"
        super().__init__(message)
        self.license_ids = list(license_ids)
        self.directory = directory
