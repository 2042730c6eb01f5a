# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`licensetype`.

licensetype names the license that governs a piece of text. Text is
normalized (lowercased, line breaks and whitespace runs flattened) and run
through an ordered table of phrase rules; the first rule that matches
decides the identifier.

Most callers need one of:

- :func:`new_license_from_file` to classify a single file.
- :func:`new_license_from_directory` / :func:`new_licenses_from_directory`
  to find ``LICENSE*``, ``LICENCE*``, ``COPYING*`` or ``UNLICENSE`` files in
  a directory and classify them.
- :func:`new_license` plus :meth:`License.classify` for text already in
  memory.

Examples:
    >>> from licensetype import new_license
    >>> lic = new_license(None, "This is free and unencumbered software "
    ...                         "released into the public domain.")
    >>> lic.classify()
    'Unlicense'
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("licensetype")
except Exception:  # pragma: no cover
    __version__ = "0.0.0+unknown"

from .core.config import (
    DEFAULT_LICENSE_FILES,
    LicenseTypeConfig,
    LoggingConfig,
    ScanConfig,
    load_config_from_path,
)
from .core.errors import (
    LicenseError,
    MultipleLicensesFound,
    NoLicenseFileFound,
    UnrecognizedLicense,
)
from .core.licenses import License, new_license, new_license_from_file, read_license_text
from .core.locate import compile_patterns, locate_license_files, match_license_files
from .core.log import configure_logging, get_logger, temp_level
from .core.normalize import normalize_text
from .core.registry import (
    KNOWN_LICENSES,
    LICENSE_AGPL_3_0,
    LICENSE_APACHE_2_0,
    LICENSE_BSD_2_CLAUSE,
    LICENSE_BSD_3_CLAUSE,
    LICENSE_CDDL_1_0,
    LICENSE_EPL_1_0,
    LICENSE_GPL_2_0,
    LICENSE_GPL_3_0,
    LICENSE_ISC,
    LICENSE_LGPL_2_1,
    LICENSE_LGPL_3_0,
    LICENSE_MIT,
    LICENSE_MPL_2_0,
    LICENSE_UNLICENSE,
    LICENSE_ZLIB,
    is_known_license,
)
from .core.rules import RULES, Rule, classify_text, match_rule
from .core.scan import (
    new_license_from_directory,
    new_licenses_from_directory,
    scan_directory,
)

__all__ = [
    "__version__",
    "License",
    "new_license",
    "new_license_from_file",
    "new_license_from_directory",
    "new_licenses_from_directory",
    "scan_directory",
    "read_license_text",
    "classify_text",
    "match_rule",
    "normalize_text",
    "Rule",
    "RULES",
    "compile_patterns",
    "match_license_files",
    "locate_license_files",
    "KNOWN_LICENSES",
    "is_known_license",
    "LICENSE_MIT",
    "LICENSE_ISC",
    "LICENSE_BSD_3_CLAUSE",
    "LICENSE_BSD_2_CLAUSE",
    "LICENSE_APACHE_2_0",
    "LICENSE_MPL_2_0",
    "LICENSE_GPL_2_0",
    "LICENSE_GPL_3_0",
    "LICENSE_LGPL_2_1",
    "LICENSE_LGPL_3_0",
    "LICENSE_AGPL_3_0",
    "LICENSE_CDDL_1_0",
    "LICENSE_EPL_1_0",
    "LICENSE_ZLIB",
    "LICENSE_UNLICENSE",
    "DEFAULT_LICENSE_FILES",
    "ScanConfig",
    "LoggingConfig",
    "LicenseTypeConfig",
    "load_config_from_path",
    "LicenseError",
    "UnrecognizedLicense",
    "NoLicenseFileFound",
    "MultipleLicensesFound",
    "configure_logging",
    "get_logger",
    "temp_level",
]
