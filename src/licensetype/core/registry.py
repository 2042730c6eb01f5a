# registry.py
# SPDX-License-Identifier: MIT
"""Catalog of the license identifiers licensetype can report."""

from __future__ import annotations

__all__ = [
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
    "KNOWN_LICENSES",
    "is_known_license",
]

LICENSE_MIT = "MIT"
LICENSE_ISC = "ISC"
LICENSE_BSD_3_CLAUSE = "BSD-3-Clause"
LICENSE_BSD_2_CLAUSE = "BSD-2-Clause"
LICENSE_APACHE_2_0 = "Apache-2.0"
LICENSE_MPL_2_0 = "MPL-2.0"
LICENSE_GPL_2_0 = "GPL-2.0"
LICENSE_GPL_3_0 = "GPL-3.0"
LICENSE_LGPL_2_1 = "LGPL-2.1"
LICENSE_LGPL_3_0 = "LGPL-3.0"
LICENSE_AGPL_3_0 = "AGPL-3.0"
LICENSE_CDDL_1_0 = "CDDL-1.0"
LICENSE_EPL_1_0 = "EPL-1.0"
LICENSE_ZLIB = "zlib"
LICENSE_UNLICENSE = "Unlicense"

KNOWN_LICENSES: tuple[str, ...] = (
    LICENSE_MIT,
    LICENSE_ISC,
    LICENSE_BSD_3_CLAUSE,
    LICENSE_BSD_2_CLAUSE,
    LICENSE_APACHE_2_0,
    LICENSE_MPL_2_0,
    LICENSE_GPL_2_0,
    LICENSE_GPL_3_0,
    LICENSE_LGPL_2_1,
    LICENSE_LGPL_3_0,
    LICENSE_AGPL_3_0,
    LICENSE_CDDL_1_0,
    LICENSE_EPL_1_0,
    LICENSE_ZLIB,
    LICENSE_UNLICENSE,
)

_KNOWN_SET = frozenset(KNOWN_LICENSES)


def is_known_license(license_id: str | None) -> bool:
    """Return True if ``license_id`` is exactly one of :data:`KNOWN_LICENSES`."""
    return license_id in _KNOWN_SET
