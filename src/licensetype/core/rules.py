# rules.py
# SPDX-License-Identifier: MIT
"""
Ordered phrase rules that map license text to an identifier.

Each rule keys on short, legally stable phrases from a license's boilerplate.
Rules are evaluated top to bottom against the normalized text and the first
match wins, so families sharing boilerplate must list the more specific
variant first (BSD-3-Clause before BSD-2-Clause).

Whole-text similarity scoring (edit distance, Jaro-Winkler) is not used;
GPL-sized texts make it slow and it still does not settle which license is
in play. Heavily modified text ends up unrecognized rather than
misclassified.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import UnrecognizedLicense
from .log import get_logger
from .normalize import normalize_text
from .registry import (
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
)

log = get_logger(__name__)

__all__ = [
    "Rule",
    "RULES",
    "BSD_PREAMBLE",
    "contains",
    "match_rule",
    "match_normalized",
    "classify_text",
]


def contains(normalized: str, literal: str) -> bool:
    """Literal substring test; ``normalized`` must come from :func:`normalize_text`."""
    return literal in normalized


@dataclass(frozen=True, slots=True)
class Rule:
    """
    One entry of the classification table.

    Attributes:
        license_id (str): Identifier reported when the rule matches.
        all_of (tuple[str, ...]): Lowercase phrases that must all appear.
        any_of (tuple[str, ...]): Lowercase phrases of which at least one
            must appear. Ignored when empty.
    """

    license_id: str
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.all_of and not self.any_of:
            raise ValueError(f"Rule for {self.license_id!r} needs at least one phrase.")
        for phrase in self.all_of + self.any_of:
            if phrase != phrase.lower():
                raise ValueError(f"Rule phrase must be lowercase: {phrase!r}")

    def matches(self, normalized: str) -> bool:
        if not all(contains(normalized, phrase) for phrase in self.all_of):
            return False
        if self.any_of and not any(contains(normalized, phrase) for phrase in self.any_of):
            return False
        return True


BSD_PREAMBLE = "redistribution and use in source and binary forms"

RULES: tuple[Rule, ...] = (
    Rule(
        LICENSE_MIT,
        all_of=(
            "permission is hereby granted, free of charge, to any person obtaining a copy of this software",
        ),
    ),
    Rule(
        LICENSE_ISC,
        all_of=("permission to use, copy, modify, and/or distribute this software for any",),
    ),
    Rule(
        LICENSE_APACHE_2_0,
        any_of=(
            "apache license version 2.0, january 2004",
            "http://www.apache.org/licenses/license-2.0",
        ),
    ),
    Rule(LICENSE_GPL_2_0, all_of=("gnu general public license version 2, june 1991",)),
    Rule(LICENSE_GPL_3_0, all_of=("gnu general public license version 3, 29 june 2007",)),
    Rule(LICENSE_LGPL_2_1, all_of=("gnu lesser general public license version 2.1, february 1999",)),
    Rule(LICENSE_LGPL_3_0, all_of=("gnu lesser general public license version 3, 29 june 2007",)),
    Rule(LICENSE_AGPL_3_0, all_of=("gnu affero general public license version 3, 19 november 2007",)),
    Rule(LICENSE_MPL_2_0, all_of=("mozilla public license", "version 2.0")),
    # Only BSD-3 carries the non-endorsement clause; the bare preamble
    # defaults to the less restrictive BSD-2.
    Rule(LICENSE_BSD_3_CLAUSE, all_of=(BSD_PREAMBLE, "neither the name of")),
    Rule(LICENSE_BSD_2_CLAUSE, all_of=(BSD_PREAMBLE,)),
    Rule(LICENSE_CDDL_1_0, all_of=("common development and distribution license (cddl) version 1.0",)),
    Rule(LICENSE_EPL_1_0, all_of=("eclipse public license - v 1.0",)),
    Rule(
        LICENSE_ZLIB,
        all_of=("permission is granted to anyone to use this software for any purpose",),
    ),
    Rule(
        LICENSE_UNLICENSE,
        all_of=("this is free and unencumbered software released into the public domain",),
    ),
)


def match_normalized(normalized: str, rules: Sequence[Rule] = RULES) -> Rule | None:
    """Return the first rule matching already-normalized text, or None."""
    for rule in rules:
        if rule.matches(normalized):
            return rule
    return None


def match_rule(text: str, rules: Sequence[Rule] = RULES) -> Rule | None:
    """Normalize ``text`` once and return the first matching rule, or None."""
    return match_normalized(normalize_text(text), rules)


def classify_text(text: str, rules: Sequence[Rule] = RULES) -> str:
    """
    Classify raw license text.

    Args:
        text (str): License text in any casing or line wrapping.
        rules (Sequence[Rule]): Ordered rule table; defaults to :data:`RULES`.

    Returns:
        str: Identifier of the first matching rule.

    Raises:
        UnrecognizedLicense: If no rule matches.
    """
    rule = match_rule(text, rules)
    if rule is None:
        raise UnrecognizedLicense()
    log.debug("Matched %s via %s", rule.license_id, rule.all_of + rule.any_of)
    return rule.license_id
