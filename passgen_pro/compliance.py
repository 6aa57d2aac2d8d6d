# -*- coding: utf-8 -*-
"""
Heuristic compliance badges.

Badges are computed from what the password actually contains. The options
used to generate it are accepted for convenience but do not influence the
result: a password generated with symbols enabled may still happen to contain
none.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .charsets import SYMBOLS, GenerationOptions

SEQUENTIAL_PATTERNS: Tuple[str, ...] = ("abc", "012", "bcd", "123", "xyz", "789", "123456")

NIST_MIN_LENGTH = 8
STRONG_MIN_LENGTH = 12
COMPLEX_MIN_CLASSES = 3

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile("[" + re.escape(SYMBOLS) + "]")


@dataclass(frozen=True)
class ComplianceBadges:
    nist: bool
    owasp: bool
    strong: bool
    complex: bool


def has_sequential(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in SEQUENTIAL_PATTERNS)


def check_compliance(password: str, options: Optional[GenerationOptions] = None) -> ComplianceBadges:
    has_upper = _UPPER_RE.search(password) is not None
    has_lower = _LOWER_RE.search(password) is not None
    has_digit = _DIGIT_RE.search(password) is not None
    has_symbol = _SYMBOL_RE.search(password) is not None

    classes = sum((has_upper, has_lower, has_digit, has_symbol))

    return ComplianceBadges(
        nist=len(password) >= NIST_MIN_LENGTH and not has_sequential(password),
        owasp=classes == 4,
        strong=len(password) >= STRONG_MIN_LENGTH and (has_upper or has_lower) and has_digit,
        complex=classes >= COMPLEX_MIN_CLASSES,
    )
