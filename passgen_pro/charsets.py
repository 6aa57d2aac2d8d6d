# -*- coding: utf-8 -*-
"""
Character set construction.

Each category has a full alphabet and a reduced variant:
- uppercase / lowercase / numbers drop glyphs that are easy to misread
  (I, L, O / i, l, o / 0, 1) when ``exclude_confusing`` is set.
- symbols fall back to a small "form-safe" subset when
  ``exclude_unsafe_symbols`` is set.

Categories are disjoint, so the charset size is simply the sum of the
selected category lengths.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List

from .errors import ConfigurationError

# -------------------------
# Category alphabets
# -------------------------

UPPERCASE = string.ascii_uppercase
UPPERCASE_NO_CONFUSING = "ABCDEFGHJKMNPQRSTUVWXYZ"
LOWERCASE = string.ascii_lowercase
LOWERCASE_NO_CONFUSING = "abcdefghjkmnpqrstuvwxyz"
NUMBERS = string.digits
NUMBERS_NO_CONFUSING = "23456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
# Symbols accepted by most web forms.
SYMBOLS_SAFE = "!@#$%^&*_+-="


@dataclass(frozen=True)
class GenerationOptions:
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    exclude_confusing: bool = False
    exclude_unsafe_symbols: bool = False

    @property
    def any_category(self) -> bool:
        return self.uppercase or self.lowercase or self.numbers or self.symbols


def category_alphabets(options: GenerationOptions) -> List[str]:
    """Return the alphabet of each enabled category, in charset order."""
    groups: List[str] = []

    if options.uppercase:
        groups.append(UPPERCASE_NO_CONFUSING if options.exclude_confusing else UPPERCASE)
    if options.lowercase:
        groups.append(LOWERCASE_NO_CONFUSING if options.exclude_confusing else LOWERCASE)
    if options.numbers:
        groups.append(NUMBERS_NO_CONFUSING if options.exclude_confusing else NUMBERS)
    if options.symbols:
        groups.append(SYMBOLS_SAFE if options.exclude_unsafe_symbols else SYMBOLS)

    return groups


def build_charset(options: GenerationOptions) -> str:
    """Concatenate the enabled categories. Empty when nothing is enabled."""
    return "".join(category_alphabets(options))


def get_charset_size(options: GenerationOptions) -> int:
    return sum(len(g) for g in category_alphabets(options))


def require_charset(options: GenerationOptions) -> str:
    """
    Same as build_charset, but refuses an empty result.

    Raises:
        ConfigurationError if no character category is enabled.
    """
    charset = build_charset(options)
    if not charset:
        raise ConfigurationError("At least one character type must be selected.")
    return charset
