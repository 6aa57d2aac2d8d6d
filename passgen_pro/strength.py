# -*- coding: utf-8 -*-
"""
Strength estimation.

Entropy is computed from the size of the space the secret was drawn from,
never from the characters that were actually picked:
- passwords: length * log2(charset size)
- passphrases: word count * log2(wordlist size)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .generator import WORDLIST

# Illustrative offline attacker: one guess per microsecond.
DEFAULT_GUESSES_PER_SECOND = 1e6

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000

# Beyond this many log2-seconds, 2**x no longer fits a float.
_MAX_LOG2_SECONDS = 1000.0

TIER_WEAK = "weak"
TIER_FAIR = "fair"
TIER_GOOD = "good"
TIER_STRONG = "strong"
TIER_VERY_STRONG = "very-strong"

TIERS = (TIER_WEAK, TIER_FAIR, TIER_GOOD, TIER_STRONG, TIER_VERY_STRONG)


@dataclass(frozen=True)
class PasswordStrength:
    entropy_bits: float
    tier: str
    crack_time: str


def calculate_entropy(length: int, alphabet_size: int) -> float:
    """Return entropy (bits) of ``length`` uniform draws from ``alphabet_size`` entries."""
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return float(length) * math.log2(float(alphabet_size))


def classify_strength(entropy_bits: float) -> str:
    if entropy_bits >= 128:
        return TIER_VERY_STRONG
    if entropy_bits >= 100:
        return TIER_STRONG
    if entropy_bits >= 80:
        return TIER_GOOD
    if entropy_bits >= 60:
        return TIER_FAIR
    return TIER_WEAK


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _count(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def estimate_crack_time(entropy_bits: float, guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND) -> str:
    """
    Expected brute-force time for a secret of the given entropy.

    On average half of the 2^H candidates are tried before a hit, so the
    estimate is (2^H / 2) / guesses_per_second seconds, expressed in the
    largest unit that keeps the number readable.
    """
    gps = max(float(guesses_per_second), 1.0)
    log2_seconds = entropy_bits - 1.0 - math.log2(gps)

    if log2_seconds < 0:
        return "under 1 second"

    if log2_seconds > _MAX_LOG2_SECONDS:
        # log space: thousands of years as a power of ten
        log10_thousands = log2_seconds * math.log10(2.0) - math.log10(SECONDS_PER_YEAR * 1000.0)
        return f"≈ 10^{log10_thousands:.1f}k years"

    seconds = 2.0 ** log2_seconds

    if seconds < SECONDS_PER_MINUTE:
        return _count(_round_half_up(seconds), "second")
    if seconds < SECONDS_PER_HOUR:
        return _count(_round_half_up(seconds / SECONDS_PER_MINUTE), "minute")
    if seconds < SECONDS_PER_DAY:
        return _count(_round_half_up(seconds / SECONDS_PER_HOUR), "hour")
    if seconds < SECONDS_PER_YEAR:
        return _count(_round_half_up(seconds / SECONDS_PER_DAY), "day")

    years = _round_half_up(seconds / SECONDS_PER_YEAR)
    if years < 1000:
        return _count(years, "year")
    return f"{years / 1000:.1f}k years"


def _analyze(entropy_bits: float) -> PasswordStrength:
    return PasswordStrength(
        entropy_bits=round(entropy_bits, 2),
        tier=classify_strength(entropy_bits),
        crack_time=estimate_crack_time(entropy_bits),
    )


def analyze_password_strength(password: str, charset_size: int) -> PasswordStrength:
    """Strength of a password drawn uniformly from a charset of ``charset_size``."""
    return _analyze(calculate_entropy(len(password), charset_size))


def analyze_passphrase_strength(word_count: int, wordlist_size: int = len(WORDLIST)) -> PasswordStrength:
    """
    Strength of a passphrase from its word-selection combinatorics.

    The separator and the letters of each word add nothing an attacker who
    knows the wordlist would have to guess, so only the words count.
    """
    return _analyze(calculate_entropy(word_count, wordlist_size))
