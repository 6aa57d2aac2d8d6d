import math

import pytest

from passgen_pro.strength import (
    analyze_passphrase_strength,
    analyze_password_strength,
    calculate_entropy,
    classify_strength,
    estimate_crack_time,
)


def test_entropy_formula_and_degenerate_inputs():
    assert calculate_entropy(16, 94) == pytest.approx(16 * math.log2(94))
    assert calculate_entropy(0, 94) == 0.0
    assert calculate_entropy(16, 1) == 0.0
    assert calculate_entropy(16, 0) == 0.0


def test_sixteen_chars_from_94_is_strong():
    result = analyze_password_strength("x" * 16, 94)
    assert result.entropy_bits == 104.87
    assert result.tier == "strong"


def test_eight_lowercase_is_weak():
    result = analyze_password_strength("abcdefgh", 26)
    assert result.entropy_bits == pytest.approx(37.6, abs=0.01)
    assert result.tier == "weak"


def test_entropy_depends_on_length_not_content():
    assert analyze_password_strength("aaaaaaaaaaaa", 62) == analyze_password_strength("Zq9x!Lm2Pa7r", 62)


@pytest.mark.parametrize(
    "bits,tier",
    [
        (0, "weak"),
        (59.99, "weak"),
        (60, "fair"),
        (79.99, "fair"),
        (80, "good"),
        (99.99, "good"),
        (100, "strong"),
        (127.99, "strong"),
        (128, "very-strong"),
        (300, "very-strong"),
    ],
)
def test_tier_thresholds_are_inclusive_lower_bounds(bits, tier):
    assert classify_strength(bits) == tier


@pytest.mark.parametrize(
    "bits,expected",
    [
        (0, "under 1 second"),
        (1, "1 second"),
        (6, "32 seconds"),
        (8, "2 minutes"),
        (13, "1 hour"),
        (18, "2 days"),
        (30, "17 years"),
        (40, "17.4k years"),
    ],
)
def test_crack_time_units_at_one_guess_per_second(bits, expected):
    assert estimate_crack_time(bits, guesses_per_second=1) == expected


def test_crack_time_default_rate():
    # 2^20 / 2 guesses at a million per second is about half a second
    assert estimate_crack_time(20) == "under 1 second"
    assert estimate_crack_time(16 * math.log2(94)).endswith("k years")


def test_crack_time_survives_huge_entropy():
    text = estimate_crack_time(5000)
    assert text.startswith("≈ 10^")
    assert text.endswith("k years")


def test_passphrase_uses_word_combinatorics():
    result = analyze_passphrase_strength(4, 40)
    assert result.entropy_bits == round(4 * math.log2(40), 2)
    assert result.tier == "weak"


def test_passphrase_default_wordlist_size():
    assert analyze_passphrase_strength(7) == analyze_passphrase_strength(7, 40)
