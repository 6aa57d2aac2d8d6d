import math

import pytest

from passgen_pro.charsets import GenerationOptions
from passgen_pro.errors import ConfigurationError
from passgen_pro.generator import WORDLIST
from passgen_pro.service import (
    MODE_PASSPHRASE,
    MODE_PASSWORD,
    GenerationRequest,
    generate_secret,
)


def request(mode=MODE_PASSWORD, length=16, word_count=4, **options):
    return GenerationRequest(mode=mode, length=length, word_count=word_count, options=GenerationOptions(**options))


def test_password_round():
    result = generate_secret(request(length=20))
    assert len(result.secret) == 20
    assert result.strength.entropy_bits == round(20 * math.log2(88), 2)
    assert result.strength.tier == "very-strong"


def test_password_round_uses_options_charset_size():
    result = generate_secret(request(length=16, symbols=False, exclude_confusing=True))
    assert result.strength.entropy_bits == round(16 * math.log2(23 + 23 + 8), 2)


def test_password_round_badges_match_secret():
    # 12 bytes of 26 map to 'a' (index 26 of the 88-character charset)
    result = generate_secret(request(length=12), source=lambda n: bytes([26] * n))
    assert result.secret == "a" * 12
    assert result.badges.owasp is False
    assert result.badges.complex is False


def test_passphrase_round():
    result = generate_secret(request(mode=MODE_PASSPHRASE, word_count=5))
    words = result.secret.split("-")
    assert len(words) == 5
    assert all(word in WORDLIST for word in words)
    assert result.strength.entropy_bits == round(5 * math.log2(len(WORDLIST)), 2)


def test_passphrase_ignores_disabled_categories():
    result = generate_secret(
        request(mode=MODE_PASSPHRASE, uppercase=False, lowercase=False, numbers=False, symbols=False)
    )
    assert len(result.secret.split("-")) == 4


def test_empty_password_configuration():
    with pytest.raises(ConfigurationError):
        generate_secret(request(uppercase=False, lowercase=False, numbers=False, symbols=False))


def test_unknown_mode():
    with pytest.raises(ValueError):
        generate_secret(request(mode="pin"))
