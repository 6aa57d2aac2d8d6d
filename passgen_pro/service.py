# -*- coding: utf-8 -*-
"""One generation round: produce a secret and analyze it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .charsets import GenerationOptions, get_charset_size
from .compliance import ComplianceBadges, check_compliance
from .generator import DEFAULT_SEPARATOR, WORDLIST, generate_passphrase, generate_password
from .randomness import RandomSource
from .strength import PasswordStrength, analyze_passphrase_strength, analyze_password_strength

MODE_PASSWORD = "password"
MODE_PASSPHRASE = "passphrase"


@dataclass(frozen=True)
class GenerationRequest:
    mode: str
    length: int
    word_count: int
    options: GenerationOptions
    separator: str = DEFAULT_SEPARATOR


@dataclass(frozen=True)
class GenerationResult:
    secret: str
    strength: PasswordStrength
    badges: ComplianceBadges


def generate_secret(request: GenerationRequest, source: Optional[RandomSource] = None) -> GenerationResult:
    """
    Raises:
        ConfigurationError in password mode when no category is enabled.
        ValueError for an unknown mode.
    """
    if request.mode == MODE_PASSPHRASE:
        secret = generate_passphrase(request.word_count, request.separator, source)
        strength = analyze_passphrase_strength(request.word_count, len(WORDLIST))
    elif request.mode == MODE_PASSWORD:
        secret = generate_password(request.length, request.options, source)
        strength = analyze_password_strength(secret, get_charset_size(request.options))
    else:
        raise ValueError(f"Unknown generation mode: {request.mode!r}")

    return GenerationResult(
        secret=secret,
        strength=strength,
        badges=check_compliance(secret, request.options),
    )
