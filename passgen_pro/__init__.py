# -*- coding: utf-8 -*-
"""PassGen Pro: client-side password and passphrase generator."""

from .charsets import GenerationOptions, build_charset, get_charset_size
from .compliance import ComplianceBadges, check_compliance
from .errors import ConfigurationError, PassGenError, RenderError, StorageError
from .generator import WORDLIST, generate_passphrase, generate_password
from .strength import PasswordStrength, analyze_passphrase_strength, analyze_password_strength

__all__ = [
    "WORDLIST",
    "ComplianceBadges",
    "ConfigurationError",
    "GenerationOptions",
    "PassGenError",
    "PasswordStrength",
    "RenderError",
    "StorageError",
    "analyze_passphrase_strength",
    "analyze_password_strength",
    "build_charset",
    "check_compliance",
    "generate_passphrase",
    "generate_password",
    "get_charset_size",
]
