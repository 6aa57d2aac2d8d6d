# -*- coding: utf-8 -*-
"""Password and passphrase generation."""

from __future__ import annotations

from typing import Optional, Tuple

from .charsets import GenerationOptions, require_charset
from .randomness import RandomSource, select

DEFAULT_SEPARATOR = "-"

WORDLIST: Tuple[str, ...] = (
    "aurora",
    "beacon",
    "crystal",
    "diamond",
    "eclipse",
    "forest",
    "galaxy",
    "horizon",
    "island",
    "journey",
    "kingdom",
    "liberty",
    "mountain",
    "nebula",
    "ocean",
    "phoenix",
    "quantum",
    "radiant",
    "stellar",
    "thunder",
    "universe",
    "valley",
    "wisdom",
    "zenith",
    "azure",
    "breeze",
    "cascade",
    "destiny",
    "eternal",
    "fortune",
    "gentle",
    "harmony",
    "infinite",
    "jubilant",
    "knight",
    "legacy",
    "marvel",
    "nobility",
    "optimal",
    "pioneer",
)


def generate_password(
    length: int,
    options: GenerationOptions,
    source: Optional[RandomSource] = None,
) -> str:
    """
    Generate a password of exactly ``length`` characters from the charset
    described by ``options``.

    The generator does not enforce a length range; the UI keeps it within 8-32.

    Raises:
        ConfigurationError if no character category is enabled.
        ValueError for a negative length.
    """
    charset = require_charset(options)
    return "".join(select(length, charset, source))


def generate_passphrase(
    word_count: int = 4,
    separator: str = DEFAULT_SEPARATOR,
    source: Optional[RandomSource] = None,
) -> str:
    """Join ``word_count`` random words from WORDLIST with ``separator``."""
    return separator.join(select(word_count, WORDLIST, source))
