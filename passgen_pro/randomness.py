# -*- coding: utf-8 -*-
"""
Secure random selection over an alphabet.

One byte (0..255) is drawn per selection and mapped with ``byte % len(alphabet)``.
For alphabet sizes that do not divide 256 this favours the lower indices
slightly: with 88 characters, indices 0..79 are hit 3 times out of 256 and
the rest twice. The bias is bounded and accepted here; tests depend on the
exact mapping, so changing it means changing them too.
"""

from __future__ import annotations

import secrets
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

# Capability: return exactly n cryptographically secure random bytes.
RandomSource = Callable[[int], bytes]

DEFAULT_SOURCE: RandomSource = secrets.token_bytes


def random_bytes(count: int, source: Optional[RandomSource] = None) -> bytes:
    """
    Draw ``count`` bytes from the source.

    Raises:
        ValueError if count is negative or the source returns the wrong amount.
    """
    if count < 0:
        raise ValueError("Selection count must not be negative.")

    draw = source if source is not None else DEFAULT_SOURCE
    data = bytes(draw(count))
    if len(data) != count:
        raise ValueError(f"Random source returned {len(data)} bytes, expected {count}.")
    return data


def select(count: int, alphabet: Sequence[T], source: Optional[RandomSource] = None) -> List[T]:
    """Pick ``count`` entries from ``alphabet``, one random byte each, in draw order."""
    if not alphabet:
        raise ValueError("Alphabet is empty; no entries to choose from.")

    size = len(alphabet)
    return [alphabet[value % size] for value in random_bytes(count, source)]
