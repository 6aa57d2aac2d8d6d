# -*- coding: utf-8 -*-
"""Error taxonomy for the password generator."""

from __future__ import annotations


class PassGenError(Exception):
    """Base class for all errors raised by passgen_pro."""


class ConfigurationError(PassGenError, ValueError):
    """No character category is enabled, so there is nothing to choose from."""


class RenderError(PassGenError):
    """A QR code could not be produced for the given text."""


class StorageError(PassGenError):
    """The history backend could not be read or written."""
