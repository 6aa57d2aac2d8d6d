# -*- coding: utf-8 -*-
"""QR code rendering for transferring a secret to a phone."""

from __future__ import annotations

import base64
import io
import logging

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H

from .errors import RenderError

QR_WIDTH = 200
QR_MARGIN = 1

logger = logging.getLogger(__name__)


def render_qr_png(text: str, width: int = QR_WIDTH) -> bytes:
    """
    Encode ``text`` as a square PNG of ``width`` pixels, high error correction.

    Raises:
        RenderError if the text cannot be encoded or the image cannot be written.
    """
    try:
        qr = qrcode.QRCode(error_correction=ERROR_CORRECT_H, box_size=1, border=QR_MARGIN)
        qr.add_data(text)
        qr.make(fit=True)

        raw = io.BytesIO()
        qr.make_image(fill_color="black", back_color="white").save(raw)
        raw.seek(0)

        with Image.open(raw) as modules:
            scaled = modules.convert("RGB").resize((width, width), Image.NEAREST)

        out = io.BytesIO()
        scaled.save(out, format="PNG")
        return out.getvalue()
    except Exception as e:
        raise RenderError(f"Could not render QR code: {e}") from e


def render_qr(text: str, width: int = QR_WIDTH) -> str:
    """Return a ``data:image/png;base64,...`` URI, or "" when rendering fails."""
    try:
        png = render_qr_png(text, width)
    except RenderError:
        logger.debug("QR rendering failed; continuing without a QR code.", exc_info=True)
        return ""
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
