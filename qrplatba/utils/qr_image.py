"""
QR code image rendering for SPD strings.
"""
import base64
import io
from pathlib import Path
from typing import Union

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from qrplatba.config import settings

ERROR_CORRECTION_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def build_qr_image(payload: str):
    """
    Build a QR code image for the given payload.

    Args:
        payload: Data to encode (e.g., SPD string)

    Returns:
        PIL based image of the QR code
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECTION_LEVELS[settings.qr_error_correction],
        box_size=settings.qr_box_size,
        border=settings.qr_border,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return qr.make_image(fill_color="black", back_color="white")


def render_qr_png(payload: str, path: Union[str, Path]) -> str:
    """Save the QR code as a PNG file and return its path."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    build_qr_image(payload).save(file_path)
    return str(file_path)


def render_qr_data_url(payload: str) -> str:
    """
    Render the QR code as a PNG data URL.

    Args:
        payload: Data to encode

    Returns:
        str: data:image/png;base64,... URL usable as an <img> source
    """
    buffer = io.BytesIO()
    build_qr_image(payload).save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
