"""QR Encoder — renders JSON payloads as PNG QR codes with python-qrcode."""

import io
import logging
from typing import Any

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from starlette.concurrency import run_in_threadpool

from museum_api.core.errors import QREncodeError
from museum_api.core.qr_payload import serialize_qr_payload

logger = logging.getLogger(__name__)


class QRCodeEncoder:
    """PNG QR encoder; rendering is CPU-bound and runs in the threadpool."""

    def __init__(self, box_size: int = 10, border: int = 4):
        self.box_size = box_size
        self.border = border

    async def encode(self, payload: dict[str, Any]) -> bytes:
        text = serialize_qr_payload(payload)
        try:
            return await run_in_threadpool(self.render, text)
        except (DataOverflowError, ValueError, OSError) as e:
            logger.error(f"QR encoding failed: {e}", extra={"operation": "encode"})
            raise QREncodeError(f"Failed to encode QR code: {e}")

    def render(self, text: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        img = qr.make_image(image_factory=PilImage)
        buf = io.BytesIO()
        img.save(buf)
        return buf.getvalue()
