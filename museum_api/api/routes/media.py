"""Media Routes — audio upload passthrough and QR-code generation.

Invariants:
    - /uploadAudio rejects a request without an "audio" file before touching storage
    - The blob is stored under the client's original file name
    - /qrcode encodes the compact JSON {"id": ...} and streams it as image/png
"""

from collections.abc import Iterator

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import StreamingResponse

from museum_api.api.dependencies import get_object_store, get_qr_encoder
from museum_api.core.client_protocols import ObjectStore, QREncoder
from museum_api.core.enforce_fields import (
    AUDIO_FILE, DOCUMENT_ID_FIELDS, check_required_fields,
)
from museum_api.core.qr_payload import build_qr_payload
from museum_api.schemas.records import UploadResponse

router = APIRouter(tags=["media"])

STREAM_CHUNK_BYTES = 64 * 1024


def iter_chunks(data: bytes, size: int = STREAM_CHUNK_BYTES) -> Iterator[bytes]:
    for start in range(0, len(data), size):
        yield data[start:start + size]


@router.post("/uploadAudio", response_model=UploadResponse)
async def upload_audio(
    audio: UploadFile | None = File(None),
    objects: ObjectStore = Depends(get_object_store),
):
    """Store an audio file and return a long-lived signed URL for it."""
    check_required_fields(
        {AUDIO_FILE.name: audio.filename if audio is not None else None},
        (AUDIO_FILE,),
    )
    data = await audio.read()
    url = await objects.upload(audio.filename, data, audio.content_type)
    return UploadResponse(imageURL=url)


@router.get("/qrcode", response_class=StreamingResponse)
async def qr_code(
    document_id: str | None = Query(None, alias="id"),
    encoder: QREncoder = Depends(get_qr_encoder),
):
    """PNG QR code whose content is {"id":"<id>"}."""
    check_required_fields({"id": document_id}, DOCUMENT_ID_FIELDS)
    png = await encoder.encode(build_qr_payload(document_id))
    return StreamingResponse(
        iter_chunks(png),
        media_type="image/png",
        headers={"Content-Disposition": 'inline; filename="qrcode.png"'},
    )
