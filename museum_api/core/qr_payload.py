"""QR payload construction — the JSON envelope encoded into QR images."""

import json


def build_qr_payload(document_id: str) -> dict[str, str]:
    return {"id": document_id}


def serialize_qr_payload(payload: dict) -> str:
    """Compact JSON, matching what mobile scanners parse: {"id":"abc"}."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
