"""Domain Types — collection names and record field tables.

Invariants:
    - Firestore has no DDL: these constants are the single source of truth for
      collection names and the fields a record carries
    - Field tuples are ordered; validation walks them in this order

Design Decisions:
    - str Enum for collections: serializes to JSON and logs without conversion
"""

from enum import Enum
from typing import NewType


DocumentId = NewType("DocumentId", str)


class Collection(str, Enum):
    """Document-store collections owned by the museum app."""
    EXHIBITS = "expo"
    ARTIFACTS = "obra"


# Fields persisted on each record (the store assigns the document id)
EXHIBIT_FIELDS: tuple[str, ...] = ("name",)
ARTIFACT_FIELDS: tuple[str, ...] = ("name", "autor", "description", "imageURL")

# Multipart field carrying the uploaded audio
AUDIO_UPLOAD_FIELD = "audio"
