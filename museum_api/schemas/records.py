"""Record Schemas — exhibit (expo) and artifact (obra) bodies and responses."""

from pydantic import BaseModel, ConfigDict


class ExhibitCreate(BaseModel):
    name: str | None = None


class DocumentRef(BaseModel):
    """Body of DELETE requests: the document id to remove."""
    id: str | None = None


class ArtifactWrite(BaseModel):
    """Body of POST and PATCH /obra — all five fields are required."""
    id: str | None = None
    name: str | None = None
    autor: str | None = None
    description: str | None = None
    imageURL: str | None = None


class Exhibit(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: str
    name: str | None = None


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    message: str
    id: str


class UploadResponse(BaseModel):
    imageURL: str
