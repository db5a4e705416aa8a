"""Stored image metadata attached to an idea."""

from datetime import UTC, datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class IdeaImage(BaseSchemaModel):
    """Metadata of an image the upload handler has already stored.

    Only metadata is kept on the idea; file bytes never pass through the
    idea service.
    """

    filename: str = Field(..., min_length=1, description="Stored file name")
    original_name: str = Field("", description="Name of the file as uploaded")
    mimetype: str = Field(..., description="Image MIME type")
    size: int = Field(..., ge=0, description="File size in bytes")
    upload_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the file was stored",
    )
