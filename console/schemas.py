"""Pydantic schemas for the file backend API."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


class FileRecord(BaseModel):
    """Metadata for one stored file, as returned by the backend."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    file_name: str = Field(alias="fileName")
    size: int = Field(ge=0)
    uploaded_at: str = Field(alias="uploadedAt")
    content_type: Optional[str] = Field(default=None, alias="contentType")
    description: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def _numeric_id_to_str(cls, value):
        # ids are opaque; some backends send integers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ListFilesEnvelope(BaseModel):
    """Wrapped listing response: ``{"files": [...]}``."""
    files: Optional[List[FileRecord]]


ListFilesPayload = Union[ListFilesEnvelope, List[FileRecord]]

_listing_adapter = TypeAdapter(Optional[ListFilesPayload])


def normalize_listing(payload) -> List[FileRecord]:
    """
    Decode a listing response body into a list of records.

    Accepts either the wrapper object or a bare array; a null body or a null
    ``files`` field yields an empty list.

    Raises:
        ValueError: If the payload matches neither shape or a record is invalid
    """
    try:
        parsed = _listing_adapter.validate_python(payload)
    except ValidationError as e:
        raise ValueError(
            f"Unexpected file listing format ({e.error_count()} validation error(s))"
        ) from e
    if parsed is None:
        return []
    if isinstance(parsed, ListFilesEnvelope):
        return list(parsed.files or [])
    return list(parsed)
