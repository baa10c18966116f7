"""
Document domain models and schemas.

Dependencies: pydantic
System role: Upload and retention API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Uploaded document on local storage."""

    id: str = Field(description="Document identifier (unique stored filename)")
    filename: str = Field(description="Stored filename")
    destination: str = Field(description="Directory holding the file")
    path: str = Field(description="Full storage path")
    size_bytes: int = Field(description="File size in bytes")
    content_type: str = Field(default="application/pdf", description="MIME type")
    uploaded_at: datetime = Field(description="Upload timestamp (UTC)")


class UploadedFileInfo(BaseModel):
    """File summary returned after upload."""

    filename: str
    size: int
    mimetype: str


class UploadResponse(BaseModel):
    """Response for a successful upload."""

    message: str
    file: UploadedFileInfo
    document_id: str
    job_id: str


class CleanupResponse(BaseModel):
    """Response for a manual cleanup."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    files_deleted: int = Field(alias="filesDeleted")
