"""
Ingestion job message schema.

Validates the JSON payload placed on the ingestion queue when a document is uploaded.

Dependencies: pydantic
System role: Data validation and contract definition for the job queue
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IngestionMessage(BaseModel):
    """Queue message body: where the uploaded document lives."""

    filename: str = Field(..., min_length=1, description="Stored filename, also the document ID")
    destination: str = Field(..., description="Directory the file was stored in")
    path: str = Field(..., min_length=1, description="Full storage path of the file")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "filename": "pdf-1718000000000-123456789.pdf",
                "destination": "uploads/",
                "path": "uploads/pdf-1718000000000-123456789.pdf",
            }
        }
    )

    @property
    def document_id(self) -> str:
        """Document identifier derived from the unique stored filename."""
        return Path(self.filename).name
