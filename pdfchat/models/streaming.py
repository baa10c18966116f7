"""
Streaming event schemas for SSE chat.

Defines event types and payloads for incremental answer delivery.

Dependencies: pydantic
System role: Streaming protocol schemas
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


class StreamEventType(str, Enum):
    """Server-to-client event types for streaming chat."""

    CONTENT = "content"
    DONE = "done"
    ERROR = "error"


class StreamEvent(BaseModel):
    """
    Base streaming event model.

    Attributes:
        event: Event type identifier
        data: Event-specific payload
    """

    event: StreamEventType
    data: dict[str, Any]

    @classmethod
    def content(cls, text: str) -> "StreamEvent":
        """Answer fragment event."""
        return cls(event=StreamEventType.CONTENT, data={"content": text})

    @classmethod
    def done(cls) -> "StreamEvent":
        """Terminal marker event."""
        return cls(event=StreamEventType.DONE, data={"done": True})

    @classmethod
    def error(cls, message: str) -> "StreamEvent":
        """In-band error event."""
        return cls(event=StreamEventType.ERROR, data={"error": message})

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event.value, "data": self.data}

    def to_sse(self) -> str:
        """Format as a server-sent event frame."""
        return f"data: {json.dumps(self.data)}\n\n"
