"""Chat API endpoints.

Routes:
- POST /chat - Answer a question about the uploaded document
- POST /chat/stream - Stream the answer using Server-Sent Events (SSE)

Dependencies: pdfchat.application.services.chat_service
System role: Grounded Q&A HTTP API with streaming support
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import aclosing

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from pdfchat.api.deps import get_chat_service
from pdfchat.api.routers.router_utils import error_response
from pdfchat.application.services.chat_service import ChatService
from pdfchat.core.exceptions import PdfChatException, ValidationError
from pdfchat.core.rag_query.query_engine import RAGQueryEngine
from pdfchat.models.chat import ChatRequest, ChatResponse, ChatSource, ErrorResponse
from pdfchat.models.streaming import StreamEvent

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

CHAT_FAILURE_MESSAGE = "Failed to process chat request"


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """Answer a question from the indexed document.

    Flow:
    1. Validate the query
    2. Retrieve the nearest chunks and generate a grounded answer
    3. Map ranked sources to ChatSource

    Args:
        request: ChatRequest with the question
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer with sources, or an ErrorResponse (400/500)
    """
    try:
        answer = await chat_service.process_chat(request.query)
    except ValidationError as e:
        return error_response(400, e.message)
    except Exception as e:
        logger.error(f"{__name__}:chat - {type(e).__name__}: {e}")
        detail = e.message if isinstance(e, PdfChatException) else str(e)
        return error_response(500, CHAT_FAILURE_MESSAGE, detail)

    sources = [
        ChatSource(
            chunk_index=source.rank,
            text_preview=source.text_preview,
            score=source.score,
            source=source.source,
        )
        for source in answer.sources
    ]
    return ChatResponse(answer=answer.answer, sources=sources)


@router.post(
    "/chat/stream",
    responses={400: {"model": ErrorResponse}},
)
async def chat_stream(
    http_request: Request,
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """Stream an answer using Server-Sent Events (SSE).

    Validation happens before the stream opens, so an empty query gets a
    plain 400 JSON response. Once streaming has started, failures are
    reported in-band and the stream ends.

    SSE Format:
        data: {"content": "..."}

        data: {"done": true}

        data: {"error": "..."}

    Args:
        http_request: Raw request, used to detect client disconnects
        request: ChatRequest with the question
        chat_service: Injected ChatService

    Returns:
        StreamingResponse: SSE stream of answer fragments
    """
    try:
        RAGQueryEngine.validate_query(request.query)
    except ValidationError as e:
        return error_response(400, e.message)

    logger.info(f"{__name__}:chat_stream - START query_length={len(request.query)}")

    async def event_generator() -> AsyncGenerator[str, None]:
        """Generate SSE frames from the chat stream."""
        try:
            async with aclosing(chat_service.stream_chat(request.query)) as fragments:
                async for fragment in fragments:
                    if await http_request.is_disconnected():
                        logger.info(f"{__name__}:chat_stream - Client disconnected, stopping")
                        return
                    yield StreamEvent.content(fragment).to_sse()

            yield StreamEvent.done().to_sse()
            logger.info(f"{__name__}:chat_stream - Stream completed")

        except PdfChatException as e:
            logger.error(f"{__name__}:chat_stream - {type(e).__name__}: {e}")
            yield StreamEvent.error(e.message).to_sse()

        except Exception as e:
            logger.error(f"{__name__}:chat_stream - {type(e).__name__}: {e}")
            yield StreamEvent.error(CHAT_FAILURE_MESSAGE).to_sse()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )
