"""Request body size ceiling"""
import logging
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from mindful_campus.exceptions import RequestBodyTooLargeException

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than max_body_bytes.
    
    A declared Content-Length over the limit is refused before the app runs.
    Streamed bodies are counted as they arrive and cut off once the limit is
    crossed, before JSON parsing completes.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = dict(scope["headers"]).get(b"content-length")
        if content_length is not None and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.warning(f"Rejected {scope['method']} {scope['path']}: body of {int(content_length)} bytes")
            error = RequestBodyTooLargeException(self.max_body_bytes)
            response = JSONResponse({"error": error.detail}, status_code=error.status_code)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(f"Rejected {scope['method']} {scope['path']}: streamed body over limit")
                    raise RequestBodyTooLargeException(self.max_body_bytes)
            return message

        await self.app(scope, limited_receive, send)
