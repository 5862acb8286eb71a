# mylife/middleware/logging.py
import time
import uuid
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send
import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger("http")

class RequestIdMiddleware:
    """
    Binds request_id/path/method into structlog contextvars for the request,
    echoes the request id back in the response headers and logs one
    http_request_finished event per request.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        incoming = headers.get(self.header_name.lower().encode())
        req_id = incoming.decode("latin-1") if incoming else str(uuid.uuid4())
        path = scope.get("path", "")
        method = scope.get("method", "")
        status_code = 500
        start = time.perf_counter()

        async def send_with_request_id(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                MutableHeaders(scope=message)[self.header_name] = req_id
            await send(message)

        # the app-level 500 handler runs outside this middleware and reads the id from request.state
        scope.setdefault("state", {})["request_id"] = req_id
        clear_contextvars()
        bind_contextvars(request_id=req_id, path=path, method=method)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info("http_request_finished", status_code=status_code, duration_ms=duration_ms)
            clear_contextvars()
