"""Request ID middleware.

Forwards a client X-Request-ID when it is safe to log, otherwise mints a
UUID4. The value is stored on request.state and echoed on the response.
Raw ASGI (no BaseHTTPMiddleware) so streaming responses pass through.
"""

import re
import uuid
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_RE = re.compile(rf"^[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}$")


def _header_value(scope: dict, name: str) -> str | None:
    wanted = name.lower().encode("latin-1")
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Client value if it matches [A-Za-z0-9_-]{1,64}; else a fresh UUID4."""
    candidate = (raw or "").strip()
    if _REQUEST_ID_RE.match(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request ID to scope state and to every response."""
    header_bytes = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_header_value(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_bytes, request_id.encode("latin-1")),
                ]
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app
