"""Security headers middleware.

Clickjacking and MIME-sniffing protection plus a restrictive CSP for a JSON
API. Headers already set by the route win. Raw ASGI.
"""

from typing import Callable

CSP_DIRECTIVES: dict[str, str] = {
    "default-src": "'none'",
    "frame-ancestors": "'none'",
    "base-uri": "'none'",
    "form-action": "'none'",
}

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Security-Policy": "; ".join(f"{k} {v}" for k, v in CSP_DIRECTIVES.items()),
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Add security headers missing from the response."""
    defaults = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or DEFAULT_HEADERS).items()
    ]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                current = list(message.get("headers", []))
                present = {name.lower() for name, _ in current}
                current.extend(h for h in defaults if h[0] not in present)
                message["headers"] = current
            await send(message)

        await app(scope, receive, send_with_headers)

    return asgi_app
