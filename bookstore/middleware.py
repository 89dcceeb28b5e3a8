"""
ASGI Middleware

NormalizeApiPathMiddleware rewrites /api paths before routing:
lowercases them and drops a trailing slash, so "/api/Authors/" and
"/api/users/register/" (what the UI client sends) reach the same
routes as "/api/authors" and "/api/users/register".

Only the path is touched; the query string is left alone.
"""

from starlette.types import ASGIApp, Receive, Scope, Send

API_PREFIX = "/api"


class NormalizeApiPathMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            normalized = normalize_api_path(path)
            if normalized != path:
                scope = dict(scope)
                scope["path"] = normalized
                scope["raw_path"] = normalized.encode()
        await self.app(scope, receive, send)


def normalize_api_path(path: str) -> str:
    """Lowercase an /api path and strip its trailing slash."""
    lowered = path.lower()
    if lowered != API_PREFIX and not lowered.startswith(API_PREFIX + "/"):
        return path
    return lowered.rstrip("/") or "/"
