"""
Per-request context shared with the logging layer.

RequestContextMiddleware assigns the request id; the profile id is bound by
the auth dependency once the caller's profile is resolved. Both are kept in
ContextVars for JsonFormatter and mirrored on request.state for the access
log line.
"""

import uuid
from contextvars import ContextVar
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
profile_id_ctx: ContextVar[str | None] = ContextVar("profile_id", default=None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_profile_id() -> str | None:
    return profile_id_ctx.get()


def bind_profile(request: Request, profile_id: str) -> None:
    """Attach the authenticated profile to the current request's logs"""
    profile_id_ctx.set(profile_id)
    request.state.profile_id = profile_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Starts a fresh logging context for every request.

    Reuses an incoming X-Request-ID (generating a UUID4 otherwise), echoes it
    in the response and clears any profile id left by a previous request.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = rid
        request.state.profile_id = None

        rid_token = request_id_ctx.set(rid)
        profile_token = profile_id_ctx.set(None)
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            profile_id_ctx.reset(profile_token)
            request_id_ctx.reset(rid_token)
