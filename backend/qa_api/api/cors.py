"""CORS Layer — Starlette CORSMiddleware whose rejections go through the Response Mapper.

Invariants:
    - Allowed origins/methods/headers come from settings
    - A rejected preflight answers 403 with the standard error envelope
    - Allowed preflights and simple requests behave exactly like CORSMiddleware
"""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from qa_api.api.error_handlers import CorsForbidden, map_failure


class MappedCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that reports policy violations as CorsForbidden."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers=request_headers)
        if response.status_code == 400:
            reason = bytes(response.body).decode().removeprefix("Disallowed CORS ")
            return map_failure(CorsForbidden(reason))
        return response
