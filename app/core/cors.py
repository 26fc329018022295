from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Adds permissive cross-origin headers to every response and answers
    every OPTIONS request with an empty 204.

    Unlike starlette's CORSMiddleware the headers do not depend on the
    request carrying an Origin header.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
