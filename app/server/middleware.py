from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id, path and method to every log line of a request.

    The id is taken from the X-Correlation-ID request header when present
    and echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER)
        with bind_request_context(
            correlation_id=correlation_id,
            request_path=request.url.path,
            request_method=request.method,
        ) as bound_id:
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = bound_id
        return response
