import logging

from fastapi import Request, Response

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Content-Type": "application/json",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": "Accept, Content-Type, Content-Length, Authorization, X-Custom-Header",
}


async def cors_middleware(request: Request, call_next):
    """Stamp the cross-origin headers and JSON content type on every response."""
    try:
        response = await call_next(request)
    except Exception:
        # keep a crashing handler local to its own request
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        response = Response(status_code=500)
    response.headers.update(CORS_HEADERS)
    return response
