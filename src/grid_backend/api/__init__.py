from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from grid_backend.config import get_cors_origins
from grid_backend.logging_config import configure_logging
from grid_backend.request_context import (
    REQUEST_ID_HEADER,
    generate_request_id,
    reset_request_id,
    set_request_id,
)

from .routes_cells import router as cells_router

configure_logging()

app = FastAPI(
    title="Grid Backend API",
    version="0.1.0",
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """
    Bind a correlation ID to the request and echo it on the response.

    A client-supplied X-Request-Id is reused; otherwise a UUIDv4 is generated.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
    token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    """
    Inject a small set of security-related headers on all HTTP responses.

    Function-based middleware (rather than BaseHTTPMiddleware) avoids known
    edge cases in Starlette's BaseHTTPMiddleware with TestClient/anyio.
    """
    response = await call_next(request)
    headers = response.headers
    headers.setdefault("X-Content-Type-Options", "nosniff")
    headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    headers.setdefault("X-Frame-Options", "DENY")
    headers.setdefault(
        "Permissions-Policy",
        "geolocation=(), microphone=(), camera=()",
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(cells_router, prefix="/api")

__all__ = ["app"]
