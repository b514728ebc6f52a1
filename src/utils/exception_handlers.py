import httpx
import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from src.utils.exceptions import InvalidVRAResponse, VRAConnectionError

logger = logging.getLogger(__name__)

async def vra_http_error_handler(request: Request, exc: httpx.HTTPStatusError):
    """
    Custom exception handler for httpx.HTTPStatusError raised by vRA calls.

    Passes through client-side statuses the caller can act on and reports
    anything else as a bad gateway.
    """
    upstream_status: int = exc.response.status_code
    logger.error(f"vRA error caught by handler: {upstream_status} {exc.response.text}")

    if upstream_status in (
        status.HTTP_400_BAD_REQUEST,
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
        status.HTTP_409_CONFLICT,
    ):
        detail = f"vRA server rejected the request: {exc.response.text}"
        status_code = upstream_status
    else:
        detail = f"vRA server returned an error: {upstream_status}"
        status_code = status.HTTP_502_BAD_GATEWAY

    return JSONResponse(
        status_code=status_code,
        content={"detail": detail},
    )

async def vra_unavailable_handler(request: Request, exc: Exception):
    """Report transport and session failures as service unavailable."""
    logger.error(f"vRA server unavailable: {exc}")
    if isinstance(exc, VRAConnectionError):
        detail = str(exc)
    else:
        detail = f"Could not connect to vRA server: {exc}"
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": detail},
    )

async def vra_invalid_response_handler(request: Request, exc: InvalidVRAResponse):
    """Report vRA responses that do not match the expected shape as a bad gateway."""
    logger.error(f"Invalid vRA response caught by handler: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc)},
    )
