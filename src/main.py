import logging
import httpx
import uvicorn # type: ignore
from fastapi import FastAPI # type: ignore
from src.api import block_device_endpoints
from src.utils.config import config
from src.utils.exception_handlers import vra_http_error_handler, vra_invalid_response_handler, vra_unavailable_handler
from src.utils.exceptions import InvalidVRAResponse, VRAConnectionError

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format=config.LOG_FORMAT
)

logger: logging.Logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title=config.APP_TITLE,
    version=config.APP_VERSION,
    debug=config.DEBUG
)

# Register the custom exception handlers for errors raised by vRA calls
app.add_exception_handler(httpx.HTTPStatusError, vra_http_error_handler)
app.add_exception_handler(httpx.RequestError, vra_unavailable_handler)
app.add_exception_handler(VRAConnectionError, vra_unavailable_handler)
app.add_exception_handler(InvalidVRAResponse, vra_invalid_response_handler)

app.include_router(block_device_endpoints.router, prefix=config.API_PREFIX)

@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "version": config.APP_VERSION}

if __name__ == "__main__":
    logger.info(f"Starting server on {config.HOST}:{config.PORT}, debug={config.DEBUG}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
