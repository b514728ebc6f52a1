import httpx
import logging
from typing import Any, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError # type: ignore
from src.utils.config import config
from src.utils.constants import LOGIN_API
from src.utils.exceptions import InvalidVRAResponse, VRAConnectionError

logger: logging.Logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}

ModelT = TypeVar("ModelT", bound=BaseModel)

def _get_access_token(conn: httpx.Client, refresh_token: str) -> str:
    """
    Exchange a vRA refresh token for a bearer access token.

    Args:
        conn: Client bound to the vRA server
        refresh_token: API refresh token issued by the vRA server

    Returns:
        str: Bearer access token

    Raises:
        VRAConnectionError: If the login response carries no token
        httpx.HTTPStatusError: If the vRA server rejects the refresh token
    """
    logger.debug(f"Requesting access token from {LOGIN_API}")
    response: httpx.Response = conn.post(LOGIN_API, json={"refreshToken": refresh_token})
    response.raise_for_status()
    token: Optional[str] = response.json().get("token")
    if not token:
        raise VRAConnectionError("vRA login response did not contain an access token")
    return token

def get_vra_connection() -> httpx.Client:
    """
    Establish an authenticated session with the vRA server.

    Returns:
        httpx.Client: Client with base URL and Authorization header set

    Raises:
        VRAConnectionError: If the server or credentials are not configured,
            or the login exchange fails

    Note:
        Caller is responsible for closing the client when done.
    """
    if not config.VRA_SERVER:
        raise VRAConnectionError("VRA_SERVER is not configured")
    if not config.VRA_API_TOKEN and not config.VRA_REFRESH_TOKEN:
        raise VRAConnectionError("Either VRA_API_TOKEN or VRA_REFRESH_TOKEN must be configured")

    logger.info(f"Establishing vRA session with {config.VRA_BASE_URL}")
    conn = httpx.Client(
        base_url=config.VRA_BASE_URL,
        headers=JSON_HEADERS,
        verify=config.VRA_VERIFY_SSL,
        timeout=config.VRA_REQUEST_TIMEOUT,
    )
    try:
        token: str = config.VRA_API_TOKEN or _get_access_token(conn, config.VRA_REFRESH_TOKEN)
    except (httpx.HTTPError, VRAConnectionError) as e:
        conn.close()
        logger.error(f"Failed to authenticate with vRA server {config.VRA_BASE_URL}: {e}")
        raise VRAConnectionError(f"Failed to authenticate with vRA server: {e}") from e

    conn.headers["Authorization"] = f"Bearer {token}"
    logger.debug("vRA session established successfully")
    return conn

def get_connection_dependency() -> httpx.Client:
    """
    FastAPI dependency to manage the vRA session lifecycle.

    Yields:
        httpx.Client: An authenticated vRA client.
    """
    logger.debug("Dependency: acquiring vRA session.")
    conn: httpx.Client | None = None
    try:
        conn = get_vra_connection()
        yield conn
    finally:
        if conn:
            conn.close()
            logger.debug("Dependency: vRA session closed.")

def invoke_rest_method(
    conn: httpx.Client,
    method: str,
    uri: str,
    body: Optional[dict] = None,
    params: Optional[dict] = None,
    ) -> Any:
    """
    Send a request to the vRA API and return the parsed JSON response.

    Args:
        conn: Authenticated vRA client
        method: HTTP method (GET, POST, ...)
        uri: API path relative to the server, e.g. '/iaas/api/projects'
        body: Optional JSON request body
        params: Optional query string parameters

    Returns:
        The decoded JSON body, or None for an empty response

    Raises:
        httpx.HTTPStatusError: If the server answers with a 4xx/5xx status
        httpx.RequestError: On transport failures
    """
    logger.debug(f"{method} {uri} params={params}")
    response: httpx.Response = conn.request(method, uri, json=body, params=params)
    response.raise_for_status()
    if not response.content:
        return None
    return response.json()

def parse_vra_response(model: Type[ModelT], response: Any, uri: str) -> ModelT:
    """
    Validate a decoded vRA response against a result model.

    Raises:
        InvalidVRAResponse: If the response does not match the model
    """
    try:
        return model.model_validate(response)
    except ValidationError as e:
        logger.error(f"Unexpected response from {uri} for {model.__name__}: {e}")
        raise InvalidVRAResponse(f"Unexpected response from vRA server at {uri}: {e.error_count()} invalid field(s)") from e
