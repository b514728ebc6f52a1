import httpx
import logging
from src.schemas.block_device import CompletedDisk, RequestStatus
from src.utils.constants import REQUEST_TRACKER_API
from src.utils.vra_utils import invoke_rest_method, parse_vra_response

logger: logging.Logger = logging.getLogger(__name__)

def get_request_status(conn: httpx.Client, request_id: str) -> RequestStatus:
    """
    Read the current state of an asynchronous vRA request.

    Args:
        conn: Authenticated vRA client
        request_id: Id returned when the request was submitted

    Returns:
        RequestStatus: Status string and, once finished, resource locators
    """
    logger.debug(f"Retrieving status of request '{request_id}'")
    uri: str = REQUEST_TRACKER_API.format(request_id=request_id)
    response: dict = invoke_rest_method(conn, "GET", uri)
    request_status = parse_vra_response(RequestStatus, response, uri)
    logger.debug(f"Request '{request_id}' status: {request_status.status} ({request_status.progress}%)")
    return request_status

def get_block_device(conn: httpx.Client, resource_link: str) -> CompletedDisk:
    """Fetch full block device details from a resource locator."""
    logger.debug(f"Retrieving block device details from '{resource_link}'")
    response: dict = invoke_rest_method(conn, "GET", resource_link)
    return parse_vra_response(CompletedDisk, response, resource_link)
