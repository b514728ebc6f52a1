import httpx
import json
import logging
from typing import List, Optional, Union
from src.schemas.block_device import CompletedDisk, RequestStatus, SubmittedOperation
from src.schemas.create_block_device_request import (
    ByIdBlockDeviceRequest,
    ByNameBlockDeviceRequest,
    CreateBlockDeviceRequest,
)
from src.services.project_lookup import get_project_id_by_name
from src.services.request_status import get_block_device, get_request_status
from src.utils.config import config
from src.utils.constants import BLOCK_DEVICES_API, REQUEST_STATUS_FINISHED
from src.utils.polling import poll_until
from src.utils.vra_utils import invoke_rest_method, parse_vra_response

logger: logging.Logger = logging.getLogger(__name__)

def resolve_project_id(conn: httpx.Client, request: CreateBlockDeviceRequest) -> str:
    """
    Return the project id a block device should be created in.

    By-id requests use the supplied id as-is; by-name requests are resolved
    through the project listing.

    Raises:
        ProjectNotFound: If a by-name request matches no project
    """
    if isinstance(request, ByIdBlockDeviceRequest):
        return request.project_id
    if isinstance(request, ByNameBlockDeviceRequest):
        return get_project_id_by_name(conn, request.project_name)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")

def build_block_device_payload(request: CreateBlockDeviceRequest, project_id: str) -> dict:
    """Build the JSON body for the block device creation call."""
    return {
        "capacityInGB": request.capacity_in_gb,
        "encrypted": request.encrypted,
        "name": request.name,
        "description": request.description,
        "persistent": request.persistent,
        "projectId": project_id,
    }

def submit_block_device(conn: httpx.Client, payload: dict) -> SubmittedOperation:
    """
    Submit a block device creation request.

    Args:
        conn: Authenticated vRA client
        payload: Body built by build_block_device_payload

    Returns:
        SubmittedOperation: Handle of the asynchronous request
    """
    response: dict = invoke_rest_method(conn, "POST", BLOCK_DEVICES_API, body=payload)
    operation = parse_vra_response(SubmittedOperation, response, BLOCK_DEVICES_API)
    logger.info(f"Block device request '{operation.id}' submitted (status: {operation.status})")
    return operation

def wait_for_block_devices(
    conn: httpx.Client,
    request_id: str,
    timeout: int,
    interval: Optional[float] = None,
    ) -> List[CompletedDisk]:
    """
    Poll a creation request until it finishes and return the created disks.

    Args:
        conn: Authenticated vRA client
        request_id: Id of the submitted request
        timeout: Maximum time to wait in seconds
        interval: Seconds between polls (uses config default if None)

    Returns:
        List[CompletedDisk]: One entry per resource locator of the finished
        request, or an empty list if the request did not finish in time.
    """
    if interval is None:
        interval = config.COMPLETION_POLL_INTERVAL

    logger.info(f"Waiting for request '{request_id}' to finish - Timeout: {timeout}s, Interval: {interval}s")
    request_status: Optional[RequestStatus] = poll_until(
        lambda: get_request_status(conn, request_id),
        lambda current: current.status == REQUEST_STATUS_FINISHED,
        interval=interval,
        timeout=timeout,
    )
    if request_status is None:
        logger.warning(f"Request '{request_id}' did not finish within {timeout}s")
        return []

    logger.info(f"Request '{request_id}' finished with {len(request_status.resources)} resource(s)")
    return [get_block_device(conn, resource_link) for resource_link in request_status.resources]

def create_block_device(
    conn: httpx.Client,
    request: CreateBlockDeviceRequest,
    confirmed: bool = True,
    ) -> Union[SubmittedOperation, List[CompletedDisk], None]:
    """
    Create a block device in a vRA project.

    Resolves the project id, submits the creation request and, if the
    request asks for it, waits for the asynchronous operation to finish.

    Args:
        conn: Authenticated vRA client
        request: By-id or by-name creation request
        confirmed: Whether the caller approved the change. Nothing is sent
            to the server when False.

    Returns:
        SubmittedOperation when not waiting for completion, the list of
        created disks when waiting (empty on timeout), or None when the
        change was not confirmed.

    Raises:
        ProjectNotFound: If a by-name request matches no project
        httpx.HTTPStatusError: If any vRA call fails
        InvalidVRAResponse: If a vRA response cannot be parsed
    """
    if not confirmed:
        logger.info(f"Creation of block device '{request.name}' not confirmed, skipping")
        return None

    logger.info(f"Creating block device '{request.name}' with capacity {request.capacity_in_gb}GB")
    project_id: str = resolve_project_id(conn, request)
    payload: dict = build_block_device_payload(request, project_id)
    logger.debug(f"Block device payload:\n{json.dumps(payload, indent=4)}")

    operation: SubmittedOperation = submit_block_device(conn, payload)
    if not request.wait_for_completion:
        return operation

    return wait_for_block_devices(conn, operation.id, timeout=request.completion_timeout)
