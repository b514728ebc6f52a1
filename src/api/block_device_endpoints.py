from fastapi import APIRouter, Depends, HTTPException, status # type: ignore
import httpx
import logging
from src.schemas.block_device import RequestStatus
from src.schemas.create_block_device_request import CreateBlockDeviceRequest
from src.services.block_device_create import create_block_device
from src.services.request_status import get_request_status
from src.utils.config import config
from src.utils.constants import COMMON_API_RESPONSES
from src.utils.exceptions import ProjectNotFound
from src.utils.vra_utils import get_connection_dependency

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix=config.BLOCK_DEVICE_ROUTER_PREFIX,
    tags=["block-device"],
    responses={
        **COMMON_API_RESPONSES,
    }
)

@router.post("/create",
            summary="Create a block device",
            description="Create a block device in a vRA project given by id or by name, optionally waiting for the request to finish.",
            status_code=status.HTTP_201_CREATED)
def create_block_device_endpoint(
    request: CreateBlockDeviceRequest,
    conn: httpx.Client = Depends(get_connection_dependency)):
    """
    Create a block device on the vRA server.

    Args:
        request: Creation request carrying either project_id or project_name.

    Returns:
        dict: The submitted request, or the created block devices when
        wait_for_completion is set.
    """
    logger.info(f"Block device creation request - Name: {request.name}, Size: {request.capacity_in_gb}GB")
    try:
        result = create_block_device(conn, request, confirmed=True)
    except ProjectNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if isinstance(result, list):
        return {"block_devices": [disk.model_dump(by_alias=True) for disk in result]}
    return result.model_dump()

@router.get("/requests/{request_id}",
            summary="Get request status",
            description="Return the current status of an asynchronous block device request.",
            response_model=RequestStatus)
def get_request_status_endpoint(
    request_id: str,
    conn: httpx.Client = Depends(get_connection_dependency)):
    logger.info(f"Request status lookup - Id: {request_id}")
    return get_request_status(conn, request_id)
