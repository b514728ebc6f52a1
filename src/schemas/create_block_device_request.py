from typing import Union
from pydantic import Field, TypeAdapter, field_validator # type: ignore
from src.schemas.base_schemas import BaseBlockDeviceRequest
from src.utils.validation_utils import validate_name

class ByIdBlockDeviceRequest(BaseBlockDeviceRequest):
    """Request model for block device creation in a project given by id."""
    project_id: str = Field(..., description="Id of the project to create the block device in")

    @field_validator('project_id')
    @classmethod
    def validate_project_id_field(cls, v: str) -> str:
        return validate_name(v, "Project id")

class ByNameBlockDeviceRequest(BaseBlockDeviceRequest):
    """Request model for block device creation in a project given by name."""
    project_name: str = Field(..., description="Name of the project to create the block device in")

    @field_validator('project_name')
    @classmethod
    def validate_project_name_field(cls, v: str) -> str:
        return validate_name(v, "Project name")

# Both variants forbid extra fields, so exactly one of project_id/project_name must be given.
CreateBlockDeviceRequest = Union[ByIdBlockDeviceRequest, ByNameBlockDeviceRequest]

_request_adapter: TypeAdapter = TypeAdapter(CreateBlockDeviceRequest)

def parse_block_device_request(data: dict) -> CreateBlockDeviceRequest:
    """
    Build a by-id or by-name request from raw parameters.

    Raises:
        pydantic.ValidationError: If neither or both of project_id and
            project_name are given, or any field is invalid.
    """
    return _request_adapter.validate_python(data)
