from pydantic import BaseModel, ConfigDict, Field, field_validator # type: ignore
from src.utils.config import config
from src.utils.validation_utils import validate_capacity_gb, validate_name, validate_timeout

class BaseBlockDeviceRequest(BaseModel):
    """Base request model for block device creation."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Name of the block device")
    capacity_in_gb: int = Field(..., description="Capacity of the block device in GB")
    description: str = Field("", description="Description of the block device")
    persistent: bool = Field(False, description="Keep the block device when its machine is deleted")
    encrypted: bool = Field(False, description="Create an encrypted block device")
    wait_for_completion: bool = Field(False, description="Block until the creation request finishes")
    completion_timeout: int = Field(
        default_factory=lambda: config.COMPLETION_TIMEOUT,
        description="Seconds to wait for completion before giving up",
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Validate the block device name."""
        return validate_name(value, "Block device name")

    @field_validator('capacity_in_gb')
    @classmethod
    def validate_capacity_in_gb(cls, value: int) -> int:
        return validate_capacity_gb(value)

    @field_validator('completion_timeout')
    @classmethod
    def validate_completion_timeout(cls, value: int) -> int:
        return validate_timeout(value)
