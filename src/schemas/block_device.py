from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field # type: ignore

class SubmittedOperation(BaseModel):
    """Handle of an accepted block device creation request."""
    id: str = Field(..., description="Request id used to poll for completion")
    name: Optional[str] = Field(None, description="Human readable name of the request")
    status: Optional[str] = Field(None, description="Request status at submission time")
    progress: Optional[int] = Field(None, description="Request progress percentage")

class RequestStatus(BaseModel):
    """State of an asynchronous request as reported by the request tracker."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[str] = None
    progress: Optional[int] = None
    status: str
    message: Optional[str] = None
    resources: List[str] = Field(default_factory=list, description="Resource locators, set once finished")

class CompletedDisk(BaseModel):
    """Block device details read from a finished request's resource locator."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    status: Optional[str] = None
    owner: Optional[str] = None
    external_region_id: Optional[str] = Field(None, alias="externalRegionId")
    external_zone_id: Optional[str] = Field(None, alias="externalZoneId")
    description: Optional[str] = None
    tags: Optional[List[Dict[str, Any]]] = None
    capacity_in_gb: Optional[int] = Field(None, alias="capacityInGB")
    cloud_account_ids: Optional[List[str]] = Field(None, alias="cloudAccountIds")
    external_id: Optional[str] = Field(None, alias="externalId")
    id: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    org_id: Optional[str] = Field(None, alias="orgId")
    custom_properties: Optional[Dict[str, Any]] = Field(None, alias="customProperties")
    project_id: Optional[str] = Field(None, alias="projectId")
    persistent: Optional[bool] = None
