"""vRA IaaS API paths and shared API response definitions."""

LOGIN_API = "/iaas/api/login"
PROJECTS_API = "/iaas/api/projects"
BLOCK_DEVICES_API = "/iaas/api/block-devices"
REQUEST_TRACKER_API = "/iaas/api/request-tracker/{request_id}"

REQUEST_STATUS_FINISHED = "FINISHED"

COMMON_API_RESPONSES = {
    401: {"description": "The vRA server rejected the supplied credentials"},
    404: {"description": "Project or resource not found"},
    422: {"description": "Request validation failed"},
    502: {"description": "The vRA server returned an unexpected error"},
    503: {"description": "The vRA server could not be reached"},
}
