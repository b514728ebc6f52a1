import httpx
import logging
from src.utils.constants import PROJECTS_API
from src.utils.exceptions import ProjectNotFound
from src.utils.vra_utils import invoke_rest_method

logger: logging.Logger = logging.getLogger(__name__)

def get_project_id_by_name(conn: httpx.Client, project_name: str) -> str:
    """
    Resolve a project name to its id.

    Queries the project listing filtered by exact name equality and selects
    only the id field. When several projects match, the first one wins.

    Args:
        conn: Authenticated vRA client
        project_name: Exact name of the project

    Returns:
        str: Id of the first matching project

    Raises:
        ProjectNotFound: If no project has the given name
        httpx.HTTPStatusError: If the project listing fails
    """
    # OData string literals escape a single quote by doubling it
    escaped_name = project_name.replace("'", "''")
    params = {"$filter": f"name eq '{escaped_name}'", "$select": "id"}
    logger.info(f"Resolving project id for project '{project_name}'")
    response: dict = invoke_rest_method(conn, "GET", PROJECTS_API, params=params)

    content: list = (response or {}).get("content") or []
    if not content or not content[0].get("id"):
        error_msg = f"Project '{project_name}' not found"
        logger.error(error_msg)
        raise ProjectNotFound(error_msg)

    if len(content) > 1:
        logger.warning(f"{len(content)} projects named '{project_name}' found, using the first one")

    project_id: str = content[0]["id"]
    logger.debug(f"Project '{project_name}' resolved to id '{project_id}'")
    return project_id
