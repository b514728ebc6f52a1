import logging
import pytest # type: ignore
from src.utils.constants import BLOCK_DEVICES_API
from src.utils.vra_utils import get_vra_connection
from tests.config import config

logger = logging.getLogger(__name__)

@pytest.fixture(scope="session")
def vra_connection():
    """Live vRA session, skipping the e2e suite when no server is configured."""
    if not config.VRA_SERVER or not config.TEST_PROJECT_NAME:
        pytest.skip("VRA_SERVER and TEST_PROJECT_NAME must be set for e2e tests")
    conn = get_vra_connection()
    yield conn
    conn.close()

@pytest.fixture(scope="session")
def test_context(client, vra_connection):
    context = {
        "client": client,
        "project_name": config.TEST_PROJECT_NAME,
        "disk_name": config.TEST_DISK_NAME,
        "created_disk_ids": [],
    }
    yield context
    if not config.TEST_CLEANUP_ON_END:
        logger.info("Skipping system cleanup...")
        return
    for disk_id in context["created_disk_ids"]:
        logger.info(f"Deleting block device '{disk_id}'")
        try:
            vra_connection.delete(f"{BLOCK_DEVICES_API}/{disk_id}", params={"purge": "true"}).raise_for_status()
        except Exception as e:
            logger.warning(f"Cleanup of block device '{disk_id}' failed: {e}")
