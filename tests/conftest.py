import pytest # type: ignore
from fastapi.testclient import TestClient # type: ignore
from unittest.mock import Mock
import httpx
import logging

logger = logging.getLogger(__name__)

from src.main import app
from src.utils.vra_utils import get_connection_dependency

# Global test counter
test_counter = 0

def pytest_runtest_logstart(nodeid, location):
    """Log test start with sequence number"""
    global test_counter
    test_counter += 1
    test_name = location[2]  # Get the test function name
    logger.info(f"===================== Start #{test_counter} - {test_name} =====================")

def pytest_runtest_logfinish(nodeid, location):
    """Log test finish with sequence number"""
    global test_counter
    test_name = location[2]  # Get the test function name
    logger.info(f"===================== Finish #{test_counter} - {test_name} =====================")

@pytest.fixture(scope="session")
def client():
    """Fixture to provide a FastAPI TestClient."""
    return TestClient(app)

@pytest.fixture
def mock_vra_connection():
    """Fixture to provide a mocked vRA client."""
    return Mock(spec=httpx.Client)

@pytest.fixture
def client_with_mocks(client, mock_vra_connection):
    """Fixture to provide a test client with the vRA session dependency mocked."""

    def override_get_connection():
        yield mock_vra_connection

    app.dependency_overrides[get_connection_dependency] = override_get_connection
    yield client, mock_vra_connection
    app.dependency_overrides.clear()

def make_vra_client(handler) -> httpx.Client:
    """Build an httpx client whose requests are answered by handler."""
    return httpx.Client(base_url="https://vra.example.com", transport=httpx.MockTransport(handler))

@pytest.fixture
def vra_client_factory():
    """Fixture returning a factory for clients backed by httpx.MockTransport."""
    clients = []

    def factory(handler) -> httpx.Client:
        conn = make_vra_client(handler)
        clients.append(conn)
        return conn

    yield factory
    for conn in clients:
        conn.close()
