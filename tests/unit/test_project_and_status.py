import pytest
from unittest.mock import Mock, patch
from src.services.project_lookup import get_project_id_by_name
from src.services.request_status import get_block_device, get_request_status
from src.utils.exceptions import ProjectNotFound

@patch('src.services.project_lookup.invoke_rest_method')
def test_get_project_id_by_name_first_match(mock_invoke):
    """Test the first matching project id is returned."""
    mock_invoke.return_value = {"content": [{"id": "p-1"}, {"id": "p-2"}]}
    conn = Mock()

    assert get_project_id_by_name(conn, "GOLD") == "p-1"
    mock_invoke.assert_called_once_with(
        conn, "GET", "/iaas/api/projects",
        params={"$filter": "name eq 'GOLD'", "$select": "id"},
    )

@patch('src.services.project_lookup.invoke_rest_method')
def test_get_project_id_by_name_escapes_quotes(mock_invoke):
    mock_invoke.return_value = {"content": [{"id": "p-1"}]}
    get_project_id_by_name(Mock(), "Bob's project")
    assert mock_invoke.call_args.kwargs["params"]["$filter"] == "name eq 'Bob''s project'"

@pytest.mark.parametrize("response", [{"content": []}, {}, None, {"content": [{}]}])
@patch('src.services.project_lookup.invoke_rest_method')
def test_get_project_id_by_name_not_found(mock_invoke, response):
    """Test an empty lookup raises instead of yielding an empty id."""
    mock_invoke.return_value = response
    with pytest.raises(ProjectNotFound, match="MISSING"):
        get_project_id_by_name(Mock(), "MISSING")

@patch('src.services.request_status.invoke_rest_method')
def test_get_request_status(mock_invoke):
    mock_invoke.return_value = {
        "id": "req-1",
        "name": "Provisioning",
        "progress": 100,
        "status": "FINISHED",
        "resources": ["/iaas/api/block-devices/d1"],
        "selfLink": "/iaas/api/request-tracker/req-1",
    }
    conn = Mock()

    status = get_request_status(conn, "req-1")

    assert status.status == "FINISHED"
    assert status.resources == ["/iaas/api/block-devices/d1"]
    mock_invoke.assert_called_once_with(conn, "GET", "/iaas/api/request-tracker/req-1")

@patch('src.services.request_status.invoke_rest_method')
def test_get_request_status_in_progress_has_no_resources(mock_invoke):
    mock_invoke.return_value = {"id": "req-1", "progress": 10, "status": "INPROGRESS"}
    status = get_request_status(Mock(), "req-1")
    assert status.resources == []

@patch('src.services.request_status.invoke_rest_method')
def test_get_block_device_maps_fields(mock_invoke):
    """Test camelCase detail fields map onto the completed disk."""
    mock_invoke.return_value = {
        "name": "disk1",
        "capacityInGB": 10,
        "externalRegionId": "eu-west-1",
        "cloudAccountIds": ["ca-1"],
        "projectId": "p-123",
        "persistent": True,
        "_links": {"self": {"href": "/iaas/api/block-devices/d1"}},
    }
    conn = Mock()

    disk = get_block_device(conn, "/iaas/api/block-devices/d1")

    assert disk.name == "disk1"
    assert disk.capacity_in_gb == 10
    assert disk.external_region_id == "eu-west-1"
    assert disk.cloud_account_ids == ["ca-1"]
    assert disk.project_id == "p-123"
    assert disk.persistent is True
    mock_invoke.assert_called_once_with(conn, "GET", "/iaas/api/block-devices/d1")
