# tests/clients/test_configurator_api_client.py
import pytest
import requests
from unittest.mock import MagicMock, patch

from clients.python.configurator_api_client import ConfiguratorClient

BASE_URL = "http://localhost:8000"


@pytest.fixture
def client():
    return ConfiguratorClient(BASE_URL + "/", "dev_key")


def _response(json_data=None, status_code=200, text="", headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    response.headers = headers or {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


def test_base_url_and_headers(client):
    assert client.base_url == BASE_URL
    assert client.headers == {"X-API-Key": "dev_key"}


@patch("clients.python.configurator_api_client.requests.get")
def test_check_connection(mock_get, client):
    mock_get.return_value = _response(status_code=200)
    assert client.check_connection() == (True, "Connection successful")

    mock_get.return_value = _response(status_code=503)
    ok, message = client.check_connection()
    assert not ok
    assert "503" in message

    mock_get.side_effect = requests.ConnectionError("refused")
    ok, message = client.check_connection()
    assert not ok
    assert "refused" in message


@patch("clients.python.configurator_api_client.requests.request")
def test_pointer_hit_payload(mock_request, client):
    mock_request.return_value = _response({"session_id": "s1"})

    client.pointer_hit("s1", 1)
    mock_request.assert_called_with(
        "POST", f"{BASE_URL}/sessions/s1/pointer", json={"unit_id": 1}, headers=client.headers
    )

    client.pointer_hit("s1", 1, "roof")
    mock_request.assert_called_with(
        "POST", f"{BASE_URL}/sessions/s1/pointer", json={"unit_id": 1, "face": "roof"}, headers=client.headers
    )


@patch("clients.python.configurator_api_client.requests.request")
def test_set_wall_variant_payload(mock_request, client):
    mock_request.return_value = _response({"walls": {"1": {"front": "Door"}}})

    result = client.set_wall_variant("s1", "Door")
    assert result["walls"] == {"1": {"front": "Door"}}
    mock_request.assert_called_with(
        "PUT", f"{BASE_URL}/sessions/s1/walls", json={"variant": "Door"}, headers=client.headers
    )


@patch("clients.python.configurator_api_client.requests.request")
def test_add_unit_conflict_raises(mock_request, client):
    mock_request.return_value = _response({"detail": {"code": "no_face_selected"}}, status_code=409)
    with pytest.raises(requests.HTTPError):
        client.add_unit("s1")


@patch("clients.python.configurator_api_client.requests.request")
def test_download_report(mock_request, client):
    mock_request.return_value = _response(
        text="Container assembly scheme\n",
        headers={"Content-Disposition": 'attachment; filename="assembly-scheme-123.txt"'},
    )
    filename, content = client.download_report("s1")
    assert filename == "assembly-scheme-123.txt"
    assert content.startswith("Container assembly scheme")
