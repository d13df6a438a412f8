# Unit tests for the SynapsePay HTTP client
import pytest
from unittest.mock import MagicMock
import httpx

from synapse_pay_client.infrastructure.http_client import HttpClient
from synapse_pay_client.app.service.exceptions import ApiError


@pytest.fixture
def mock_httpx_client():
    return MagicMock(spec=httpx.Client)

@pytest.fixture
def http_client(mock_httpx_client):
    return HttpClient(
        base_url="https://uat-api.synapsefi.com/v3.1/",
        client_id="client_id_1",
        client_secret="client_secret_1",
        fingerprint="fp_1",
        ip_address="10.0.0.1",
        http_client=mock_httpx_client,
    )

def make_response(status_code: int, body=None, text: str = ""):
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.content = b"{}" if body is not None else b""
    response.json.return_value = body
    response.text = text
    return response

def test_headers_carry_gateway_and_user_credentials(http_client):
    http_client.update_headers(oauth_key="oauth_1")

    headers = http_client.get_headers()

    assert headers["X-SP-GATEWAY"] == "client_id_1|client_secret_1"
    assert headers["X-SP-USER-IP"] == "10.0.0.1"
    assert headers["X-SP-USER"] == "oauth_1|fp_1"

def test_update_headers_only_changes_given_values(http_client):
    http_client.update_headers(user_id="user1")

    assert http_client.user_id == "user1"
    assert http_client.fingerprint == "fp_1"
    assert http_client.oauth_key == ""

def test_patch_sends_json_and_returns_parsed_body(http_client, mock_httpx_client):
    mock_httpx_client.request.return_value = make_response(200, {"_id": "user1", "documents": []})
    payload = {"documents": [{"id": "5", "alias": "Pip"}]}

    body = http_client.patch("/users/user1", payload)

    assert body == {"_id": "user1", "documents": []}
    args, kwargs = mock_httpx_client.request.call_args
    assert args == ("PATCH", "https://uat-api.synapsefi.com/v3.1/users/user1")
    assert kwargs["json"] == payload
    assert kwargs["headers"]["X-SP-GATEWAY"] == "client_id_1|client_secret_1"

def test_empty_body_returns_empty_dict(http_client, mock_httpx_client):
    mock_httpx_client.request.return_value = make_response(204)

    assert http_client.get("/users/user1") == {}

def test_error_status_raises_api_error_with_message(http_client, mock_httpx_client):
    error_body = {"error": {"en": "Invalid field value supplied."}, "error_code": "200", "http_code": "400"}
    mock_httpx_client.request.return_value = make_response(400, error_body, text="bad request")

    with pytest.raises(ApiError) as exc_info:
        http_client.patch("/users/user1", {"documents": []})

    assert exc_info.value.status_code == 400
    assert exc_info.value.response == error_body
    assert str(exc_info.value) == "Invalid field value supplied."

def test_error_status_without_json_uses_text(http_client, mock_httpx_client):
    response = make_response(502, text="Bad Gateway")
    mock_httpx_client.request.return_value = response

    with pytest.raises(ApiError) as exc_info:
        http_client.get("/users/user1")

    assert exc_info.value.status_code == 502
    assert str(exc_info.value) == "Bad Gateway"

def test_request_error_raises_api_error(http_client, mock_httpx_client):
    mock_httpx_client.request.side_effect = httpx.ConnectError("Connection refused", request=MagicMock())

    with pytest.raises(ApiError) as exc_info:
        http_client.get("/users/user1")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.RequestError)

def test_close_closes_underlying_client(http_client, mock_httpx_client):
    http_client.close()
    mock_httpx_client.close.assert_called_once()
