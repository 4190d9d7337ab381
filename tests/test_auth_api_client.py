import pytest
import requests
from unittest.mock import patch, MagicMock
from infrastructure.http.auth_api_client import AuthApiClient, AuthServiceError


@pytest.fixture
def client():
    return AuthApiClient("http://localhost:8888/")


@patch('requests.post')
def test_post_login_success(mock_post, client):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = {"sucesso": True, "usuario": {"id": 1}}
    mock_post.return_value = mock_resp

    reply = client.post_login("a@test.com", "segredo1")

    assert reply.ok is True
    assert reply.status_code == 200
    mock_post.assert_called_once_with(
        "http://localhost:8888/api/login",
        json={"email": "a@test.com", "senha": "segredo1"},
        timeout=None,
    )


@patch('requests.post')
def test_post_register_rejection_carries_message(mock_post, client):
    mock_resp = MagicMock()
    mock_resp.status_code = 400
    mock_resp.json.return_value = {"sucesso": False, "mensagem": "Este email já está cadastrado"}
    mock_post.return_value = mock_resp

    reply = client.post_register({"nome": "A"})

    assert reply.ok is False
    assert reply.message == "Este email já está cadastrado"
    assert mock_post.call_args[0][0] == "http://localhost:8888/api/registrar"


@patch('requests.post')
def test_network_error(mock_post, client):
    mock_post.side_effect = requests.ConnectionError("Connection Refused")

    with pytest.raises(AuthServiceError) as excinfo:
        client.post_login("a@test.com", "x")
    assert "network error" in str(excinfo.value)


@patch('requests.post')
def test_non_json_answer(mock_post, client):
    mock_resp = MagicMock()
    mock_resp.status_code = 502
    mock_resp.json.side_effect = ValueError("no json")
    mock_post.return_value = mock_resp

    with pytest.raises(AuthServiceError):
        client.post_login("a@test.com", "x")


@patch('requests.post')
def test_timeout_is_forwarded(mock_post):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = {"sucesso": True}
    mock_post.return_value = mock_resp

    AuthApiClient("http://auth", timeout=2.5).post_login("a@test.com", "x")

    assert mock_post.call_args.kwargs["timeout"] == 2.5
