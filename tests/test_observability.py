from unittest.mock import patch

from infrastructure import observability


def test_scrubber_redacts_passwords_in_frames_and_request():
    event = {
        "exception": {"values": [{"stacktrace": {"frames": [
            {"vars": {"senha": "segredo1", "email": "a@test.com", "nested": {"password": "x"}}},
            {"function": "no_vars"},
        ]}}]},
        "request": {"data": {"email": "a@test.com", "senha": "segredo1"}},
    }

    scrubbed = observability._scrub_sensitive_data(event, {})

    frame_vars = scrubbed["exception"]["values"][0]["stacktrace"]["frames"][0]["vars"]
    assert frame_vars["senha"] == "[REDACTED]"
    assert frame_vars["nested"]["password"] == "[REDACTED]"
    assert frame_vars["email"] == "a@test.com"
    assert scrubbed["request"]["data"]["senha"] == "[REDACTED]"


def test_scrubber_masks_hash_like_strings():
    salt = "0123456789abcdef0123456789abcdef"
    assert observability._recursive_scrub([f"salt={salt}"]) == ["salt=[REDACTED]"]


@patch("infrastructure.observability.logging.basicConfig")
def test_setup_without_dsn_only_configures_logging(mock_basic_config, monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    with patch("sentry_sdk.init") as mock_init:
        observability.setup_observability()

    mock_init.assert_not_called()
    assert mock_basic_config.call_args.kwargs["level"] == 10


@patch("infrastructure.observability.logging.basicConfig")
def test_setup_with_dsn_initializes_sentry(_mock_basic_config, monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")
    monkeypatch.setenv("SENTRY_ENV", "test")

    with patch("sentry_sdk.init") as mock_init:
        observability.setup_observability()

    kwargs = mock_init.call_args.kwargs
    assert kwargs["environment"] == "test"
    assert kwargs["send_default_pii"] is False
    assert kwargs["before_send"] is observability._scrub_sensitive_data
