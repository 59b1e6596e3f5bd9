from unittest.mock import patch

from infrastructure import observability


def test_scrub_masks_sensitive_keys_and_bearer_tokens():
    data = {
        "password": "hunter2",
        "payload": {"email": "u@x.com", "access_token": "t1"},
        "headers": ["Authorization: Bearer abc.def"],
    }

    scrubbed = observability.scrub(data)

    assert scrubbed["password"] == "[REDACTED]"
    assert scrubbed["payload"]["email"] == "u@x.com"
    assert scrubbed["payload"]["access_token"] == "[REDACTED]"
    assert scrubbed["headers"] == ["Authorization: Bearer [REDACTED]"]


def test_before_send_scrubs_frame_vars():
    event = {
        "exception": {
            "values": [{"stacktrace": {"frames": [{"vars": {"token": "t1", "email": "u@x.com"}}]}}]
        }
    }

    result = observability._scrub_sensitive_data(event, {})

    frame_vars = result["exception"]["values"][0]["stacktrace"]["frames"][0]["vars"]
    assert frame_vars == {"token": "[REDACTED]", "email": "u@x.com"}


@patch("infrastructure.observability.logging.basicConfig")
def test_setup_without_dsn_skips_sentry(mock_basic_config, monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    with patch("sentry_sdk.init") as mock_init:
        observability.setup_observability()

    mock_basic_config.assert_called_once()
    mock_init.assert_not_called()


@patch("infrastructure.observability.logging.basicConfig")
def test_setup_with_dsn_installs_scrubber(_mock_basic_config, monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")
    with patch("sentry_sdk.init") as mock_init:
        observability.setup_observability()

    _, kwargs = mock_init.call_args
    assert kwargs["before_send"] is observability._scrub_sensitive_data
    assert kwargs["send_default_pii"] is False
