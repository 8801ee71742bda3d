"""Tests for environment configuration loading."""

import pytest

from pubsub_service.config import Config, PubSubParams, load_pubsub_params


@pytest.mark.parametrize(
    "project_id, credentials_path",
    [
        ("my-project", "/var/secrets/key.json"),
        ("", ""),
        ("  padded  ", "relative/path.json"),
    ],
)
def test_load_pubsub_params_returns_values_verbatim(project_id, credentials_path):
    params = load_pubsub_params(
        {"PROJECT_ID": project_id, "GOOGLE_APPLICATION_CREDENTIALS": credentials_path}
    )

    assert params == PubSubParams(project_id=project_id, credentials_path=credentials_path)


def test_load_pubsub_params_missing_variables_become_empty_strings():
    params = load_pubsub_params({})

    assert params.project_id == ""
    assert params.credentials_path == ""


def test_load_pubsub_params_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PROJECT_ID", "from-env")
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)

    params = load_pubsub_params()

    assert params.project_id == "from-env"
    assert params.credentials_path == ""


def test_params_are_immutable():
    params = load_pubsub_params({"PROJECT_ID": "p"})

    with pytest.raises(AttributeError):
        params.project_id = "other"


def test_config_defaults():
    config = Config(environ={})

    assert config.ENV == "production"
    assert config.is_production()
    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_DIR == ""
    assert config.HEALTH_TOPIC_ID == "support-test"
    assert config.EMAIL_TOPIC_ID == "email"
    assert config.pubsub_params() == PubSubParams("", "")


def test_config_port_is_fixed():
    config = Config(environ={"PORT": "9999", "SERVER_PORT": "9999"})

    assert config.SERVER_PORT == 8080


def test_config_overrides():
    config = Config(
        environ={
            "APP_ENV": "Development",
            "LOG_LEVEL": "debug",
            "PUBSUB_HEALTH_TOPIC": "canary",
            "PUBSUB_EMAIL_TOPIC": "outbound-email",
        }
    )

    assert config.is_development()
    assert config.LOG_LEVEL == "DEBUG"
    assert config.HEALTH_TOPIC_ID == "canary"
    assert config.EMAIL_TOPIC_ID == "outbound-email"


def test_get_required_raises_for_unknown_key():
    config = Config(environ={})

    assert config.get("UNKNOWN", "fallback") == "fallback"
    assert not config.has("UNKNOWN")
    with pytest.raises(EnvironmentError, match="UNKNOWN"):
        config.get_required("UNKNOWN")
