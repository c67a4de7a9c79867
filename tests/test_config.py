import pytest

from netgsm.config import ClientConfig, build_client_config, getenv_required, load_client_config
from netgsm.errors import InvalidConfiguration, MissingCredentials


def test_load_client_config_reads_yaml_and_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("NETGSM_USERCODE", "8501112233")
    monkeypatch.setenv("NETGSM_PASSWORD", "s3cret")
    path = tmp_path / "config.yaml"
    path.write_text(
        "netgsm:\n"
        "  usercode_env: NETGSM_USERCODE\n"
        "  password_env: NETGSM_PASSWORD\n"
        "  msgheader: ACME\n"
        "  timeout: 30000\n",
        encoding="utf-8",
    )

    config = load_client_config(str(path))

    assert config.usercode == "8501112233"
    assert config.password == "s3cret"
    assert config.msgheader == "ACME"
    assert config.timeout_seconds == 30
    assert config.base_url == "https://api.netgsm.com.tr"
    assert config.encoding == "utf8"


def test_load_client_config_without_credentials_fails(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("netgsm:\n  msgheader: ACME\n", encoding="utf-8")
    with pytest.raises(MissingCredentials):
        load_client_config(str(path))


def test_load_client_config_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_client_config(str(path))


def test_build_client_config_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidConfiguration):
        build_client_config({"usercode": "u", "password": "p", "apiVersion": "2"})


def test_build_client_config_ignores_none_values() -> None:
    config = build_client_config({"usercode": "u", "password": "p", "base_url": None})
    assert config.base_url == "https://api.netgsm.com.tr"


def test_validate_rejects_non_positive_timeout() -> None:
    with pytest.raises(InvalidConfiguration):
        ClientConfig(usercode="u", password="p", timeout=0).validate()


def test_getenv_required_raises_when_missing(monkeypatch) -> None:
    monkeypatch.delenv("NETGSM_MISSING", raising=False)
    with pytest.raises(InvalidConfiguration):
        getenv_required("NETGSM_MISSING")


def test_load_client_config_turns_numeric_credentials_into_strings(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "netgsm:\n"
        "  usercode: 8501112233\n"
        "  password: 123456\n"
        "  query_string_auth: true\n"
        "  timeout: 1500\n",
        encoding="utf-8",
    )

    config = load_client_config(str(path))

    assert config.usercode == "8501112233"
    assert config.password == "123456"
    assert config.query_string_auth is True
    assert config.timeout_seconds == 1.5
