import pytest

from pamscim import ConfigurationError
from pamscim.client import REQUEST_TIMEOUT
from pamscim.config import ScimSettings, load_settings
from pamscim.config import settings

ENV_VARS = [
    "IDENTITY_CONFIG",
    "IDENTITY_URL",
    "IDENTITY_APP_ID",
    "IDENTITY_CLIENT_ID",
    "IDENTITY_CLIENT_SECRET",
    "IDENTITY_USERNAME",
    "IDENTITY_SECRET",
    "IDENTITY_TOKEN",
    "IDENTITY_VERBOSE",
    "IDENTITY_TIMEOUT",
    "IDENTITY_API_ENDPOINT",
    "IDENTITY_API_VERSION",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    secrets_dir = tmp_path / "secrets"
    secrets_dir.mkdir()
    monkeypatch.setattr(settings, "SECRETS_DIR", secrets_dir)
    return secrets_dir


def write_config(tmp_path, text):
    path = tmp_path / "config.yml"
    path.write_text(text)
    return path


def test_defaults_without_sources():
    cfg = load_settings()
    assert cfg == ScimSettings()
    assert cfg.api_endpoint == "scim"
    assert cfg.api_version == "v2"
    assert cfg.timeout == REQUEST_TIMEOUT


def test_load_from_yaml(tmp_path):
    path = write_config(
        tmp_path,
        "IDENTITY:\n"
        "  URL: example.my.idaptive.app\n"
        "  APP_ID: myapp\n"
        "  CLIENT_ID: svc@example.com\n"
        "  CLIENT_SECRET: s3cret\n"
        "  VERBOSE: true\n",
    )

    cfg = load_settings(path)

    assert cfg.host == "example.my.idaptive.app"
    assert cfg.app_id == "myapp"
    assert cfg.client_secret == "s3cret"
    assert cfg.verbose is True
    assert cfg.auth_mode == "client_credentials"


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = write_config(tmp_path, "IDENTITY:\n  URL: from-file\n  TOKEN: file-token\n")
    monkeypatch.setenv("IDENTITY_URL", "from-env")
    monkeypatch.setenv("IDENTITY_VERBOSE", "no")

    cfg = load_settings(path)

    assert cfg.host == "from-env"
    assert cfg.bearer_token == "file-token"
    assert cfg.verbose is False


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path, "IDENTITY:\n  URL: example.my.idaptive.app\n")
    monkeypatch.setenv("IDENTITY_CONFIG", str(path))

    assert load_settings().host == "example.my.idaptive.app"


def test_secret_file_takes_priority(isolated_environment, monkeypatch):
    (isolated_environment / "identity_client_secret").write_text("file-secret\n")
    monkeypatch.setenv("IDENTITY_CLIENT_SECRET", "env-secret")

    assert load_settings().client_secret == "file-secret"


def test_secret_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("IDENTITY_SECRET", "env-password")

    assert load_settings().password == "env-password"


def test_missing_section_rejected(tmp_path):
    path = write_config(tmp_path, "OTHER:\n  URL: x\n")

    with pytest.raises(ConfigurationError, match="IDENTITY"):
        load_settings(path)


def test_invalid_yaml_rejected(tmp_path):
    path = write_config(tmp_path, "IDENTITY: [unclosed\n")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "absent.yml")


def test_invalid_timeout_rejected(monkeypatch):
    monkeypatch.setenv("IDENTITY_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize(
    "overrides,mode",
    [
        (dict(bearer_token="t", client_id="c", client_secret="s", app_id="a"), "token"),
        (dict(client_id="c", client_secret="s", app_id="a", username="u", password="p"), "resource_owner"),
        (dict(client_id="c", client_secret="s", app_id="a"), "client_credentials"),
        (dict(client_id="c", client_secret="s", app_id="a", username="u"), "client_credentials"),
    ],
)
def test_auth_mode_priority(overrides, mode):
    assert ScimSettings(host="h", **overrides).auth_mode == mode


@pytest.mark.parametrize(
    "overrides",
    [
        dict(bearer_token="t"),
        dict(host="h"),
        dict(host="h", client_id="c", client_secret="s"),
    ],
)
def test_auth_mode_requires_host_and_credentials(overrides):
    with pytest.raises(ConfigurationError):
        ScimSettings(**overrides).auth_mode
