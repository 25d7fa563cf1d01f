import pytest

from tvdbxml.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TVDB_API_KEY", "TVDB_BASE_URL", "TVDB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_from_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("api_key: ABC\nmax_results: 3\n", encoding="utf-8")

    config = Config.from_file(path)

    assert config.api_key == "ABC"
    assert config.max_results == 3
    assert config.base_url == "http://thetvdb.com"


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_file(tmp_path / "missing.yaml")


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("api_key: FROMFILE\ntimeout: 20\n", encoding="utf-8")
    monkeypatch.setenv("TVDB_API_KEY", "FROMENV")
    monkeypatch.setenv("TVDB_TIMEOUT", "2.5")

    config = Config.from_env_and_file(path)

    assert config.api_key == "FROMENV"
    assert config.timeout == 2.5


def test_env_only(monkeypatch):
    monkeypatch.setenv("TVDB_API_KEY", "KEY")
    monkeypatch.setenv("TVDB_BASE_URL", "http://mirror.test")

    config = Config.from_env_and_file()

    assert config.api_key == "KEY"
    assert config.base_url == "http://mirror.test"


def test_missing_api_key():
    with pytest.raises(ValueError):
        Config.from_env_and_file()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("TVDB_API_KEY", "KEY")
    monkeypatch.setenv("TVDB_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        Config.from_env_and_file()


def test_round_trip_file(tmp_path):
    path = tmp_path / "config.yaml"
    Config(api_key="KEY", max_results=8).to_file(path)

    assert Config.from_file(path) == Config(api_key="KEY", max_results=8)


def test_overrides_fill_missing_api_key(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("timeout: 3\n", encoding="utf-8")
    monkeypatch.setenv("TVDB_BASE_URL", "http://env.test")

    config = Config.from_env_and_file(
        path, {"api_key": "CLI", "base_url": "http://cli.test", "log_level": None}
    )

    assert config.api_key == "CLI"
    assert config.base_url == "http://cli.test"
    assert config.timeout == 3
    assert config.log_level == "WARNING"
