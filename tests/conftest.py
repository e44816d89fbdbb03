import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real tokens, .env and config.toml files out of the tests."""
    for name in ("GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_API_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
