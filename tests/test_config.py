import dataclasses
import os

import pytest

from bittrex_rest.config import API_BASE, BittrexApiOptions, load_options

ENV_VARS = (
    "BITTREX_API_KEY",
    "BITTREX_API_SECRET",
    "BITTREX_API_VERSION",
    "BITTREX_BASE_URL",
    "BITTREX_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # load_dotenv writes into os.environ; give each test a throwaway copy
    env = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    monkeypatch.setattr(os, "environ", env)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    opts = BittrexApiOptions("k", "s")
    assert opts.api_version == "v1.1"
    assert opts.base_url == API_BASE
    assert opts.transport_options == {}


def test_options_are_frozen():
    opts = BittrexApiOptions("k", "s")
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.api_key = "other"


def test_secret_not_in_repr():
    assert "s3cret" not in repr(BittrexApiOptions("k", "s3cret"))


def test_load_options_from_env_file(tmp_path):
    env = tmp_path / "bittrex.env"
    env.write_text(
        "BITTREX_API_KEY=file-key\n"
        "BITTREX_API_SECRET=file-secret\n"
        "BITTREX_TIMEOUT_MS=5000\n",
        encoding="utf-8",
    )
    opts = load_options(str(env))
    assert opts.api_key == "file-key"
    assert opts.api_secret == "file-secret"
    assert opts.api_version == "v1.1"
    assert opts.transport_options == {"timeout": 5000}


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    env = tmp_path / "bittrex.env"
    env.write_text("BITTREX_API_KEY=file-key\nBITTREX_API_SECRET=file-secret\n", encoding="utf-8")
    monkeypatch.setenv("BITTREX_API_KEY", "env-key")
    monkeypatch.setenv("BITTREX_API_VERSION", "v2.0")
    opts = load_options(str(env))
    assert opts.api_key == "env-key"
    assert opts.api_version == "v2.0"


def test_missing_credentials(tmp_path):
    with pytest.raises(RuntimeError, match="BITTREX_API_KEY"):
        load_options(str(tmp_path / "absent.env"))
