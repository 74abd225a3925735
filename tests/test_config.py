import pytest

from dtoken import TokenConfig


def test_from_env_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DTOKEN_PERSISTENT_LENGTH", raising=False)
    monkeypatch.delenv("DTOKEN_TRANSIENT_LENGTH", raising=False)
    assert TokenConfig.from_env() == TokenConfig(persistent_length=32, transient_length=24)


def test_from_env_reads_lengths(monkeypatch) -> None:
    monkeypatch.setenv("DTOKEN_PERSISTENT_LENGTH", "64")
    monkeypatch.setenv("DTOKEN_TRANSIENT_LENGTH", "16")
    config = TokenConfig.from_env()
    assert config.persistent_length == 64
    assert config.transient_length == 16


@pytest.mark.parametrize("raw", ["abc", "0", "-4"])
def test_from_env_rejects_bad_lengths(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("DTOKEN_TRANSIENT_LENGTH", raw)
    with pytest.raises(ValueError):
        TokenConfig.from_env()


def test_config_rejects_non_positive_lengths() -> None:
    with pytest.raises(ValueError):
        TokenConfig(persistent_length=0)
