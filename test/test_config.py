import pytest

from order_service.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "DEV_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.host == "127.0.0.1"
    assert s.port == 3000
    assert s.dev_logging is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEV_LOGGING", "1")
    s = Settings(_env_file=None)
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.dev_logging is True


def test_dev_logging_zero_is_off(monkeypatch):
    monkeypatch.setenv("DEV_LOGGING", "0")
    assert Settings(_env_file=None).dev_logging is False


def test_reads_dotenv(tmp_path, monkeypatch):
    for name in ("HOST", "PORT", "DEV_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4000\nDEV_LOGGING=1\n")
    s = Settings(_env_file=env_file)
    assert s.port == 4000
    assert s.dev_logging is True


def test_missing_dotenv_is_not_an_error(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=tmp_path / "absent.env").port == 3000


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("", False), ("2", False), ("true", False), ("0", False), ("yes please", False)],
)
def test_only_one_enables_dev_logging(monkeypatch, value, expected):
    monkeypatch.setenv("DEV_LOGGING", value)
    assert Settings(_env_file=None).dev_logging is expected


def test_blank_dev_logging_in_dotenv_is_off(tmp_path, monkeypatch):
    monkeypatch.delenv("DEV_LOGGING", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DEV_LOGGING=\n")
    assert Settings(_env_file=env_file).dev_logging is False
