from pathlib import Path

from payroll import config
from payroll.config import Settings


def test_get_settings_defaults(monkeypatch):
    for name in ("PAYROLL_DATA_FILE", "APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)

    settings = config.get_settings()

    assert settings.data_file == Path("employees.txt")
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False


def test_settings_read_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PAYROLL_DATA_FILE", str(tmp_path / "staff.txt"))
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()

    assert settings.data_file == tmp_path / "staff.txt"
    assert settings.log_json is True


def test_settings_accept_field_names():
    settings = Settings(data_file="other.txt", log_level="DEBUG")

    assert settings.data_file == Path("other.txt")
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()
