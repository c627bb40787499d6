from pathlib import Path

from examertric.config import DEFAULT_DATA_DIR, Settings


def test_settings_defaults():
    settings = Settings.from_env({})
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.require_login is True
    assert settings.auth_configured is False
    assert settings.storage_path == DEFAULT_DATA_DIR / "local_storage.json"


def test_settings_from_env(tmp_path: Path):
    settings = Settings.from_env(
        {
            "EXAMERTRIC_DATA_DIR": str(tmp_path),
            "EXAMERTRIC_FIREBASE_API_KEY": " abc ",
            "EXAMERTRIC_REQUIRE_LOGIN": "false",
            "EXAMERTRIC_LOG_LEVEL": "debug",
        }
    )
    assert settings.data_dir == tmp_path
    assert settings.firebase_api_key == "abc"
    assert settings.auth_configured
    assert settings.require_login is False
    assert settings.log_level == "DEBUG"
