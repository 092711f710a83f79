from ember_quality.config.pipeline_settings import get_pipeline_settings, load_env_file


def test_pipeline_settings_defaults(clean_settings, monkeypatch):
    for key in (
        "EMBER_PUBLISH_THRESHOLD",
        "EMBER_NUMERIC_TOLERANCE",
        "EMBER_MAX_BATCH_SIZE",
        "EMBER_BATCH_CONCURRENCY",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = get_pipeline_settings()
    assert settings.publish_threshold == 60.0
    assert settings.numeric_tolerance == 0.0001
    assert settings.max_batch_size == 100
    assert settings.batch_concurrency == 8


def test_pipeline_settings_env_override_and_floor(clean_settings, monkeypatch):
    monkeypatch.setenv("EMBER_PUBLISH_THRESHOLD", "75")
    monkeypatch.setenv("EMBER_NUMERIC_TOLERANCE", "-1")
    monkeypatch.setenv("EMBER_MAX_BATCH_SIZE", "0")
    monkeypatch.setenv("EMBER_BATCH_CONCURRENCY", "not-a-number")

    settings = get_pipeline_settings()
    assert settings.publish_threshold == 75.0
    assert settings.numeric_tolerance == 0.0
    assert settings.max_batch_size == 1
    assert settings.batch_concurrency == 8


def test_load_env_file_refreshes_cache(clean_settings, monkeypatch, tmp_path):
    # 先 setenv 再 delenv，测试结束后 dotenv 写入的值会被还原
    monkeypatch.setenv("EMBER_MAX_BATCH_SIZE", "100")
    monkeypatch.delenv("EMBER_MAX_BATCH_SIZE")
    assert get_pipeline_settings().max_batch_size == 100

    env_file = tmp_path / ".env"
    env_file.write_text("EMBER_MAX_BATCH_SIZE=25\n", encoding="utf-8")

    assert load_env_file(str(env_file)) is True
    assert get_pipeline_settings().max_batch_size == 25


def test_pipeline_settings_blank_values_use_defaults(clean_settings, monkeypatch):
    monkeypatch.setenv("EMBER_PUBLISH_THRESHOLD", "  ")
    monkeypatch.setenv("EMBER_MAX_BATCH_SIZE", " 50 ")

    settings = get_pipeline_settings()
    assert settings.publish_threshold == 60.0
    assert settings.max_batch_size == 50
