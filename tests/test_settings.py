from pathlib import Path

from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.GRID_SIZE == 4
    assert cfg.MAX_GRID_SIZE == 50
    assert cfg.NOTIFY_ENABLED is False
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("GRID_SIZE", "6")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("NTFY_TOPIC", "env-topic")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.GRID_SIZE == 6
    assert cfg.DEBUG is True
    assert cfg.NTFY_TOPIC == "env-topic"
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["GRID_SIZE"] == cfg.GRID_SIZE
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY_WORDS_PER_GROUP=7)
    assert errors == {}
    assert cfg.NOTIFY_WORDS_PER_GROUP == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, GRID_SIZE="5")
    assert errors == {}
    assert cfg.GRID_SIZE == 5


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY_ENABLED="true")
    assert errors == {}
    assert cfg.NOTIFY_ENABLED is True

    errors = update_settings(cfg, NOTIFY_ENABLED="false")
    assert errors == {}
    assert cfg.NOTIFY_ENABLED is False


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_TOPIC="test-topic")
    assert errors == {}
    assert cfg.NTFY_TOPIC == "test-topic"


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, GRID_SIZE=5, NTFY_TOPIC="multi")
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.GRID_SIZE == 5
    assert cfg.NTFY_TOPIC == "multi"


def test_update_invalid_value_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, GRID_SIZE="big")
    assert "GRID_SIZE" in errors
    assert cfg.GRID_SIZE == 4


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_URL="http://localhost")
    assert "NTFY_URL" in errors
    assert cfg.NTFY_URL == "https://ntfy.sh"


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25
