"""
Tests for settings loading
"""

import pytest

from skillmatch.config import DEFAULT_SETTINGS, get_env, load_settings


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(tmp_path / "nope.yaml")

    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_yaml_overrides_are_merged(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("matching:\n  min_score: 70\n  tiers:\n    strong: 90\n")

    settings = load_settings(path)

    assert settings["matching"]["min_score"] == 70
    assert settings["matching"]["tiers"] == {"strong": 90, "good": 60, "fair": 40}
    assert settings["matching"]["high_score_threshold"] == 85
    assert settings["recommendations"]["max_items"] == 3


def test_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("matching:\n  # min_score: 50\nrecommendations:\n  max_items: 2\n")

    settings = load_settings(path)

    assert settings["matching"] == DEFAULT_SETTINGS["matching"]
    assert settings["recommendations"]["max_items"] == 2


def test_scalar_section_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("matching: 70\n")

    with pytest.raises(ValueError, match="matching"):
        load_settings(path)


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        load_settings(path)


def test_settings_path_from_env(monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("recommendations:\n  max_items: 5\n")
    monkeypatch.setenv("SKILLMATCH_SETTINGS", str(path))

    assert load_settings()["recommendations"]["max_items"] == 5


def test_get_env_strips(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "  https://x.supabase.co \n")

    assert get_env("SUPABASE_URL") == "https://x.supabase.co"
    assert get_env("SKILLMATCH_UNSET_VAR", "fallback") == "fallback"
