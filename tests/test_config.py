"""Tests for promptlib.config."""

import json

import pytest

from promptlib.config import (
    AVAILABLE_TONES,
    DEFAULT_CATEGORIES,
    DEFAULT_DATA_DIR,
    Settings,
    create_directories,
    load_reference_data,
)
from promptlib.errors import ErrorCode, PromptLibError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PROMPTLIB_DATA_DIR", "PROMPTLIB_PROMPTS_FILE", "PROMPTLIB_CATEGORIES_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.prompts_file == DEFAULT_DATA_DIR / "prompts.json"
        assert settings.categories_file == DEFAULT_DATA_DIR / "categories.json"

    def test_data_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROMPTLIB_DATA_DIR", str(tmp_path))
        settings = Settings.from_env()
        assert settings.prompts_file == tmp_path / "prompts.json"

    def test_explicit_data_dir_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROMPTLIB_DATA_DIR", str(tmp_path / "env"))
        settings = Settings.from_env(data_dir=tmp_path / "cli")
        assert settings.data_dir == tmp_path / "cli"

    def test_file_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROMPTLIB_PROMPTS_FILE", str(tmp_path / "elsewhere" / "p.json"))
        settings = Settings.from_env(data_dir=tmp_path / "lib")
        assert settings.prompts_file == tmp_path / "elsewhere" / "p.json"
        assert settings.directories() == [tmp_path / "lib", tmp_path / "elsewhere"]


class TestCreateDirectories:
    def test_creates_nested(self, tmp_path):
        target = tmp_path / "a" / "b"
        assert create_directories([target]) == [target]
        assert target.is_dir()

    def test_failure_does_not_stop_the_rest(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        good = tmp_path / "good"
        assert create_directories([blocker / "sub", good]) == [good]
        assert good.is_dir()


class TestReferenceData:
    def test_missing_file_uses_defaults(self, tmp_path):
        data = load_reference_data(tmp_path / "categories.json")
        assert data.categories == DEFAULT_CATEGORIES
        assert data.tones == AVAILABLE_TONES

    def test_reads_file(self, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text(
            json.dumps(
                {
                    "categories": [{"id": 9, "name": "Ops", "icon": "🛠", "color": "#000"}],
                    "tones": ["Dry"],
                }
            )
        )
        data = load_reference_data(path)
        assert [c.name for c in data.categories] == ["Ops"]
        assert data.tones == ["Dry"]

    def test_partial_file_keeps_default_tones(self, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text(json.dumps({"categories": [{"id": 1, "name": "Ops"}]}))
        assert load_reference_data(path).tones == AVAILABLE_TONES

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "categories.json"
        path.write_text("{oops")
        with pytest.raises(PromptLibError) as exc_info:
            load_reference_data(path)
        assert exc_info.value.code == ErrorCode.STORAGE_READ

    @pytest.mark.parametrize(
        "document",
        [
            {"categories": ["Studies"]},
            {"categories": {"name": "Studies"}},
            {"tones": "Formal"},
            {"tones": ["Formal", 3]},
            {"categories": ["Studies"], "tones": "Formal"},
        ],
    )
    def test_wrong_shape_raises(self, tmp_path, document):
        path = tmp_path / "categories.json"
        path.write_text(json.dumps(document))
        with pytest.raises(PromptLibError) as exc_info:
            load_reference_data(path)
        assert exc_info.value.code == ErrorCode.STORAGE_READ
        assert exc_info.value.path == path
