"""Tests for Settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from doc_preview_core.options import (
    NDOC_TAGS,
    IncludeProcessing,
    SupportedLanguage,
    TagCompatibilityLevel,
    UnrecognizedTagHandling,
)
from doc_preview_core.settings import Settings, settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults when no variables or .env file are present."""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, clear=True):
            s = Settings()

        assert s.server_host == "127.0.0.1"
        assert s.server_port == 11235
        assert s.preview_style == "sandcastle_prototype"
        assert s.language == SupportedLanguage.CSHARP
        assert s.tag_compatibility == TagCompatibilityLevel.SANDCASTLE
        assert s.include_processing == IncludeProcessing.NONE
        assert s.unrecognized_tag_handling == UnrecognizedTagHandling.RENDER_CONTENTS

    @patch.dict(
        os.environ,
        {
            "DOC_PREVIEW_SERVER_PORT": "9000",
            "DOC_PREVIEW_PREVIEW_STYLE": "msdn",
            "DOC_PREVIEW_LANGUAGE": "basic",
            "DOC_PREVIEW_TAG_COMPATIBILITY": "ndoc_1_3",
            "DOC_PREVIEW_INCLUDE_PROCESSING": "relative",
        },
    )
    def test_env_variable_loading(self):
        s = Settings()
        assert s.server_port == 9000
        assert s.preview_style == "msdn"
        assert s.language == SupportedLanguage.BASIC
        assert s.tag_compatibility == TagCompatibilityLevel.NDOC_1_3
        assert s.include_processing == IncludeProcessing.RELATIVE

    @patch.dict(os.environ, {"DOC_PREVIEW_SERVER_PORT": "8080", "SERVER_PORT": "1", "DOC_PREVIEW_UNKNOWN": "x"})
    def test_prefix_required_and_extras_ignored(self):
        s = Settings()
        assert s.server_port == 8080
        assert not hasattr(s, "unknown")

    @patch.dict(os.environ, {"DOC_PREVIEW_SERVER_PORT": "not-a-port"})
    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            Settings()

    def test_settings_singleton(self):
        from doc_preview_core.settings import settings as settings2

        assert isinstance(settings, Settings)
        assert settings is settings2

    def test_env_file_loading(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading from a .env file in the working directory."""
        (tmp_path / ".env").write_text("DOC_PREVIEW_SERVER_HOST=0.0.0.0\nDOC_PREVIEW_LANGUAGE=basic\n")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, clear=True):
            s = Settings()
        assert s.server_host == "0.0.0.0"
        assert s.language == SupportedLanguage.BASIC

    @patch.dict(os.environ, {"DOC_PREVIEW_SERVER_PORT": "7000"})
    def test_env_var_overrides_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("DOC_PREVIEW_SERVER_PORT=6000")
        monkeypatch.chdir(tmp_path)
        assert Settings().server_port == 7000

    def test_settings_frozen(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings().server_port = 1
        assert "frozen" in str(exc_info.value).lower()


class TestDerivedOptions:
    """Test values derived from settings."""

    def test_option_set(self):
        s = Settings(
            tag_compatibility=TagCompatibilityLevel.NDOC_1_3,
            include_processing=IncludeProcessing.ABSOLUTE,
            unrecognized_tag_handling=UnrecognizedTagHandling.HIDE_TAG_AND_CONTENTS,
        )
        options = s.option_set()
        assert options.recognized_tags == NDOC_TAGS
        assert options.include_processing == IncludeProcessing.ABSOLUTE
        assert options.unrecognized_tag_handling == UnrecognizedTagHandling.HIDE_TAG_AND_CONTENTS

    def test_include_base_path(self, tmp_path: Path) -> None:
        assert Settings(include_base_dir=str(tmp_path)).include_base_path == tmp_path

    def test_include_base_path_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, clear=True):
            assert Settings().include_base_path == Path.cwd()
