"""Tests for preview options."""

import pytest
from pydantic import ValidationError

from doc_preview_core.options import (
    MICROSOFT_TAGS,
    SANDCASTLE_TAGS,
    IncludeProcessing,
    OptionSet,
    SupportedLanguage,
    TagCompatibilityLevel,
    UnrecognizedTagHandling,
)


class TestSupportedLanguage:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("csharp", SupportedLanguage.CSHARP),
            ("C#", SupportedLanguage.CSHARP),
            ("VB", SupportedLanguage.BASIC),
            ("Basic", SupportedLanguage.BASIC),
            ("cobol", SupportedLanguage.NONE),
            (42, SupportedLanguage.NONE),
        ],
    )
    def test_lookup(self, value, expected):
        assert SupportedLanguage(value) is expected


class TestOptionSet:
    """Test OptionSet defaults and tag vocabularies."""

    def test_defaults(self):
        options = OptionSet()
        assert options.tag_compatibility == TagCompatibilityLevel.SANDCASTLE
        assert options.include_processing == IncludeProcessing.NONE
        assert options.unrecognized_tag_handling == UnrecognizedTagHandling.RENDER_CONTENTS
        assert options.recognized_tags == SANDCASTLE_TAGS

    def test_microsoft_strict_excludes_extensions(self):
        options = OptionSet(tag_compatibility=TagCompatibilityLevel.MICROSOFT_STRICT)
        assert options.recognized_tags == MICROSOFT_TAGS
        assert options.recognizes("summary")
        assert not options.recognizes("note")
        assert not options.recognizes("threadsafety")

    def test_ndoc_recognizes_event(self):
        options = OptionSet(tag_compatibility=TagCompatibilityLevel.NDOC_1_3)
        assert options.recognizes("event")
        assert options.recognizes("note")

    def test_explicit_tags_kept(self):
        options = OptionSet(recognized_tags=frozenset({"summary"}))
        assert options.recognizes("summary")
        assert not options.recognizes("remarks")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            OptionSet().include_processing = IncludeProcessing.ABSOLUTE
