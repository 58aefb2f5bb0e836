"""Preview options: target language, tag compatibility and include handling.

The option set is a read-only value handed to each render. ``Settings``
builds one from the environment; tests and callers may build their own.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SupportedLanguage(StrEnum):
    """Language in which declaration syntax is spelled.

    Any unknown value resolves to NONE, which renders the
    "not supported" message instead of a syntax block.
    """

    CSHARP = "csharp"
    BASIC = "basic"
    NONE = "none"

    @classmethod
    def _missing_(cls, value: object) -> "SupportedLanguage":
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
            if lowered in _LANGUAGE_ALIASES:
                return cls(_LANGUAGE_ALIASES[lowered])
        return cls.NONE


_LANGUAGE_ALIASES: dict[str, str] = {
    "c#": "csharp",
    "cs": "csharp",
    "vb": "basic",
    "vb.net": "basic",
    "visualbasic": "basic",
}


class TagCompatibilityLevel(StrEnum):
    """Which documentation tag vocabulary is recognized."""

    MICROSOFT_STRICT = "microsoft_strict"
    NDOC_1_3 = "ndoc_1_3"
    SANDCASTLE = "sandcastle"


class IncludeProcessing(StrEnum):
    """How ``<include>`` tags are expanded before rendering."""

    NONE = "none"
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class UnrecognizedTagHandling(StrEnum):
    """What to do with a known tag that the compatibility level does not recognize."""

    HIDE_TAG_AND_CONTENTS = "hide_tag_and_contents"
    STRIP_TAG_SHOW_CONTENTS = "strip_tag_show_contents"
    HIGHLIGHT_TAG_AND_CONTENTS = "highlight_tag_and_contents"
    RENDER_CONTENTS = "render_contents"


MICROSOFT_TAGS: frozenset[str] = frozenset({
    "c",
    "code",
    "example",
    "exception",
    "include",
    "list",
    "para",
    "param",
    "paramref",
    "permission",
    "remarks",
    "returns",
    "see",
    "seealso",
    "summary",
    "typeparam",
    "typeparamref",
    "value",
})

SANDCASTLE_TAGS: frozenset[str] = MICROSOFT_TAGS | {"exclude", "note", "overloads", "preliminary", "threadsafety"}

NDOC_TAGS: frozenset[str] = SANDCASTLE_TAGS | {"event"}

RECOGNIZED_TAGS: dict[TagCompatibilityLevel, frozenset[str]] = {
    TagCompatibilityLevel.MICROSOFT_STRICT: MICROSOFT_TAGS,
    TagCompatibilityLevel.NDOC_1_3: NDOC_TAGS,
    TagCompatibilityLevel.SANDCASTLE: SANDCASTLE_TAGS,
}


class OptionSet(BaseModel):
    """Read-only configuration for one render.

    ``recognized_tags`` defaults to the vocabulary of ``tag_compatibility``.
    """

    model_config = ConfigDict(frozen=True)

    tag_compatibility: TagCompatibilityLevel = TagCompatibilityLevel.SANDCASTLE
    recognized_tags: frozenset[str] = Field(default=frozenset())
    include_processing: IncludeProcessing = IncludeProcessing.NONE
    unrecognized_tag_handling: UnrecognizedTagHandling = UnrecognizedTagHandling.RENDER_CONTENTS

    @model_validator(mode="before")
    @classmethod
    def _default_recognized_tags(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("recognized_tags"):
            level = TagCompatibilityLevel(data.get("tag_compatibility", TagCompatibilityLevel.SANDCASTLE))
            return {**data, "recognized_tags": RECOGNIZED_TAGS[level]}
        return data

    def recognizes(self, tag_name: str) -> bool:
        return tag_name in self.recognized_tags


__all__ = [
    "IncludeProcessing",
    "MICROSOFT_TAGS",
    "NDOC_TAGS",
    "OptionSet",
    "RECOGNIZED_TAGS",
    "SANDCASTLE_TAGS",
    "SupportedLanguage",
    "TagCompatibilityLevel",
    "UnrecognizedTagHandling",
]
