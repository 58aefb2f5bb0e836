"""Core configuration settings for the documentation previewer.

Settings are loaded from environment variables with .env file support via
pydantic-settings. Every variable carries the ``DOC_PREVIEW_`` prefix.

Environment variables:
    DOC_PREVIEW_SERVER_HOST: Interface the content server binds to
    DOC_PREVIEW_SERVER_PORT: Port the content server listens on
    DOC_PREVIEW_PREVIEW_STYLE: Output skin (sandcastle_prototype, msdn)
    DOC_PREVIEW_LANGUAGE: Syntax language (csharp, basic)
    DOC_PREVIEW_TAG_COMPATIBILITY: microsoft_strict, ndoc_1_3 or sandcastle
    DOC_PREVIEW_INCLUDE_PROCESSING: none, absolute or relative
    DOC_PREVIEW_UNRECOGNIZED_TAG_HANDLING: policy for unrecognized tags
    DOC_PREVIEW_INCLUDE_BASE_DIR: Base directory for relative include files

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from doc_preview_core.settings import settings
    >>> print(settings.server_port)
    >>> options = settings.option_set()

Note:
    Settings are loaded once at module import and frozen. The process must
    be restarted to pick up changes to environment variables or .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from doc_preview_core.options import (
    IncludeProcessing,
    OptionSet,
    SupportedLanguage,
    TagCompatibilityLevel,
    UnrecognizedTagHandling,
)


class Settings(BaseSettings):
    """Previewer configuration.

    Attributes:
        server_host: Interface for the content server. Loopback by default
                     since the preview is only meant for the local browser.

        server_port: TCP port of the content server.

        preview_style: Name of the output skin used to render pages.

        language: Language used to spell declaration syntax.

        tag_compatibility: Documentation tag vocabulary to recognize.

        include_processing: Whether and how ``<include>`` tags are expanded.

        unrecognized_tag_handling: Policy for known tags outside the
                                   recognized vocabulary.

        include_base_dir: Directory that relative include paths resolve
                          against. Empty means the current directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOC_PREVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    server_host: str = "127.0.0.1"
    server_port: int = 11235

    preview_style: str = "sandcastle_prototype"
    language: SupportedLanguage = SupportedLanguage.CSHARP

    tag_compatibility: TagCompatibilityLevel = TagCompatibilityLevel.SANDCASTLE
    include_processing: IncludeProcessing = IncludeProcessing.NONE
    unrecognized_tag_handling: UnrecognizedTagHandling = UnrecognizedTagHandling.RENDER_CONTENTS
    include_base_dir: str = ""

    def option_set(self) -> OptionSet:
        """Build the read-only option set handed to renders."""
        return OptionSet(
            tag_compatibility=self.tag_compatibility,
            include_processing=self.include_processing,
            unrecognized_tag_handling=self.unrecognized_tag_handling,
        )

    @property
    def include_base_path(self) -> Path:
        return Path(self.include_base_dir) if self.include_base_dir else Path.cwd()


# Create a single, importable instance of the settings
settings = Settings()
