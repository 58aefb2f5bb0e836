"""Glue between the comment parser, a style engine, the page shell and the content slot."""

from pathlib import Path

from doc_preview_core.comments import ElementNode, parse_comment, process_includes
from doc_preview_core.declarations import Declaration
from doc_preview_core.exceptions import DocPreviewError
from doc_preview_core.logging import get_preview_logger
from doc_preview_core.options import OptionSet, SupportedLanguage
from doc_preview_core.server import ContentSlot
from doc_preview_core.settings import Settings
from doc_preview_core.transformation import TransformEngine, create_engine

logger = get_preview_logger(__name__)


class Previewer:
    """Renders declarations and publishes each finished page to a ``ContentSlot``.

    A failed render leaves the previously published page in place.
    """

    def __init__(
        self,
        engine: TransformEngine | None = None,
        *,
        slot: ContentSlot | None = None,
        language: SupportedLanguage = SupportedLanguage.CSHARP,
        options: OptionSet | None = None,
        include_base_dir: Path | None = None,
    ):
        self.engine = engine or create_engine()
        self.slot = slot or ContentSlot()
        self.language = SupportedLanguage(language)
        self.options = options or OptionSet()
        self.include_base_dir = include_base_dir

    @classmethod
    def from_settings(cls, settings: Settings, slot: ContentSlot | None = None) -> "Previewer":
        return cls(
            create_engine(settings.preview_style),
            slot=slot,
            language=settings.language,
            options=settings.option_set(),
            include_base_dir=settings.include_base_path,
        )

    def prepare_comment(self, comment: ElementNode | str, member_name: str | None = None) -> ElementNode:
        """Parse raw comment text and expand ``include`` tags per the include option."""
        root = parse_comment(comment, member_name=member_name) if isinstance(comment, str) else comment
        return process_includes(root, self.options.include_processing, self.include_base_dir)

    def render_fragment(
        self,
        declaration: Declaration | None,
        comment: ElementNode | str | None = None,
        language: SupportedLanguage | None = None,
    ) -> str:
        """Render the HTML fragment without publishing it.

        When ``comment`` is omitted the declaration's own ``doc_comment`` is used.
        """
        if comment is None:
            comment = declaration.doc_comment if declaration is not None and declaration.doc_comment else ""
        root = self.prepare_comment(comment, declaration.name if declaration is not None else None)
        return self.engine.transform(root, declaration, language or self.language, self.options)

    def render(
        self,
        declaration: Declaration | None,
        comment: ElementNode | str | None = None,
        language: SupportedLanguage | None = None,
    ) -> str:
        """Render a full page, publish it to the slot and return it."""
        target_language = language or self.language
        try:
            fragment = self.render_fragment(declaration, comment, target_language)
            page = self.engine.render_page(fragment, declaration, target_language)
        except DocPreviewError:
            logger.exception("Preview render failed for %s", declaration.name if declaration is not None else "<no declaration>")
            raise
        self.slot.set(page)
        logger.debug("Published preview page (%d characters)", len(page))
        return page


__all__ = ["Previewer"]
