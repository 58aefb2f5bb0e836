"""Style name to engine lookup."""

from types import MappingProxyType

from doc_preview_core.logging import get_preview_logger

from .engine import SyntaxBuilder, TransformEngine
from .msdn import MsdnEngine
from .sandcastle import SandcastlePrototypeEngine

logger = get_preview_logger(__name__)

DEFAULT_STYLE = SandcastlePrototypeEngine.style_name

ENGINES: MappingProxyType[str, type[TransformEngine]] = MappingProxyType({
    SandcastlePrototypeEngine.style_name: SandcastlePrototypeEngine,
    MsdnEngine.style_name: MsdnEngine,
})


def available_styles() -> list[str]:
    return sorted(ENGINES)


def get_engine_class(style_name: str | None) -> type[TransformEngine]:
    """Engine class for a style name; unknown names fall back to the default style."""
    key = (style_name or DEFAULT_STYLE).strip().lower()
    engine_class = ENGINES.get(key)
    if engine_class is None:
        logger.warning(
            "Unknown preview style '%s', using '%s'. Available: %s",
            style_name,
            DEFAULT_STYLE,
            ", ".join(available_styles()),
        )
        return ENGINES[DEFAULT_STYLE]
    return engine_class


def create_engine(style_name: str | None = None, syntax_generator: SyntaxBuilder | None = None) -> TransformEngine:
    engine_class = get_engine_class(style_name)
    if syntax_generator is None:
        return engine_class()
    return engine_class(syntax_generator=syntax_generator)


__all__ = ["DEFAULT_STYLE", "ENGINES", "available_styles", "create_engine", "get_engine_class"]
