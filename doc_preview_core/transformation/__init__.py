"""Documentation tag transformation: dispatcher, render context and style engines."""

from .context import RenderContext
from .engine import ALWAYS_RECOGNIZED, DEFAULT_HANDLER_KEY, RenderState, TagHandler, TransformEngine
from .member_key import get_name
from .msdn import MsdnEngine
from .registry import DEFAULT_STYLE, ENGINES, available_styles, create_engine, get_engine_class
from .sandcastle import SandcastlePrototypeEngine

__all__ = [
    "ALWAYS_RECOGNIZED",
    "DEFAULT_HANDLER_KEY",
    "DEFAULT_STYLE",
    "ENGINES",
    "MsdnEngine",
    "RenderContext",
    "RenderState",
    "SandcastlePrototypeEngine",
    "TagHandler",
    "TransformEngine",
    "available_styles",
    "create_engine",
    "get_engine_class",
    "get_name",
]
