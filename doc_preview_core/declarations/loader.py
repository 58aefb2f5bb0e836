"""Load declarations from YAML or JSON documents.

Stands in for the source-structure parser: a document describes one
declaration (with nested members for types and enums) using the field names
of the declaration model, discriminated by ``kind``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from doc_preview_core.exceptions import DeclarationLoadError

from .model import Declaration

_declaration_adapter: TypeAdapter[Declaration] = TypeAdapter(Declaration)


def parse_declaration(data: Mapping[str, Any]) -> Declaration:
    """Validate a mapping into a declaration."""
    try:
        return _declaration_adapter.validate_python(data)
    except ValidationError as e:
        raise DeclarationLoadError(f"Invalid declaration: {e}") from e


def load_declaration(path: Path) -> Declaration:
    """Read a YAML or JSON file and validate it into a declaration."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeclarationLoadError(f"Cannot read declaration file {path}: {e}") from e
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise DeclarationLoadError(f"Declaration file {path} is not valid YAML/JSON: {e}") from e
    if not isinstance(data, Mapping):
        raise DeclarationLoadError(f"Declaration file {path} must contain a mapping, got {type(data).__name__}")
    return parse_declaration(data)


__all__ = ["load_declaration", "parse_declaration"]
