"""Exception hierarchy for Doc Preview Core.

This module defines the exception hierarchy used throughout the Doc Preview Core library.
All exceptions inherit from DocPreviewError, providing a consistent error handling interface.
"""


class DocPreviewError(Exception):
    """Base exception for all Doc Preview Core errors."""


class PreviewArgumentError(DocPreviewError, ValueError):
    """Raised when a required argument (such as the declaration to preview) is missing or invalid."""


class CommentParseError(DocPreviewError):
    """Raised when documentation comment XML cannot be parsed in strict mode."""


class DeclarationLoadError(DocPreviewError):
    """Raised when a declaration file cannot be read or does not match the declaration model."""


class RenderError(DocPreviewError):
    """Raised when a tag handler or the syntax generator fails during a render pass."""


class RenderInProgressError(RenderError):
    """Raised when a render is started on an engine that is already rendering."""


class PageTemplateError(DocPreviewError):
    """Raised when the page shell template cannot be loaded or rendered."""


class ServerError(DocPreviewError):
    """Raised when the preview content server cannot be started."""


class LoggingConfigError(DocPreviewError):
    """Raised when a logging configuration file is not a YAML mapping."""
