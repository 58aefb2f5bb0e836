"""CLI for rendering documentation previews and serving them over HTTP."""

import argparse
import sys
from pathlib import Path

from doc_preview_core.comments import parse_comment
from doc_preview_core.declarations import load_declaration
from doc_preview_core.exceptions import DocPreviewError
from doc_preview_core.logging import setup_logging
from doc_preview_core.options import SupportedLanguage
from doc_preview_core.preview import Previewer
from doc_preview_core.server import ContentSlot, PreviewServer
from doc_preview_core.settings import Settings
from doc_preview_core.transformation import available_styles, create_engine


def _add_render_options(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("declaration", type=Path, help="YAML or JSON declaration file")
    parser.add_argument("--comment", type=Path, help="Documentation comment XML file (defaults to the declaration's doc_comment)")
    parser.add_argument("--style", default=settings.preview_style, help=f"Output skin: {', '.join(available_styles())}")
    parser.add_argument("--language", default=settings.language.value, help="Syntax language: csharp or basic")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed comment XML instead of rendering an error marker")
    parser.add_argument("--fragment", action="store_true", help="Write only the rendered fragment, without the page shell")


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doc-preview", description="Documentation preview renderer")
    parser.add_argument("--log-level", help="Override the library log level (e.g. DEBUG)")
    subparsers = parser.add_subparsers(dest="command")

    render = subparsers.add_parser("render", help="Render a preview page to a file or stdout")
    _add_render_options(render, settings)
    render.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    serve = subparsers.add_parser("serve", help="Render a preview page and serve it over HTTP")
    _add_render_options(serve, settings)
    serve.add_argument("--host", default=settings.server_host)
    serve.add_argument("--port", type=int, default=settings.server_port)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the doc-preview CLI with render/serve subcommands."""
    settings = Settings()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(level=args.log_level)
        previewer = Previewer(
            create_engine(args.style),
            slot=ContentSlot(),
            language=SupportedLanguage(args.language),
            options=settings.option_set(),
            include_base_dir=settings.include_base_path,
        )
        output = _render(previewer, args)
    except DocPreviewError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.command == "render":
        if args.output:
            args.output.write_text(output, encoding="utf-8")
        else:
            sys.stdout.write(output)
        return 0

    server = PreviewServer(previewer.slot, host=args.host, port=args.port)
    print(f"Serving preview at {server.url} (Ctrl+C to stop)")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


def _render(previewer: Previewer, args: argparse.Namespace) -> str:
    declaration = load_declaration(args.declaration)
    comment = None
    if args.comment:
        try:
            comment = args.comment.read_text(encoding="utf-8")
        except OSError as e:
            raise DocPreviewError(f"Cannot read comment file {args.comment}: {e}") from e
    if args.strict:
        text = comment if comment is not None else (declaration.doc_comment or "")
        comment = parse_comment(text, member_name=declaration.name, strict=True)
    if args.fragment:
        fragment = previewer.render_fragment(declaration, comment)
        previewer.slot.set(fragment)
        return fragment
    return previewer.render(declaration, comment)


__all__ = ["main"]

if __name__ == "__main__":
    sys.exit(main())
