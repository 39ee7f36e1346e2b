"""Bundle OpenAPI fragments into openapi.json / openapi.yaml.

Usage:
  openapi-bundle
  openapi-bundle --root path/to/project
  openapi-bundle --check
  openapi-bundle-preview --port 8080

Options:
  --root DIR     Project root holding openapi/ (default: current directory)
  --strict       Fail when two fragment files of one category define the same key
  --check        Do not write; exit non-zero if the outputs are missing or stale (CI check)
  -v/--verbose   Debug logging (shows base entries replaced by fragments)

Exit Codes:
  0 success / in-check mode outputs up to date
  1 base document missing
  2 outputs stale in --check mode
  3 other error (malformed fragment, duplicate keys in --strict mode)
"""
from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import List, Optional, Tuple

from .assembler import assemble, bundle
from .bundle_parts.helpers import document_hash, render_json, render_yaml
from .config.layout import BundleLayout
from .errors import BaseDocumentNotFound, BundleError

EXIT_OK = 0
EXIT_MISSING_BASE = 1
EXIT_STALE = 2
EXIT_ERROR = 3


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stdout,
        force=True,
    )


def _stale_outputs(layout: BundleLayout, strict: bool) -> Tuple[List[Path], str]:
    document = assemble(layout, strict=strict).document
    expected = {
        layout.json_output: render_json(document),
        layout.yaml_output: render_yaml(document),
    }
    stale = []
    for path, text in expected.items():
        if not path.is_file() or path.read_text(encoding='utf-8') != text:
            stale.append(path)
    return stale, document_hash(document)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Bundle OpenAPI fragment files into one spec")
    p.add_argument('--root', dest='root', help='Project root containing the openapi/ directory')
    p.add_argument('--strict', action='store_true', help='Treat duplicate fragment keys as an error')
    p.add_argument('--check', action='store_true', help='Exit 2 if openapi.json/openapi.yaml are out of date')
    p.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = p.parse_args(sys.argv[1:] if argv is None else argv)

    configure_logging(args.verbose)
    layout = BundleLayout.from_root(args.root)

    try:
        if args.check:
            stale, spec_hash = _stale_outputs(layout, args.strict)
            if stale:
                for path in stale:
                    print(f"Out of date: {path}", file=sys.stderr)
                return EXIT_STALE
            print(f"Bundled spec is up to date (hash {spec_hash})")
            return EXIT_OK
        print("Bundling OpenAPI specification...\n")
        bundle(layout, strict=args.strict)
    except BaseDocumentNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MISSING_BASE
    except BundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print("\nOpenAPI bundling complete!")
    return EXIT_OK


def serve_main(argv: Optional[List[str]] = None) -> int:
    """Run the preview server (development only)."""
    from .preview import create_app

    p = argparse.ArgumentParser(description="Serve the bundled OpenAPI spec with Redoc")
    p.add_argument('--root', dest='root', help='Project root containing the openapi/ directory')
    p.add_argument('--host', default='127.0.0.1')
    p.add_argument('--port', type=int, default=8080)
    args = p.parse_args(sys.argv[1:] if argv is None else argv)

    configure_logging()
    config = {'OPENAPI_ROOT': str(Path(args.root).resolve())} if args.root else None
    create_app(config).run(host=args.host, port=args.port)
    return EXIT_OK


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
