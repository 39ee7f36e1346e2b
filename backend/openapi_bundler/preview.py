"""Read-only Flask preview of the bundled document (development helper)."""
from flask import Flask, Response, request, make_response
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

from .assembler import assemble
from .bundle_parts.helpers import document_hash, render_json, render_yaml
from .config.layout import BundleLayout
from .errors import BaseDocumentNotFound, BundleError

load_dotenv()

__all__ = ["create_app"]


def create_app(config: Optional[Dict[str, Any]] = None):
    """Read-only preview server; the document is re-assembled on every request."""
    app = Flask(__name__)

    app.config['OPENAPI_ROOT'] = os.getenv('OPENAPI_ROOT', os.getcwd())
    app.config['OPENAPI_STRICT'] = os.getenv('OPENAPI_STRICT', '').lower() in ('1', 'true', 'yes')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    def current_document() -> Dict[str, Any]:
        layout = BundleLayout.from_root(app.config['OPENAPI_ROOT'])
        return assemble(layout, strict=app.config['OPENAPI_STRICT']).document

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    @app.route('/openapi.json')
    def openapi_json():
        document = current_document()
        etag = document_hash(document)[:32]
        inm = request.headers.get('If-None-Match')
        if inm and inm.strip('"') == etag:
            resp = make_response('', 304)
        else:
            resp = Response(render_json(document), mimetype='application/json')
        resp.headers['ETag'] = etag
        return resp

    @app.route('/openapi.yaml')
    def openapi_yaml():
        return Response(render_yaml(current_document()), mimetype='application/yaml')

    @app.route('/docs')
    def docs_index():
        # Lightweight HTML referencing Redoc CDN (no local install) for quick browsing
        return (
            "<!DOCTYPE html><html><head><title>API Docs</title>"
            "<link rel=\"stylesheet\" href=\"https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css\" />"
            "</head><body><redoc spec-url='/openapi.json'></redoc>"
            "<script src='https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js'></script>"
            "</body></html>"
        )

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        if isinstance(e, BundleError):
            status = 404 if isinstance(e, BaseDocumentNotFound) else 500
            app.logger.error('Bundling failed: %s', e)
            return {
                'error': {
                    'status': status,
                    'title': 'Bundle Failed',
                    'detail': str(e),
                }
            }, status
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app
