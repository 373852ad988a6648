from flask import Flask
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any

from .config.openapi import openapi_config_from_env
from .exceptions import DocumentError

load_dotenv()


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config.update(openapi_config_from_env())

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    # One builder per document variant, shared by every request of this app
    from .openapi import make_builders
    app.extensions['openapi'] = make_builders(app.config)

    from .routes.docs import docs_bp
    app.register_blueprint(docs_bp)

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

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
        # document state never goes into the body, only into the log
        if isinstance(e, DocumentError):
            app.logger.exception('API document unavailable: %s %s', e.message, e.context)
        else:
            app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app
