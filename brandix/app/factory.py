from __future__ import annotations

import logging
from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException

from brandix.app.config import Config
from brandix.app.extensions import db, migrate, cors
from brandix.app.common.errors import ApiError, error_payload
from brandix.app.common.request_context import attach_request_id, init_request_id
from brandix.app.api.register import register_api_blueprints
from brandix.app.cli import cli_bp
from brandix.app.seed import seed_tiles


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(attach_request_id)

    # Health endpoint
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_api_blueprints(app)

    # CLI (flask seed / search / estimate)
    app.register_blueprint(cli_bp)

    @app.get("/")
    def index():
        return (
            "<h1>Brandix Ceramic</h1><p>Server is running. Visit <a href='/api'>/api</a>.</p>",
            200,
            {"Content-Type": "text/html"},
        )

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(getattr(g, "request_id", None))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape
        payload = error_payload("http_error", err.description, {"name": err.name}, getattr(g, "request_id", None))
        return jsonify(payload), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = error_payload("internal_error", "Internal server error", None, getattr(g, "request_id", None))
        return jsonify(payload), 500

    if app.config.get("AUTO_SEED"):
        with app.app_context():
            db.create_all()
            seed_tiles()

    return app
