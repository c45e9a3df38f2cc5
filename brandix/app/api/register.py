from flask import Flask

from brandix.modules.catalog.routes import bp as catalog_bp
from brandix.modules.estimator.routes import bp as estimator_bp
from brandix.modules.inquiry.routes import bp as inquiry_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(estimator_bp, url_prefix="/api")
    app.register_blueprint(inquiry_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Brandix Ceramic API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/tiles", "/tiles/<id>", "/categories"],
                "estimator": ["/estimate"],
                "inquiry": ["/inquiry", "/tiles/<id>/inquiry", "/catalog/request"],
            },
        }, 200
