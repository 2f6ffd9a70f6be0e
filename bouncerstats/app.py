"""Application factory for the bouncer statistics charts."""

from __future__ import annotations

import logging

from typing import Any, Mapping, Optional, Union

from flask import Flask, render_template

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("bouncerstats")

from .config import Config
from .errors import ValidationError
from .routes.report import bp as report_bp
from .services.charts import ChartRenderer
from .services.datastore import DataStore


def create_app(
    config_object: Optional[Union[str, Mapping[str, Any], type]] = None,
) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    app.config.from_object(Config)
    if isinstance(config_object, Mapping):
        app.config.from_mapping(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    datastore = DataStore(app.config)
    renderer = ChartRenderer(
        pie_size=app.config["PIE_SIZE"],
        line_size=app.config["LINE_SIZE"],
        title=app.config["CHART_TITLE"],
    )

    app.extensions["datastore"] = datastore
    app.extensions["renderer"] = renderer

    app.register_blueprint(report_bp)

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        logger.info("Rejected request: %s", exc.message)
        html = render_template(
            "error.html",
            title=app.config["REPORT_TITLE"],
            message=exc.message,
            charset=app.config["OUTPUT_CHARSET"],
        )
        return html, 400, {"Content-Type": f"text/html; charset={app.config['OUTPUT_CHARSET']}"}

    return app


__all__ = ["create_app"]
