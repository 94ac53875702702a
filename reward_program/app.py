import logging
from typing import Any, Dict, Optional

import click
from flask import Flask, jsonify
from flask.logging import default_handler
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from reward_program.core import (
    STATUS_BY_KIND,
    RewardsError,
    connect,
    get_data_settings,
    get_server_settings,
    load_environment,
)
from reward_program.db import CustomerProvider, InMemoryCustomerProvider, MongoCustomerProvider
from reward_program.mock_customers import MOCK_CUSTOMERS, seed_mock_customers
from reward_program.routes import create_rewards_blueprint
from reward_program.services import RewardsService


def configure_logging(level: str) -> None:
    package_logger = logging.getLogger("reward_program")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        package_logger.addHandler(default_handler)


def build_provider(settings: Dict[str, Any]) -> CustomerProvider:
    if settings["source"] == "mongo":
        database = connect(settings)
        return MongoCustomerProvider(database[settings["collection"]])
    return InMemoryCustomerProvider(MOCK_CUSTOMERS)


def create_app(provider: Optional[CustomerProvider] = None) -> Flask:
    load_environment()
    server_settings = get_server_settings()
    configure_logging(server_settings["log_level"])

    app = Flask(__name__)

    allowed_origin = server_settings["client_origin"]
    CORS(
        app,
        resources={r"/rewards/*": {"origins": [allowed_origin, "http://127.0.0.1:5173"]}},
        methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=["Content-Type"],
    )

    if provider is None:
        data_settings = get_data_settings()
        provider = build_provider(data_settings)
        app.logger.info("serving rewards from %s data source", data_settings["source"])
    else:
        app.logger.info("serving rewards from injected %s", type(provider).__name__)

    service = RewardsService(provider)
    app.config.update(
        REWARDS_PROVIDER=provider,
        REWARDS_SERVICE=service,
    )

    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    @app.errorhandler(RewardsError)
    def handle_rewards_error(error: RewardsError):
        response = jsonify({"error": error.kind.value, "message": error.message})
        response.status_code = STATUS_BY_KIND[error.kind]
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        name = (error.name or "error").lower().replace(" ", "_")
        response = jsonify({"error": name, "message": error.description})
        response.status_code = error.code or 500
        # keep headers such as Allow on 405s, but not the HTML content type
        for header, value in error.get_headers():
            if header.lower() != "content-type":
                response.headers[header] = value
        return response

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        app.logger.exception("unhandled error: %s", error)
        response = jsonify({"error": "internal_error", "message": f"Something went wrong: {error}"})
        response.status_code = 500
        return response

    @app.cli.command("seed-customers")
    def seed_customers_command():
        """Insert the mock customers into the configured MongoDB collection."""
        settings = get_data_settings()
        if settings["source"] != "mongo":
            raise click.ClickException("seed-customers requires REWARDS_DATA_SOURCE=mongo")
        database = connect(settings)
        inserted = seed_mock_customers(database, collection=settings["collection"])
        click.echo(f"Inserted {inserted} customers into {settings['collection']}")

    app.register_blueprint(create_rewards_blueprint(service))

    return app


if __name__ == "__main__":
    # Create and run the Flask app directly (use Flask CLI in production)
    load_environment()
    settings = get_server_settings()
    app = create_app()
    app.run(host="0.0.0.0", port=settings["port"], debug=settings["debug"])
