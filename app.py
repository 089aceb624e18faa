import argparse
import logging
import sys

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

import config
from inspector import component_names, inspect_components

GREETING = "Greetings from Spring Boot!"
TEXT_PLAIN = "text/plain; charset=UTF-8"

logger = logging.getLogger(__name__)


def create_app():
    # No static route: "/" and "/health" are the only paths served
    app = Flask(__name__, static_folder=None)

    @app.before_request
    def log_request_info():
        app.logger.debug("Request: %s %s", request.method, request.path)

    @app.after_request
    def log_response_info(response):
        app.logger.debug("Response: %s", response.status)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        """Render HTTP errors as plain text, keeping status and headers (e.g. Allow)."""
        response = e.get_response()
        response.set_data(f"{e.code} {e.name}")
        response.content_type = TEXT_PLAIN
        return response

    @app.get("/")
    def index():
        return Response(GREETING, status=200, content_type=TEXT_PLAIN)

    @app.get("/health")
    def health():
        return jsonify(status="ok"), 200

    return app


app = create_app()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve the greeting endpoint.")
    parser.add_argument("--host", default=config.HOST, help="bind address (env: HOST)")
    parser.add_argument("--port", type=int, default=config.PORT, help="listen port (env: PORT)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                        handlers=[logging.StreamHandler(sys.stdout)])

    application = create_app()
    inspect_components(component_names(application))

    logger.info("Listening on %s:%d", args.host, args.port)
    application.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
