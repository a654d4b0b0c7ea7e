from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request, send_from_directory

from model_listing import ModelListingError, list_models
from settings import Settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    asset_root = settings.asset_root

    app = Flask(
        __name__,
        static_folder=asset_root,
        static_url_path="/",
    )
    app.config["ASSET_ROOT"] = asset_root

    @app.after_request
    def add_cors(resp):
        origin = request.headers.get("Origin") or "*"
        resp.headers["Access-Control-Allow-Origin"] = origin
        resp.headers["Vary"] = "Origin"
        resp.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers", "Content-Type"
        )
        resp.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        return resp

    @app.errorhandler(ModelListingError)
    def model_listing_failed(exc):
        app.logger.error("/models failed: %s", exc)
        return jsonify({"error": str(exc)}), 500

    @app.route("/")
    def index():
        return send_from_directory(asset_root, "index.html")

    @app.route("/models", methods=["GET", "OPTIONS"])
    def models():
        if request.method == "OPTIONS":
            return ("", 204)

        entries = [entry.to_dict() for entry in list_models(asset_root)]
        app.logger.info("/models -> %s", entries)
        return jsonify(entries)

    return app


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = Settings.from_env()
    app = create_app(settings)
    app.logger.info("Serving %s on %s:%d", settings.asset_root, settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
