# arduino_bridge/__init__.py
from flask import Flask, request
from flask_restful import Api
from .extensions import cors
from .link import LinkManager
from .resources import register_resources
import logging

def create_app(overrides: dict | None = None, transport_factory=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    # logging …
    for h in list(app.logger.handlers):
        app.logger.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    app.logger.addHandler(handler)
    app.logger.setLevel(str(app.config.get("LOG_LEVEL") or "DEBUG").upper())
    logging.getLogger("werkzeug").setLevel(logging.INFO)

    @app.before_request
    def _log_req():
        app.logger.debug(
            "REQ %s %s endpoint=%s ua=%s",
            request.method, request.path, request.endpoint,
            request.headers.get("User-Agent", "")[:80],
        )

    # any origin may call the bridge
    cors.init_app(app, origins=app.config.get("CORS_ORIGINS", "*"),
                  send_wildcard=app.config.get("CORS_SEND_WILDCARD", True))

    # REST API
    api = Api(app)
    register_resources(api)

    link = LinkManager(
        transport_factory=transport_factory,
        read_timeout=app.config.get("ARDUINO_READ_TIMEOUT", 1.0),
    )
    link.init_app(app)

    @app.get("/health")
    def health():
        return {"ok": True, "link": link.snapshot()}, 200

    return app
