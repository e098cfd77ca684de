# backend/fittrack/__init__.py

import sqlite3

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import Config

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE rules unless this is switched on per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)

    # CORS: allow the mobile/web clients to call /v1/*
    CORS(app, resources={r"/v1/*": {"origins": "*"}})

    # -----------------------------
    # JSON error handlers
    # -----------------------------
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "The requested resource could not be found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "The method is not supported for this resource"}), 405

    @app.errorhandler(500)
    def server_error(error):
        return (
            jsonify({"error": "The server encountered an error and cannot complete your request"}),
            500,
        )

    # -----------------------------
    # IMPORT + REGISTER BLUEPRINTS
    # -----------------------------
    from .routes.user_routes import user_bp

    app.register_blueprint(user_bp, url_prefix="/v1/user")

    from .cli import register_commands

    register_commands(app)

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    from . import models  # noqa: F401  (registers every table on db.metadata)

    with app.app_context():
        db.create_all()

    return app
