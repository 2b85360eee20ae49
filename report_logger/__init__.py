import pymysql
pymysql.install_as_MySQLdb()
from flask import Flask, send_from_directory
from flask_cors import CORS
from pathlib import Path
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import DevConfig
from .extensions import db, migrate, jwt, ma, bcrypt
from .utils.errors import register_error_handlers
from .api import (
    auth_routes,
    message_routes,
    category_routes,
    issue_routes,
    solution_routes,
    report_routes,
    upload_routes,
)


def _check_database(app: Flask) -> None:
    """Log whether the database answers. The app keeps running either way."""
    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            app.logger.info("Connected to the database")
        except SQLAlchemyError as exc:
            app.logger.error("Database connection error: %s", exc)
        finally:
            db.session.remove()


def create_app(config_class=DevConfig) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Upload folder for report pictures
    uploads_dir = Path(app.config["UPLOAD_FOLDER"]).resolve()
    uploads_dir.mkdir(parents=True, exist_ok=True)
    app.config["UPLOAD_FOLDER"] = str(uploads_dir)

    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    bcrypt.init_app(app)

    # Blueprints
    app.register_blueprint(auth_routes.bp)
    app.register_blueprint(message_routes.bp, url_prefix="/messages")
    app.register_blueprint(category_routes.bp, url_prefix="/categories")
    app.register_blueprint(issue_routes.bp, url_prefix="/issues")
    app.register_blueprint(solution_routes.bp, url_prefix="/solutions")
    app.register_blueprint(report_routes.bp, url_prefix="/reports")
    app.register_blueprint(report_routes.export_bp)
    app.register_blueprint(upload_routes.bp)

    register_error_handlers(app)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "report-logger-backend"}

    @app.get("/uploads/<path:filename>")
    def serve_upload(filename: str):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    if app.config.get("CHECK_DB_ON_STARTUP"):
        _check_database(app)

    return app
