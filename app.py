import logging
import sys
from flask import Flask
from dotenv import load_dotenv
from src.models import db
from src.config import ConfigError, build_database_uri, get_config
from src.controllers.subscription_controller import STORE_EXTENSION, error_response
from src.routes.subscribe import subscribe_bp
from src.cli.commands import init_db, list_subscriptions
from src.services.errors import MethodError
from src.services.subscription_store import SqlAlchemySubscriptionStore

# Load environment variables early
load_dotenv()


def register_blueprints(app):
    """Attach all route blueprints."""
    app.register_blueprint(subscribe_bp)
    app.cli.add_command(init_db)
    app.cli.add_command(list_subscriptions)


def configure_logging(app):
    """Apply LOG_LEVEL to app.logger and send the src.* module loggers through its handlers."""
    level = app.config.get("LOG_LEVEL", "INFO")
    app.logger.setLevel(level)

    service_logger = logging.getLogger("src")
    service_logger.setLevel(level)
    for handler in app.logger.handlers:
        if handler not in service_logger.handlers:
            service_logger.addHandler(handler)


def create_app(config_object=None, store=None):
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    # Missing MADB_* settings are fatal here, before any request is served
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = build_database_uri()

    configure_logging(app)

    db.init_app(app)
    app.extensions[STORE_EXTENSION] = store or SqlAlchemySubscriptionStore(db)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response(MethodError(str(e)))

    with app.app_context():
        if app.config.get("CREATE_TABLES"):
            db.create_all()
        register_blueprints(app)

    return app


if __name__ == "__main__":
    try:
        app = create_app()
    except ConfigError as e:
        logging.basicConfig()
        logging.getLogger(__name__).critical(f"💥 {e}")
        sys.exit(1)

    app.logger.info(f"🚀 Server starting on port {app.config['PORT']}...")
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config.get("DEBUG", False), threaded=True)
