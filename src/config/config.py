import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

# driver name as written in MADB_MYSQL -> SQLAlchemy dialect+driver
DRIVERS = {
    "mysql": "mysql+pymysql",
    "mariadb": "mariadb+pymysql",
}

REQUIRED_DB_VARS = ("MADB_MYSQL", "MADB_USERNAME", "MADB_PASSWORD", "MADB_REQUEST", "MADB_DATABASE")


class ConfigError(RuntimeError):
    """Raised at startup when required settings are missing."""


def _flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def build_database_uri(environ=None):
    """Assemble the SQLAlchemy URL from the MADB_* variables (or DATABASE_URL)."""
    env = os.environ if environ is None else environ

    if env.get("DATABASE_URL"):
        return env["DATABASE_URL"]

    missing = [name for name in REQUIRED_DB_VARS if not env.get(name)]
    if missing:
        raise ConfigError(f"Missing required database parameters: {', '.join(missing)}")

    host, _, port = env["MADB_REQUEST"].partition(":")
    driver = env["MADB_MYSQL"]
    url = URL.create(
        drivername=DRIVERS.get(driver, driver),
        username=env["MADB_USERNAME"],
        password=env["MADB_PASSWORD"],
        host=host or None,
        port=int(port) if port else None,
        database=env["MADB_DATABASE"],
    )
    return url.render_as_string(hide_password=False)


class BaseConfig:
    APP_ENV = os.getenv("APP_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server configuration
    PORT = int(os.getenv("PORT", "8080"))

    # Resolved by create_app() via build_database_uri() when left as None
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": int(os.getenv("DB_POOL_RECYCLE", "280")),
    }

    CREATE_TABLES = _flag("CREATE_TABLES", "true")
    TESTING = False
