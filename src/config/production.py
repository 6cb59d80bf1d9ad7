from .config import BaseConfig, _flag
from dotenv import load_dotenv

load_dotenv()


class ProductionConfig(BaseConfig):
    DEBUG = False
    # schema is managed with `flask init-db`, not on every boot
    CREATE_TABLES = _flag("CREATE_TABLES", "false")
