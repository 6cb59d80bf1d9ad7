import os
from .config import BaseConfig
from dotenv import load_dotenv

load_dotenv()

class DevConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
