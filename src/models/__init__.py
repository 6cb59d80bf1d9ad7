from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from src.models.subscription_model import Subscription  # noqa: E402,F401
