# src/models/subscription_model.py

from datetime import datetime
from src.models import db

class Subscription(db.Model):
    __tablename__ = "subscriptions"

    # append-only: the same (user_id, county, town) may appear many times
    id          = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id     = db.Column(db.String(128), nullable=False, index=True)
    county      = db.Column(db.String(128), nullable=False)
    town        = db.Column(db.String(128), nullable=False)
    created_at  = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<Subscription {self.user_id} {self.county}/{self.town}>"
