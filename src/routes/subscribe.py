# src/routes/subscribe.py

from flask import Blueprint, request
from src.controllers.subscription_controller import subscribe_all

subscribe_bp = Blueprint("subscribe", __name__)


@subscribe_bp.route("/subscribeAll", methods=["POST"], provide_automatic_options=False)
def handle_subscribe_all():
    """Append one row per county/town pair in the body for the given user."""
    return subscribe_all(request.get_data(cache=False))
