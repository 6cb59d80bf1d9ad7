from flask import current_app, jsonify
from src.models.request_model import decode_request
from src.services.errors import DecodeError, SubscriptionError
from src.services.subscription_writer import SubscriptionWriter

STORE_EXTENSION = "subscription_store"


def get_subscription_store():
    """Store wired up by create_app(); tests replace it with a fake."""
    return current_app.extensions[STORE_EXTENSION]


def error_response(error: SubscriptionError):
    # client only ever sees the generic message, never driver detail
    return error.public_message, error.status_code, {"Content-Type": "text/plain; charset=utf-8"}


def subscribe_all(raw_body):
    """Decode the body, write every (county, town) row in one transaction, build the response."""
    logger = current_app.logger

    try:
        req = decode_request(raw_body)
    except DecodeError as e:
        logger.warning(f"⚠️ Rejected subscription request: {e}")
        return error_response(e)

    logger.info(f"📨 Subscription request for user {req.user_id}: "
                f"{len(req.subscriptions)} regions, {req.row_count} rows")

    writer = SubscriptionWriter(get_subscription_store())
    outcome = writer.handle(req)

    if not outcome.success:
        logger.error(f"❌ Subscription write failed for user {req.user_id}: {outcome.state.value}")
        return error_response(outcome.error)

    return jsonify({"success": True}), 200
