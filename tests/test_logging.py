import json
import logging

from app import create_app
from tests.conftest import FakeStore

WRITER_LOGGER = "src.services.subscription_writer"


def make_config(base, level):
    class _Config(base):
        LOG_LEVEL = level

    return _Config


def test_writer_info_is_emitted_at_info_level(test_config, caplog):
    app = create_app(make_config(test_config, "INFO"), store=FakeStore())
    body = {"userId": "u1", "subscriptions": {"CountyA": ["TownX", "TownY"]}}

    resp = app.test_client().post("/subscribeAll", data=json.dumps(body), content_type="application/json")

    assert resp.status_code == 200
    assert logging.getLogger(WRITER_LOGGER).getEffectiveLevel() == logging.INFO
    stored = [r for r in caplog.records if r.name == WRITER_LOGGER and r.levelno == logging.INFO]
    assert any("Stored 2 subscriptions for user u1" in r.getMessage() for r in stored)


def test_writer_failure_is_logged_with_detail(test_config, caplog):
    app = create_app(make_config(test_config, "INFO"), store=FakeStore(fail_on_write=1))
    body = {"userId": "u1", "subscriptions": {"CountyA": ["TownX"]}}

    resp = app.test_client().post("/subscribeAll", data=json.dumps(body), content_type="application/json")

    assert resp.status_code == 500
    errors = [r for r in caplog.records if r.name == WRITER_LOGGER and r.levelno == logging.ERROR]
    assert any("WriteError" in r.getMessage() for r in errors)


def test_log_level_applies_to_service_loggers(test_config):
    app = create_app(make_config(test_config, "DEBUG"), store=FakeStore())

    assert app.logger.level == logging.DEBUG
    assert logging.getLogger("src").level == logging.DEBUG
    assert logging.getLogger(WRITER_LOGGER).getEffectiveLevel() == logging.DEBUG
    for handler in app.logger.handlers:
        assert handler in logging.getLogger("src").handlers


def test_repeated_app_creation_does_not_duplicate_handlers(test_config):
    create_app(make_config(test_config, "INFO"), store=FakeStore())
    before = list(logging.getLogger("src").handlers)
    create_app(make_config(test_config, "INFO"), store=FakeStore())

    assert logging.getLogger("src").handlers == before
