import json
import logging

from core.logger import log_event


def test_log_event_accepts_a_level_field(caplog):
    caplog.set_level(logging.INFO, logger="intervyou")

    log_event("question_selector", "search_broadened", level="mid", type="technical")

    payload = json.loads(caplog.records[-1].getMessage())
    assert caplog.records[-1].levelno == logging.INFO
    assert payload["level"] == "mid"
    assert payload["type"] == "technical"


def test_log_event_uses_log_level(caplog):
    caplog.set_level(logging.INFO, logger="intervyou")

    log_event("ai", "pool_exhausted", log_level=logging.WARNING, requested=5)

    assert caplog.records[-1].levelno == logging.WARNING


def test_log_event_redacts_answers(caplog):
    caplog.set_level(logging.INFO, logger="intervyou")

    log_event("ai", "answer_analyzed", answer="I led the team")

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["answer"] == {"redacted": True, "length": 14}
