"""Unit tests for decision logging and metrics"""

import json
import logging
from prometheus_client import REGISTRY
from loan_gateway.domain.decisioning import DecisionPolicy, LoanApplicationProcessor
from loan_gateway.domain.models import DeclineReason
from loan_gateway.infrastructure.observability.logging import CustomJsonFormatter, setup_logging
from loan_gateway.infrastructure.observability.metrics import record_decision


def decision_count(outcome: str, reason: str) -> float:
    return REGISTRY.get_sample_value("loan_decision_total", {"outcome": outcome, "reason": reason}) or 0.0


def test_record_decision_labels():
    before_accepted = decision_count("accepted", "none")
    before_declined = decision_count("declined", "low_salary")

    record_decision(True, None)
    record_decision(False, DeclineReason.LOW_SALARY)

    assert decision_count("accepted", "none") == before_accepted + 1
    assert decision_count("declined", "low_salary") == before_declined + 1


def test_process_records_scoring_failure(processor, application, credit_scorer):
    credit_scorer.calculate_score.side_effect = RuntimeError("Test Exception")
    before_decisions = decision_count("declined", "scoring_error")
    before_failures = REGISTRY.get_sample_value("credit_score_failures_total") or 0.0

    processor.process(application)

    assert decision_count("declined", "scoring_error") == before_decisions + 1
    assert REGISTRY.get_sample_value("credit_score_failures_total") == before_failures + 1


def test_process_logs_decision(processor, application, caplog):
    with caplog.at_level(logging.INFO):
        processor.process(application)

    record = next(r for r in caplog.records if r.getMessage() == "Decision completed")
    assert record.application_id == 42
    assert record.decision_outcome == "accepted"
    assert record.decline_reason is None
    assert record.duration_ms >= 0


def test_process_logs_decline_reason(identity_verifier, credit_scorer, low_salary_application, caplog):
    processor = LoanApplicationProcessor(identity_verifier, credit_scorer, policy=DecisionPolicy())

    with caplog.at_level(logging.INFO):
        processor.process(low_salary_application)

    record = next(r for r in caplog.records if r.getMessage() == "Decision completed")
    assert record.decision_outcome == "declined"
    assert record.decline_reason == "low_salary"


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("loan_gateway", logging.WARNING, __file__, 1, "Credit score calculation failed", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Credit score calculation failed"
    assert payload["level"] == "WARNING"
    assert payload["service"] == "loan-gateway"
    assert "timestamp" in payload


def test_setup_logging_installs_json_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
