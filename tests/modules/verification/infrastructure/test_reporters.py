# tests/modules/verification/infrastructure/test_reporters.py
"""
Tests para: ConsoleResultReporter, JsonResultReporter, CompositeResultReporter
Tipo: Unitario (Infrastructure)
"""
import io
import json
import logging
from unittest.mock import Mock

import pytest

from file_verifier.modules.verification.domain.entities import VerificationResult
from file_verifier.modules.verification.domain.value_objects import (
    CheckDefinition,
    FailureKind,
    ResolvedCheck,
)
from file_verifier.modules.verification.infrastructure.reporters import (
    CompositeResultReporter,
    ConsoleResultReporter,
    JsonResultReporter,
    format_failure,
)


@pytest.fixture
def failed_result():
    result = VerificationResult()
    for _ in range(4):
        result.record_check()
    result.add_existence_failure(ResolvedCheck(CheckDefinition("a.txt"), "/p/a.txt"))
    result.add_non_existence_failure(
        ResolvedCheck(CheckDefinition("b.lock", must_exist=False), "/p/b.lock")
    )
    result.add_content_failure(
        ResolvedCheck(CheckDefinition("c.log", content_pattern="OK$"), "/p/c.log")
    )
    return result


def test_format_failure_mentions_location_nature_and_pattern():
    check = ResolvedCheck(CheckDefinition("c.log", content_pattern="OK$"), "/p/c.log")

    line = format_failure(FailureKind.CONTENT, check)

    assert "[content]" in line
    assert "/p/c.log" in line
    assert "'OK$'" in line


def test_console_reporter_logs_one_error_per_failure(failed_result, caplog):
    with caplog.at_level(logging.INFO, logger="verifier.report"):
        ConsoleResultReporter().report(failed_result)

    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 3
    assert errors[0].startswith("[existence]")
    assert errors[1].startswith("[absence]")
    assert errors[2].startswith("[content]")
    assert "3 fallo(s) en 4 verificación(es)" in caplog.text


def test_console_reporter_summary_without_failures(caplog):
    result = VerificationResult()
    result.record_check()

    with caplog.at_level(logging.INFO, logger="verifier.report"):
        ConsoleResultReporter().report(result)

    assert "sin fallos" in caplog.text
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_json_reporter_writes_machine_readable_payload(failed_result):
    stream = io.StringIO()

    JsonResultReporter(stream=stream).report(failed_result)

    payload = json.loads(stream.getvalue())
    assert payload["has_failures"] is True
    assert payload["checks_run"] == 4
    assert payload["non_existence_failures"][0]["exists"] is False
    assert payload["content_failures"][0]["contains"] == "OK$"


def test_composite_reporter_fans_out(failed_result):
    first, second = Mock(), Mock()

    CompositeResultReporter(first, second).report(failed_result)

    first.report.assert_called_once_with(failed_result)
    second.report.assert_called_once_with(failed_result)
