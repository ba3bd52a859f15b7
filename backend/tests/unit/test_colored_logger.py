"""Unit tests for the StepLogger used by the teacher save."""

import logging

import pytest

from schoolapp.infrastructure.logging.colored_logger import SaveStage, StepLogger


def test_timed_step_logs_failure_as_warning_and_reraises(caplog):
    log = StepLogger("TeacherService")

    with caplog.at_level(logging.INFO, logger="TeacherService"):
        with pytest.raises(OSError):
            with log.timed_step(SaveStage.ATTACHMENT, "Storing attachment"):
                raise OSError("disk full")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "[ATTACH]" in warnings[0].getMessage()
    assert "OSError: disk full" in warnings[0].getMessage()


def test_timed_step_logs_start_and_completion(caplog):
    log = StepLogger("TeacherService")

    with caplog.at_level(logging.INFO, logger="TeacherService"):
        with log.timed_step(SaveStage.PERSIST, "Saving teacher aggregate"):
            pass

    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert all("[PERSIST]" in m for m in messages)
    assert "✓" in messages[1]


def test_save_stages():
    stages = {name for name in vars(SaveStage) if not name.startswith("_")}
    assert stages == {"UNIQUENESS", "MAPPING", "ATTACHMENT", "PERSIST", "COMPLETE"}
