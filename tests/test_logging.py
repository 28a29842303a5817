"""Tests for structured and audit logging."""

import logging

import pytest

from app.core.logging import AuditLogger, StructuredFormatter
from app.services.placement import PlacementService


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="checked",
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for key=value log formatting."""

    def test_base_fields(self) -> None:
        """Level, logger and message are always present."""
        output = StructuredFormatter().format(_record())

        assert "level=INFO" in output
        assert "logger=app.test" in output
        assert "message=checked" in output
        assert "student_id=" not in output

    def test_context_fields(self) -> None:
        """Student, company and action extras are rendered."""
        output = StructuredFormatter().format(
            _record(student_id=3, company_id="C001", action="student.updated")
        )

        assert "student_id=3" in output
        assert "company_id=C001" in output
        assert "action=student.updated" in output


class TestLogContext:
    """Tests that callers attach context to their log records."""

    def test_eligibility_check_carries_ids(
        self, service: PlacementService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Eligibility checks log the student and company ids as extras."""
        with caplog.at_level(logging.DEBUG, logger="app.services.placement"):
            service.check_eligibility(1, "C001")

        records = [r for r in caplog.records if r.name == "app.services.placement"]
        assert records
        assert records[-1].student_id == 1
        assert records[-1].company_id == "C001"

    def test_audit_log_carries_action(self, caplog: pytest.LogCaptureFixture) -> None:
        """Audit events carry their action as an extra."""
        with caplog.at_level(logging.INFO, logger="audit"):
            AuditLogger().log(
                action="policy_config.replaced",
                actor_type="api",
                actor_id="anonymous",
                entity_type="policy_config",
                entity_id="active",
            )

        record = caplog.records[-1]
        assert record.action == "policy_config.replaced"
        assert "entity=policy_config:active" in record.getMessage()

    def test_roster_change_is_audited(
        self, service: PlacementService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Creating a student emits a student.created audit event."""
        with caplog.at_level(logging.INFO, logger="audit"):
            service.create_student(name="Meera Nair")

        actions = [getattr(r, "action", None) for r in caplog.records if r.name == "audit"]
        assert actions == ["student.created"]
