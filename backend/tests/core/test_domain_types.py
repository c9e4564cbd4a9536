"""Domain Types — identifier helpers and health report.

Tests:
    - is_nil treats None and the all-zero UUID as "no identifier"
    - parse_identifier accepts canonical UUIDs only
    - HealthReport.ok mirrors the status
"""

from uuid import uuid4

from todo_api.core.domain_types import (
    NIL_ID, HealthReport, ServiceStatus, TodoId, UserId,
    is_nil, parse_identifier,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert TodoId(uid) == uid


def test_is_nil():
    assert is_nil(None)
    assert is_nil(NIL_ID)
    assert not is_nil(uuid4())


def test_parse_identifier_accepts_uuid_string():
    uid = uuid4()
    assert parse_identifier(str(uid)) == uid


def test_parse_identifier_rejects_usernames():
    assert parse_identifier("alice") is None
    assert parse_identifier("") is None


def test_service_status_is_two_valued():
    assert set(ServiceStatus) == {ServiceStatus.OK, ServiceStatus.UNAVAILABLE}


def test_health_report_ok():
    assert HealthReport(ServiceStatus.OK).ok
    down = HealthReport(ServiceStatus.UNAVAILABLE, error="connection refused")
    assert not down.ok
    assert down.error == "connection refused"
