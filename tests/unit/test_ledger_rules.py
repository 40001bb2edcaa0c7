"""Unit tests for financial request lifecycle rules"""

import pytest
from datetime import datetime, timezone
from types import SimpleNamespace
from tender_crm.domain.exceptions import ValidationError
from tender_crm.domain.ledger import apply_status_update, validate_new_request
from tender_crm.domain.models import Actor, FinancialRequestType, InstrumentSlot

APPROVER = Actor(user_id="user1", user_name="Admin User")


def make_request(request_type: str = "EMD") -> SimpleNamespace:
    return SimpleNamespace(
        type=request_type,
        status="Pending Approval",
        approver_id=None,
        approval_date=None,
        rejection_reason=None,
        instrument_details=None,
    )


def test_validate_new_request_returns_type():
    assert validate_new_request("ten1", "PBG", 1000) is FinancialRequestType.PBG


@pytest.mark.parametrize(
    "tender_id, request_type, amount, field",
    [
        (None, "EMD", 100, "tenderId"),
        ("ten1", None, 100, "type"),
        ("ten1", "EMD", None, "amount"),
        ("ten1", "EMD", 0, "amount"),
        ("ten1", "EMD", -5, "amount"),
        ("ten1", "EMD", "100", "amount"),
        ("ten1", "EMD", True, "amount"),
        ("ten1", "EMD", float("inf"), "amount"),
        ("ten1", "EMD", float("nan"), "amount"),
        ("ten1", "Cheque", 100, "type"),
    ],
)
def test_validate_new_request_rejects(tender_id, request_type, amount, field):
    with pytest.raises(ValidationError) as exc_info:
        validate_new_request(tender_id, request_type, amount)
    assert exc_info.value.field == field


def test_approve_stamps_approver_and_date():
    request = make_request()
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    slot = apply_status_update(request, "Approved", APPROVER, now=now)

    assert slot is None
    assert request.status == "Approved"
    assert request.approver_id == "user1"
    assert request.approval_date == now


def test_reject_stores_reason_without_approver():
    request = make_request()

    apply_status_update(request, "Rejected", APPROVER, reason="Insufficient funds")

    assert request.status == "Rejected"
    assert request.rejection_reason == "Insufficient funds"
    assert request.approver_id is None


def test_reject_requires_reason():
    request = make_request()

    with pytest.raises(ValidationError) as exc_info:
        apply_status_update(request, "Rejected", APPROVER)

    assert exc_info.value.field == "reason"
    assert request.status == "Pending Approval"


def test_process_stores_instrument_and_returns_slot():
    request = make_request("PBG")
    instrument = {"mode": "BG", "issuingBank": "HDFC"}

    slot = apply_status_update(request, "Processed", APPROVER, instrument=instrument)

    assert slot is InstrumentSlot.PBG
    assert request.instrument_details == instrument


def test_process_other_returns_no_slot():
    request = make_request("Other")

    slot = apply_status_update(request, "Processed", APPROVER, instrument={"mode": "Cash"})

    assert slot is None
    assert request.status == "Processed"
    assert request.instrument_details == {"mode": "Cash"}


def test_process_requires_instrument():
    with pytest.raises(ValidationError) as exc_info:
        apply_status_update(make_request(), "Processed", APPROVER)
    assert exc_info.value.field == "instrument"


@pytest.mark.parametrize("status", [None, "", "   "])
def test_status_is_required(status):
    with pytest.raises(ValidationError) as exc_info:
        apply_status_update(make_request(), status, APPROVER)
    assert exc_info.value.field == "status"


def test_unrecognized_status_is_stored_verbatim():
    request = make_request()

    slot = apply_status_update(request, "Refunded", APPROVER, reason="ignored")

    assert slot is None
    assert request.status == "Refunded"
    assert request.rejection_reason is None
    assert request.approver_id is None
