"""Financial request lifecycle rules"""

import math
from datetime import datetime
from numbers import Number
from typing import Any, Dict, Optional
from tender_crm.domain.exceptions import ValidationError
from tender_crm.domain.models import Actor, FinancialRequestStatus, FinancialRequestType, InstrumentSlot
from tender_crm.domain.projection import resolve_slot
from tender_crm.utils.date_utils import utcnow


def validate_new_request(
    tender_id: Optional[str],
    request_type: Optional[str],
    amount: Any,
) -> FinancialRequestType:
    """
    Check the required fields of a new financial request.

    Raises:
        ValidationError: tenderId, type or amount missing, type unknown,
            or amount not a positive finite number
    """
    if not tender_id:
        raise ValidationError("tenderId is required", field="tenderId")
    if not request_type:
        raise ValidationError("type is required", field="type")
    try:
        parsed_type = FinancialRequestType(request_type)
    except ValueError:
        allowed = ", ".join(t.value for t in FinancialRequestType)
        raise ValidationError(f"type must be one of: {allowed}", field="type")
    if amount is None:
        raise ValidationError("amount is required", field="amount")
    if isinstance(amount, bool) or not isinstance(amount, Number) or not math.isfinite(amount) or not amount > 0:
        raise ValidationError("amount must be a positive number", field="amount")
    return parsed_type


def apply_status_update(
    request: Any,
    status: Optional[str],
    actor: Actor,
    reason: Optional[str] = None,
    instrument: Optional[Dict[str, Any]] = None,
    now: Optional[datetime] = None,
) -> Optional[InstrumentSlot]:
    """
    Apply a status transition to a financial request in place.

    Only Approved, Rejected and Processed carry side effects; any other
    status string is stored as given.

    Returns:
        The tender slot to project into when the request became Processed
        with a type that has a slot, otherwise None.

    Raises:
        ValidationError: status missing, Rejected without reason, or
            Processed without instrument
    """
    if not status or not status.strip():
        raise ValidationError("status is required", field="status")

    if status == FinancialRequestStatus.REJECTED.value and not reason:
        raise ValidationError("reason is required when rejecting a request", field="reason")
    if status == FinancialRequestStatus.PROCESSED.value and instrument is None:
        raise ValidationError("instrument is required when processing a request", field="instrument")

    request.status = status

    if status == FinancialRequestStatus.APPROVED.value:
        request.approver_id = actor.user_id
        request.approval_date = now or utcnow()
        return None

    if status == FinancialRequestStatus.REJECTED.value:
        request.rejection_reason = reason
        return None

    if status == FinancialRequestStatus.PROCESSED.value:
        request.instrument_details = dict(instrument)
        return resolve_slot(request.type)

    return None
