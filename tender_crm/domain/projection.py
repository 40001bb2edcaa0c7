"""Projection of processed financial instruments onto a tender's embedded slots"""

from typing import Any, Dict, Optional
from tender_crm.domain.models import FinancialRequestType, InstrumentSlot

# Defaults written after the instrument payload; the sd slot has none
SLOT_DEFAULTS: Dict[InstrumentSlot, Dict[str, Any]] = {
    InstrumentSlot.EMD: {"refundStatus": "Pending"},
    InstrumentSlot.PBG: {"status": "Active"},
}


def resolve_slot(request_type: str | FinancialRequestType) -> Optional[InstrumentSlot]:
    """
    Map a financial request type to the tender slot it projects into.

    EMD -> emd, PBG -> pbg, any other recognized type -> sd.
    "Other" has no slot and returns None, so projection is skipped.
    """
    request_type = FinancialRequestType(request_type)
    if request_type is FinancialRequestType.OTHER:
        return None
    if request_type is FinancialRequestType.EMD:
        return InstrumentSlot.EMD
    if request_type is FinancialRequestType.PBG:
        return InstrumentSlot.PBG
    return InstrumentSlot.SD


def project_instrument(
    amount: float,
    instrument: Dict[str, Any],
    slot: InstrumentSlot,
) -> Dict[str, Any]:
    """
    Build the replacement slot document for a processed request.

    Instrument fields win over everything except ``amount``, which always
    comes from the request. Slot defaults are applied last.

    Example:
        project_instrument(50000, {"mode": "Online", "amount": 1}, InstrumentSlot.EMD)
        -> {"mode": "Online", "amount": 50000, "refundStatus": "Pending"}
    """
    record = dict(instrument)
    record["amount"] = amount
    record.update(SLOT_DEFAULTS.get(slot, {}))
    return record


def apply_projection(tender: Any, slot: InstrumentSlot, record: Dict[str, Any]) -> None:
    """Replace the tender's slot with ``record``"""
    # Assign a fresh dict so the ORM sees the JSON column as changed
    setattr(tender, slot.value, dict(record))
