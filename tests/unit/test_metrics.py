"""Unit tests for ledger metric labelling"""

from prometheus_client import REGISTRY
from tender_crm.infrastructure.observability.metrics import record_status

METRIC = "tender_crm_financial_request_total"


def sample(status: str) -> float:
    return REGISTRY.get_sample_value(METRIC, {"status": status}) or 0.0


def test_known_status_keeps_its_label():
    before = sample("Approved")

    record_status("Approved")

    assert sample("Approved") == before + 1


def test_free_form_statuses_share_other_series():
    before = sample("other")

    record_status("Refunded")
    record_status("On Hold")

    assert sample("other") == before + 2
    assert REGISTRY.get_sample_value(METRIC, {"status": "Refunded"}) is None
    assert REGISTRY.get_sample_value(METRIC, {"status": "On Hold"}) is None
