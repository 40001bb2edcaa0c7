"""Prometheus metrics for ledger activity, projections and HTTP latency"""

from prometheus_client import Counter, Histogram
from tender_crm.domain.models import FinancialRequestStatus

KNOWN_STATUSES = {status.value for status in FinancialRequestStatus}

# Ledger metrics
financial_request_counter = Counter(
    "tender_crm_financial_request_total",
    "Financial request creations and status changes",
    ["status"],
)

projection_counter = Counter(
    "tender_crm_projection_total",
    "Instrument projections onto tenders",
    ["slot", "outcome"],  # applied | skipped_other | tender_missing
)

history_entry_counter = Counter(
    "tender_crm_history_entries_total",
    "Audit entries appended",
    ["entity"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_status(status: str) -> None:
    """Count a request reaching ``status``; free-form statuses share one series"""
    label = status if status in KNOWN_STATUSES else "other"
    financial_request_counter.labels(status=label).inc()


def record_projection(slot: str | None, outcome: str) -> None:
    """Count a projection attempt by slot and outcome"""
    projection_counter.labels(slot=slot or "none", outcome=outcome).inc()
