"""Audit history writes shared by clients and tenders"""

from typing import Any, Dict, Optional
from tender_crm.domain.history import append_history
from tender_crm.domain.models import Actor
from tender_crm.infrastructure.observability.metrics import history_entry_counter


def record_history(
    entity: Any,
    actor: Actor,
    action: str,
    details: Optional[str] = None,
) -> Dict[str, Any]:
    """Append an audit entry to ``entity`` and count it; the caller persists"""
    entry = append_history(entity, actor, action, details)
    history_entry_counter.labels(entity=type(entity).__name__.lower()).inc()
    return entry
