"""Append-only audit history embedded in clients and tenders"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from tender_crm.domain.models import Actor
from tender_crm.utils.date_utils import isoformat_utc


def make_history_entry(
    actor: Actor,
    action: str,
    details: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build a single audit entry"""
    entry: Dict[str, Any] = {
        "userId": actor.user_id,
        "user": actor.user_name,
        "action": action,
        "timestamp": isoformat_utc(timestamp),
    }
    if details is not None:
        entry["details"] = details
    return entry


def append_history(
    entity: Any,
    actor: Actor,
    action: str,
    details: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Append an audit entry to ``entity.history`` and return it.

    Earlier entries are copied into the new list unchanged; nothing is ever
    removed or reordered.
    """
    entry = make_history_entry(actor, action, details)
    existing: List[Dict[str, Any]] = list(entity.history or [])
    entity.history = existing + [entry]
    return entry
