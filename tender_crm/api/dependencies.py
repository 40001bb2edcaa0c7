"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Header, Request
from tender_crm.domain.models import Actor


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_actor(
    x_user_id: str = Header(..., min_length=1, description="Acting user id"),
    x_user_name: Optional[str] = Header(None, description="Acting user display name"),
) -> Actor:
    """Acting principal for mutating endpoints, taken from request headers"""
    return Actor(user_id=x_user_id, user_name=x_user_name or x_user_id)
