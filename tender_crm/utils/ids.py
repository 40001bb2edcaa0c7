"""Logical identifier generation"""

import uuid

FINANCIAL_REQUEST = "fin"
TENDER = "ten"
CLIENT = "cli"
USER = "user"
OEM = "oem"
PRODUCT = "prod"
DEPARTMENT = "dept"
DESIGNATION = "desig"
BIDDING_TEMPLATE = "btemp"


def new_id(prefix: str) -> str:
    """
    Generate a prefixed identifier, e.g. ``fin3f2a...``.

    The random suffix keeps ids unique under concurrent creation, which a
    millisecond timestamp suffix does not.
    """
    return f"{prefix}{uuid.uuid4().hex}"
