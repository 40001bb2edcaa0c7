"""Domain models - pure Python dataclasses and enums shared across layers"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Actor:
    """Principal performing an operation, passed explicitly by the caller"""

    user_id: str
    user_name: str


class FinancialRequestType(str, Enum):
    """Kind of financial instrument being requested"""

    EMD = "EMD"
    PBG = "PBG"
    SD = "SD"
    OTHER = "Other"


class FinancialRequestStatus(str, Enum):
    """Ledger statuses with side effects; other strings are stored verbatim"""

    PENDING_APPROVAL = "Pending Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    PROCESSED = "Processed"


class InstrumentSlot(str, Enum):
    """Embedded financial record slots on a tender"""

    EMD = "emd"
    PBG = "pbg"
    SD = "sd"


class InstrumentMode(str, Enum):
    DD = "DD"
    BG = "BG"
    ONLINE = "Online"
    CASH = "Cash"
    NA = "N/A"


class AssignmentStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"
