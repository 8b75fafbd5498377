# backend/ers/domain/entities.py
#
# Every field has a default so is_property_of can build an empty instance.

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class ReimbursementStatus(IntEnum):
    PENDING = 1
    APPROVED = 2
    DENIED = 3


class ReimbursementType(IntEnum):
    LODGING = 1
    TRAVEL = 2
    FOOD = 3
    OTHER = 4


# resolution outcomes a manager may pick
RESOLVED_STATUSES = (ReimbursementStatus.APPROVED, ReimbursementStatus.DENIED)


@dataclass
class User:
    id: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


@dataclass
class Reimbursement:
    id: Optional[int] = None
    amount: Optional[float] = None
    submitted: Optional[datetime] = None
    resolved: Optional[datetime] = None
    description: Optional[str] = None
    author: Optional[int] = None
    resolver: Optional[int] = None
    status: Optional[int] = None
    type: Optional[int] = None


@dataclass(frozen=True)
class Principal:
    """Identity attached to an authenticated session."""

    id: int
    username: str
    role: str
