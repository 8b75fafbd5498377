# backend/ers/api/schemas.py
#
# Request fields are Optional; the services reject missing values with BadRequest.

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ---------- AUTH ----------

class LoginIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class PrincipalOut(BaseModel):
    id: int
    username: str
    role: str

    class Config:
        from_attributes = True


class LoginOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    principal: PrincipalOut


# ---------- USERS ----------

class UserOut(BaseModel):
    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    role: str

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class UserUpdate(UserCreate):
    id: Optional[int] = None


# ---------- REIMBURSEMENTS ----------

class ReimbursementOut(BaseModel):
    id: int
    amount: float
    submitted: datetime
    resolved: Optional[datetime] = None
    description: str
    author: int
    resolver: Optional[int] = None
    status: int
    type: int

    class Config:
        from_attributes = True


class ReimbursementCreate(BaseModel):
    amount: Optional[float] = None
    description: Optional[str] = None
    author: Optional[int] = None
    type: Optional[int] = None


class ReimbursementUpdate(ReimbursementCreate):
    id: Optional[int] = None


class ReimbursementResolve(BaseModel):
    id: Optional[int] = None
    status: Optional[int] = None
    # defaults to the manager making the request
    resolver: Optional[int] = None
