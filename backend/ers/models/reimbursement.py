from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)

from ers.core.database import Base
from ers.core.time_utils import utcnow


class ReimbursementModel(Base):
    __tablename__ = "ers_reimbursements"

    __table_args__ = (
        # SAFETY CONSTRAINTS
        CheckConstraint("amount > 0", name="ck_reimb_amount_positive"),
        CheckConstraint("status_id IN (1, 2, 3)", name="ck_reimb_status_known"),
        CheckConstraint("type_id IN (1, 2, 3, 4)", name="ck_reimb_type_known"),

        # PERFORMANCE INDEXES
        Index("ix_reimb_author_id", "author_id"),
        Index("ix_reimb_status_id", "status_id"),
        Index("ix_reimb_type_id", "type_id"),
    )

    id = Column(Integer, primary_key=True, index=True)

    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=False)

    # submitted is stamped once on insert and never rewritten
    submitted = Column(DateTime, nullable=False, default=utcnow)
    resolved = Column(DateTime, nullable=True)

    author_id = Column(Integer, ForeignKey("ers_users.id"), nullable=False)
    resolver_id = Column(Integer, ForeignKey("ers_users.id"), nullable=True)

    # 1 pending | 2 approved | 3 denied
    status_id = Column(Integer, nullable=False, default=1)
    # 1 lodging | 2 travel | 3 food | 4 other
    type_id = Column(Integer, nullable=False)
