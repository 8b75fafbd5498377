from typing import Optional

from ers.domain.entities import Reimbursement, User
from ers.models.reimbursement import ReimbursementModel
from ers.models.user import UserModel


def map_user_row(row: Optional[UserModel]) -> Optional[User]:
    if row is None:
        return None

    # password carries the stored hash; services strip it before returning
    return User(
        id=row.id,
        username=row.username,
        password=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        role=row.role,
    )


def map_reimbursement_row(row: Optional[ReimbursementModel]) -> Optional[Reimbursement]:
    if row is None:
        return None

    return Reimbursement(
        id=row.id,
        amount=float(row.amount) if row.amount is not None else None,
        submitted=row.submitted,
        resolved=row.resolved,
        description=row.description,
        author=row.author_id,
        resolver=row.resolver_id,
        status=row.status_id,
        type=row.type_id,
    )
