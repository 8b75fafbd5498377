import logging
from typing import List, Optional

from sqlalchemy import exists, or_

from ers.core.errors import StateConflictError
from ers.core.security import hash_password, verify_password
from ers.domain.entities import User
from ers.models.reimbursement import ReimbursementModel
from ers.models.user import UserModel
from ers.repositories.base import SqlRepository
from ers.repositories.mappers import map_user_row

logger = logging.getLogger(__name__)

# domain attribute -> column; password is deliberately not searchable
_QUERYABLE_COLUMNS = {
    "id": UserModel.id,
    "username": UserModel.username,
    "email": UserModel.email,
    "first_name": UserModel.first_name,
    "last_name": UserModel.last_name,
    "role": UserModel.role,
}


class UserRepository(SqlRepository):

    def get_all(self) -> List[User]:
        with self._session() as db:
            rows = db.query(UserModel).order_by(UserModel.id).all()
            return [map_user_row(r) for r in rows]

    def get_by_id(self, id: int) -> Optional[User]:
        with self._session() as db:
            return map_user_row(db.get(UserModel, id))

    def get_by_unique_key(self, key: str, value: str) -> Optional[User]:
        column = _QUERYABLE_COLUMNS.get(key)
        if column is None:
            return None

        with self._session() as db:
            row = db.query(UserModel).filter(column == value).first()
            return map_user_row(row)

    def get_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        with self._session() as db:
            row = db.query(UserModel).filter(UserModel.username == username).first()
            if row is None or not verify_password(password, row.password_hash):
                return None
            return map_user_row(row)

    def add_new(self, user: User) -> User:
        with self._session("Couldn't add given user, username and email must be unique") as db:
            row = UserModel(
                username=user.username,
                password_hash=hash_password(user.password),
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                role=user.role,
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info("created user id=%s username=%s", row.id, row.username)
            return map_user_row(row)

    def update(self, user: User) -> bool:
        with self._session("Invalid input to update user") as db:
            count = (
                db.query(UserModel)
                .filter(UserModel.id == user.id)
                .update(
                    {
                        UserModel.username: user.username,
                        UserModel.password_hash: hash_password(user.password),
                        UserModel.first_name: user.first_name,
                        UserModel.last_name: user.last_name,
                        UserModel.email: user.email,
                        UserModel.role: user.role,
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return count == 1

    def delete_by_id(self, id: int) -> bool:
        referenced = exists().where(
            or_(ReimbursementModel.author_id == id, ReimbursementModel.resolver_id == id)
        )

        with self._session() as db:
            count = (
                db.query(UserModel)
                .filter(UserModel.id == id, ~referenced)
                .delete(synchronize_session=False)
            )
            db.commit()

            if count == 0 and db.get(UserModel, id) is not None:
                raise StateConflictError(
                    "User is referenced by existing reimbursements and cannot be deleted"
                )

        # success means "no longer retrievable", whether or not a row existed
        return True
