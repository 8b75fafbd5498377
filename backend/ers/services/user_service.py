import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from ers.core.errors import (
    AuthenticationError,
    BadRequestError,
    ResourceNotFoundError,
    ResourcePersistenceError,
)
from ers.core.parsing import parse_number
from ers.core.validators import is_property_of, is_valid_id, is_valid_object, is_valid_strings
from ers.domain.entities import User
from ers.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Business rules for user accounts.

    Every User handed back to a caller has its password stripped.
    """

    def __init__(self, user_repo: UserRepository):
        self._repo = user_repo

    def get_all_users(self) -> List[User]:
        users = self._repo.get_all()
        if not users:
            raise ResourceNotFoundError("There aren't any users in the DB")
        return [self._remove_password(u) for u in users]

    def get_user_by_id(self, id: Any) -> User:
        if not is_valid_id(id):
            raise BadRequestError("This is not a valid id")

        user = self._repo.get_by_id(id)
        if user is None:
            raise ResourceNotFoundError("There aren't any user with given id")

        return self._remove_password(user)

    def get_user_by_unique_key(self, query: Mapping) -> User:
        # only single-key searches; extra keys are checked but ignored
        if not query or not isinstance(query, Mapping):
            raise BadRequestError("A single search key is required")

        keys = list(query.keys())
        if not all(is_property_of(k, User) for k in keys):
            raise BadRequestError("Unknown user attribute in query")

        key = keys[0]
        value = query[key]

        if key == "id":
            return self.get_user_by_id(parse_number(value))

        if not is_valid_strings(value):
            raise BadRequestError(f"Invalid value provided for {key}")

        user = self._repo.get_by_unique_key(key, value)
        if user is None:
            raise ResourceNotFoundError(f"No user found with given {key}")

        return self._remove_password(user)

    def authenticate_user(self, username: Any, password: Any) -> User:
        if not is_valid_strings(username, password):
            raise BadRequestError("Username and password are required")

        user = self._repo.get_user_by_credentials(username, password)
        if user is None:
            logger.info("failed login for username=%s", username)
            raise AuthenticationError("Bad credentials provided.")

        return self._remove_password(user)

    def add_new_user(self, new_user: User) -> User:
        if not is_valid_object(new_user, "id"):
            raise BadRequestError("Invalid property value found in provided user")

        if not self._is_username_available(new_user.username):
            raise ResourcePersistenceError("The provided username is already taken")

        if not self._is_email_available(new_user.email):
            raise ResourcePersistenceError("The provided email is already taken")

        persisted = self._repo.add_new(new_user)
        return self._remove_password(persisted)

    def update_user(self, user: User) -> bool:
        if not is_valid_object(user) or not is_valid_id(user.id):
            raise BadRequestError("Invalid property value found in provided user")

        if not self._is_username_available(user.username, exclude_id=user.id):
            raise ResourcePersistenceError("The provided username is already taken")

        if not self._is_email_available(user.email, exclude_id=user.id):
            raise ResourcePersistenceError("The provided email is already taken")

        return self._repo.update(user)

    def delete_user_by_id(self, id: Any) -> bool:
        if not is_valid_id(id):
            raise BadRequestError("Invalid id provided")

        return self._repo.delete_by_id(id)

    @staticmethod
    def _remove_password(user: User) -> User:
        return dataclasses.replace(user, password=None)

    def _is_username_available(self, username: str, exclude_id: Optional[int] = None) -> bool:
        try:
            holder = self.get_user_by_unique_key({"username": username})
        except ResourceNotFoundError:
            return True
        return exclude_id is not None and holder.id == exclude_id

    def _is_email_available(self, email: str, exclude_id: Optional[int] = None) -> bool:
        try:
            holder = self.get_user_by_unique_key({"email": email})
        except ResourceNotFoundError:
            return True
        return exclude_id is not None and holder.id == exclude_id
