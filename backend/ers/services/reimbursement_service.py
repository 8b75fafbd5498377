import logging
from typing import Any, List, Optional

from ers.core.errors import AuthorizationError, BadRequestError, ResourceNotFoundError
from ers.core.validators import is_positive_number, is_valid_id, is_valid_object
from ers.domain.entities import RESOLVED_STATUSES, Reimbursement, ReimbursementType
from ers.repositories.reimbursement_repo import ReimbursementRepository
from ers.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

# fields the store owns; whatever the caller sends for them is ignored on create
_STORE_ASSIGNED = ("id", "submitted", "resolved", "resolver", "status")

# fields an update may not touch
_NOT_UPDATABLE = ("submitted", "resolved", "resolver", "status")

# only id, status and resolver matter when resolving
_NOT_RESOLUTION = ("amount", "submitted", "resolved", "description", "author", "type")

_TYPE_CODES = frozenset(t.value for t in ReimbursementType)


class ReimbursementService:
    # Pending -> Approved | Denied; both terminal. The gateway gates writes on
    # Pending atomically and raises StateConflictError itself.

    def __init__(self, reimbursement_repo: ReimbursementRepository, user_repo: UserRepository):
        self._repo = reimbursement_repo
        self._users = user_repo

    def get_all_reimbursements(self) -> List[Reimbursement]:
        reimbursements = self._repo.get_all()
        if not reimbursements:
            raise ResourceNotFoundError("There aren't any reimbursements available")
        return reimbursements

    def get_reimbursement_by_id(self, id: Any) -> Reimbursement:
        if not is_valid_id(id):
            raise BadRequestError("The id is not valid")

        reimbursement = self._repo.get_by_id(id)
        if reimbursement is None:
            raise ResourceNotFoundError("There is no reimbursement for given id")

        return reimbursement

    def get_all_my_reimbursements(self, author_id: Any) -> List[Reimbursement]:
        if not is_valid_id(author_id):
            raise BadRequestError("The author id is not valid")

        reimbursements = self._repo.get_all_my_reimb(author_id)
        if not reimbursements:
            raise ResourceNotFoundError("There aren't any reimbursements associated with given author")

        return reimbursements

    def filter_reimb_by_type(self, type: Any) -> List[Reimbursement]:
        if not is_valid_id(type):
            raise BadRequestError("The type id is not valid")

        reimbursements = self._repo.filter_reimb_type(type)
        if not reimbursements:
            raise ResourceNotFoundError("There aren't any reimbursements of given type")

        return reimbursements

    def filter_reimb_by_status(self, status: Any) -> List[Reimbursement]:
        if not is_valid_id(status):
            raise BadRequestError("The status id is not valid")

        reimbursements = self._repo.filter_reimb_status(status)
        if not reimbursements:
            raise ResourceNotFoundError("There aren't any reimbursements with given status")

        return reimbursements

    def add_new_reimbursement(self, candidate: Reimbursement) -> Reimbursement:
        if not is_valid_object(candidate, *_STORE_ASSIGNED):
            raise BadRequestError("Invalid property values found in provided reimbursement")

        self._check_editable_values(candidate)
        return self._repo.add_new(candidate)

    def update_reimbursement(self, candidate: Reimbursement, submitter_id: Optional[int] = None) -> bool:
        """Rewrite amount, description, author and type of a pending reimbursement.

        With ``submitter_id`` set, only that user's own reimbursement may be
        changed, and it cannot be handed to another author.
        """
        if not is_valid_object(candidate, *_NOT_UPDATABLE) or not is_valid_id(candidate.id):
            raise BadRequestError("Invalid property values found in given reimbursement")

        self._check_editable_values(candidate)

        if submitter_id is not None:
            current = self._repo.get_by_id(candidate.id)
            if current is None:
                raise ResourceNotFoundError("There is no reimbursement for given id")
            if current.author != submitter_id or candidate.author != submitter_id:
                raise AuthorizationError("You can only update your own reimbursements")

        if not self._repo.update(candidate):
            raise ResourceNotFoundError("There is no reimbursement for given id")

        return True

    def set_reimbursement_status(self, candidate: Reimbursement) -> bool:
        if (
            not is_valid_object(candidate, *_NOT_RESOLUTION)
            or not is_valid_id(candidate.id)
            or not is_valid_id(candidate.status)
            or not is_valid_id(candidate.resolver)
        ):
            raise BadRequestError("Invalid property values found in given resolution")

        if candidate.status not in RESOLVED_STATUSES:
            raise BadRequestError("A reimbursement can only be approved or denied")

        if self._users.get_by_id(candidate.resolver) is None:
            raise BadRequestError("The resolver is not an existing user")

        if not self._repo.set_reimb_status(candidate):
            raise ResourceNotFoundError("There is no reimbursement for given id")

        logger.info(
            "reimbursement id=%s resolved with status=%s by user=%s",
            candidate.id,
            candidate.status,
            candidate.resolver,
        )
        return True

    def _check_editable_values(self, candidate: Reimbursement) -> None:
        if not is_positive_number(candidate.amount):
            raise BadRequestError("The amount must be a positive number")

        if not is_valid_id(candidate.type) or candidate.type not in _TYPE_CODES:
            raise BadRequestError("The type is not a known reimbursement type")

        if not is_valid_id(candidate.author) or self._users.get_by_id(candidate.author) is None:
            raise BadRequestError("The author is not an existing user")
