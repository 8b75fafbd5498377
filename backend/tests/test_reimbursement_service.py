from datetime import datetime
from unittest.mock import Mock

import pytest

from ers.core.errors import (
    AuthorizationError,
    BadRequestError,
    ResourceNotFoundError,
    StateConflictError,
)
from ers.domain.entities import Reimbursement, ReimbursementStatus, ReimbursementType, User
from ers.repositories.reimbursement_repo import ReimbursementRepository
from ers.repositories.user_repo import UserRepository
from ers.services.reimbursement_service import ReimbursementService


def _stored(id=1, author=2, status=ReimbursementStatus.PENDING):
    return Reimbursement(
        id=id,
        amount=120.0,
        submitted=datetime(2026, 10, 1, 9, 30),
        description="Hotel, two nights",
        author=author,
        status=int(status),
        type=int(ReimbursementType.LODGING),
    )


@pytest.fixture
def repo():
    return Mock(spec=ReimbursementRepository)


@pytest.fixture
def users():
    users = Mock(spec=UserRepository)
    users.get_by_id.side_effect = lambda id: User(id=id, username=f"user{id}", role="employee")
    return users


@pytest.fixture
def service(repo, users):
    return ReimbursementService(repo, users)


def test_get_all_reimbursements(service, repo):
    repo.get_all.return_value = [_stored(1), _stored(2)]

    assert len(service.get_all_reimbursements()) == 2


def test_get_all_reimbursements_empty_is_not_found(service, repo):
    repo.get_all.return_value = []

    with pytest.raises(ResourceNotFoundError):
        service.get_all_reimbursements()


def test_get_reimbursement_by_id(service, repo):
    repo.get_by_id.return_value = _stored(3)

    assert service.get_reimbursement_by_id(3).id == 3

    repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundError):
        service.get_reimbursement_by_id(4)

    with pytest.raises(BadRequestError):
        service.get_reimbursement_by_id(-1)


def test_get_all_my_reimbursements(service, repo):
    repo.get_all_my_reimb.return_value = [_stored(author=9)]

    result = service.get_all_my_reimbursements(9)

    assert [r.author for r in result] == [9]
    repo.get_all_my_reimb.assert_called_once_with(9)


def test_get_all_my_reimbursements_none_found(service, repo):
    repo.get_all_my_reimb.return_value = []

    with pytest.raises(ResourceNotFoundError):
        service.get_all_my_reimbursements(9)

    with pytest.raises(BadRequestError):
        service.get_all_my_reimbursements("9")


@pytest.mark.parametrize("method, gateway", [
    ("filter_reimb_by_type", "filter_reimb_type"),
    ("filter_reimb_by_status", "filter_reimb_status"),
])
def test_filters(service, repo, method, gateway):
    getattr(repo, gateway).return_value = [_stored()]
    assert len(getattr(service, method)(1)) == 1

    getattr(repo, gateway).return_value = []
    with pytest.raises(ResourceNotFoundError):
        getattr(service, method)(2)

    with pytest.raises(BadRequestError):
        getattr(service, method)(0)

    assert getattr(repo, gateway).call_count == 2


def test_add_new_reimbursement_ignores_store_assigned_fields(service, repo):
    repo.add_new.return_value = _stored(10)
    candidate = Reimbursement(
        amount=55.0,
        description="Team lunch",
        author=2,
        type=int(ReimbursementType.FOOD),
        status=int(ReimbursementStatus.APPROVED),
    )

    assert service.add_new_reimbursement(candidate).id == 10
    repo.add_new.assert_called_once_with(candidate)


@pytest.mark.parametrize("missing", ["amount", "description", "author", "type"])
def test_add_new_reimbursement_requires_core_fields(service, repo, missing):
    fields = dict(amount=55.0, description="Team lunch", author=2, type=3)
    fields[missing] = None

    with pytest.raises(BadRequestError):
        service.add_new_reimbursement(Reimbursement(**fields))

    repo.add_new.assert_not_called()


def test_update_reimbursement_requires_id(service, repo):
    with pytest.raises(BadRequestError):
        service.update_reimbursement(Reimbursement(amount=1.0, description="d", author=1, type=1))

    repo.update.assert_not_called()


def test_update_reimbursement_missing_target(service, repo):
    repo.update.return_value = False

    with pytest.raises(ResourceNotFoundError):
        service.update_reimbursement(Reimbursement(id=8, amount=1.0, description="d", author=1, type=1))


def test_update_reimbursement_conflict_propagates(service, repo):
    repo.update.side_effect = StateConflictError()

    with pytest.raises(StateConflictError):
        service.update_reimbursement(Reimbursement(id=8, amount=1.0, description="d", author=1, type=1))


def test_set_status_requires_resolution_fields(service, repo):
    with pytest.raises(BadRequestError):
        service.set_reimbursement_status(Reimbursement(id=1, status=2))

    with pytest.raises(BadRequestError):
        service.set_reimbursement_status(Reimbursement(id=1, resolver=3))

    repo.set_reimb_status.assert_not_called()


def test_set_status_cannot_move_back_to_pending(service, repo):
    with pytest.raises(BadRequestError):
        service.set_reimbursement_status(
            Reimbursement(id=1, status=int(ReimbursementStatus.PENDING), resolver=3)
        )

    repo.set_reimb_status.assert_not_called()


def test_set_status_approves(service, repo):
    repo.set_reimb_status.return_value = True
    candidate = Reimbursement(id=1, status=int(ReimbursementStatus.APPROVED), resolver=3)

    assert service.set_reimbursement_status(candidate) is True
    repo.set_reimb_status.assert_called_once_with(candidate)


@pytest.mark.parametrize("amount", [0, -50.0, float("inf"), True])
def test_add_new_reimbursement_rejects_non_positive_amount(service, repo, amount):
    with pytest.raises(BadRequestError):
        service.add_new_reimbursement(Reimbursement(amount=amount, description="Taxi", author=2, type=2))

    repo.add_new.assert_not_called()


@pytest.mark.parametrize("type", [0, 5, 99, 2.5])
def test_add_new_reimbursement_rejects_unknown_type(service, repo, type):
    with pytest.raises(BadRequestError):
        service.add_new_reimbursement(Reimbursement(amount=10.0, description="Taxi", author=2, type=type))

    repo.add_new.assert_not_called()


def test_add_new_reimbursement_rejects_unknown_author(service, repo, users):
    users.get_by_id.side_effect = None
    users.get_by_id.return_value = None

    with pytest.raises(BadRequestError):
        service.add_new_reimbursement(Reimbursement(amount=10.0, description="Taxi", author=4242, type=2))

    users.get_by_id.assert_called_once_with(4242)
    repo.add_new.assert_not_called()


def test_update_reimbursement_rejects_bad_values(service, repo):
    with pytest.raises(BadRequestError):
        service.update_reimbursement(Reimbursement(id=8, amount=-1.0, description="d", author=1, type=1))

    with pytest.raises(BadRequestError):
        service.update_reimbursement(Reimbursement(id=8, amount=1.0, description="d", author=1, type=7))

    repo.update.assert_not_called()


def test_update_reimbursement_by_owner(service, repo):
    repo.get_by_id.return_value = _stored(8, author=2)
    repo.update.return_value = True

    candidate = Reimbursement(id=8, amount=30.0, description="d", author=2, type=1)

    assert service.update_reimbursement(candidate, submitter_id=2) is True
    repo.update.assert_called_once_with(candidate)


def test_update_reimbursement_of_someone_else_is_forbidden(service, repo):
    repo.get_by_id.return_value = _stored(8, author=2)

    with pytest.raises(AuthorizationError):
        service.update_reimbursement(
            Reimbursement(id=8, amount=30.0, description="d", author=3, type=1), submitter_id=3
        )

    repo.update.assert_not_called()


def test_update_reimbursement_cannot_reassign_author(service, repo):
    repo.get_by_id.return_value = _stored(8, author=2)

    with pytest.raises(AuthorizationError):
        service.update_reimbursement(
            Reimbursement(id=8, amount=30.0, description="d", author=5, type=1), submitter_id=2
        )

    repo.update.assert_not_called()


def test_set_status_unknown_resolver(service, repo, users):
    users.get_by_id.side_effect = None
    users.get_by_id.return_value = None

    with pytest.raises(BadRequestError):
        service.set_reimbursement_status(
            Reimbursement(id=1, status=int(ReimbursementStatus.DENIED), resolver=777)
        )

    repo.set_reimb_status.assert_not_called()
