import logging
from typing import List, Optional

from ers.core.errors import StateConflictError
from ers.core.time_utils import utcnow
from ers.domain.entities import Reimbursement, ReimbursementStatus
from ers.models.reimbursement import ReimbursementModel
from ers.repositories.base import SqlRepository
from ers.repositories.mappers import map_reimbursement_row

logger = logging.getLogger(__name__)


class ReimbursementRepository(SqlRepository):

    def get_all(self) -> List[Reimbursement]:
        with self._session() as db:
            rows = db.query(ReimbursementModel).order_by(ReimbursementModel.id).all()
            return [map_reimbursement_row(r) for r in rows]

    def get_by_id(self, id: int) -> Optional[Reimbursement]:
        with self._session() as db:
            return map_reimbursement_row(db.get(ReimbursementModel, id))

    def get_all_my_reimb(self, author_id: int) -> List[Reimbursement]:
        return self._filter(ReimbursementModel.author_id == author_id)

    def filter_reimb_type(self, type: int) -> List[Reimbursement]:
        return self._filter(ReimbursementModel.type_id == type)

    def filter_reimb_status(self, status: int) -> List[Reimbursement]:
        return self._filter(ReimbursementModel.status_id == status)

    def add_new(self, reimb: Reimbursement) -> Reimbursement:
        # status and submitted are always assigned here, never taken from the caller
        with self._session("Couldn't add given reimbursement") as db:
            row = ReimbursementModel(
                amount=reimb.amount,
                description=reimb.description,
                author_id=reimb.author,
                type_id=reimb.type,
                status_id=int(ReimbursementStatus.PENDING),
                submitted=utcnow(),
                resolved=None,
                resolver_id=None,
            )
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info("created reimbursement id=%s author=%s", row.id, row.author_id)
            return map_reimbursement_row(row)

    def update(self, reimb: Reimbursement) -> bool:
        """Rewrite the editable fields of a pending reimbursement.

        Returns False when no such row exists. Raises StateConflictError when
        the row exists but is no longer pending; the row is left untouched.
        """
        with self._session("Invalid input to update reimbursement") as db:
            count = (
                db.query(ReimbursementModel)
                .filter(
                    ReimbursementModel.id == reimb.id,
                    ReimbursementModel.status_id == int(ReimbursementStatus.PENDING),
                )
                .update(
                    {
                        ReimbursementModel.amount: reimb.amount,
                        ReimbursementModel.description: reimb.description,
                        ReimbursementModel.author_id: reimb.author,
                        ReimbursementModel.type_id: reimb.type,
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return self._check_pending_write(db, reimb.id, count, "update")

    def set_reimb_status(self, reimb: Reimbursement) -> bool:
        """Resolve a pending reimbursement: status, resolved timestamp, resolver."""
        with self._session() as db:
            count = (
                db.query(ReimbursementModel)
                .filter(
                    ReimbursementModel.id == reimb.id,
                    ReimbursementModel.status_id == int(ReimbursementStatus.PENDING),
                )
                .update(
                    {
                        ReimbursementModel.status_id: int(reimb.status),
                        ReimbursementModel.resolved: utcnow(),
                        ReimbursementModel.resolver_id: reimb.resolver,
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return self._check_pending_write(db, reimb.id, count, "resolve")

    def _filter(self, criterion) -> List[Reimbursement]:
        with self._session() as db:
            rows = (
                db.query(ReimbursementModel)
                .filter(criterion)
                .order_by(ReimbursementModel.id)
                .all()
            )
            return [map_reimbursement_row(r) for r in rows]

    @staticmethod
    def _check_pending_write(db, id: int, count: int, action: str) -> bool:
        if count == 1:
            return True

        row = db.get(ReimbursementModel, id)
        if row is None:
            return False

        logger.info("refused to %s reimbursement id=%s in status %s", action, id, row.status_id)
        raise StateConflictError(f"You can only {action} a pending reimbursement")
