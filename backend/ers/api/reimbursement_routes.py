# backend/ers/api/reimbursement_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends

from ers.api.deps_auth import get_current_principal, get_reimbursement_service, require_manager
from ers.api.schemas import (
    ReimbursementCreate,
    ReimbursementOut,
    ReimbursementResolve,
    ReimbursementUpdate,
)
from ers.core.parsing import parse_number
from ers.domain.entities import Principal, Reimbursement, Role
from ers.services.reimbursement_service import ReimbursementService

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------- READ (manager only for the full list and filters) ----------


@router.get("", response_model=List[ReimbursementOut])
def list_reimbursements(
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    _manager: Principal = Depends(require_manager),
):
    logger.info("GET /reimbursements")
    return reimbs.get_all_reimbursements()


@router.get("/myreimb/{author_id}", response_model=List[ReimbursementOut])
def list_my_reimbursements(
    author_id: str,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    _user: Principal = Depends(get_current_principal),
):
    return reimbs.get_all_my_reimbursements(parse_number(author_id))


@router.get("/filtertype/{type_id}", response_model=List[ReimbursementOut])
def filter_by_type(
    type_id: str,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    _manager: Principal = Depends(require_manager),
):
    return reimbs.filter_reimb_by_type(parse_number(type_id))


@router.get("/filterstatus/{status_id}", response_model=List[ReimbursementOut])
def filter_by_status(
    status_id: str,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    _manager: Principal = Depends(require_manager),
):
    return reimbs.filter_reimb_by_status(parse_number(status_id))


@router.get("/{reimb_id}", response_model=ReimbursementOut)
def get_reimbursement(
    reimb_id: str,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    _user: Principal = Depends(get_current_principal),
):
    return reimbs.get_reimbursement_by_id(parse_number(reimb_id))

# ---------- WRITE ----------


@router.post("", response_model=ReimbursementOut)
def create_reimbursement(
    payload: ReimbursementCreate,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    user: Principal = Depends(get_current_principal),
):
    logger.info("POST /reimbursements by user id=%s", user.id)
    candidate = Reimbursement(**payload.model_dump())
    if candidate.author is None:
        candidate.author = user.id
    return reimbs.add_new_reimbursement(candidate)


@router.put("", response_model=bool)
def update_reimbursement(
    payload: ReimbursementUpdate,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    user: Principal = Depends(get_current_principal),
):
    logger.info("PUT /reimbursements id=%s by user id=%s", payload.id, user.id)
    # employees may only edit their own pending requests
    submitter_id = None if user.role == Role.MANAGER.value else user.id
    return reimbs.update_reimbursement(Reimbursement(**payload.model_dump()), submitter_id)


@router.put("/status", response_model=bool)
def resolve_reimbursement(
    payload: ReimbursementResolve,
    reimbs: ReimbursementService = Depends(get_reimbursement_service),
    manager: Principal = Depends(require_manager),
):
    logger.info("PUT /reimbursements/status id=%s by manager id=%s", payload.id, manager.id)
    candidate = Reimbursement(
        id=payload.id,
        status=payload.status,
        resolver=payload.resolver or manager.id,
    )
    return reimbs.set_reimbursement_status(candidate)
