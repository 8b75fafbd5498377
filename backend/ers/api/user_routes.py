# backend/ers/api/user_routes.py

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Request

from ers.api.deps_auth import get_user_service, require_admin
from ers.api.schemas import UserCreate, UserOut, UserUpdate
from ers.core.parsing import parse_number
from ers.core.validators import is_empty_object
from ers.domain.entities import Principal, User
from ers.services.user_service import UserService

logger = logging.getLogger(__name__)

# every /users route is admin only
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=Union[List[UserOut], UserOut])
def list_or_find_users(request: Request, users: UserService = Depends(get_user_service)):
    query = dict(request.query_params)

    if is_empty_object(query):
        logger.info("GET /users")
        return users.get_all_users()

    logger.info("GET /users by %s", ",".join(query))
    return users.get_user_by_unique_key(query)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    return users.get_user_by_id(parse_number(user_id))


@router.post("", response_model=UserOut)
def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    logger.info("POST /users username=%s", payload.username)
    return users.add_new_user(User(**payload.model_dump()))


@router.put("", response_model=bool)
def update_user(payload: UserUpdate, users: UserService = Depends(get_user_service)):
    logger.info("PUT /users id=%s", payload.id)
    return users.update_user(User(**payload.model_dump()))


@router.delete("/{user_id}", response_model=bool)
def delete_user(
    user_id: str,
    users: UserService = Depends(get_user_service),
    principal: Principal = Depends(require_admin),
):
    logger.info("DELETE /users/%s by admin id=%s", user_id, principal.id)
    return users.delete_user_by_id(parse_number(user_id))
