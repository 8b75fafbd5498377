# backend/ers/api/auth_routes.py

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from ers.api.deps_auth import get_current_principal, get_settings, get_user_service
from ers.api.schemas import LoginIn, LoginOut, PrincipalOut
from ers.core.config import Settings
from ers.core.security import create_access_token
from ers.domain.entities import Principal
from ers.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


def _start_session(
    username,
    password,
    response: Response,
    users: UserService,
    settings: Settings,
) -> LoginOut:
    user = users.authenticate_user(username, password)
    principal = Principal(id=user.id, username=user.username, role=user.role)

    token = create_access_token(
        {"sub": str(principal.id), "username": principal.username, "role": principal.role},
        settings,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.app_env == "prod",
    )

    logger.info("session started for user id=%s role=%s", principal.id, principal.role)
    return LoginOut(access_token=token, principal=PrincipalOut.model_validate(principal))


# JSON login, the one the frontend uses
@router.post("", response_model=LoginOut)
def login(
    payload: LoginIn,
    response: Response,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    return _start_session(payload.username, payload.password, response, users, settings)


# OAuth2 form endpoint (Swagger Authorize uses this)
@router.post("/token", response_model=LoginOut)
def token(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    return _start_session(form_data.username, form_data.password, response, users, settings)


@router.get("", status_code=status.HTTP_204_NO_CONTENT)
def logout(settings: Settings = Depends(get_settings)):
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/me", response_model=PrincipalOut)
def me(principal: Principal = Depends(get_current_principal)):
    return PrincipalOut.model_validate(principal)
