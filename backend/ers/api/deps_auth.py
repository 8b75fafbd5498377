# backend/ers/api/deps_auth.py

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from ers.container import Container
from ers.core.config import Settings
from ers.core.errors import AuthenticationError, AuthorizationError
from ers.core.security import decode_token
from ers.domain.entities import Principal, Role
from ers.services.reimbursement_service import ReimbursementService
from ers.services.user_service import UserService

# Only used by Swagger UI for the "Authorize" flow. Browsers send the session
# cookie instead, so a missing header must not fail on its own.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


# ---------- CONTAINER DEPS ----------

def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.settings


def get_user_service(container: Container = Depends(get_container)) -> UserService:
    return container.user_service


def get_reimbursement_service(
    container: Container = Depends(get_container),
) -> ReimbursementService:
    return container.reimbursement_service


# ---------- AUTH DEPS ----------

def get_current_principal(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> Principal:
    raw = token or request.cookies.get(settings.session_cookie_name)
    if not raw:
        raise AuthenticationError("No session found! Please login.")

    try:
        payload = decode_token(raw, settings)
    except ValueError:
        raise AuthenticationError("Session is invalid or expired. Please login.")

    try:
        return Principal(
            id=int(payload["sub"]),
            username=str(payload["username"]),
            role=str(payload["role"]),
        )
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Session is invalid or expired. Please login.")


def require_role(role: Role) -> Callable[..., Principal]:
    def guard(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role != role.value:
            raise AuthorizationError(f"{role.value.capitalize()} role required")
        return principal

    return guard


require_admin = require_role(Role.ADMIN)
require_manager = require_role(Role.MANAGER)
