"""Account registration and login endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from calorie_tracker.api.dependencies import get_container, get_current_user
from calorie_tracker.api.schemas import LoginRequest, RegisterRequest
from calorie_tracker.api.serializers import serialize_user, success
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.auth import (
    AuthSession,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Create an account and return a bearer token."""
    try:
        session = container.auth_service.register(
            email=body.email, password=body.password, name=body.name
        )
    except EmailAlreadyRegisteredError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return success(_session_payload(session))


@router.post("/login")
async def login(
    body: LoginRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Exchange email and password for a bearer token."""
    try:
        session = container.auth_service.login(body.email, body.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        ) from exc
    return success(_session_payload(session))


@router.get("/me")
async def me(user: UserProfile = Depends(get_current_user)) -> dict[str, object]:
    """Return the authenticated user."""
    return success(serialize_user(user))


def _session_payload(session: AuthSession) -> dict[str, object]:
    return {
        "id": str(session.user.id),
        "name": session.user.name,
        "email": session.user.email,
        "token": session.token,
    }
