"""FastAPI dependencies for container access and bearer authentication."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.users import UserProfile

NOT_AUTHORIZED = "Not authorized to access this route"

_bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    container: AppContainer = Depends(get_container),
) -> UserProfile:
    """Resolve the bearer token to a user; every failure is the same 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED
        )
    user = container.auth_service.authenticate(credentials.credentials)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED
        )
    return user
