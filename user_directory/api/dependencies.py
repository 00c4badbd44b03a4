# External package imports
from fastapi import Depends, HTTPException, Request, status

# Local application imports
from ..application.services.user_service import UserService
from ..di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the container built during startup
    
    Raises:
        HTTPException: If the application has not finished starting up
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is not ready"
        )
    return container


def get_user_service(container: DIContainer = Depends(get_container)) -> UserService:
    """FastAPI dependency returning the shared UserService"""
    return container.get(UserService)
