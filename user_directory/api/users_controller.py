# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ..application.dto.user_dto import UserCreateRequest, UserResponse, UserDetailResponse
from ..application.services.user_service import UserService
from .dependencies import get_user_service


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List every user in store order"""
    users = await user_service.list_users()
    return [UserResponse.from_user(user) for user in users]


@router.get("/{username}", response_model=Optional[UserDetailResponse])
async def get_user(
    username: str,
    user_service: UserService = Depends(get_user_service),
) -> Optional[UserDetailResponse]:
    """
    Get a user by username with followers expanded into full records
    
    Args:
        username: Exact (case-sensitive) username
        
    Returns:
        UserDetailResponse, or null when no user matches
    """
    result = await user_service.get_user_with_followers(username)
    if result is None:
        return None
    user, followers = result
    return UserDetailResponse.from_user_with_followers(user, followers)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a new user
    
    Validation failures are turned into a 400 response by the
    application-wide ValidationError handler.
    """
    user = await user_service.create_user(request.to_input())
    return UserResponse.from_user(user)
