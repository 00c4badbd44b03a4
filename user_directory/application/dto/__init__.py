from .user_dto import UserCreateRequest, UserResponse, UserDetailResponse

__all__ = [
    "UserCreateRequest",
    "UserResponse",
    "UserDetailResponse",
]
