# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from ...domain.models.user import User


class UserCreateRequest(BaseModel):
    """
    DTO for user creation request.
    
    Fields are optional here so that missing values reach the domain rules
    and are reported together with every other violation.
    """
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    username: Optional[str] = None
    email: Optional[str] = None
    followers: Optional[List[str]] = None
    
    model_config = ConfigDict(populate_by_name=True)
    
    def to_input(self) -> Dict[str, Any]:
        """Create input keyed by wire field names, without unset fields"""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserResponse(BaseModel):
    """DTO for user response (followers as ID references)"""
    id: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: str = Field(..., alias="fullName")
    followers: List[str] = Field(default_factory=list)
    
    model_config = ConfigDict(populate_by_name=True)
    
    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            followers=list(user.followers),
        )


class UserDetailResponse(UserResponse):
    """DTO for single-user response with followers expanded into full records"""
    followers: List[UserResponse] = Field(default_factory=list)
    
    @classmethod
    def from_user_with_followers(cls, user: User, followers: List[User]) -> "UserDetailResponse":
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            followers=[UserResponse.from_user(follower) for follower in followers],
        )
