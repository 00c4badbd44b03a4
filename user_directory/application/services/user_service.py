"""
Data access layer shared by the REST and GraphQL front-ends.

Both front-ends go through ``UserService`` for every read and write, so
validation and follower resolution behave the same whichever protocol a
caller uses. Neither front-end holds a store reference of its own.
"""
# Standard library imports
import logging
from typing import Any, List, Mapping, Optional, Tuple

# Local application imports
from ...domain.constants import UserFields
from ...domain.exceptions import FieldViolation, ValidationError
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ...domain.validation import validate_fields

logger = logging.getLogger(__name__)


class UserService:
    """Stateless facade over the user repository"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def list_users(self) -> List[User]:
        """Return every user, unfiltered, in store order"""
        return await self.user_repository.find_all()
    
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the first user with exactly this username, or None"""
        return await self.user_repository.find_by_username(username)
    
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Return the first user with exactly this email address, or None"""
        return await self.user_repository.find_by_email(email)
    
    async def get_user_with_followers(self, username: str) -> Optional[Tuple[User, List[User]]]:
        """
        Look up a user by username and resolve its followers
        
        Returns:
            (user, resolved followers), or None if no user matches
        """
        user = await self.get_user_by_username(username)
        if user is None:
            return None
        return user, await self.resolve_followers(user)
    
    async def create_user(self, data: Mapping[str, Any]) -> User:
        """
        Validate and persist a new user
        
        Args:
            data: Create input keyed by wire field names (firstName, lastName,
                username, email, followers); every field is optional, rules
                run only on fields that are present, and any id is ignored
                
        Returns:
            The persisted user with its assigned ID
            
        Raises:
            ValidationError: With every failing field rule, if any
        """
        violations = validate_fields(data)
        
        followers = data.get(UserFields.FOLLOWERS) or []
        for ref in followers:
            if not isinstance(ref, str) or not self.user_repository.is_valid_id(ref):
                violations.append(
                    FieldViolation(
                        field=UserFields.FOLLOWERS,
                        rule="reference",
                        message=f"Invalid user reference: {ref}",
                    )
                )
        
        if violations:
            logger.info(f"Rejected user {data.get(UserFields.USERNAME)!r}: {len(violations)} violation(s)")
            raise ValidationError(violations)
        
        new_user = User(
            id=None,  # Will be set by repository
            first_name=data.get(UserFields.FIRST_NAME),
            last_name=data.get(UserFields.LAST_NAME),
            username=data.get(UserFields.USERNAME),
            email=data.get(UserFields.EMAIL),
            followers=list(followers),
        )
        
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Created user {saved_user.id} ({saved_user.username})")
        return saved_user
    
    async def resolve_followers(self, user: User) -> List[User]:
        """
        Expand a user's follower references into full records
        
        References that resolve to nothing are dropped; the rest keep the
        order (and any repetition) of ``user.followers``.
        """
        if not user.followers:
            return []
        
        found = await self.user_repository.find_by_ids(user.followers)
        by_id = {follower.id: follower for follower in found}
        return [by_id[ref] for ref in user.followers if ref in by_id]
