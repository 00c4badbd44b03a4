from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    def is_valid_id(self, user_id: str) -> bool:
        """Whether ``user_id`` is a well-formed identifier for this store"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every user in the store's natural order"""
        pass
    
    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """By-identifier lookup: every user whose ID is in ``user_ids`` (unknown IDs are skipped)"""
        pass
    
    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find the first user with this exact username"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the first user with this exact email address"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Persist a new user and return it with its assigned ID"""
        pass
