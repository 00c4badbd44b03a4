# Standard library imports
import logging
from typing import Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import StoreError

logger = logging.getLogger(__name__)


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    def is_valid_id(self, user_id: str) -> bool:
        return ObjectId.is_valid(user_id)
    
    async def find_all(self) -> List[User]:
        """
        List every user in natural (insertion) order
        
        Returns:
            List of User domain models
        """
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}")
            raise StoreError(f"Error listing users: {str(e)}") from e
    
    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """
        Find users by a batch of IDs in a single query
        
        Args:
            user_ids: IDs to look up; malformed IDs are skipped
            
        Returns:
            Matching users in store order (missing IDs produce no entry)
        """
        object_ids = [oid for oid in (_to_object_id(uid) for uid in user_ids) if oid is not None]
        if not object_ids:
            return []
        
        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            logger.error(f"Error finding users by IDs: {e}")
            raise StoreError(f"Error finding users by IDs: {str(e)}") from e
    
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find the first user (store scan order) with this exact username"""
        if not username:
            return None
        return await self._find_one({UserFields.USERNAME: username}, "username")
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the first user (store scan order) with this exact email address"""
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email}, "email")
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user document
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            StoreError: If the store rejects the write
        """
        if not user:
            raise ValueError("User cannot be None")
        
        user_dict = self._user_to_dict(user)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            logger.error(f"Error saving user: {e}")
            raise StoreError(f"Error saving user: {str(e)}") from e
        
        if new_document is None:
            raise StoreError("User was created but could not be retrieved")
        return self._document_to_user(new_document)
    
    async def _find_one(self, query: Dict, key_name: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"Error finding user by {key_name}: {e}")
            raise StoreError(f"Error finding user by {key_name}: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            first_name=document.get(UserFields.FIRST_NAME),
            last_name=document.get(UserFields.LAST_NAME),
            username=document.get(UserFields.USERNAME),
            email=document.get(UserFields.EMAIL),
            followers=[str(ref) for ref in document.get(UserFields.FOLLOWERS, [])],
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage (no _id, the store assigns it;
            unset name and email fields are left out)
        """
        user_dict = {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
        }
        user_dict = {key: value for key, value in user_dict.items() if value is not None}
        user_dict[UserFields.FOLLOWERS] = [ObjectId(ref) for ref in user.followers]
        return user_dict
