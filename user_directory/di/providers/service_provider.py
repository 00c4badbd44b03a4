from typing import TYPE_CHECKING
from ...application.services.user_service import UserService
from ...domain.repositories.user_repository import UserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Service provider - registers the data access layer shared by both front-ends"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register UserService as a singleton; it is stateless apart from its
        repository, so one instance serves every request.
        """
        container.register_singleton(
            UserService,
            UserService(user_repository=container.get(UserRepository))
        )
