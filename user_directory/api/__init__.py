"""
API layer for the user directory.

Exposes the REST surface under /users and the GraphQL surface under
/graphql. Both delegate every operation to UserService.
"""
from .users_controller import router as users_router
from .graphql_controller import create_graphql_app, create_graphql_router
from .error_handlers import register_error_handlers


__all__ = ["users_router", "create_graphql_app", "create_graphql_router", "register_error_handlers"]
