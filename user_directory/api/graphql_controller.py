"""
GraphQL surface.

The schema is compiled once from ``schema.graphql`` when the application is
created; resolvers are bound to that compiled schema and only unwrap
arguments before delegating to UserService.
"""
# Standard library imports
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

# External package imports
from ariadne import MutationType, ObjectType, QueryType, format_error, load_schema_from_path, make_executable_schema
from ariadne.asgi import GraphQL
from ariadne.explorer import ExplorerGraphiQL, ExplorerHttp405
from fastapi import APIRouter, Depends, Request
from graphql import GraphQLError, GraphQLResolveInfo, GraphQLSchema

# Local application imports
from ..application.services.user_service import UserService
from ..core.config import Settings
from ..domain.exceptions import StoreError, ValidationError
from ..domain.models.user import User
from .dependencies import get_user_service

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.graphql"

query = QueryType()
mutation = MutationType()
user_type = ObjectType("User")
user_type.set_alias("firstName", "first_name")
user_type.set_alias("lastName", "last_name")


def _user_service(info: GraphQLResolveInfo) -> UserService:
    return info.context["user_service"]


@user_type.field("fullName")
def resolve_full_name(user: User, info: GraphQLResolveInfo) -> str:
    return user.full_name


@query.field("users")
async def resolve_users(_, info: GraphQLResolveInfo) -> List[User]:
    return await _user_service(info).list_users()


@query.field("user")
async def resolve_user(_, info: GraphQLResolveInfo, username: str) -> Optional[User]:
    # Followers stay as ID references here, unlike GET /users/{username}
    return await _user_service(info).get_user_by_username(username)


@mutation.field("createUser")
async def resolve_create_user(_, info: GraphQLResolveInfo, user: Dict[str, Any]) -> User:
    return await _user_service(info).create_user(user)


def build_schema(schema_path: Path = SCHEMA_PATH) -> GraphQLSchema:
    """Compile the schema file and bind resolvers to it"""
    type_defs = load_schema_from_path(str(schema_path))
    return make_executable_schema(type_defs, query, mutation, user_type)


def format_directory_error(error: GraphQLError, debug: bool = False) -> dict:
    """Default ariadne formatting plus machine-readable codes for domain errors"""
    formatted = format_error(error, debug)
    original = error.original_error
    if isinstance(original, ValidationError):
        formatted.setdefault("extensions", {}).update(
            code="VALIDATION_ERROR",
            violations=[violation.to_dict() for violation in original.violations],
        )
    elif isinstance(original, StoreError):
        logger.error(f"Store error in GraphQL operation: {original}")
        formatted.setdefault("extensions", {}).update(code="STORE_ERROR")
    return formatted


def get_context_value(request: Request, data: Any = None) -> Dict[str, Any]:
    return {"request": request, "user_service": request.scope["user_service"]}


def create_graphql_app(settings: Settings, schema: Optional[GraphQLSchema] = None) -> GraphQL:
    """
    Create the ariadne ASGI handler.
    
    GraphiQL and introspection are only available when DEBUG is set.
    """
    return GraphQL(
        schema if schema is not None else build_schema(),
        context_value=get_context_value,
        error_formatter=format_directory_error,
        debug=settings.debug,
        introspection=settings.debug,
        explorer=ExplorerGraphiQL() if settings.debug else ExplorerHttp405(),
    )


def create_graphql_router(graphql_app: GraphQL) -> APIRouter:
    """Expose ``graphql_app`` through FastAPI so it shares the DI container"""
    router = APIRouter(tags=["graphql"])
    
    @router.get("")
    async def handle_graphql_explorer(
        request: Request,
        user_service: UserService = Depends(get_user_service),
    ):
        request.scope["user_service"] = user_service
        return await graphql_app.handle_request(request)
    
    @router.post("")
    async def handle_graphql_query(
        request: Request,
        user_service: UserService = Depends(get_user_service),
    ):
        request.scope["user_service"] = user_service
        return await graphql_app.handle_request(request)
    
    return router
