"""
User routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for user endpoints.
Each endpoint builds a DTO, calls exactly one service and maps the result;
all business logic is delegated to the service layer.
"""

from fastapi import APIRouter, HTTPException, Depends, Query, status
import logging

from models.users import (
    UserDTO,
    UserUpdateDTO,
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
)
from models.common import DeleteResponse, PaginatedResponse, create_delete_response
from core.pagination import create_paginated_response
from core.exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    DuplicateException,
    BusinessException,
    StoreUnavailableException,
)
from services.create_user_service import CreateUserService
from services.update_user_service import UpdateUserService
from services.delete_user_service import DeleteUserService
from services.user_query_service import (
    GetUserService,
    FindUserByEmailService,
    ListUsersService,
)
from dependencies import (
    get_create_user_service,
    get_update_user_service,
    get_delete_user_service,
    get_get_user_service,
    get_find_user_by_email_service,
    get_list_users_service,
)
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


# ==================== Exception Handler ====================

def handle_service_exception(e: Exception) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if isinstance(e, NotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    elif isinstance(e, ValidationException):
        return HTTPException(
            status_code=422,
            detail={"message": e.message, "errors": e.errors}
        )
    elif isinstance(e, DuplicateException):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )
    elif isinstance(e, StoreUnavailableException):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message
        )
    elif isinstance(e, BusinessException):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    elif isinstance(e, AppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor"
        )


# ==================== Endpoints ====================


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreateRequest,
    service: CreateUserService = Depends(get_create_user_service),
):
    """
    Create a new user.

    Args:
        payload: Name, email and password
        service: Injected CreateUserService

    Returns:
        Created user
    """
    try:
        user_data = UserDTO(
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        return UserResponse.model_validate(service.execute(user_data))
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al crear usuario"
        )


@router.get("/", response_model=PaginatedResponse)
def list_users(
    page: int = Query(0, ge=0, description="Número de página (0-indexed)"),
    page_size: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Tamaño de página"
    ),
    service: ListUsersService = Depends(get_list_users_service),
):
    """
    List users with pagination, ordered by id.

    Args:
        page: Page number (0-indexed)
        page_size: Items per page
        service: Injected ListUsersService

    Returns:
        Paginated list of users
    """
    try:
        items, total = service.execute(page=page, page_size=page_size)
        data = [UserResponse.model_validate(u).model_dump() for u in items]
        return create_paginated_response(data, page, page_size, total)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error listing users: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al listar usuarios"
        )


@router.get("/by-email", response_model=UserResponse)
def get_user_by_email(
    email: str = Query(..., min_length=1, description="Email del usuario"),
    service: FindUserByEmailService = Depends(get_find_user_by_email_service),
):
    """
    Get the user registered with an email address.

    Args:
        email: Email to look up
        service: Injected FindUserByEmailService

    Returns:
        User data
    """
    try:
        return UserResponse.model_validate(service.execute(email))
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting user by email {email}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener usuario"
        )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    service: GetUserService = Depends(get_get_user_service),
):
    """
    Get a user by ID.

    Args:
        user_id: User ID
        service: Injected GetUserService

    Returns:
        User data
    """
    try:
        return UserResponse.model_validate(service.execute(user_id))
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener usuario"
        )


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdateRequest,
    service: UpdateUserService = Depends(get_update_user_service),
):
    """
    Update a user. Only the fields present in the body are changed.

    Args:
        user_id: User ID
        payload: Fields to update
        service: Injected UpdateUserService

    Returns:
        Updated user
    """
    try:
        user_update = UserUpdateDTO(**payload.model_dump(exclude_unset=True))
        return UserResponse.model_validate(service.execute(user_id, user_update))
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al actualizar usuario"
        )


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(
    user_id: int,
    service: DeleteUserService = Depends(get_delete_user_service),
):
    """
    Delete a user permanently.

    Args:
        user_id: User ID
        service: Injected DeleteUserService

    Returns:
        Delete confirmation
    """
    try:
        service.execute(user_id)
        return create_delete_response(
            message="Usuario eliminado correctamente",
            deleted_id=user_id,
        )
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error deleting user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al eliminar usuario"
        )
