"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Every dependency built within one
request shares the same database session (FastAPI caches `get_db`).
"""

from typing import Optional
from sqlalchemy.orm import Session
from fastapi import Depends

from config import settings
from database.db import get_db
from repositories.interfaces import IUserRepository
from repositories.user_repository import UserRepository
from repositories.audit_repository import AuditRepository
from services.audit_service import AuditService
from services.notification_service import NotificationService, LoggingNotificationService
from services.create_user_service import CreateUserService
from services.update_user_service import UpdateUserService
from services.delete_user_service import DeleteUserService
from services.user_query_service import (
    GetUserService,
    FindUserByEmailService,
    ListUsersService,
)


# ==================== Repository Dependencies ====================

def get_user_repository(db: Session = Depends(get_db)) -> IUserRepository:
    """
    Get the user repository.

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        UserRepository bound to the request session
    """
    return UserRepository(db)


def get_audit_repository(db: Session = Depends(get_db)) -> AuditRepository:
    """Get AuditRepository bound to the request session."""
    return AuditRepository(db)


# ==================== Collaborator Dependencies ====================

def get_audit_service(
    repository: AuditRepository = Depends(get_audit_repository),
) -> Optional[AuditService]:
    """Get AuditService, or None when auditing is disabled."""
    if not settings.audit_enabled:
        return None
    return AuditService(repository)


def get_notification_service() -> Optional[NotificationService]:
    """Get the notifier, or None when notifications are disabled."""
    if not settings.notifications_enabled:
        return None
    return LoggingNotificationService()


# ==================== Service Dependencies ====================

def get_create_user_service(
    repository: IUserRepository = Depends(get_user_repository),
    notification_service: Optional[NotificationService] = Depends(get_notification_service),
    audit_service: Optional[AuditService] = Depends(get_audit_service),
) -> CreateUserService:
    """
    Get CreateUserService instance.

    Example:
        ```python
        @router.post("/users/")
        def create_user(
            service: CreateUserService = Depends(get_create_user_service)
        ):
            return service.execute(...)
        ```
    """
    return CreateUserService(repository, notification_service, audit_service)


def get_update_user_service(
    repository: IUserRepository = Depends(get_user_repository),
    audit_service: Optional[AuditService] = Depends(get_audit_service),
) -> UpdateUserService:
    """Get UpdateUserService instance."""
    return UpdateUserService(repository, audit_service)


def get_delete_user_service(
    repository: IUserRepository = Depends(get_user_repository),
    audit_service: Optional[AuditService] = Depends(get_audit_service),
) -> DeleteUserService:
    """Get DeleteUserService instance."""
    return DeleteUserService(repository, audit_service)


def get_get_user_service(
    repository: IUserRepository = Depends(get_user_repository),
) -> GetUserService:
    """Get GetUserService instance."""
    return GetUserService(repository)


def get_find_user_by_email_service(
    repository: IUserRepository = Depends(get_user_repository),
) -> FindUserByEmailService:
    """Get FindUserByEmailService instance."""
    return FindUserByEmailService(repository)


def get_list_users_service(
    repository: IUserRepository = Depends(get_user_repository),
) -> ListUsersService:
    """Get ListUsersService instance."""
    return ListUsersService(repository)
