"""
Service for creating users.

Validates the incoming UserDTO, persists the new user through the repository
and then triggers the welcome notification and the audit record.
"""

from typing import Optional
import logging

from services.base_service import BaseService
from services.audit_service import AuditService
from services.notification_service import NotificationService
from services.user_rules import (
    normalize_email,
    name_violations,
    email_violations,
    password_violations,
)
from repositories.interfaces import IUserRepository
from database.models import UserORM
from models.users import UserDTO
from core.exceptions import DuplicateException
from core.security import hash_password
from config import settings

logger = logging.getLogger(__name__)


class CreateUserService(BaseService[IUserRepository]):
    """Creates a user from a UserDTO."""

    def __init__(
        self,
        repository: IUserRepository,
        notification_service: Optional[NotificationService] = None,
        audit_service: Optional[AuditService] = None,
        password_min_length: Optional[int] = None,
    ):
        """
        Initialize the service.

        Args:
            repository: User repository
            notification_service: Optional welcome notifier
            audit_service: Optional audit recorder
            password_min_length: Overrides settings.password_min_length
        """
        super().__init__(repository)
        self.notification_service = notification_service
        self.audit_service = audit_service
        self.password_min_length = password_min_length or settings.password_min_length

    def execute(self, user_data: UserDTO) -> UserORM:
        """
        Create a new user.

        Args:
            user_data: Name, email and plain-text password

        Returns:
            The persisted user with its id assigned

        Raises:
            ValidationException: If any business rule is violated
            DuplicateException: If the email is already registered
        """
        name = user_data.name.strip()
        email = normalize_email(user_data.email)

        errors = (
            name_violations(name)
            + email_violations(email)
            + password_violations(user_data.password, self.password_min_length)
        )
        self.raise_if_invalid(errors, message="Datos de usuario inválidos")

        if self.repository.find_by_email(email) is not None:
            raise DuplicateException(resource="Usuario", field="email", value=email)

        salt_hex, hash_hex = hash_password(user_data.password)
        user = UserORM(
            name=name,
            email=email,
            password_salt=salt_hex,
            password_hash=hash_hex,
        )

        created = self.repository.save(user)
        logger.info(f"User {created.id} ({created.email}) created")

        if self.notification_service is not None:
            self.run_side_effect(
                "welcome notification",
                self.notification_service.send_welcome,
                created,
            )
        if self.audit_service is not None:
            self.run_side_effect(
                "audit user.created",
                self.audit_service.record,
                "user.created",
                "user",
                created.id,
                {"email": created.email},
            )

        return created
