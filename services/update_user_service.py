"""
Service for updating users.
"""

from typing import Optional
import logging

from services.base_service import BaseService
from services.audit_service import AuditService
from services.user_rules import (
    normalize_email,
    name_violations,
    email_violations,
    password_violations,
)
from repositories.interfaces import IUserRepository
from database.models import UserORM
from models.users import UserUpdateDTO
from core.exceptions import DuplicateException
from core.security import hash_password
from config import settings

logger = logging.getLogger(__name__)


class UpdateUserService(BaseService[IUserRepository]):
    """Applies a partial update to an existing user."""

    def __init__(
        self,
        repository: IUserRepository,
        audit_service: Optional[AuditService] = None,
        password_min_length: Optional[int] = None,
    ):
        super().__init__(repository)
        self.audit_service = audit_service
        self.password_min_length = password_min_length or settings.password_min_length

    def execute(self, user_id: int, user_update: UserUpdateDTO) -> UserORM:
        """
        Update a user.

        Only the fields explicitly set on the DTO are validated and applied.

        Args:
            user_id: User ID
            user_update: Fields to change

        Returns:
            The updated user

        Raises:
            NotFoundException: If the user does not exist
            ValidationException: If any provided field breaks a rule
            DuplicateException: If the new email belongs to another user
        """
        user = self.repository.get_by_id(user_id)
        changes = user_update.model_dump(exclude_unset=True)

        if "name" in changes and changes["name"] is not None:
            changes["name"] = changes["name"].strip()
        if "email" in changes and changes["email"] is not None:
            changes["email"] = normalize_email(changes["email"])

        errors = []
        if "name" in changes:
            errors += name_violations(changes["name"])
        if "email" in changes:
            errors += email_violations(changes["email"])
        if "password" in changes:
            errors += password_violations(changes["password"], self.password_min_length)
        self.raise_if_invalid(errors, message="Datos de usuario inválidos")

        if not changes:
            return user

        if "email" in changes and changes["email"] != user.email:
            owner = self.repository.find_by_email(changes["email"])
            if owner is not None and owner.id != user.id:
                raise DuplicateException(resource="Usuario", field="email", value=changes["email"])

        if "name" in changes:
            user.name = changes["name"]
        if "email" in changes:
            user.email = changes["email"]
        if "password" in changes:
            user.password_salt, user.password_hash = hash_password(changes["password"])

        updated = self.repository.save(user)
        logger.info(f"User {user_id} updated ({', '.join(sorted(changes))})")

        if self.audit_service is not None:
            self.run_side_effect(
                "audit user.updated",
                self.audit_service.record,
                "user.updated",
                "user",
                updated.id,
                {"fields": sorted(changes)},
            )

        return updated
