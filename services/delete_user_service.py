"""
Service for deleting users.
"""

from typing import Optional
import logging

from services.base_service import BaseService
from services.audit_service import AuditService
from repositories.interfaces import IUserRepository

logger = logging.getLogger(__name__)


class DeleteUserService(BaseService[IUserRepository]):
    """Permanently removes a user."""

    def __init__(self, repository: IUserRepository, audit_service: Optional[AuditService] = None):
        super().__init__(repository)
        self.audit_service = audit_service

    def execute(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            NotFoundException: If the user does not exist
        """
        self.repository.delete(user_id)
        logger.info(f"User {user_id} deleted")

        if self.audit_service is not None:
            self.run_side_effect(
                "audit user.deleted",
                self.audit_service.record,
                "user.deleted",
                "user",
                user_id,
            )
