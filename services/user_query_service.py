"""
Read-only user services: lookup by id, lookup by email and paginated listing.
"""

from typing import List, Tuple

from services.base_service import BaseService
from services.user_rules import normalize_email
from repositories.interfaces import IUserRepository
from database.models import UserORM
from core.pagination import calculate_skip


class GetUserService(BaseService[IUserRepository]):
    """Fetches one user by id."""

    def execute(self, user_id: int) -> UserORM:
        """
        Raises:
            NotFoundException: If the user does not exist
        """
        return self.repository.get_by_id(user_id)


class FindUserByEmailService(BaseService[IUserRepository]):
    """Fetches the user registered with an email address."""

    def execute(self, email: str) -> UserORM:
        """
        Raises:
            NotFoundException: If no user has that email
        """
        return self.repository.get_by_email(normalize_email(email))


class ListUsersService(BaseService[IUserRepository]):
    """Lists users page by page, ordered by id."""

    def execute(self, page: int = 0, page_size: int = 50) -> Tuple[List[UserORM], int]:
        """
        Get a page of users.

        Args:
            page: Page number (0-indexed)
            page_size: Items per page

        Returns:
            Tuple of (users in the page, total count)
        """
        items = self.repository.get_all(
            skip=calculate_skip(page, page_size),
            limit=page_size,
        )
        return items, self.repository.count()
