"""
Service for audit records written after successful user writes.
"""

import json
import logging
from typing import Any, Dict, Optional

from repositories.audit_repository import AuditRepository
from database.models import AuditLogORM

logger = logging.getLogger(__name__)


class AuditService:
    """Persists one audit record per business write."""

    def __init__(self, repository: AuditRepository):
        self.repository = repository

    def record(
        self,
        action: str,
        entity_type: str,
        entity_id: Any,
        details: Optional[Dict[str, Any]] = None,
    ) -> AuditLogORM:
        """
        Store an audit record.

        Args:
            action: Action name, e.g. "user.created"
            entity_type: Type of the affected entity
            entity_id: ID of the affected entity
            details: Extra JSON-serializable context

        Returns:
            The persisted audit record
        """
        entry = AuditLogORM(
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id),
            details=json.dumps(details, default=str) if details else None,
        )
        saved = self.repository.save(entry)
        logger.debug(f"Audit {action} recorded for {entity_type} {entity_id}")
        return saved
