"""
Tests for AuditService backed by the SQLAlchemy repository.
"""

import json
from sqlalchemy.orm import Session

from repositories.audit_repository import AuditRepository
from services.audit_service import AuditService


class TestAuditService:

    def test_record_persists_entry(self, db_session: Session):
        repository = AuditRepository(db_session)
        service = AuditService(repository)

        entry = service.record("user.created", "user", 1, {"email": "alice@example.com"})

        assert entry.id is not None
        assert entry.entity_id == "1"
        assert json.loads(entry.details) == {"email": "alice@example.com"}
        assert [e.action for e in repository.find_by_entity("user", 1)] == ["user.created"]

    def test_record_without_details(self, db_session: Session):
        entry = AuditService(AuditRepository(db_session)).record("user.deleted", "user", 9)

        assert entry.details is None
