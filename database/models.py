from sqlalchemy import Column, String, Integer, DateTime, Text
from sqlalchemy.orm import declarative_base

from utils.datetime_utils import get_store_now

Base = declarative_base()


#ORM: Usuarios
class UserORM(Base):
    __tablename__ = "users"
    #columna en DB: user_id, atributo python: id
    id = Column("user_id", Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_salt = Column(String(64), nullable=False)
    password_hash = Column(String(128), nullable=False)
    #auditoría
    created_at = Column(DateTime, default=get_store_now)
    updated_at = Column(DateTime, default=get_store_now, onupdate=get_store_now)

    def __repr__(self) -> str:
        return f"<UserORM id={self.id} email={self.email!r}>"


#ORM: registro de auditoría
class AuditLogORM(Base):
    __tablename__ = "audit_logs"
    id = Column("audit_id", Integer, primary_key=True, autoincrement=True)
    action = Column(String(50), nullable=False)
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(String(50), nullable=False, index=True)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, default=get_store_now)


__all__ = [
    "Base",
    "UserORM",
    "AuditLogORM",
]
