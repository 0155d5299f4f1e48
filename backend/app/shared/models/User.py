# app/shared/models/User.py
"""
Modèles liés aux utilisateurs.

Stratégie de découpage User :
- User            : identité (id émis par le fournisseur d'auth) + rattachement RH
- EmployeeProfile : compétences déclarées, condition d'accès à l'assessment

Note sur department / position :
  Stockés en listes JSON (un employé peut cumuler plusieurs postes).
  Un profil est "complet" quand department, position et skills sont non vides.
"""
from sqlalchemy import (
    Column, String, Boolean, DateTime, JSON, ForeignKey, Enum as SAEnum,
)
from sqlalchemy.sql import func

from app.core.database import Base
from app.shared.enums import UserRole


class User(Base):
    __tablename__ = "users"

    id    = Column(String, primary_key=True, index=True)   # sub du JWT externe
    email = Column(String, unique=True, index=True, nullable=False)
    name  = Column(String, nullable=False)

    role      = Column(
        SAEnum(UserRole, name="userrole", values_callable=lambda e: [m.value for m in e]),
        default=UserRole.EMPLOYEE, nullable=False, index=True,
    )
    hr_id     = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    is_active = Column(Boolean, default=True)
    paid      = Column(Boolean, default=False)

    department = Column(JSON, default=list)   # ["Engineering", ...]
    position   = Column(JSON, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User id={self.id} role={self.role}>"


class EmployeeProfile(Base):
    __tablename__ = "employee_profiles"

    user_id = Column(String, ForeignKey("users.id"), primary_key=True)
    skills  = Column(JSON, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<EmployeeProfile user={self.user_id}>"
